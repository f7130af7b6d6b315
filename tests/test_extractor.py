# File: tests/test_extractor.py
"""Content extraction: title fallbacks, chrome removal, selector priority, links."""
from site_reader.crawler.extractor import UNTITLED, extract

from .conftest import html

BASE = "https://example.com/docs/"


def test_title_from_title_tag():
    page = extract(html("<main>x</main>", title="  Guide  "), BASE)
    assert page.title == "Guide"


def test_title_falls_back_to_first_h1():
    markup = "<html><head><title>   </title></head><body><h1> First </h1><h1>Second</h1></body></html>"
    assert extract(markup, BASE).title == "First"


def test_title_h1_inside_header_still_counts():
    markup = "<html><body><header><h1>Site name</h1></header><main>Body</main></body></html>"
    page = extract(markup, BASE)
    assert page.title == "Site name"
    assert "Site name" not in page.content


def test_title_default():
    assert extract("<html><body><p>no heading</p></body></html>", BASE).title == UNTITLED


def test_chrome_is_removed():
    markup = html(
        "<header>Top bar</header>"
        "<nav>Menu</nav>"
        '<div role="navigation">Side menu</div>'
        "<main>Real text<script>var x = 1;</script><style>p {}</style></main>"
        "<iframe>frame</iframe><noscript>Enable JS</noscript>"
        "<footer>Copyright</footer>"
    )
    content = extract(markup, BASE).content
    assert content == "Real text"


def test_overlapping_selectors_duplicate_text():
    markup = html("<main><article>Hello</article></main>")
    assert extract(markup, BASE).content == "Hello Hello"


def test_selectors_in_priority_order():
    markup = html(
        '<div class="post-content">Last</div>'
        '<div id="content">Middle</div>'
        "<main>First</main>"
    )
    assert extract(markup, BASE).content == "First Middle Last"


def test_fallback_to_body_when_no_region_matches():
    markup = html("<div><p>Plain   body</p>\n\n\n<p>text</p></div><footer>foot</footer>")
    assert extract(markup, BASE).content == "Plain body text"


def test_fallback_when_regions_are_blank():
    markup = html('<div class="content">   \n  </div><p>Outside</p>')
    assert extract(markup, BASE).content == "Outside"


def test_whitespace_is_collapsed():
    markup = html("<main>\n\n   Line one\n\n\n\tLine   two   </main>")
    assert extract(markup, BASE).content == "Line one Line two"


def test_document_without_body():
    assert extract("just text", BASE).content == "just text"


def test_links_resolved_deduplicated_and_filtered():
    markup = html(
        "<nav><a href='/menu'>menu</a></nav>"
        "<main>"
        "<a href='install'>install</a>"
        "<a href='install#step-2'>step 2</a>"
        "<a href='/api'>api</a>"
        "<a href='mailto:team@example.com'>mail</a>"
        "<a href='javascript:void(0)'>js</a>"
        "<a>no href</a>"
        "<a href='https://other.com/x'>other</a>"
        "</main>"
    )
    page = extract(markup, BASE)
    assert page.links == [
        "https://example.com/docs/install",
        "https://example.com/api",
        "https://other.com/x",
    ]
