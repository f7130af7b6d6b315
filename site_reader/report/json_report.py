# site_reader/report/json_report.py

"""
JSON report for SiteReader.

Serializes a CrawlReport into a file.
"""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from site_reader.crawler.models import CrawlReport, Success


def report_to_dict(report: CrawlReport) -> Dict[str, Any]:
    """Plain-data view of *report*: pages, per-entry outcomes and counts."""
    outcomes = [
        {
            "url": o.entry.url,
            "depth": o.entry.depth,
            "status": o.status,
            "reason": None if isinstance(o, Success) else o.reason,
        }
        for o in report.outcomes
    ]
    return {
        "start_url": report.start_url,
        "summary": report.summary(),
        "pages": [asdict(p) for p in report.pages],
        "outcomes": outcomes,
    }


def render_json(report: CrawlReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: CrawlReport of a finished crawl
    :param output_path: path to the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from site_reader.report.json_report import render_json
    report_path = render_json(report, 'reports/crawl.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report_to_dict(report), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
