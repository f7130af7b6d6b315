# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_reader.config import DEFAULT_EXCLUDE_PATTERNS, CrawlConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults():
    cfg = CrawlConfig()
    assert cfg.max_depth == 2
    assert cfg.max_pages == 20
    assert cfg.same_domain is True
    assert cfg.exclude_patterns == (
        "/auth/", "/login", "/logout", "/signin", "/signup", "/register",
        ".pdf", ".jpg", ".png", ".gif",
    )
    assert cfg.exclude_patterns == DEFAULT_EXCLUDE_PATTERNS
    assert cfg.renderer == "browser"


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("max_depth: 1\nmax_pages: 5\nexclude_patterns: [/admin]", ".yaml", None),
        (json.dumps({"max_depth": 1, "max_pages": 5, "exclude_patterns": ["/admin"]}), ".json", None),
        ("max_pages: 0", ".yml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("a: b: c", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("{not json", ".json", ValueError),
        ("max_depth = 1", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlConfig)
        assert (cfg.max_depth, cfg.max_pages) == (1, 5)
        assert cfg.exclude_patterns == ("/admin",)


def test_empty_file_gives_defaults(tmp_path):
    assert load_config(write_file(tmp_path, "", ".yaml")) == CrawlConfig()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_load_config_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == CrawlConfig()

    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("max_pages: 3", encoding="utf-8")
    assert load_config(None).max_pages == 3


def test_config_is_frozen():
    cfg = CrawlConfig()
    with pytest.raises(ValidationError):
        cfg.max_pages = 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_depth": -1},
        {"max_pages": 0},
        {"delay": -0.5},
        {"page_timeout": 0},
        {"renderer": "curl"},
        {"exclude_patterns": ["/ok", ""]},
        {"user_agent": ""},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        CrawlConfig(**kwargs)


def test_single_pattern_string_is_accepted():
    assert CrawlConfig(exclude_patterns="/private").exclude_patterns == ("/private",)


def test_with_overrides_revalidates():
    cfg = CrawlConfig().with_overrides(max_pages=3, same_domain=None)
    assert cfg.max_pages == 3
    assert cfg.same_domain is True
    with pytest.raises(ValidationError):
        cfg.with_overrides(max_pages=0)
