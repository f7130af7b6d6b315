# === FILE: site_reader/config.py ===
"""
Loading and validation of the SiteReader crawl configuration.
Pydantic describes the schema and checks the data once, at construction.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_EXCLUDE_PATTERNS: Tuple[str, ...] = (
    "/auth/",
    "/login",
    "/logout",
    "/signin",
    "/signup",
    "/register",
    ".pdf",
    ".jpg",
    ".png",
    ".gif",
)


class CrawlConfig(BaseModel):
    """Termination and filtering policy for one crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(2, ge=0, description="Links are followed only from pages above this depth.")
    max_pages: int = Field(20, ge=1, description="Hard limit on the number of processed pages.")
    same_domain: bool = Field(True, description="Stay on the start URL's host.")
    exclude_patterns: Tuple[str, ...] = Field(
        DEFAULT_EXCLUDE_PATTERNS, description="URLs containing any of these substrings are skipped."
    )
    delay: float = Field(1.0, ge=0, description="Pause after every processed page (seconds).")
    page_timeout: float = Field(30.0, gt=0, description="Navigation timeout per page (seconds).")
    renderer: Literal["browser", "http"] = Field("browser", description="How pages are fetched.")
    headless: bool = Field(True, description="Run the browser without a window.")
    user_agent: str = Field("SiteReaderBot/1.0", min_length=1, description="User-Agent for HTTP mode.")

    @field_validator("exclude_patterns", mode="before")
    def _coerce_patterns(cls, v: Any) -> Any:
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("exclude_patterns")
    def _no_empty_patterns(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        # an empty substring would exclude every URL
        if any(not p for p in v):
            raise ValueError("exclude_patterns must not contain empty strings")
        return v

    def with_overrides(self, **overrides: Any) -> CrawlConfig:
        """Return a re-validated copy; ``None`` values keep the current setting."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return CrawlConfig(**data)


DEFAULT_CONFIG = CrawlConfig()

_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> CrawlConfig:
    """
    Read YAML or JSON and return a validated CrawlConfig.

    Without *path*, ``configs/default.yaml`` is used when it exists,
    otherwise the built-in defaults. A missing explicit path raises
    FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return DEFAULT_CONFIG
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlConfig(**data)


__all__ = [
    "CrawlConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_EXCLUDE_PATTERNS",
    "load_config",
]
