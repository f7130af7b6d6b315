# File: site_reader/report/__init__.py
"""site_reader.report: JSON and HTML crawl reports used by the CLI and tests."""

from site_reader.report.html_report import render_html
from site_reader.report.json_report import render_json, report_to_dict

__all__ = ["render_json", "render_html", "report_to_dict"]
