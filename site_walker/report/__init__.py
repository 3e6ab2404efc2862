"""site_walker.report: crawl report writers used by the CLI."""

from site_walker.report.json_report import render_json

__all__ = ["render_json"]
