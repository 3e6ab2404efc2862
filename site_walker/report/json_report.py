# site_walker/report/json_report.py

"""
JSON report for SiteWalker.

Serializes a CrawlResult to a file.
"""
import json
from dataclasses import asdict
from pathlib import Path

from site_walker.engine import CrawlResult


def render_json(result: CrawlResult, output_path: Path | str) -> Path:
    """
    Write *result* as JSON to *output_path* and return the path written.

    Example:
    ```python
    from site_walker.report.json_report import render_json
    report_path = render_json(result, 'reports/crawl.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(result)
    data['count'] = len(result.pages)

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
