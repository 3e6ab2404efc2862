# === FILE: site_walker/config.py ===
"""
Loading and validation of the SiteWalker crawler configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class CrawlerConfig(BaseModel):
    """Settings for one crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_url: HttpUrl = Field(..., description="Page the crawl starts from.")
    max_pages: int = Field(100, ge=1, description="Stop after this many visited pages.")
    delay: float = Field(0.5, ge=0, description="Pause between two visited pages (seconds).")
    timeout: float = Field(10.0, gt=0, description="Timeout for a single request (seconds).")
    step_timeout: Optional[float] = Field(
        None, gt=0, description="Abort the crawl if one step takes longer (seconds)."
    )
    max_redirects: int = Field(10, ge=0, description="Redirects followed per request.")
    user_agent: str = Field("SiteWalker/0.1", min_length=1, description="User-Agent header.")

    def with_overrides(self, **values: Any) -> CrawlerConfig:
        """Return a re-validated copy with the non-None *values* applied."""
        updates = {k: v for k, v in values.items() if v is not None}
        if not updates:
            return self
        return type(self).model_validate({**self.model_dump(mode="json"), **updates})


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


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Read a YAML or JSON file and return a validated CrawlerConfig.
    Raises FileNotFoundError when the file does not exist.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
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

    return CrawlerConfig(**data)
