# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from site_walker.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("start_url: http://example.com\nmax_pages: 5", ".yaml", None),
        ("start_url: http://example.com\nmax_pages: 5", ".yml", None),
        (json.dumps({"start_url": "http://example.com", "max_pages": 5}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("{broken", ".json", ValueError),
        ("start_url = 'http://example.com'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert str(cfg.start_url) == "http://example.com/"
        assert cfg.max_pages == 5
        assert cfg.delay == 0.5


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("start_url: https://example.org/\n")
    assert str(load_config(None).start_url) == "https://example.org/"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "field,value",
    [
        ("max_pages", 0),
        ("delay", -1),
        ("timeout", 0),
        ("step_timeout", 0),
        ("user_agent", ""),
        ("unknown", 1),
        ("start_url", "ftp://example.com"),
    ],
)
def test_invalid_values_rejected(field, value):
    data = {"start_url": "http://example.com", field: value}
    with pytest.raises(ValidationError):
        CrawlerConfig(**data)


def test_config_is_frozen():
    cfg = CrawlerConfig(start_url="http://example.com")
    with pytest.raises(ValidationError):
        cfg.max_pages = 3


def test_with_overrides_revalidates():
    cfg = CrawlerConfig(start_url="http://example.com", max_pages=10)
    updated = cfg.with_overrides(max_pages=3, delay=None, start_url="https://other.org/x")

    assert updated.max_pages == 3
    assert updated.delay == cfg.delay
    assert str(updated.start_url) == "https://other.org/x"
    assert cfg.max_pages == 10
    assert cfg.with_overrides(delay=None) is cfg
    with pytest.raises(ValidationError):
        cfg.with_overrides(max_pages=0)
