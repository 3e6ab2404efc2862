#!/usr/bin/env python3
"""
Command-line entry point for the SiteWalker crawler.

Commands:
  crawl     Walk a site breadth-first and print every visited page
  config    Show the effective configuration

Common options:
  --config PATH       Path to a YAML/JSON config (optional)
  --limit INT         Max number of pages to visit (overrides max_pages)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout if omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

crawl options:
  START_URL           Page to start from (overrides start_url)
  --delay SEC         Pause between visited pages
  --step-timeout SEC  Stop the crawl if one page takes longer
  --json PATH         Also save a JSON report

Example:
  site-walker --limit 20 crawl https://example.com --delay 1 --json crawl.json
"""
import asyncio
import sys
from pathlib import Path
from typing import Any, Optional

import click
from pydantic import ValidationError

from site_walker import __version__
from site_walker.config import CrawlerConfig, load_config
from site_walker.engine import run_crawl
from site_walker.logger import DEFAULT_FORMAT, init_logging
from site_walker.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _effective_config(ctx: click.Context, **overrides: Any) -> CrawlerConfig:
    base: Optional[CrawlerConfig] = ctx.obj['config']
    overrides['max_pages'] = ctx.obj['limit']
    try:
        if base is None:
            if not overrides.get('start_url'):
                print_error('No start URL: pass START_URL or --config')
            base = CrawlerConfig(start_url=overrides.pop('start_url'))
        return base.with_overrides(**overrides)
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')


def _echo_page(position: int, url: str) -> None:
    click.echo(f'[{position}] {url}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteWalker, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Max number of pages to visit (overrides max_pages)'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stdout if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, limit, log_level, log_file, log_format):
    """SiteWalker command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    cfg = None
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except Exception as e:
            print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg
    ctx.obj['limit'] = limit


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('start_url', required=False)
@click.option(
    '--delay', '-d', 'delay',
    type=click.FloatRange(min=0),
    default=None,
    help='Pause between visited pages (seconds)'
)
@click.option(
    '--step-timeout', 'step_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Stop the crawl if one page takes longer (seconds)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.pass_context
def crawl_command(ctx, start_url, delay, step_timeout, json_output):
    """Walk the site breadth-first and print every visited page."""
    cfg = _effective_config(ctx, start_url=start_url, delay=delay, step_timeout=step_timeout)
    try:
        result = asyncio.run(run_crawl(cfg, on_page=_echo_page))
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if json_output:
        try:
            saved = render_json(result, json_output)
            click.echo(f'JSON report: {saved}')
        except Exception as e:
            print_error(f'Failed to save JSON report: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('start_url', required=False)
@click.pass_context
def show_config(ctx, start_url):
    """Show the effective configuration as JSON."""
    cfg = _effective_config(ctx, start_url=start_url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
