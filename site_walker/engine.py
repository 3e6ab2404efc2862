# File: site_walker/engine.py
"""site_walker.engine: drives a breadth-first crawl with a page cap and pacing."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import AsyncIterator, Callable, List, Optional
from urllib.parse import urldefrag

from aiohttp import ClientSession, ClientTimeout

from site_walker.config import CrawlerConfig
from site_walker.crawler.fetcher import Fetcher
from site_walker.crawler.link_extractor import LinkExtractor
from site_walker.graph.traversal import BreadthFirstSearch, TraversalState
from site_walker.logger import logger

__all__ = ["CrawlResult", "crawl", "run_crawl", "open_session"]


@dataclass(slots=True)
class CrawlResult:
    """Visited pages of one crawl, in visiting order."""

    start_url: str
    pages: List[str] = field(default_factory=list)
    duration: float = 0.0


def open_session(config: CrawlerConfig) -> ClientSession:
    """Build the aiohttp session the fetcher borrows."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


async def _visit(
    bfs: BreadthFirstSearch[str], config: CrawlerConfig
) -> AsyncIterator[str]:
    count = 0
    while count < config.max_pages:
        if count and config.delay and bfs.state is not TraversalState.EXHAUSTED:
            await asyncio.sleep(config.delay)
        try:
            if config.step_timeout:
                url = await asyncio.wait_for(bfs.__anext__(), timeout=config.step_timeout)
            else:
                url = await bfs.__anext__()
        except StopAsyncIteration:
            logger.info("No more pages to visit")
            return
        except asyncio.TimeoutError:
            logger.error("Step did not finish within %s seconds, stopping crawl", config.step_timeout)
            return
        count += 1
        logger.debug("Visited [%d] %s", count, url)
        yield url


async def crawl(
    config: CrawlerConfig, session: Optional[ClientSession] = None
) -> AsyncIterator[str]:
    """
    Yield visited URLs in breadth-first order, at most ``config.max_pages``.

    A session passed in is borrowed and left open; otherwise one is opened
    for the duration of the crawl.
    """
    start = urldefrag(str(config.start_url)).url
    logger.info("Crawl started: %s (limit %d)", start, config.max_pages)
    started = time.monotonic()
    count = 0

    own_session = session is None
    if own_session:
        session = open_session(config)
    try:
        bfs = BreadthFirstSearch(LinkExtractor(Fetcher(session, config.max_redirects)), start)
        async for url in _visit(bfs, config):
            count += 1
            yield url
    finally:
        if own_session and not session.closed:
            await session.close()
        duration = time.monotonic() - started
        logger.info("Crawl finished: %d pages in %.2f s", count, duration)


async def run_crawl(
    config: CrawlerConfig,
    session: Optional[ClientSession] = None,
    on_page: Optional[Callable[[int, str], None]] = None,
) -> CrawlResult:
    """
    Run :func:`crawl` to completion and collect the visited pages.

    *on_page* is called with the 1-based position and URL of each page as
    soon as it is visited.
    """
    started = time.monotonic()
    result = CrawlResult(start_url=urldefrag(str(config.start_url)).url)
    async for url in crawl(config, session):
        result.pages.append(url)
        if on_page is not None:
            on_page(len(result.pages), url)
    result.duration = time.monotonic() - started
    return result
