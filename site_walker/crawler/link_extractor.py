"""
Link extraction and URL resolution for SiteWalker.

:class:`LinkExtractor` is the web implementation of the adjacency contract:
the neighbors of a page are the pages its anchors point to.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urldefrag, urljoin, urlsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_walker.crawler.fetcher import Fetcher
from site_walker.crawler.models import FetchError, UrlResolutionError, describe_error
from site_walker.logger import logger

__all__ = ("LinkExtractor", "extract_hrefs", "resolve_url")

_SUPPORTED_SCHEMES = ("http", "https")


def extract_hrefs(content: str) -> List[str]:
    """Return the href of every <a> element in document order."""
    soup = BeautifulSoup(content, "html.parser")
    hrefs: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        hrefs.append(href_val.strip())
    return hrefs


def resolve_url(href: str, base: str) -> str:
    """
    Resolve *href* found on the page at *base* to an absolute URL without
    fragment.

    Absolute http(s) URLs are kept as they are; scheme-less ones are joined
    to *base*. Everything else raises UrlResolutionError.
    """
    try:
        parsed = urlsplit(href)
        if parsed.scheme:
            if parsed.scheme.lower() not in _SUPPORTED_SCHEMES:
                raise UrlResolutionError(href, base, f"unsupported scheme {parsed.scheme!r}")
            if not parsed.netloc:
                raise UrlResolutionError(href, base, "missing host")
            absolute = href
        else:
            absolute = urljoin(base, href)
            if not urlsplit(absolute).netloc:
                raise UrlResolutionError(href, base, "base is not an absolute URL")
    except ValueError as exc:
        raise UrlResolutionError(href, base, str(exc)) from exc
    return urldefrag(absolute).url


class LinkExtractor:
    """Adjacency over web pages. Never raises from :meth:`neighbors`."""

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher

    async def neighbors(self, node: str) -> List[str]:
        try:
            page = await self.fetcher.fetch(node)
        except FetchError as exc:
            logger.warning("Skipping %s: %s", node, describe_error(exc))
            return []

        links: List[str] = []
        for href in extract_hrefs(page.content):
            try:
                links.append(resolve_url(href, page.effective_url))
            except UrlResolutionError as exc:
                logger.debug("Discarded link on %s: %s", page.effective_url, describe_error(exc))
        logger.debug("Found %d links on %s", len(links), page.effective_url)
        return links
