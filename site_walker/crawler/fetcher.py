# site_walker/crawler/fetcher.py
"""
Fetcher module: issues one GET per page, follows redirects and reports the
effective URL. Failures are raised as :class:`FetchError` subclasses.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession
from site_walker.crawler.models import BodyReadError, PageData, SendError, StatusError
from site_walker.logger import logger


class Fetcher:
    """Fetches pages through a borrowed aiohttp session. No retries."""

    def __init__(self, session: ClientSession, max_redirects: int = 10) -> None:
        self.session = session
        self.max_redirects = max_redirects

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its PageData.

        Raises SendError, StatusError or BodyReadError; the aiohttp
        exception, if any, is chained as ``__cause__``.
        """
        try:
            async with self.session.get(
                url,
                allow_redirects=True,
                max_redirects=self.max_redirects,
                raise_for_status=False,
            ) as resp:
                effective = str(resp.url)
                if resp.status >= 400:
                    raise StatusError(url, resp.status)
                try:
                    text = await resp.text()
                except (ClientError, asyncio.TimeoutError, UnicodeDecodeError, LookupError) as exc:
                    raise BodyReadError(url) from exc
        except (ClientError, asyncio.TimeoutError) as exc:
            raise SendError(url) from exc

        if effective != url:
            logger.debug("Redirected: %s -> %s", url, effective)
        return PageData(url=url, effective_url=effective, status=resp.status, content=text)
