"""
Data models and error taxonomy for the SiteWalker crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = (
    "PageData",
    "CrawlerError",
    "FetchError",
    "SendError",
    "StatusError",
    "BodyReadError",
    "UrlResolutionError",
    "describe_error",
)


@dataclass(slots=True)
class PageData:
    """A fetched page: requested URL, URL after redirects, status and text."""

    url: str
    effective_url: str
    status: int
    content: str


class CrawlerError(Exception):
    """Base class for SiteWalker errors."""


class FetchError(CrawlerError):
    """A page could not be fetched."""

    reason = "fetch failed"

    def __init__(self, url: str, detail: Optional[str] = None) -> None:
        self.url = url
        self.detail = detail
        message = f"{self.reason}: {url}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class SendError(FetchError):
    """The request could not be sent (DNS, connection, TLS, timeout)."""

    reason = "request failed"


class StatusError(FetchError):
    """The server answered with a non-success status."""

    reason = "error status"

    def __init__(self, url: str, status: int) -> None:
        self.status = status
        super().__init__(url, f"HTTP {status}")


class BodyReadError(FetchError):
    """The response arrived but its body could not be read or decoded."""

    reason = "unreadable body"


class UrlResolutionError(CrawlerError):
    """An href is neither an absolute URL nor resolvable against its page."""

    def __init__(self, href: str, base: str, detail: str) -> None:
        self.href = href
        self.base = base
        super().__init__(f"cannot resolve {href!r} against {base}: {detail}")


def describe_error(exc: BaseException) -> str:
    """Render *exc* with its ``__cause__`` chain, outermost first."""
    parts = []
    current: Optional[BaseException] = exc
    while current is not None:
        text = str(current) or type(current).__name__
        parts.append(text)
        current = current.__cause__
    return " <- caused by: ".join(parts)
