# File: tests/conftest.py
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from aiohttp import web

from site_walker.logger import logger


@asynccontextmanager
async def _serve_app(app: web.Application) -> AsyncIterator[str]:
    """Start *app* on an ephemeral port, yield its base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    try:
        host, port = runner.addresses[0][:2]
        yield f"http://{host}:{port}"
    finally:
        await runner.cleanup()


def html(body: str) -> web.Response:
    return web.Response(text=f"<html><body>{body}</body></html>", content_type="text/html")


@pytest.fixture()
def serve_app():
    """Return the async context manager that serves an aiohttp app."""
    return _serve_app


@pytest.fixture()
def capture_logs(caplog):
    """Let caplog see records of the non-propagating project logger."""
    logger.propagate = True
    caplog.set_level(logging.DEBUG, logger=logger.name)
    yield caplog
    logger.propagate = False


@pytest_asyncio.fixture
async def small_site() -> AsyncIterator[str]:
    """
    /        -> /a, /b#top, /a#x, mailto:
    /a       -> /, /c
    /b       -> /c, /broken
    /c       -> /a
    /broken  -> HTTP 500
    /old     -> redirect to /new/
    /new/    -> child (relative)
    /new/child -> /
    """
    app = web.Application()

    async def root(_):
        return html(
            '<a href="/a">A</a><a href="/b#top">B</a>'
            '<a href="/a#x">A again</a><a href="mailto:me@example.com">mail</a>'
        )

    async def page_a(_):
        return html('<a href="/">home</a><a href="/c">C</a>')

    async def page_b(_):
        return html('<a href="/c">C</a><a href="/broken">broken</a>')

    async def page_c(_):
        return html('<a href="/a">A</a>')

    async def broken(_):
        return web.Response(status=500, text="boom")

    async def old(_):
        raise web.HTTPFound("/new/")

    async def new_index(_):
        return html('<a href="child">child</a>')

    async def new_child(_):
        return html('<a href="/">home</a>')

    app.router.add_get("/", root)
    app.router.add_get("/a", page_a)
    app.router.add_get("/b", page_b)
    app.router.add_get("/c", page_c)
    app.router.add_get("/broken", broken)
    app.router.add_get("/old", old)
    app.router.add_get("/new/", new_index)
    app.router.add_get("/new/child", new_child)

    async with _serve_app(app) as base:
        yield base
