"""Tests for the async HTTP client and its interceptors."""

import json
import re
from unittest.mock import AsyncMock

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from beta_tester.core import VersionCheckInterceptor
from beta_tester.updater import PackageProbe
from beta_tester.utils import AsyncHTTPClient, HttpResponse

RC1_URL = "https://wordpress.org/wordpress-5.4-RC1.zip"
LATIN1_BODY = b"caf\xe9 \x00\xff"


def make_app(version_check_body=None):
    async def version_check(request):
        return web.json_response(version_check_body)

    async def package(request):
        return web.Response(body=b"PK\x03\x04", content_type="application/zip")

    async def moved(request):
        raise web.HTTPFound("/wordpress-5.4-RC1.zip")

    async def moved_away(request):
        raise web.HTTPFound("/wordpress-5.4-beta2.zip")

    async def latin1_text(request):
        return web.Response(body=LATIN1_BODY, headers={"Content-Type": "text/plain; charset=utf-8"})

    app = web.Application()
    app.router.add_get("/core/version-check/1.7/", version_check)
    app.router.add_get("/wordpress-5.4-RC1.zip", package)
    app.router.add_get("/latest.zip", moved)
    app.router.add_get("/gone.zip", moved_away)
    app.router.add_get("/readme.txt", latin1_text)
    return app


class LocalVersionCheckInterceptor(VersionCheckInterceptor):
    VERSION_CHECK_PATTERN = re.compile(r"^http://127\.0\.0\.1:\d+/core/version-check/")


@pytest.mark.asyncio
async def test_get_returns_response():
    async with TestServer(make_app({"offers": []})) as server:
        async with AsyncHTTPClient() as client:
            response = await client.get(str(server.make_url("/core/version-check/1.7/")))

    assert response.ok
    assert response.method == "GET"
    assert json.loads(response.body) == {"offers": []}
    assert response.headers["Content-Type"].startswith("application/json")


@pytest.mark.asyncio
async def test_head_follows_redirects():
    async with TestServer(make_app()) as server:
        async with AsyncHTTPClient() as client:
            found = await client.head(str(server.make_url("/wordpress-5.4-RC1.zip")))
            moved = await client.head(str(server.make_url("/latest.zip")))
            moved_away = await client.head(str(server.make_url("/gone.zip")))
            missing = await client.head(str(server.make_url("/wordpress-5.4-beta2.zip")))

    assert found.status == 200 and found.body == b""
    assert moved.ok
    assert moved_away.status == 404
    assert missing.status == 404


@pytest.mark.asyncio
async def test_body_bytes_kept_as_received():
    async with TestServer(make_app()) as server:
        async with AsyncHTTPClient() as client:
            client.add_interceptor(LocalVersionCheckInterceptor("5.4-beta1", AsyncMock()))
            response = await client.get(str(server.make_url("/readme.txt")))

    assert response.body == LATIN1_BODY


@pytest.mark.asyncio
async def test_transport_error_becomes_response():
    server = TestServer(make_app())
    await server.start_server()
    url = str(server.make_url("/core/version-check/1.7/"))
    await server.close()

    async with AsyncHTTPClient(timeout=2) as client:
        response = await client.get(url)

    assert response.status is None
    assert response.error
    assert not response.ok


@pytest.mark.asyncio
async def test_interceptors_run_in_order():
    calls = []

    def tag(name):
        async def interceptor(response):
            calls.append(name)
            return response.model_copy(update={"body": response.body + name.encode()})
        return interceptor

    async with TestServer(make_app({"offers": []})) as server:
        async with AsyncHTTPClient(interceptors=[tag("a")]) as client:
            client.add_interceptor(tag("b"))
            response = await client.get(str(server.make_url("/core/version-check/1.7/")))

    assert calls == ["a", "b"]
    assert response.body.endswith(b"ab")


@pytest.mark.asyncio
async def test_version_check_rewritten_end_to_end(version_check_body):
    probe = AsyncMock()
    probe.exists.side_effect = lambda url: url == RC1_URL

    async with TestServer(make_app(version_check_body)) as server:
        async with AsyncHTTPClient() as client:
            client.add_interceptor(LocalVersionCheckInterceptor("5.4-beta1", probe))
            response = await client.get(str(server.make_url("/core/version-check/1.7/")),
                                        params={"version": "5.4-beta1"})

    offers = json.loads(response.body)["offers"]
    assert [o["version"] for o in offers] == ["5.3.2", "5.4-RC1", "5.4-RC1"]
    probe.exists.assert_awaited_once_with(RC1_URL)


def test_response_ok():
    assert HttpResponse(method="GET", url="u", status=200).ok
    assert not HttpResponse(method="GET", url="u", status=200, error="boom").ok
    assert not HttpResponse(method="GET", url="u", status=404).ok


@pytest.mark.asyncio
async def test_package_found_behind_redirect():
    async with TestServer(make_app()) as server:
        async with AsyncHTTPClient() as client:
            probe = PackageProbe(client)
            assert await probe.exists(str(server.make_url("/latest.zip"))) is True
            assert await probe.exists(str(server.make_url("/gone.zip"))) is False
