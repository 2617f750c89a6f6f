"""Async HTTP client utilities."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import aiohttp
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class HttpResponse(BaseModel):
    """Response to a request, or the transport error that took its place."""
    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    status: Optional[int] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status == 200


Interceptor = Callable[[HttpResponse], Awaitable[HttpResponse]]


class AsyncHTTPClient:
    """Reusable async HTTP client.

    Every response, including transport failures, is handed to the
    registered interceptors in order before it is returned.
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(self, headers: Optional[Dict[str, str]] = None,
                 timeout: float = DEFAULT_TIMEOUT,
                 interceptors: Optional[List[Interceptor]] = None):
        self.default_headers = headers or {}
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.interceptors: List[Interceptor] = list(interceptors or [])
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session:
            await self.session.close()
            self.session = None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if not self.session:
            self.session = aiohttp.ClientSession(headers=self.default_headers, timeout=self.timeout)
        return self.session

    def add_interceptor(self, interceptor: Interceptor):
        self.interceptors.append(interceptor)

    async def request(self, method: str, url: str, **kwargs: Any) -> HttpResponse:
        """Send a request and return the (possibly intercepted) response."""
        session = self._ensure_session()
        method = method.upper()

        try:
            async with session.request(method, url, **kwargs) as resp:
                body = await resp.read()
                response = HttpResponse(
                    method=method,
                    url=url,
                    status=resp.status,
                    headers=dict(resp.headers),
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("%s %s failed: %r", method, url, e)
            response = HttpResponse(method=method, url=url, error=f"{type(e).__name__}: {e}")

        for interceptor in self.interceptors:
            response = await interceptor(response)
        return response

    async def get(self, url: str, params: Optional[Dict[str, str]] = None,
                  headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def head(self, url: str, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        """HEAD request. Redirects are followed and the final status is reported."""
        return await self.request("HEAD", url, headers=headers)
