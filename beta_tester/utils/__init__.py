"""Common utilities."""

from .async_http import AsyncHTTPClient, HttpResponse, Interceptor
from .logger import setup_logging

__all__ = ["AsyncHTTPClient", "HttpResponse", "Interceptor", "setup_logging"]
