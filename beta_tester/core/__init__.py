"""Interception of core version-check responses."""

from .interceptor import VersionCheckInterceptor, create_interceptor

__all__ = ["VersionCheckInterceptor", "create_interceptor"]
