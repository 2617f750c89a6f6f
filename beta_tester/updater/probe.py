"""Existence checks for release packages."""

import logging

from ..utils.async_http import AsyncHTTPClient

logger = logging.getLogger(__name__)


class PackageProbe:
    """Checks whether a package is published, with a single HEAD request.

    Most probes end in a 404. That is the normal answer for a release that
    hasn't shipped yet, so nothing here is logged above DEBUG.
    """

    def __init__(self, client: AsyncHTTPClient):
        self.client = client

    async def exists(self, url: str) -> bool:
        response = await self.client.head(url)
        if response.error:
            logger.debug("Package probe for %s failed: %s", url, response.error)
        else:
            logger.debug("Package probe for %s returned HTTP %s", url, response.status)
        return response.ok
