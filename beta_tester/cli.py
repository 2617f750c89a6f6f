"""Command line entry point: run a core version check as a beta/RC site would see it."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from . import __version__
from .core.interceptor import create_interceptor
from .exceptions import MalformedPayloadError
from .updater.probe import PackageProbe
from .updater.rewriter import decode_body
from .utils.async_http import AsyncHTTPClient
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)

VERSION_CHECK_URL = "https://api.wordpress.org/core/version-check/1.7/"
USER_AGENT = f"wp-beta-tester/{__version__}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wp-beta-tester",
        description="Show the core update offers a site running RUNNING_VERSION would get.",
    )
    parser.add_argument("running_version", metavar="RUNNING_VERSION",
                        help="version the site is running, e.g. 5.4-beta1")
    parser.add_argument("--api-url", default=VERSION_CHECK_URL,
                        help="core version-check endpoint (default: %(default)s)")
    parser.add_argument("--timeout", type=float, default=AsyncHTTPClient.DEFAULT_TIMEOUT,
                        help="HTTP timeout in seconds (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log probe details")
    return parser


async def check_for_updates(running_version: str, api_url: str = VERSION_CHECK_URL,
                            timeout: float = AsyncHTTPClient.DEFAULT_TIMEOUT) -> Optional[Dict[str, Any]]:
    """Request the version check and return the (rewritten) body, or None on failure."""
    async with AsyncHTTPClient(headers={"User-Agent": USER_AGENT}, timeout=timeout) as client:
        interceptor = create_interceptor(running_version, PackageProbe(client))
        if interceptor:
            client.add_interceptor(interceptor)
            if not interceptor.VERSION_CHECK_PATTERN.match(api_url):
                logger.warning("%s is not a core version-check URL, offers will not be rewritten", api_url)

        response = await client.get(api_url, params={"version": running_version})

    if not response.ok:
        logger.error("Version check failed: %s", response.error or f"HTTP {response.status}")
        return None

    return decode_body(response.body)


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        body = asyncio.run(check_for_updates(args.running_version, args.api_url, args.timeout))
    except MalformedPayloadError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130

    if body is None:
        return 1

    json.dump(body["offers"], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
