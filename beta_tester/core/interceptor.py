"""Hook the rewriter into responses from the core version-check API."""

import json
import logging
import re
from typing import List, Optional

from ..exceptions import MalformedPayloadError
from ..updater.probe import PackageProbe
from ..updater.rewriter import decode_body, rewrite_offers
from ..utils.async_http import HttpResponse
from ..versions.candidates import generate_candidates
from ..versions.models import Candidate, ParsedVersion
from ..versions.parser import parse_version

logger = logging.getLogger(__name__)


class VersionCheckInterceptor:
    """Response interceptor that limits core updates to the next beta/RC release.

    The running version is parsed, and the next release candidates are
    generated, once here rather than on every response. If the running
    version is not a named beta/RC release the interceptor does nothing.
    """

    VERSION_CHECK_PATTERN = re.compile(r"^https?://api\.wordpress\.org/core/version-check/")

    def __init__(self, running_version: str, probe: PackageProbe):
        self.running_version = running_version
        self.probe = probe
        self.parsed: Optional[ParsedVersion] = parse_version(running_version)
        self.candidates: List[Candidate] = generate_candidates(self.parsed) if self.parsed else []

    @property
    def active(self) -> bool:
        return self.parsed is not None

    def applies_to(self, response: HttpResponse) -> bool:
        """Whether the response is a successful core version-check response."""
        return (
            response.error is None
            and bool(self.VERSION_CHECK_PATTERN.match(response.url))
            and response.status == 200
        )

    async def __call__(self, response: HttpResponse) -> HttpResponse:
        if not self.active or not self.applies_to(response):
            return response

        try:
            body = decode_body(response.body)
            result = await rewrite_offers(body, self.candidates, self.probe)
        except MalformedPayloadError as e:
            logger.warning("%s; passing response from %s through unchanged", e, response.url)
            return response

        if result.found:
            logger.info("Running %s, offering %s", self.running_version, result.candidate.label)
        else:
            logger.info("Running %s, no newer beta/RC package found; removed development and autoupdate offers",
                        self.running_version)

        return response.model_copy(update={"body": json.dumps(result.body).encode("utf-8")})


def create_interceptor(running_version: str, probe: PackageProbe) -> Optional[VersionCheckInterceptor]:
    """Build the interceptor, or return None if `running_version` is not a beta/RC release."""
    interceptor = VersionCheckInterceptor(running_version, probe)
    if not interceptor.active:
        logger.debug("%s is not a named beta/RC release, not intercepting", running_version)
        return None
    return interceptor
