"""Rewrite core version-check responses to offer only the next beta/RC package."""

import copy
import json
from typing import Any, Dict, List, Sequence, Union

from pydantic import ValidationError

from ..exceptions import MalformedPayloadError
from ..versions.models import Candidate, RewriteResult, VersionCheckResponse
from .probe import PackageProbe

# offers pointed at the next beta/RC package, or removed when there is none
REWRITTEN_RESPONSES = ("development", "autoupdate")


def _check_shape(body: Any):
    if not isinstance(body, dict):
        raise MalformedPayloadError(f"expected a JSON object, got {type(body).__name__}")
    try:
        VersionCheckResponse.model_validate(body)
    except ValidationError as e:
        raise MalformedPayloadError(str(e)) from e


def decode_body(raw: Union[str, bytes]) -> Dict[str, Any]:
    """Decode and validate a version-check response body."""
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise MalformedPayloadError(f"invalid JSON ({e})") from e

    _check_shape(body)
    return body


def _point_offer_at(offer: Dict[str, Any], candidate: Candidate) -> Dict[str, Any]:
    offer["download"] = candidate.url
    offer["current"] = offer["version"] = candidate.label

    # only the full zip is known to exist
    packages = offer.get("packages")
    if isinstance(packages, dict):
        offer["packages"] = {
            name: candidate.url if name == "full" else False
            for name in packages
        }
    return offer


async def rewrite_offers(body: Dict[str, Any], candidates: Sequence[Candidate],
                         probe: PackageProbe) -> RewriteResult:
    """Point the development/autoupdate offers at the first candidate that exists.

    Candidates are probed in order and probing stops at the first hit. When
    none exists those offers are dropped. Other offers are left as they are.
    The given body is not modified.
    """
    _check_shape(body)
    body = copy.deepcopy(body)
    offers: List[Dict[str, Any]] = body["offers"]

    for candidate in candidates:
        if not await probe.exists(candidate.url):
            continue

        body["offers"] = [
            _point_offer_at(offer, candidate) if offer["response"] in REWRITTEN_RESPONSES else offer
            for offer in offers
        ]
        return RewriteResult(body=body, found=True, candidate=candidate)

    body["offers"] = [offer for offer in offers if offer["response"] not in REWRITTEN_RESPONSES]
    return RewriteResult(body=body, found=False)


async def rewrite_body(raw: Union[str, bytes], candidates: Sequence[Candidate],
                       probe: PackageProbe) -> str:
    """Decode, rewrite and re-encode a version-check response body."""
    result = await rewrite_offers(decode_body(raw), candidates, probe)
    return json.dumps(result.body)
