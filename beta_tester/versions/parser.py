"""Parsing of named beta/RC version strings."""

import re
from typing import Optional

from .models import ParsedVersion, ReleaseKind

# 1: version number (5.2.3), 2: optional minor segment (.3),
# 3: beta or RC, 4: number of the beta/RC release
BETA_RC_VERSION_REGEX = re.compile(r"^(\d+\.\d+(\.\d+)?)-(beta|RC)(\d+)$", re.ASCII)


def parse_version(version: str) -> Optional[ParsedVersion]:
    """Split a beta/RC version string into its parts.

    Returns None for anything that isn't a named beta/RC release, e.g.
    "5.4", "5.4-alpha-12345" or "5.4-beta".
    """
    match = BETA_RC_VERSION_REGEX.fullmatch(version or "")
    if not match:
        return None

    sequence = int(match.group(4))
    if sequence < 1:
        return None

    return ParsedVersion(
        base=match.group(1),
        kind=ReleaseKind(match.group(3)),
        sequence=sequence,
    )


def is_pre_release(version: str) -> bool:
    return parse_version(version) is not None
