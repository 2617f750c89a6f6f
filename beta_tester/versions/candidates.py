"""Guess the download URLs of the next beta/RC release."""

import logging
from typing import List

from .models import Candidate, ParsedVersion, ReleaseKind

logger = logging.getLogger(__name__)

DOWNLOAD_URL = "https://wordpress.org/wordpress-{base}-{kind}{number}.zip"


def _candidate(base: str, kind: ReleaseKind, number: int) -> Candidate:
    return Candidate(
        label=f"{base}-{kind.value}{number}",
        url=DOWNLOAD_URL.format(base=base, kind=kind.value, number=number),
    )


def generate_candidates(parsed: ParsedVersion) -> List[Candidate]:
    """Return the possible next releases, in the order they should be probed.

    A beta is followed by either RC1 or the next beta; RC1 is checked first.
    An RC is only followed by the next RC.
    """
    next_number = parsed.sequence + 1

    if parsed.kind is ReleaseKind.BETA:
        candidates = [
            _candidate(parsed.base, ReleaseKind.RC, 1),
            _candidate(parsed.base, ReleaseKind.BETA, next_number),
        ]
    else:
        candidates = [_candidate(parsed.base, ReleaseKind.RC, next_number)]

    logger.debug("Next release candidates for %s: %s",
                 parsed.label, [c.label for c in candidates])
    return candidates
