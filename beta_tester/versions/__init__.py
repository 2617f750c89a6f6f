"""Beta/RC version parsing and next-release guessing."""

from .candidates import generate_candidates
from .models import Candidate, ParsedVersion, ReleaseKind
from .parser import is_pre_release, parse_version

__all__ = [
    "Candidate",
    "ParsedVersion",
    "ReleaseKind",
    "generate_candidates",
    "is_pre_release",
    "parse_version",
]
