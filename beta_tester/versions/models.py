"""Data models for beta/RC versions and version-check responses."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReleaseKind(str, Enum):
    """Kind of named pre-release. The value is the token used in version strings."""
    BETA = "beta"
    RC = "RC"


class ParsedVersion(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: str = Field(pattern=r"^\d+\.\d+(\.\d+)?$")
    kind: ReleaseKind
    sequence: int = Field(ge=1)

    @property
    def label(self) -> str:
        return f"{self.base}-{self.kind.value}{self.sequence}"


class Candidate(BaseModel):
    """A guess at the next pre-release package, not yet known to exist."""
    model_config = ConfigDict(frozen=True)

    label: str
    url: str


class UpdateOffer(BaseModel):
    """One entry in the `offers` list of a version-check response.

    Only `response` is checked; every other key is left untyped. Offers are
    edited as plain dicts so unknown keys keep their order.
    """
    model_config = ConfigDict(extra="allow")

    response: str


class VersionCheckResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    offers: List[UpdateOffer]


class RewriteResult(BaseModel):
    """Rewritten body plus what the probe found."""
    body: Dict[str, Any]
    found: bool
    candidate: Optional[Candidate] = None
