"""Custom exceptions."""


class BetaTesterError(Exception):
    """Base class for errors raised by this package."""


class MalformedPayloadError(BetaTesterError, ValueError):
    """Raised when a version-check response body can't be rewritten."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed version-check payload: {reason}")
        self.reason = reason
