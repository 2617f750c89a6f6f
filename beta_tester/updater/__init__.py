"""Version-check response rewriting."""

from .probe import PackageProbe
from .rewriter import REWRITTEN_RESPONSES, decode_body, rewrite_body, rewrite_offers

__all__ = ["PackageProbe", "REWRITTEN_RESPONSES", "decode_body", "rewrite_body", "rewrite_offers"]
