"""Request classifier: method check and endpoint allowlist."""

from .service import (
    ALLOWED_METHODS,
    ALLOWLIST,
    INTEGER,
    Classification,
    Outcome,
    PathMatch,
    PathPattern,
    classify,
    match_allowlist,
)

__all__ = [
    "ALLOWED_METHODS",
    "ALLOWLIST",
    "INTEGER",
    "Classification",
    "Outcome",
    "PathMatch",
    "PathPattern",
    "classify",
    "match_allowlist",
]
