"""Request classification against the endpoint allowlist.

The allowlist is an ordered tuple of ``PathPattern`` rules matched segment
by segment, first match wins. A segment is either a literal string or the
``INTEGER`` placeholder, which matches one or more ASCII digits and is
extracted as an ``int``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gateway.models import RouteKind

ALLOWED_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})

# Placeholder for a digits-only path segment.
INTEGER = int


class Outcome(str, Enum):
    METHOD_NOT_ALLOWED = "method_not_allowed"
    DENIED = "denied"
    ALLOWED = "allowed"


@dataclass(frozen=True)
class PathMatch:
    """A path that matched an allowlist rule."""

    kind: RouteKind
    verify_trip: bool
    param: Optional[int] = None


@dataclass(frozen=True)
class PathPattern:
    """One allowlist rule: a segment pattern and what it grants."""

    segments: tuple
    kind: RouteKind
    verify_trip: bool = False

    def match(self, path: str) -> Optional[PathMatch]:
        parts = _split_path(path)
        if parts is None or len(parts) != len(self.segments):
            return None

        param: Optional[int] = None
        for expected, actual in zip(self.segments, parts):
            if expected is INTEGER:
                if not _is_digits(actual):
                    return None
                try:
                    param = int(actual)
                except ValueError:
                    # Past the interpreter's digit limit for int().
                    return None
            elif expected != actual:
                return None
        return PathMatch(kind=self.kind, verify_trip=self.verify_trip, param=param)


@dataclass(frozen=True)
class Classification:
    """The single outcome a request is processed under."""

    outcome: Outcome
    match: Optional[PathMatch] = None

    @property
    def allowed(self) -> bool:
        return self.outcome is Outcome.ALLOWED

    @property
    def verify_trip(self) -> bool:
        return self.match is not None and self.match.verify_trip


ALLOWLIST: tuple[PathPattern, ...] = (
    PathPattern(
        ("api", "location", "latest"),
        RouteKind.LOCATION_LATEST,
        verify_trip=True,
    ),
    PathPattern(
        ("api", "location", "history", "timestamp", INTEGER),
        RouteKind.LOCATION_HISTORY,
        verify_trip=True,
    ),
    PathPattern(("api", "trips"), RouteKind.TRIP_INDEX),
    PathPattern(("api", "trips", INTEGER), RouteKind.TRIP_DETAIL),
)


def _split_path(path: str) -> Optional[list[str]]:
    """Split an absolute path into segments, None if not absolute."""
    if not path.startswith("/"):
        return None
    return path[1:].split("/")


def _is_digits(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def match_allowlist(path: str) -> Optional[PathMatch]:
    """Return the first allowlist rule matching ``path``, or None."""
    for pattern in ALLOWLIST:
        matched = pattern.match(path)
        if matched is not None:
            return matched
    return None


def classify(method: str, path: str) -> Classification:
    """Classify a request by method and path.

    Disallowed methods are rejected regardless of path. Otherwise the path
    is either on the allowlist (possibly requiring trip verification) or
    denied.
    """
    if method.upper() not in ALLOWED_METHODS:
        return Classification(Outcome.METHOD_NOT_ALLOWED)

    matched = match_allowlist(path)
    if matched is None:
        return Classification(Outcome.DENIED)
    return Classification(Outcome.ALLOWED, matched)
