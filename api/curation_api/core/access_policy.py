"""Route access policy evaluated before any request handler runs.

Invariants:
- Rules are matched top-to-bottom and the first match wins.
- The final rule is a catch-all, so every request resolves to a level.
- The rule table is built once at import time and never mutated.

Path patterns follow Ant conventions: ``{name}`` and ``*`` match exactly one
non-empty segment, ``**`` matches zero or more segments.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache

from .config import settings


class AccessLevel(str, enum.Enum):
    """Credential requirement attached to a route."""
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@lru_cache(maxsize=256)
def _segments(path: str) -> tuple[str, ...]:
    if not path.startswith("/"):
        path = "/" + path
    return tuple(path.split("/")[1:])


def _segment_matches(pattern: str, segment: str) -> bool:
    if pattern == "*" or (pattern.startswith("{") and pattern.endswith("}")):
        return bool(segment)
    return pattern == segment


def _match_segments(pattern: tuple[str, ...], path: tuple[str, ...]) -> bool:
    if not pattern:
        return not path
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_segments(rest, path[index:]) for index in range(len(path) + 1))
    if not path or not _segment_matches(head, path[0]):
        return False
    return _match_segments(rest, path[1:])


def path_matches(pattern: str, path: str) -> bool:
    """Return True if ``path`` matches the Ant-style ``pattern``."""
    return _match_segments(_segments(pattern), _segments(path))


@dataclass(frozen=True, slots=True)
class AccessRule:
    """One row of the policy table; ``methods=None`` matches any verb."""

    patterns: tuple[str, ...]
    access: AccessLevel
    methods: frozenset[str] | None = None

    def matches(self, method: str, path: str) -> bool:
        if self.methods is not None and method.upper() not in self.methods:
            return False
        return any(path_matches(pattern, path) for pattern in self.patterns)


def build_access_rules(api_prefix: str = "/api/v1") -> tuple[AccessRule, ...]:
    """Build the ordered policy table for routes mounted under ``api_prefix``."""
    prefix = api_prefix.rstrip("/")
    return (
        AccessRule(
            patterns=(f"{prefix}/playlists", f"{prefix}/playlists/{{id}}"),
            access=AccessLevel.PUBLIC,
            methods=frozenset({"GET"}),
        ),
        AccessRule(
            patterns=(f"{prefix}/curation/**",),
            access=AccessLevel.PUBLIC,
            methods=frozenset({"GET", "PUT", "POST", "DELETE"}),
        ),
        AccessRule(patterns=(f"{prefix}/playlists/**",), access=AccessLevel.AUTHENTICATED),
        AccessRule(patterns=("/swagger-ui/**", "/v3/api-docs/**"), access=AccessLevel.PUBLIC),
        AccessRule(patterns=("/**",), access=AccessLevel.AUTHENTICATED),
    )


ACCESS_RULES = build_access_rules(settings.api_prefix)


def match_rule(method: str, path: str, rules: tuple[AccessRule, ...] = ACCESS_RULES) -> AccessRule | None:
    """Return the first rule matching the request, if any."""
    for rule in rules:
        if rule.matches(method, path):
            return rule
    return None


def resolve_access(method: str, path: str, rules: tuple[AccessRule, ...] = ACCESS_RULES) -> AccessLevel:
    """Resolve the access level for a request; unmatched requests need credentials."""
    rule = match_rule(method, path, rules)
    if rule is None:
        return AccessLevel.AUTHENTICATED
    return rule.access
