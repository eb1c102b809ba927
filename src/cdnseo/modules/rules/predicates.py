"""Header value predicates.

Every check a rule can make on a header is one ``Predicate`` value: a kind
tag plus an optional argument. Comparisons are case-insensitive.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .cache_control import directive_seconds, max_freshness, parse_cache_control


class PredicateKind(Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    CONTAINS = "contains"
    PRESENT = "present"
    ABSENT = "absent"
    NOT_CONTAINS = "not_contains"
    FRESHNESS_AT_MOST = "freshness_at_most"
    MAX_AGE_AT_LEAST = "max_age_at_least"


TEXT_KINDS = frozenset(
    {
        PredicateKind.EXACT,
        PredicateKind.PREFIX,
        PredicateKind.CONTAINS,
        PredicateKind.NOT_CONTAINS,
    }
)
SECONDS_KINDS = frozenset({PredicateKind.FRESHNESS_AT_MOST, PredicateKind.MAX_AGE_AT_LEAST})


@dataclass(frozen=True, slots=True)
class Predicate:
    """Accepted-value test for a single header."""

    kind: PredicateKind
    value: str | int | None = None

    @classmethod
    def exact(cls, value: str) -> Predicate:
        return cls(PredicateKind.EXACT, value)

    @classmethod
    def prefix(cls, value: str) -> Predicate:
        return cls(PredicateKind.PREFIX, value)

    @classmethod
    def contains(cls, value: str) -> Predicate:
        return cls(PredicateKind.CONTAINS, value)

    @classmethod
    def present(cls) -> Predicate:
        return cls(PredicateKind.PRESENT)

    @classmethod
    def absent(cls) -> Predicate:
        return cls(PredicateKind.ABSENT)

    @classmethod
    def not_contains(cls, value: str) -> Predicate:
        return cls(PredicateKind.NOT_CONTAINS, value)

    @classmethod
    def freshness_at_most(cls, seconds: int) -> Predicate:
        return cls(PredicateKind.FRESHNESS_AT_MOST, seconds)

    @classmethod
    def max_age_at_least(cls, seconds: int) -> Predicate:
        return cls(PredicateKind.MAX_AGE_AT_LEAST, seconds)

    def evaluate(self, header_value: str | None) -> bool:
        """Return True when ``header_value`` (None if absent) is acceptable."""
        kind = self.kind
        if kind is PredicateKind.PRESENT:
            return header_value is not None
        if kind is PredicateKind.ABSENT:
            return header_value is None
        if kind is PredicateKind.NOT_CONTAINS:
            return header_value is None or str(self.value).lower() not in header_value.lower()
        if kind is PredicateKind.FRESHNESS_AT_MOST:
            directives = parse_cache_control(header_value)
            if "immutable" in directives:
                return False
            freshness = max_freshness(directives)
            return freshness is None or freshness <= int(self.value)
        if kind is PredicateKind.MAX_AGE_AT_LEAST:
            directives = parse_cache_control(header_value)
            if "no-store" in directives or "no-cache" in directives:
                return False
            max_age = directive_seconds(directives, "max-age")
            return max_age is not None and max_age >= int(self.value)

        if header_value is None:
            return False
        actual = header_value.strip().lower()
        expected = str(self.value).lower()
        if kind is PredicateKind.EXACT:
            return actual == expected
        if kind is PredicateKind.PREFIX:
            return actual.startswith(expected)
        if kind is PredicateKind.CONTAINS:
            return expected in actual
        raise ValueError(f"Unsupported predicate kind: {kind}")

    def describe(self) -> str:
        """Short human-readable form, e.g. "contains 'max-age'"."""
        kind = self.kind
        if kind is PredicateKind.PRESENT:
            return "present"
        if kind is PredicateKind.ABSENT:
            return "absent"
        if kind is PredicateKind.EXACT:
            return f"equal to {self.value!r}"
        if kind is PredicateKind.PREFIX:
            return f"starting with {self.value!r}"
        if kind is PredicateKind.CONTAINS:
            return f"containing {self.value!r}"
        if kind is PredicateKind.NOT_CONTAINS:
            return f"not containing {self.value!r}"
        if kind is PredicateKind.FRESHNESS_AT_MOST:
            return f"cacheable for at most {self.value}s and not immutable"
        return f"max-age of at least {self.value}s"
