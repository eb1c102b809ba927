"""Matchers deciding which snapshots a rule applies to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cdnseo.models import ContentCategory
from cdnseo.modules.fetcher import HeaderSnapshot


class MatchKind(Enum):
    UNIVERSAL = "universal"
    CATEGORY = "category"
    CONTENT_TYPE = "content_type"
    PATH_SUFFIX = "path_suffix"


# Higher wins when two rules target the same header.
SPECIFICITY = {
    MatchKind.UNIVERSAL: 0,
    MatchKind.CATEGORY: 1,
    MatchKind.CONTENT_TYPE: 2,
    MatchKind.PATH_SUFFIX: 3,
}


@dataclass(frozen=True, slots=True)
class Matcher:
    """One applicability condition of a rule."""

    kind: MatchKind
    values: tuple[str, ...] = ()

    @classmethod
    def universal(cls) -> Matcher:
        return cls(MatchKind.UNIVERSAL)

    @classmethod
    def category(cls, *categories: ContentCategory) -> Matcher:
        return cls(MatchKind.CATEGORY, tuple(category.value for category in categories))

    @classmethod
    def content_type(cls, *prefixes: str) -> Matcher:
        return cls(MatchKind.CONTENT_TYPE, tuple(prefix.lower() for prefix in prefixes))

    @classmethod
    def path_suffix(cls, *suffixes: str) -> Matcher:
        return cls(MatchKind.PATH_SUFFIX, tuple(suffix.lower() for suffix in suffixes))

    @property
    def specificity(self) -> int:
        return SPECIFICITY[self.kind]

    def applies(self, snapshot: HeaderSnapshot, category: ContentCategory) -> bool:
        if self.kind is MatchKind.UNIVERSAL:
            return True
        if self.kind is MatchKind.CATEGORY:
            return category.value in self.values
        if self.kind is MatchKind.CONTENT_TYPE:
            return snapshot.content_type.startswith(self.values)
        return snapshot.final_path.lower().endswith(self.values)

    def describe(self) -> str:
        if self.kind is MatchKind.UNIVERSAL:
            return "all responses"
        joined = ", ".join(self.values)
        if self.kind is MatchKind.CATEGORY:
            return f"category {joined}"
        if self.kind is MatchKind.CONTENT_TYPE:
            return f"content-type {joined}"
        return f"path ending {joined}"
