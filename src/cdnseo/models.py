"""Shared data models for findings and content categories."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Finding severity, ordered from most to least urgent."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Position in SEVERITY_ORDER; lower is more urgent."""
        return SEVERITY_ORDER.index(self)

    def at_least(self, other: Severity) -> bool:
        """Return True when this severity is as urgent as ``other`` or more."""
        return self.rank <= other.rank


SEVERITY_ORDER = [
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
    Severity.INFO,
]


class ContentCategory(Enum):
    """Kind of resource a response carries, used to pick applicable rules."""

    HTML = "html"
    STATIC = "static"
    IMAGE = "image"
    FONT = "font"
    API = "api"
    DOCUMENT = "document"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Finding:
    """A single failed expectation observed on a fetched response."""

    rule_id: str
    title: str
    severity: Severity
    category: ContentCategory
    url: str
    variant: str
    explanation: str
    header: str = ""
    evidence: str = ""
    remediation: str = ""

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.title} @ {self.url} ({self.variant})"
