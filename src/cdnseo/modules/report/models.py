"""Report data models."""

from dataclasses import dataclass, field

from cdnseo.models import Finding
from cdnseo.modules.fetcher import FetchFailure


@dataclass
class ReportConfig:
    """Configuration for report rendering."""

    format: str = "text"
    include_evidence: bool = True
    include_remediation: bool = True


@dataclass(frozen=True, slots=True)
class SnapshotSummary:
    """One fetched variant, as shown in the report header."""

    path: str
    variant: str
    url: str
    status_code: int
    final_url: str
    redirects: int
    content_type: str
    cdn: str | None = None


@dataclass(frozen=True)
class Report:
    """Findings grouped by severity, then by content category."""

    target: str
    groups: dict[str, dict[str, list[Finding]]]
    counts: dict[str, int]
    snapshots: list[SnapshotSummary] = field(default_factory=list)
    unavailable: list[FetchFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def findings(self) -> list[Finding]:
        """Flatten groups back into report order."""
        return [
            finding
            for categories in self.groups.values()
            for scoped in categories.values()
            for finding in scoped
        ]
