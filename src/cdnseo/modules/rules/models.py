"""Expectation rule models."""

from dataclasses import dataclass

from cdnseo.models import ContentCategory, Severity
from cdnseo.modules.fetcher import HeaderSnapshot

from .matchers import Matcher
from .predicates import Predicate


@dataclass(frozen=True, slots=True)
class ExpectationRule:
    """A declarative header expectation for some class of responses."""

    id: str
    title: str
    header: str
    predicate: Predicate
    matchers: tuple[Matcher, ...]
    severity: Severity
    remediation: str = ""

    def specificity_for(
        self, snapshot: HeaderSnapshot, category: ContentCategory
    ) -> int | None:
        """Highest specificity among matchers that apply, or None if none apply."""
        applicable = [
            matcher.specificity
            for matcher in self.matchers
            if matcher.applies(snapshot, category)
        ]
        return max(applicable) if applicable else None


@dataclass(frozen=True)
class RuleTable:
    """Immutable, ordered collection of expectation rules."""

    rules: tuple[ExpectationRule, ...]

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def get(self, rule_id: str) -> ExpectationRule | None:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None
