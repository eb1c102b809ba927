"""Startup validation of the rule table."""

from .models import RuleTable
from .predicates import SECONDS_KINDS, TEXT_KINDS


class RuleTableError(ValueError):
    """The rule table is malformed; the audit cannot run."""


def validate_rule_table(table: RuleTable) -> RuleTable:
    """Return ``table`` unchanged, or raise RuleTableError listing every problem."""
    problems: list[str] = []
    if not table.rules:
        problems.append("rule table is empty")

    seen: set[str] = set()
    for index, rule in enumerate(table.rules):
        label = rule.id or f"#{index}"
        if not rule.id:
            problems.append(f"rule {label}: missing id")
        elif rule.id in seen:
            problems.append(f"rule {label}: duplicate id")
        seen.add(rule.id)

        if not rule.title:
            problems.append(f"rule {label}: missing title")
        if not rule.header or rule.header.strip() != rule.header or ":" in rule.header:
            problems.append(f"rule {label}: invalid header name {rule.header!r}")
        if not rule.matchers:
            problems.append(f"rule {label}: no matchers")

        kind = rule.predicate.kind
        value = rule.predicate.value
        if kind in TEXT_KINDS and (not isinstance(value, str) or not value):
            problems.append(f"rule {label}: {kind.value} predicate needs a text value")
        if kind in SECONDS_KINDS and (
            not isinstance(value, int) or isinstance(value, bool) or value < 0
        ):
            problems.append(f"rule {label}: {kind.value} predicate needs non-negative seconds")

    if problems:
        raise RuleTableError("Invalid rule table: " + "; ".join(problems))
    return table
