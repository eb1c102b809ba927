"""Rule table: declarative header expectations."""

from .cache_control import directive_seconds, max_freshness, parse_cache_control
from .categories import resolve_category
from .matchers import MatchKind, Matcher
from .models import ExpectationRule, RuleTable
from .predicates import Predicate, PredicateKind
from .table import DEFAULT_HTML_MAX_AGE, default_rules
from .validation import RuleTableError, validate_rule_table

__all__ = [
    "DEFAULT_HTML_MAX_AGE",
    "ExpectationRule",
    "MatchKind",
    "Matcher",
    "Predicate",
    "PredicateKind",
    "RuleTable",
    "RuleTableError",
    "default_rules",
    "directive_seconds",
    "max_freshness",
    "parse_cache_control",
    "resolve_category",
    "validate_rule_table",
]
