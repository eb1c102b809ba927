"""Evaluator stage: turn snapshots into findings."""

from .checks import (
    check_link_header,
    check_redirect_chain,
    check_temporary_redirects,
    check_trailing_slash,
    failure_finding,
)
from .evaluator import applicable_rules, evaluate_outcomes, evaluate_snapshot
from .formatting import display_header
from .links import Link, parse_link_header
from .parity import SIGNIFICANT_HEADERS, VOLATILE_HEADERS, check_parity

__all__ = [
    "Link",
    "SIGNIFICANT_HEADERS",
    "VOLATILE_HEADERS",
    "applicable_rules",
    "check_link_header",
    "check_parity",
    "check_redirect_chain",
    "check_temporary_redirects",
    "check_trailing_slash",
    "display_header",
    "evaluate_outcomes",
    "evaluate_snapshot",
    "failure_finding",
    "parse_link_header",
]
