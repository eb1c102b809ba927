"""Audit orchestration: fetch, evaluate, report."""

import logging

from cdnseo.config import AuditSettings
from cdnseo.models import Finding
from cdnseo.modules.evaluator import evaluate_outcomes
from cdnseo.modules.fetcher import (
    Fetcher,
    FetchOutcome,
    default_variants,
    normalize_path,
    normalize_target,
)
from cdnseo.modules.report import Report, build_report
from cdnseo.modules.rules import RuleTable, default_rules, validate_rule_table

logger = logging.getLogger(__name__)


class Auditor:
    """Runs the fetch -> evaluate -> report pipeline for one target.

    The rule table is validated in the constructor so a broken table fails
    before any request is sent.
    """

    def __init__(
        self,
        settings: AuditSettings | None = None,
        rules: RuleTable | None = None,
        fetcher: Fetcher | None = None,
    ):
        self.settings = settings or AuditSettings()
        if rules is None:
            rules = default_rules(self.settings.html_max_age)
        self.rules = validate_rule_table(rules)
        self.fetcher = fetcher or Fetcher(
            timeout=self.settings.timeout,
            max_redirects=self.settings.max_redirects,
            concurrency=self.settings.concurrency,
            method=self.settings.method,
            verify_ssl=self.settings.verify_ssl,
        )
        self.variants = default_variants(
            user_agent=self.settings.user_agent,
            crawler_user_agent=self.settings.crawler_user_agent,
            include_crawler=self.settings.include_crawler,
            include_trailing_slash=self.settings.include_trailing_slash,
        )

    def sample_paths(self, target: str, paths: list[str] | None = None) -> tuple[str, list[str]]:
        """Return the origin and the de-duplicated list of paths to audit."""
        origin, target_path = normalize_target(target)
        candidates = [normalize_path(path) for path in paths] if paths else [target_path]
        return origin, list(dict.fromkeys(candidates))

    async def audit(self, target: str, paths: list[str] | None = None) -> Report:
        """Audit ``target`` and return the grouped report."""
        origin, sampled = self.sample_paths(target, paths)
        logger.info("Auditing %s (%d paths, %d variants)", origin, len(sampled), len(self.variants))

        outcomes_by_path = await self.fetcher.fetch_paths(origin, sampled, self.variants)

        findings: list[Finding] = []
        outcomes: list[FetchOutcome] = []
        for path in sampled:
            path_outcomes = outcomes_by_path[path]
            outcomes.extend(path_outcomes)
            findings.extend(
                evaluate_outcomes(path_outcomes, self.rules, self.settings.acceptable_hops)
            )

        logger.info("Audit of %s complete: %d findings", origin, len(findings))
        return build_report(origin, findings, outcomes)


async def run_audit(
    target: str,
    paths: list[str] | None = None,
    settings: AuditSettings | None = None,
) -> Report:
    """Convenience function to audit a target with default rules."""
    return await Auditor(settings).audit(target, paths)
