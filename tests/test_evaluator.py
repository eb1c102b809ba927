"""Tests for rule evaluation against header snapshots."""

import pytest

from cdnseo.models import ContentCategory, Severity
from cdnseo.modules.evaluator import applicable_rules, evaluate_outcomes, evaluate_snapshot
from cdnseo.modules.fetcher import FetchErrorKind, FetchFailure
from cdnseo.modules.rules import resolve_category


def _ids(findings):
    return [finding.rule_id for finding in findings]


class TestEvaluateSnapshot:
    def test_clean_html_has_no_findings(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={
                "Content-Type": "text/html; charset=utf-8",
                "Cache-Control": "public, max-age=300, stale-while-revalidate=60",
            }
        )
        assert evaluate_snapshot(snapshot, rule_table) == []

    def test_immutable_html_is_high(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={
                "Content-Type": "text/html",
                "Cache-Control": "public, max-age=31536000, immutable",
            }
        )
        findings = evaluate_snapshot(snapshot, rule_table)
        assert len(findings) == 1
        finding = findings[0]
        assert finding.title == "HTML pages must not use immutable/long max-age"
        assert finding.severity is Severity.HIGH
        assert finding.category is ContentCategory.HTML
        assert finding.header == "Cache-Control"
        assert "immutable" in finding.evidence

    @pytest.mark.parametrize("max_age", [3601, 7200, 86400, 31536000])
    def test_html_above_threshold_is_at_least_medium(self, make_snapshot, rule_table, max_age):
        snapshot = make_snapshot(
            headers={"Content-Type": "text/html", "Cache-Control": f"max-age={max_age}"}
        )
        findings = evaluate_snapshot(snapshot, rule_table)
        assert findings
        assert all(finding.severity.at_least(Severity.MEDIUM) for finding in findings)

    def test_html_at_threshold_passes(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={"Content-Type": "text/html", "Cache-Control": "max-age=3600"}
        )
        assert evaluate_snapshot(snapshot, rule_table) == []

    def test_idempotent(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={
                "Content-Type": "text/html",
                "Cache-Control": "max-age=31536000",
                "X-Robots-Tag": "noindex, nofollow",
                "Vary": "User-Agent",
            }
        )
        first = evaluate_snapshot(snapshot, rule_table)
        assert first == evaluate_snapshot(snapshot, rule_table)
        assert _ids(first) == [
            "html-long-cache",
            "html-noindex",
            "html-nofollow",
            "html-vary-user-agent",
        ]

    def test_font_without_cors_is_medium(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={"Content-Type": "font/woff2", "Cache-Control": "max-age=31536000"},
            url="https://example.com/fonts/inter.woff2",
        )
        findings = evaluate_snapshot(snapshot, rule_table)
        assert _ids(findings) == ["font-cors"]
        assert findings[0].severity is Severity.MEDIUM
        assert findings[0].explanation.endswith("but is absent.")

    def test_font_with_cors_passes(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={
                "Content-Type": "font/woff2",
                "Cache-Control": "max-age=31536000",
                "Access-Control-Allow-Origin": "*",
            },
            url="https://example.com/fonts/inter.woff2",
        )
        assert evaluate_snapshot(snapshot, rule_table) == []

    def test_path_suffix_rule_overrides_universal(self, make_snapshot, rule_table):
        snapshot = make_snapshot(url="https://example.com/robots.txt")
        findings = evaluate_snapshot(snapshot, rule_table)
        assert _ids(findings) == ["robots-txt-content-type"]
        assert findings[0].severity is Severity.HIGH

    def test_robots_txt_served_as_plain_text(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={"Content-Type": "text/plain; charset=utf-8"},
            url="https://example.com/robots.txt",
        )
        assert evaluate_snapshot(snapshot, rule_table) == []

    def test_unknown_category_gets_only_universal_rules(self, make_snapshot, rule_table):
        snapshot = make_snapshot(url="https://example.com/download")
        category = resolve_category(snapshot)
        assert category is ContentCategory.UNKNOWN
        rules = applicable_rules(snapshot, rule_table, category)
        assert [rule.id for rule in rules] == ["content-type-present"]
        findings = evaluate_snapshot(snapshot, rule_table)
        assert _ids(findings) == ["content-type-present"]
        assert findings[0].category is ContentCategory.UNKNOWN

    def test_static_asset_short_cache(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={"Content-Type": "text/css", "Cache-Control": "no-cache"},
            url="https://example.com/site.css",
        )
        findings = evaluate_snapshot(snapshot, rule_table)
        assert _ids(findings) == ["static-cache-lifetime"]
        assert findings[0].severity is Severity.LOW

    def test_multi_valued_header_is_joined(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers=[
                ("Content-Type", "text/html"),
                ("X-Robots-Tag", "max-snippet:50"),
                ("X-Robots-Tag", "noindex"),
            ]
        )
        findings = evaluate_snapshot(snapshot, rule_table)
        assert _ids(findings) == ["html-noindex"]
        assert findings[0].evidence == "X-Robots-Tag: max-snippet:50, noindex"


class TestEvaluateOutcomes:
    def test_failure_becomes_medium_finding(self, make_snapshot, rule_table):
        snapshot = make_snapshot(
            headers={"Content-Type": "text/html", "Cache-Control": "max-age=31536000"}
        )
        failure = FetchFailure(
            variant="googlebot",
            path="/",
            requested_url="https://example.com/",
            kind=FetchErrorKind.TIMEOUT,
            message="timed out",
        )
        findings = evaluate_outcomes([snapshot, failure], rule_table)
        assert _ids(findings) == ["html-long-cache", "fetch-unavailable"]
        unavailable = findings[-1]
        assert unavailable.severity is Severity.MEDIUM
        assert unavailable.variant == "googlebot"
        assert unavailable.explanation == "timeout: timed out"

    def test_parity_runs_between_default_and_crawler(self, make_snapshot, rule_table):
        default = make_snapshot(headers={"Content-Type": "text/html"})
        crawler = make_snapshot(
            headers={"Content-Type": "text/html", "X-Robots-Tag": "noindex"},
            variant="googlebot",
        )
        findings = evaluate_outcomes([default, crawler], rule_table)
        assert _ids(findings) == ["html-noindex", "content-parity"]
        assert findings[0].variant == "googlebot"

    def test_no_parity_without_crawler(self, make_snapshot, rule_table):
        default = make_snapshot(headers={"Content-Type": "text/html"})
        assert evaluate_outcomes([default], rule_table) == []

    def test_deterministic(self, make_snapshot, rule_table):
        outcomes = [
            make_snapshot(headers={"Content-Type": "text/html", "Vary": "user-agent"}),
            make_snapshot(headers={"Content-Type": "text/html"}, variant="googlebot"),
        ]
        assert evaluate_outcomes(outcomes, rule_table) == evaluate_outcomes(outcomes, rule_table)
