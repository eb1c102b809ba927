"""Tests for report grouping, rendering and CDN detection."""

import json

import pytest

from cdnseo.models import ContentCategory, Finding, Severity
from cdnseo.modules.fetcher import FetchErrorKind, FetchFailure
from cdnseo.modules.report import (
    ReportConfig,
    build_report,
    detect_cdn,
    group_by_category,
    group_findings,
    highest_severity,
    render_json,
    render_report,
    render_text,
    report_to_dict,
    write_report,
)


def _finding(rule_id: str, severity: Severity, category: ContentCategory, **kwargs) -> Finding:
    values = {
        "rule_id": rule_id,
        "title": f"Title of {rule_id}",
        "severity": severity,
        "category": category,
        "url": "https://example.com/",
        "variant": "default",
        "explanation": f"Explanation of {rule_id}.",
    }
    values.update(kwargs)
    return Finding(**values)


@pytest.fixture
def findings() -> list[Finding]:
    return [
        _finding("font-cors", Severity.MEDIUM, ContentCategory.FONT),
        _finding("html-long-cache", Severity.HIGH, ContentCategory.HTML, header="Cache-Control"),
        _finding("redirect-chain", Severity.INFO, ContentCategory.HTML),
        _finding("content-parity", Severity.CRITICAL, ContentCategory.HTML),
        _finding("content-type-present", Severity.MEDIUM, ContentCategory.UNKNOWN),
        _finding("hreflang-invalid", Severity.MEDIUM, ContentCategory.HTML),
    ]


class TestGrouping:
    def test_severity_then_category(self, findings):
        groups = group_findings(findings)
        assert list(groups) == ["critical", "high", "medium", "info"]
        assert list(groups["medium"]) == ["font", "html", "unknown"]

    def test_order_within_group_is_preserved(self):
        first = _finding("a", Severity.LOW, ContentCategory.IMAGE)
        second = _finding("b", Severity.LOW, ContentCategory.IMAGE)
        assert group_by_category([first, second]) == {"image": [first, second]}

    def test_empty(self):
        assert group_findings([]) == {}


class TestBuildReport:
    def test_counts(self, findings):
        report = build_report("https://example.com", findings)
        assert report.counts == {"critical": 1, "high": 1, "medium": 3, "low": 0, "info": 1}
        assert report.total == 6
        assert [finding.rule_id for finding in report.findings()] == [
            "content-parity",
            "html-long-cache",
            "font-cors",
            "hreflang-invalid",
            "content-type-present",
            "redirect-chain",
        ]

    def test_snapshots_and_failures(self, make_snapshot):
        snapshot = make_snapshot(
            headers={"Content-Type": "text/html; charset=utf-8", "CF-Ray": "abc-AMS"}
        )
        failure = FetchFailure(
            "googlebot", "/", "https://example.com/", FetchErrorKind.DNS, "lookup failed"
        )
        report = build_report("https://example.com", [], [snapshot, failure])
        assert len(report.snapshots) == 1
        summary = report.snapshots[0]
        assert summary.cdn == "Cloudflare"
        assert summary.content_type == "text/html"
        assert report.unavailable == [failure]

    def test_highest_severity(self, findings):
        assert highest_severity(build_report("t", findings)) == "critical"
        assert highest_severity(build_report("t", findings[2:3])) == "info"
        assert highest_severity(build_report("t", [])) is None


class TestJsonReport:
    def test_structure(self, findings):
        data = report_to_dict(build_report("https://example.com", findings))
        assert data["target"] == "https://example.com"
        assert data["report_metadata"]["tool"] == "cdnseo"
        assert data["summary"]["total_findings"] == 6
        html_high = data["findings"]["high"]["html"][0]
        assert html_high["rule_id"] == "html-long-cache"
        assert html_high["header"] == "Cache-Control"
        assert html_high["severity"] == "high"

    def test_deterministic(self, findings):
        first = render_json(build_report("https://example.com", findings))
        second = render_json(build_report("https://example.com", list(findings)))
        assert first == second
        assert json.loads(first)["summary"]["critical"] == 1

    def test_evidence_can_be_excluded(self):
        finding = _finding("x", Severity.LOW, ContentCategory.HTML, evidence="Vary: *")
        config = ReportConfig(format="json", include_evidence=False, include_remediation=False)
        data = report_to_dict(build_report("t", [finding]), config)
        entry = data["findings"]["low"]["html"][0]
        assert entry["evidence"] is None
        assert entry["remediation"] is None


class TestTextReport:
    def test_render(self, findings):
        text = render_text(build_report("https://example.com", findings))
        assert "CDN SEO Audit" in text
        assert "CRITICAL / html" in text
        assert "content-parity" in text
        assert text == render_text(build_report("https://example.com", findings))

    def test_no_findings(self):
        assert "No findings." in render_text(build_report("https://example.com", []))

    def test_markup_in_values_is_not_interpreted(self):
        finding = _finding(
            "x", Severity.LOW, ContentCategory.HTML, explanation="Vary is [bold]odd[/bold]."
        )
        assert "[bold]odd[/bold]" in render_text(build_report("t", [finding]), width=200)


class TestRenderReport:
    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            render_report(build_report("t", []), ReportConfig(format="xml"))

    def test_write_report(self, temp_dir, findings):
        output = temp_dir / "reports" / "audit.json"
        written = write_report(
            build_report("https://example.com", findings), output, ReportConfig(format="json")
        )
        assert written == output
        assert json.loads(output.read_text())["target"] == "https://example.com"


class TestDetectCdn:
    @pytest.mark.parametrize(
        ("headers", "expected"),
        [
            ({"Server": "cloudflare"}, "Cloudflare"),
            ({"X-Vercel-Id": "fra1::abc"}, "Vercel"),
            ({"Server": "Netlify"}, "Netlify"),
            ({"Via": "1.1 abc.cloudfront.net (CloudFront)"}, "CloudFront"),
            ({"X-Served-By": "cache-ams", "X-Timer": "S1"}, "Fastly"),
            ({"Server": "AkamaiGHost"}, "Akamai"),
            ({"Server": "nginx/1.25.3"}, "Nginx"),
            ({"Server": "Apache/2.4"}, "Apache"),
            ({}, None),
        ],
    )
    def test_detect(self, make_snapshot, headers, expected):
        assert detect_cdn(make_snapshot(headers=headers)) == expected
