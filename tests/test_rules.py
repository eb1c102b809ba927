"""Tests for the rule table: predicates, matchers, categories and validation."""

import pytest

from cdnseo.models import ContentCategory, Severity
from cdnseo.modules.rules import (
    ExpectationRule,
    Matcher,
    Predicate,
    PredicateKind,
    RuleTable,
    RuleTableError,
    default_rules,
    max_freshness,
    parse_cache_control,
    resolve_category,
    validate_rule_table,
)


class TestCacheControl:
    def test_parse(self):
        directives = parse_cache_control('public, max-age=600, S-MaxAge="120", immutable')
        assert directives == {
            "public": None,
            "max-age": "600",
            "s-maxage": "120",
            "immutable": None,
        }

    def test_parse_empty(self):
        assert parse_cache_control(None) == {}
        assert parse_cache_control(" , ") == {}

    def test_max_freshness(self):
        assert max_freshness(parse_cache_control("max-age=60, s-maxage=3600")) == 3600
        assert max_freshness(parse_cache_control("no-cache")) is None
        assert max_freshness(parse_cache_control("max-age=abc")) is None


class TestPredicate:
    @pytest.mark.parametrize(
        ("predicate", "value", "expected"),
        [
            (Predicate.exact("*"), "*", True),
            (Predicate.exact("*"), "https://example.com", False),
            (Predicate.exact("NoIndex"), " noindex ", True),
            (Predicate.prefix("text/plain"), "Text/Plain; charset=utf-8", True),
            (Predicate.prefix("text/plain"), "text/html", False),
            (Predicate.contains("max-age"), "public, max-age=60", True),
            (Predicate.contains("max-age"), None, False),
            (Predicate.present(), "", True),
            (Predicate.present(), None, False),
            (Predicate.absent(), None, True),
            (Predicate.absent(), "x", False),
            (Predicate.not_contains("noindex"), None, True),
            (Predicate.not_contains("noindex"), "NOINDEX, nofollow", False),
            (Predicate.freshness_at_most(3600), None, True),
            (Predicate.freshness_at_most(3600), "max-age=3600", True),
            (Predicate.freshness_at_most(3600), "max-age=3601", False),
            (Predicate.freshness_at_most(3600), "max-age=60, s-maxage=86400", False),
            (Predicate.freshness_at_most(3600), "max-age=0, immutable", False),
            (Predicate.max_age_at_least(86400), "max-age=31536000, immutable", True),
            (Predicate.max_age_at_least(86400), "max-age=600", False),
            (Predicate.max_age_at_least(86400), "no-store", False),
            (Predicate.max_age_at_least(86400), None, False),
        ],
    )
    def test_evaluate(self, predicate, value, expected):
        assert predicate.evaluate(value) is expected

    def test_describe(self):
        assert Predicate.present().describe() == "present"
        assert Predicate.contains("max-age").describe() == "containing 'max-age'"
        assert "3600" in Predicate.freshness_at_most(3600).describe()


class TestCategories:
    def _snapshot(self, make_snapshot, url, content_type=None):
        headers = {"Content-Type": content_type} if content_type else {}
        return make_snapshot(headers=headers, url=url)

    @pytest.mark.parametrize(
        ("url", "content_type", "expected"),
        [
            ("https://example.com/", "text/html; charset=utf-8", ContentCategory.HTML),
            ("https://example.com/app.js", None, ContentCategory.STATIC),
            ("https://example.com/logo.PNG", None, ContentCategory.IMAGE),
            ("https://example.com/f.woff2", "application/octet-stream", ContentCategory.FONT),
            ("https://example.com/f", "font/woff2", ContentCategory.FONT),
            ("https://example.com/api/items", "application/vnd.api+json", ContentCategory.API),
            ("https://example.com/robots.txt", "text/html", ContentCategory.DOCUMENT),
            ("https://example.com/download", "application/zip", ContentCategory.UNKNOWN),
            ("https://example.com/", None, ContentCategory.UNKNOWN),
        ],
    )
    def test_resolve_category(self, make_snapshot, url, content_type, expected):
        assert resolve_category(self._snapshot(make_snapshot, url, content_type)) is expected

    def test_path_extension_takes_precedence(self, make_snapshot):
        snapshot = self._snapshot(make_snapshot, "https://example.com/page.html", "image/png")
        assert resolve_category(snapshot) is ContentCategory.HTML


class TestMatcher:
    def test_specificity_order(self):
        assert (
            Matcher.universal().specificity
            < Matcher.category(ContentCategory.HTML).specificity
            < Matcher.content_type("text/html").specificity
            < Matcher.path_suffix("/robots.txt").specificity
        )

    def test_applies(self, make_snapshot):
        snapshot = make_snapshot(
            headers={"Content-Type": "text/html"}, url="https://example.com/Robots.TXT"
        )
        document = ContentCategory.DOCUMENT
        assert Matcher.universal().applies(snapshot, document)
        assert Matcher.category(document).applies(snapshot, document)
        assert not Matcher.category(ContentCategory.HTML).applies(snapshot, document)
        assert Matcher.content_type("text/html").applies(snapshot, document)
        assert Matcher.path_suffix("/robots.txt").applies(snapshot, document)


def _rule(**overrides) -> ExpectationRule:
    values = {
        "id": "rule",
        "title": "A rule",
        "header": "Cache-Control",
        "predicate": Predicate.present(),
        "matchers": (Matcher.universal(),),
        "severity": Severity.LOW,
    }
    values.update(overrides)
    return ExpectationRule(**values)


class TestValidation:
    def test_default_table_is_valid(self, rule_table: RuleTable):
        assert validate_rule_table(rule_table) is rule_table
        assert len(rule_table) > 0
        assert rule_table.get("html-long-cache").severity is Severity.HIGH

    def test_html_threshold_is_a_parameter(self):
        rule = default_rules(html_max_age=600).get("html-long-cache")
        assert rule.predicate == Predicate(PredicateKind.FRESHNESS_AT_MOST, 600)

    def test_empty_table(self):
        with pytest.raises(RuleTableError, match="empty"):
            validate_rule_table(RuleTable(rules=()))

    def test_duplicate_ids(self):
        with pytest.raises(RuleTableError, match="duplicate id"):
            validate_rule_table(RuleTable(rules=(_rule(), _rule())))

    def test_missing_matchers(self):
        with pytest.raises(RuleTableError, match="no matchers"):
            validate_rule_table(RuleTable(rules=(_rule(matchers=()),)))

    @pytest.mark.parametrize("header", ["", " Cache-Control", "Cache-Control:"])
    def test_bad_header(self, header):
        with pytest.raises(RuleTableError, match="invalid header"):
            validate_rule_table(RuleTable(rules=(_rule(header=header),)))

    def test_text_predicate_needs_value(self):
        with pytest.raises(RuleTableError, match="text value"):
            validate_rule_table(
                RuleTable(rules=(_rule(predicate=Predicate(PredicateKind.CONTAINS)),))
            )

    def test_seconds_predicate_needs_non_negative_int(self):
        with pytest.raises(RuleTableError, match="seconds"):
            validate_rule_table(
                RuleTable(rules=(_rule(predicate=Predicate.freshness_at_most(-1)),))
            )

    def test_error_is_value_error(self):
        assert issubclass(RuleTableError, ValueError)

    def test_all_problems_reported(self):
        with pytest.raises(RuleTableError) as exc_info:
            validate_rule_table(RuleTable(rules=(_rule(id="", title="", matchers=()),)))
        message = str(exc_info.value)
        assert "missing id" in message
        assert "missing title" in message
        assert "no matchers" in message
