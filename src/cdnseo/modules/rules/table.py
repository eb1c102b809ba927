"""Built-in SEO expectations for CDN-served responses."""

from cdnseo.models import ContentCategory, Severity

from .matchers import Matcher
from .models import ExpectationRule, RuleTable
from .predicates import Predicate

DEFAULT_HTML_MAX_AGE = 3600
STATIC_MIN_MAX_AGE = 86400

HTML = (Matcher.category(ContentCategory.HTML), Matcher.content_type("text/html"))


def default_rules(html_max_age: int = DEFAULT_HTML_MAX_AGE) -> RuleTable:
    """Build the rule table. Order here is the order findings are reported in."""
    return RuleTable(
        rules=(
            ExpectationRule(
                id="content-type-present",
                title="Responses must declare a Content-Type",
                header="Content-Type",
                predicate=Predicate.present(),
                matchers=(Matcher.universal(),),
                severity=Severity.MEDIUM,
                remediation="Set Content-Type at the origin; CDNs pass it through unchanged.",
            ),
            ExpectationRule(
                id="html-long-cache",
                title="HTML pages must not use immutable/long max-age",
                header="Cache-Control",
                predicate=Predicate.freshness_at_most(html_max_age),
                matchers=HTML,
                severity=Severity.HIGH,
                remediation=(
                    f"Cache HTML for at most {html_max_age}s and drop 'immutable'; use "
                    "stale-while-revalidate so edges refresh in the background."
                ),
            ),
            ExpectationRule(
                id="html-noindex",
                title="HTML pages must not be served with X-Robots-Tag: noindex",
                header="X-Robots-Tag",
                predicate=Predicate.not_contains("noindex"),
                matchers=HTML,
                severity=Severity.HIGH,
                remediation="Remove the noindex directive from CDN or origin header rules.",
            ),
            ExpectationRule(
                id="html-nofollow",
                title="HTML pages should not be served with X-Robots-Tag: nofollow",
                header="X-Robots-Tag",
                predicate=Predicate.not_contains("nofollow"),
                matchers=HTML,
                severity=Severity.MEDIUM,
                remediation="Remove nofollow unless the page links are intentionally untrusted.",
            ),
            ExpectationRule(
                id="html-vary-user-agent",
                title="HTML varying on User-Agent fragments the CDN cache",
                header="Vary",
                predicate=Predicate.not_contains("user-agent"),
                matchers=HTML,
                severity=Severity.INFO,
                remediation=(
                    "Prefer responsive HTML; if dynamic serving is required, confirm the "
                    "crawler variant receives the same content."
                ),
            ),
            ExpectationRule(
                id="static-cache-lifetime",
                title="Static assets should be cached for at least a day",
                header="Cache-Control",
                predicate=Predicate.max_age_at_least(STATIC_MIN_MAX_AGE),
                matchers=(Matcher.category(ContentCategory.STATIC),),
                severity=Severity.LOW,
                remediation="Fingerprint asset filenames and serve them with a long max-age.",
            ),
            ExpectationRule(
                id="image-cache-control",
                title="Images should carry an explicit max-age",
                header="Cache-Control",
                predicate=Predicate.contains("max-age"),
                matchers=(Matcher.category(ContentCategory.IMAGE),),
                severity=Severity.LOW,
                remediation="Add Cache-Control with a max-age for image responses.",
            ),
            ExpectationRule(
                id="font-cors",
                title="Fonts must allow cross-origin loading",
                header="Access-Control-Allow-Origin",
                predicate=Predicate.present(),
                matchers=(Matcher.category(ContentCategory.FONT),),
                severity=Severity.MEDIUM,
                remediation="Send Access-Control-Allow-Origin for font files served from the CDN.",
            ),
            ExpectationRule(
                id="font-cache-control",
                title="Fonts should carry an explicit max-age",
                header="Cache-Control",
                predicate=Predicate.contains("max-age"),
                matchers=(Matcher.category(ContentCategory.FONT),),
                severity=Severity.LOW,
                remediation="Add Cache-Control with a long max-age for font files.",
            ),
            ExpectationRule(
                id="api-noindex",
                title="API responses should be kept out of the index",
                header="X-Robots-Tag",
                predicate=Predicate.contains("noindex"),
                matchers=(Matcher.category(ContentCategory.API),),
                severity=Severity.LOW,
                remediation="Send X-Robots-Tag: noindex on JSON API responses.",
            ),
            ExpectationRule(
                id="robots-txt-content-type",
                title="robots.txt must be served as text/plain",
                header="Content-Type",
                predicate=Predicate.prefix("text/plain"),
                matchers=(Matcher.path_suffix("/robots.txt"),),
                severity=Severity.HIGH,
                remediation="Serve robots.txt with Content-Type: text/plain.",
            ),
            ExpectationRule(
                id="sitemap-content-type",
                title="XML sitemaps must be served with an XML Content-Type",
                header="Content-Type",
                predicate=Predicate.contains("xml"),
                matchers=(Matcher.path_suffix("sitemap.xml", "sitemap_index.xml"),),
                severity=Severity.MEDIUM,
                remediation="Serve sitemaps as application/xml or text/xml.",
            ),
        )
    )
