"""cdnseo - audit CDN response headers for SEO regressions."""

__version__ = "0.1.0"

from cdnseo.models import ContentCategory, Finding, Severity

__all__ = [
    "ContentCategory",
    "Finding",
    "Severity",
    "__version__",
]
