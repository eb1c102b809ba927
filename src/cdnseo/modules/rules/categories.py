"""Content category resolution."""

from cdnseo.models import ContentCategory
from cdnseo.modules.fetcher import HeaderSnapshot

EXTENSION_CATEGORIES: dict[str, ContentCategory] = {
    ".html": ContentCategory.HTML,
    ".htm": ContentCategory.HTML,
    ".xhtml": ContentCategory.HTML,
    ".css": ContentCategory.STATIC,
    ".js": ContentCategory.STATIC,
    ".mjs": ContentCategory.STATIC,
    ".png": ContentCategory.IMAGE,
    ".jpg": ContentCategory.IMAGE,
    ".jpeg": ContentCategory.IMAGE,
    ".gif": ContentCategory.IMAGE,
    ".webp": ContentCategory.IMAGE,
    ".avif": ContentCategory.IMAGE,
    ".svg": ContentCategory.IMAGE,
    ".ico": ContentCategory.IMAGE,
    ".woff": ContentCategory.FONT,
    ".woff2": ContentCategory.FONT,
    ".ttf": ContentCategory.FONT,
    ".otf": ContentCategory.FONT,
    ".eot": ContentCategory.FONT,
    ".json": ContentCategory.API,
    ".xml": ContentCategory.DOCUMENT,
    ".txt": ContentCategory.DOCUMENT,
}

# Checked in order; first matching prefix wins.
CONTENT_TYPE_CATEGORIES: list[tuple[str, ContentCategory]] = [
    ("text/html", ContentCategory.HTML),
    ("application/xhtml+xml", ContentCategory.HTML),
    ("text/css", ContentCategory.STATIC),
    ("text/javascript", ContentCategory.STATIC),
    ("application/javascript", ContentCategory.STATIC),
    ("application/x-javascript", ContentCategory.STATIC),
    ("image/", ContentCategory.IMAGE),
    ("font/", ContentCategory.FONT),
    ("application/font-", ContentCategory.FONT),
    ("application/x-font-", ContentCategory.FONT),
    ("application/vnd.ms-fontobject", ContentCategory.FONT),
    ("application/json", ContentCategory.API),
    ("application/ld+json", ContentCategory.API),
    ("application/problem+json", ContentCategory.API),
    ("application/xml", ContentCategory.DOCUMENT),
    ("text/xml", ContentCategory.DOCUMENT),
    ("text/plain", ContentCategory.DOCUMENT),
]


def category_from_path(path: str) -> ContentCategory | None:
    last_segment = path.rsplit("/", 1)[-1].lower()
    if "." not in last_segment:
        return None
    extension = "." + last_segment.rsplit(".", 1)[-1]
    return EXTENSION_CATEGORIES.get(extension)


def category_from_content_type(content_type: str) -> ContentCategory | None:
    content_type = content_type.lower()
    for prefix, category in CONTENT_TYPE_CATEGORIES:
        if content_type.startswith(prefix):
            return category
    if content_type.endswith("+json"):
        return ContentCategory.API
    return None


def resolve_category(snapshot: HeaderSnapshot) -> ContentCategory:
    """Path extension first, then declared Content-Type, else UNKNOWN."""
    return (
        category_from_path(snapshot.final_path)
        or category_from_content_type(snapshot.content_type)
        or ContentCategory.UNKNOWN
    )
