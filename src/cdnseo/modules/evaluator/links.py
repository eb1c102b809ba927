"""Link header parsing (RFC 8288)."""

import re
from dataclasses import dataclass, field

_LINK_RE = re.compile(r"<([^>]*)>((?:\s*;\s*[^;,<]+)*)")
_PARAM_RE = re.compile(r"""\s*;\s*([^=;\s]+)\s*(?:=\s*("[^"]*"|[^;,\s]*))?""")


@dataclass(frozen=True)
class Link:
    url: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def rel(self) -> set[str]:
        return set(self.params.get("rel", "").lower().split())


def parse_link_header(value: str | None) -> list[Link]:
    """Parse ``<url>; rel="x"; hreflang="en", <url2>; ...`` into Link objects."""
    if not value:
        return []
    links: list[Link] = []
    for match in _LINK_RE.finditer(value):
        params: dict[str, str] = {}
        for name, raw in _PARAM_RE.findall(match.group(2)):
            params[name.lower()] = raw.strip('"')
        links.append(Link(url=match.group(1).strip(), params=params))
    return links
