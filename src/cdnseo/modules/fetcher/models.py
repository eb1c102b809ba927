"""Data models for fetched responses and fetch failures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit


class FetchErrorKind(Enum):
    """Why a variant could not be fetched."""

    TIMEOUT = "timeout"
    DNS = "dns"
    TLS = "tls"
    CONNECTION = "connection"
    REDIRECT_LOOP = "redirect_loop"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class RequestVariant:
    """A named way of requesting the same URL."""

    name: str
    user_agent: str | None = None
    path_suffix: str = ""


@dataclass(frozen=True, slots=True)
class RedirectHop:
    """One redirect response observed while following a chain."""

    url: str
    status_code: int
    location: str


@dataclass(frozen=True, slots=True)
class HeaderSnapshot:
    """Immutable record of one fetched response.

    Header names are stored lowercased in response order; repeated headers
    keep one entry per occurrence.
    """

    variant: str
    path: str
    requested_url: str
    final_url: str
    status_code: int
    headers: tuple[tuple[str, str], ...] = ()
    redirects: tuple[RedirectHop, ...] = ()

    @classmethod
    def build(
        cls,
        variant: str,
        path: str,
        requested_url: str,
        final_url: str,
        status_code: int,
        headers=(),
        redirects=(),
    ) -> HeaderSnapshot:
        """Create a snapshot from a header mapping or (name, value) pairs."""
        pairs = headers.items() if hasattr(headers, "items") else headers
        return cls(
            variant=variant,
            path=path,
            requested_url=requested_url,
            final_url=final_url,
            status_code=status_code,
            headers=tuple((str(name).lower(), str(value)) for name, value in pairs),
            redirects=tuple(redirects),
        )

    def get_all(self, name: str) -> list[str]:
        key = name.lower()
        return [value for header, value in self.headers if header == key]

    def get(self, name: str) -> str | None:
        """Return all values of a header joined with ', ', or None when absent."""
        values = self.get_all(name)
        if not values:
            return None
        return ", ".join(values)

    def has(self, name: str) -> bool:
        return bool(self.get_all(name))

    def header_names(self) -> frozenset[str]:
        return frozenset(header for header, _ in self.headers)

    @property
    def content_type(self) -> str:
        """Media type without parameters, lowercased."""
        value = self.get("content-type") or ""
        return value.split(";", 1)[0].strip().lower()

    @property
    def final_path(self) -> str:
        return urlsplit(self.final_url).path or "/"

    @property
    def redirect_count(self) -> int:
        return len(self.redirects)


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """Explicit marker for a variant that could not be fetched."""

    variant: str
    path: str
    requested_url: str
    kind: FetchErrorKind
    message: str


FetchOutcome = HeaderSnapshot | FetchFailure
