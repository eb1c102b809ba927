"""Async HTTP client that records every redirect hop."""

import logging
import time
from dataclasses import dataclass, field
from urllib.parse import urljoin

import httpx

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


@dataclass
class HTTPResponse:
    """Represents one HTTP response. The body is never read."""

    url: str
    status_code: int
    headers: list[tuple[str, str]] = field(default_factory=list)
    response_time: float = 0.0

    @property
    def location(self) -> str:
        for name, value in self.headers:
            if name.lower() == "location":
                return value
        return ""

    @property
    def is_redirect(self) -> bool:
        return self.status_code in REDIRECT_STATUSES and bool(self.location)


class RedirectLoopError(Exception):
    """Raised when a redirect chain revisits a URL or exceeds the hop bound."""

    def __init__(self, url: str, hops: list[HTTPResponse], reason: str):
        self.url = url
        self.hops = hops
        self.reason = reason
        super().__init__(f"{reason} after {len(hops)} redirects starting at {url}")


class HTTPClient:
    """Async HTTP client that follows redirects by hand up to a fixed bound."""

    def __init__(
        self,
        timeout: float = 10.0,
        max_redirects: int = 10,
        verify_ssl: bool = True,
    ):
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.verify_ssl = verify_ssl
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=False,
            verify=self.verify_ssl,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """Send one request without following redirects."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        start = time.perf_counter()
        request = self.client.build_request(method, url, headers=headers)
        response = await self.client.send(request, stream=True)
        try:
            return HTTPResponse(
                url=str(response.url),
                status_code=response.status_code,
                headers=list(response.headers.multi_items()),
                response_time=time.perf_counter() - start,
            )
        finally:
            await response.aclose()

    async def fetch_chain(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> tuple[list[HTTPResponse], HTTPResponse]:
        """Follow redirects from ``url``.

        Returns the redirect responses in order and the final response.
        Raises RedirectLoopError when a URL repeats or the chain grows past
        ``max_redirects`` hops, and httpx.InvalidURL for an unparseable
        Location header.
        """
        hops: list[HTTPResponse] = []
        seen = {url}
        current_url = url
        current_method = method.upper()
        while True:
            response = await self.request(current_method, current_url, headers=headers)
            if not response.is_redirect:
                return hops, response

            hops.append(response)
            try:
                next_url = urljoin(current_url, response.location)
            except ValueError as exc:
                raise httpx.InvalidURL(
                    f"Malformed Location header {response.location!r}: {exc}"
                ) from exc
            logger.debug("%s %s -> %s", response.status_code, current_url, next_url)
            if next_url in seen:
                raise RedirectLoopError(url, hops, "redirect loop detected")
            if len(hops) > self.max_redirects:
                raise RedirectLoopError(url, hops, "redirect limit exceeded")
            if response.status_code == 303 and current_method != "HEAD":
                current_method = "GET"
            seen.add(next_url)
            current_url = next_url
