"""Concurrent fetching of request variants."""

import asyncio
import logging

import httpx

from cdnseo.tools.http import HTTPClient, HTTPResponse, RedirectLoopError

from .errors import classify_error
from .models import (
    FetchErrorKind,
    FetchFailure,
    FetchOutcome,
    HeaderSnapshot,
    RedirectHop,
    RequestVariant,
)
from .variants import apply_path_suffix, build_url

logger = logging.getLogger(__name__)


def _hop(response: HTTPResponse) -> RedirectHop:
    return RedirectHop(
        url=response.url,
        status_code=response.status_code,
        location=response.location,
    )


class Fetcher:
    """Fetch every request variant of a path, a few at a time."""

    def __init__(
        self,
        timeout: float = 10.0,
        max_redirects: int = 10,
        concurrency: int = 4,
        method: str = "GET",
        verify_ssl: bool = True,
    ):
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.concurrency = max(1, concurrency)
        self.method = method.upper()
        self.verify_ssl = verify_ssl

    def _client(self) -> HTTPClient:
        return HTTPClient(
            timeout=self.timeout,
            max_redirects=self.max_redirects,
            verify_ssl=self.verify_ssl,
        )

    async def fetch_paths(
        self,
        origin: str,
        paths: list[str],
        variants: tuple[RequestVariant, ...],
    ) -> dict[str, list[FetchOutcome]]:
        """Fetch all variants of all paths and wait for every one to finish.

        Variants that do not apply to a path (the trailing-slash form of "/")
        produce no outcome.
        """
        semaphore = asyncio.Semaphore(self.concurrency)
        async with self._client() as client:
            jobs = [
                (path, self._fetch_one(client, semaphore, origin, path, variant))
                for path in paths
                for variant in variants
            ]
            results = await asyncio.gather(*(job for _, job in jobs))

        outcomes: dict[str, list[FetchOutcome]] = {path: [] for path in paths}
        for (path, _), outcome in zip(jobs, results):
            if outcome is not None:
                outcomes[path].append(outcome)
        return outcomes

    async def fetch_variants(
        self,
        origin: str,
        path: str,
        variants: tuple[RequestVariant, ...],
    ) -> list[FetchOutcome]:
        """Fetch the variants of a single path."""
        outcomes = await self.fetch_paths(origin, [path], variants)
        return outcomes[path]

    async def _fetch_one(
        self,
        client: HTTPClient,
        semaphore: asyncio.Semaphore,
        origin: str,
        path: str,
        variant: RequestVariant,
    ) -> FetchOutcome | None:
        variant_path = apply_path_suffix(path, variant.path_suffix)
        if variant_path is None:
            logger.debug("Variant %s does not apply to %s", variant.name, path)
            return None

        url = build_url(origin, variant_path)
        headers = {"User-Agent": variant.user_agent} if variant.user_agent else None
        async with semaphore:
            logger.debug("Fetching %s %s (%s)", self.method, url, variant.name)
            try:
                hops, final = await asyncio.wait_for(
                    client.fetch_chain(self.method, url, headers=headers),
                    timeout=self.timeout,
                )
            except asyncio.TimeoutError:
                logger.warning(
                    "Variant %s of %s: no final response within %ss",
                    variant.name,
                    url,
                    self.timeout,
                )
                return FetchFailure(
                    variant=variant.name,
                    path=path,
                    requested_url=url,
                    kind=FetchErrorKind.TIMEOUT,
                    message=f"no final response within {self.timeout}s",
                )
            except RedirectLoopError as exc:
                logger.warning("Variant %s of %s: %s", variant.name, url, exc)
                return FetchFailure(
                    variant=variant.name,
                    path=path,
                    requested_url=url,
                    kind=FetchErrorKind.REDIRECT_LOOP,
                    message=str(exc),
                )
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                kind = classify_error(exc)
                logger.warning(
                    "Variant %s of %s failed (%s): %s", variant.name, url, kind.value, exc
                )
                return FetchFailure(
                    variant=variant.name,
                    path=path,
                    requested_url=url,
                    kind=kind,
                    message=str(exc) or type(exc).__name__,
                )

        logger.info("%s %s -> %s (%s)", self.method, url, final.status_code, variant.name)
        return HeaderSnapshot.build(
            variant=variant.name,
            path=path,
            requested_url=url,
            final_url=final.url,
            status_code=final.status_code,
            headers=final.headers,
            redirects=[_hop(hop) for hop in hops],
        )
