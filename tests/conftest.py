"""Test configuration and fixtures for cdnseo."""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from cdnseo.modules.fetcher import HeaderSnapshot, RedirectHop
from cdnseo.modules.rules import RuleTable, default_rules


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Keep real env vars and ~/.cdnseo out of every test."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    for key in (
        "CDNSEO_TIMEOUT",
        "CDNSEO_CONCURRENCY",
        "CDNSEO_MAX_REDIRECTS",
        "CDNSEO_HTML_MAX_AGE",
        "CDNSEO_ACCEPTABLE_HOPS",
        "CDNSEO_METHOD",
        "CDNSEO_USER_AGENT",
        "CDNSEO_CRAWLER_USER_AGENT",
        "CDNSEO_VERIFY_SSL",
        "CDNSEO_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(temp_dir)
    return home


@pytest.fixture
def rule_table() -> RuleTable:
    """The default rule table with the default HTML threshold."""
    return default_rules()


@pytest.fixture
def make_snapshot() -> Callable[..., HeaderSnapshot]:
    """Factory for HeaderSnapshot objects with sensible defaults."""

    def _make(
        headers: dict[str, str] | list[tuple[str, str]] | None = None,
        url: str = "https://example.com/",
        status_code: int = 200,
        variant: str = "default",
        path: str = "/",
        redirects: list[RedirectHop] | None = None,
        requested_url: str | None = None,
    ) -> HeaderSnapshot:
        return HeaderSnapshot.build(
            variant=variant,
            path=path,
            requested_url=requested_url or url,
            final_url=url,
            status_code=status_code,
            headers=headers or {},
            redirects=redirects or [],
        )

    return _make
