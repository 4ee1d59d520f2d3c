"""
Pytest configuration for steamid-resolver tests.

Provides:
1. `ScriptedFetcher`: an `HTTPFetcher` replaying canned responses (no network)
2. `settings`: resolver settings isolated from .env files, with zero backoff
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.interfaces.http import FetchResult


class ScriptedFetcher:
    """Replays responses in order; the last one repeats once the script runs out.

    Items may be `FetchResult`, a plain body string (200 OK) or an exception
    instance to raise.
    """

    def __init__(self, responses: Iterable[FetchResult | str | Exception]) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[str, bool]] = []

    async def fetch(self, url: str, *, follow_redirects: bool = True) -> FetchResult:
        self.calls.append((url, follow_redirects))
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, Exception):
            raise item
        if isinstance(item, str):
            return FetchResult(status_code=200, headers={"content-type": "text/xml"}, text=item)
        return item


@pytest.fixture
def settings() -> ResolverSettings:
    return ResolverSettings(_env_file=None, max_retries=3, retry_base_delay_seconds=0.0)


@pytest.fixture
def make_fetcher():
    def _make(*responses: FetchResult | str | Exception) -> ScriptedFetcher:
        return ScriptedFetcher(responses)

    return _make
