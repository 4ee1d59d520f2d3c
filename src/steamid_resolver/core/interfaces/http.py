"""HTTP fetch contract.

Why Protocol:
- The pipeline only needs "GET this URL, optionally without following
  redirects"; any transport satisfying that shape can be plugged in.
- Tests swap in a scripted fetcher without touching the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class FetchResult:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""

        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


@runtime_checkable
class HTTPFetcher(Protocol):
    """Minimal transport contract.

    Rules:
    - `fetch` is async because it performs network I/O.
    - Transport failures raise `SteamNetworkError`; HTTP status codes are
      reported, never raised, so callers can inspect redirects.
    """

    async def fetch(self, url: str, *, follow_redirects: bool = True) -> FetchResult:
        ...
