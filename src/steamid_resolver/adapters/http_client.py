"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect policy for every Steam request.
- Implements the `HTTPFetcher` contract so the pipeline never imports httpx.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from bs4 import BeautifulSoup

from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.errors import SteamNetworkError
from steamid_resolver.core.interfaces.http import FetchResult

logger = logging.getLogger(__name__)


def build_async_client(
    settings: ResolverSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    follow_redirects: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the resolver defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - `transport` lets tests plug in `httpx.MockTransport`.
    """

    settings = settings or ResolverSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/xml,application/xml,text/html;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=follow_redirects,
        headers=headers,
        transport=transport,
    )


class HttpxFetcher:
    """`HTTPFetcher` backed by a fresh `httpx.AsyncClient` per request."""

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ResolverSettings()
        self._transport = transport

    async def fetch(self, url: str, *, follow_redirects: bool = True) -> FetchResult:
        logger.debug("GET %s (follow_redirects=%s)", url, follow_redirects)
        try:
            async with build_async_client(
                self._settings,
                follow_redirects=follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise SteamNetworkError(f"Failed to fetch data from Steam: {exc}", exc) from exc

        return FetchResult(
            status_code=response.status_code,
            headers=dict(response.headers),
            text=response.text,
        )


def extract_html_metadata(*, html: str) -> dict[str, Any]:
    """Extract lightweight metadata from an HTML page.

    Steam answers some failed lookups with an HTML error page instead of XML;
    its title/error text makes the resulting parse error readable.

    Optional keys:
    - title
    - error_message
    """

    if not html:
        return {}

    soup = BeautifulSoup(html, "html.parser")

    title = None
    if soup.title and soup.title.string:
        title = soup.title.string.strip()

    error_message = None
    tag = soup.find(id="message") or soup.find(class_="error_ctn")
    if tag:
        text = tag.get_text(" ", strip=True)
        if text:
            error_message = text

    out: dict[str, Any] = {}
    if title:
        out["title"] = title
    if error_message:
        out["error_message"] = error_message
    return out
