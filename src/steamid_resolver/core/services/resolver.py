"""Steam XML resolution pipeline.

One lookup = fetch -> body checks -> decode -> classify -> (profile) recovery,
run as a single unit under `with_retry`. Empty and error-envelope
classifications are turned into typed errors here; callers only ever receive
a profile or a group.

Each call builds its own client and records; nothing is shared between calls,
so concurrent lookups (e.g. `asyncio.gather`) need no coordination.
"""

from __future__ import annotations

import logging

from steamid_resolver.adapters.http_client import HttpxFetcher, extract_html_metadata
from steamid_resolver.core.classifier import classify
from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.domain.models import (
    EmptyResponse,
    ErrorResponse,
    GroupRecord,
    GroupResponse,
    ProfileRecord,
    ProfileResponse,
)
from steamid_resolver.core.error_messages import interpret_error_message
from steamid_resolver.core.errors import (
    SteamEmptyResponseError,
    SteamGroupNotFoundError,
    SteamNetworkError,
    SteamParseError,
    SteamProfileNotFoundError,
)
from steamid_resolver.core.interfaces.http import HTTPFetcher
from steamid_resolver.core.recovery import recover_custom_url
from steamid_resolver.core.retry import with_retry
from steamid_resolver.core.xml_tree import decode_xml

logger = logging.getLogger(__name__)

MIN_BODY_LENGTH = 10

XML_MARKERS: tuple[str, ...] = ("<?xml", "<profile", "<memberList")

GROUP_NOT_FOUND_PAGE_PHRASES: tuple[str, ...] = (
    "group could not be found",
    "group does not exist",
    "Group",
)

SHAREDFILE_FAILURE_PHRASES: tuple[str, ...] = (
    "There was a problem accessing the item",
    "That item does not exist",
    "error_message",
)


def is_group_url(url: str) -> bool:
    return "/groups/" in url or "memberslistxml" in url


def check_body(text: str, url: str) -> None:
    """Reject bodies that cannot be a Steam XML document.

    Steam sometimes serves an HTML error page instead of XML, mostly for
    group lookups.
    """

    if not text.strip() or len(text) < MIN_BODY_LENGTH:
        raise SteamEmptyResponseError(url)

    if any(marker in text for marker in XML_MARKERS):
        return

    if is_group_url(url):
        raise SteamGroupNotFoundError(url)
    if any(phrase in text for phrase in GROUP_NOT_FOUND_PAGE_PHRASES) or (
        "<html" in text and "error" in text
    ):
        raise SteamGroupNotFoundError(url)

    message = "Invalid XML response from Steam"
    meta = extract_html_metadata(html=text)
    detail = meta.get("error_message") or meta.get("title")
    if detail:
        message = f"{message} ({detail})"
    raise SteamParseError(message)


async def _fetch_xml(fetcher: HTTPFetcher, url: str) -> str:
    logger.debug("Fetching XML from: %s", url)
    result = await fetcher.fetch(url)
    if not result.ok:
        raise SteamNetworkError(f"HTTP {result.status_code} for {url}")
    return result.text


async def _resolve_once(url: str, fetcher: HTTPFetcher) -> ProfileResponse | GroupResponse:
    text = await _fetch_xml(fetcher, url)
    check_body(text, url)

    tree = decode_xml(text)
    logger.debug("XML parsed successfully: keys=%s", sorted(tree))
    classified = classify(tree)

    if isinstance(classified, EmptyResponse):
        raise SteamEmptyResponseError(url)
    if isinstance(classified, ErrorResponse):
        raise interpret_error_message(classified.message, identifier=url)
    if isinstance(classified, ProfileResponse):
        profile = await recover_custom_url(classified.profile, url, fetcher)
        return ProfileResponse(profile=profile)
    if isinstance(classified, GroupResponse):
        return classified
    raise SteamParseError(f"Unhandled response kind: {classified.kind}")


async def parse_steam_xml(
    url: str,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> ProfileResponse | GroupResponse:
    """Fetch and classify a fully formed Steam XML URL, with retries."""

    settings = settings or ResolverSettings()
    fetcher = fetcher or HttpxFetcher(settings)

    async def attempt() -> ProfileResponse | GroupResponse:
        return await _resolve_once(url, fetcher)

    return await with_retry(
        attempt,
        max_retries=settings.max_retries,
        base_delay=settings.retry_base_delay_seconds,
    )


async def resolve_profile(
    url: str,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> ProfileRecord:
    response = await parse_steam_xml(url, fetcher=fetcher, settings=settings)
    if isinstance(response, GroupResponse):
        raise SteamProfileNotFoundError(url)
    return response.profile


async def resolve_group(
    url: str,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> GroupRecord:
    response = await parse_steam_xml(url, fetcher=fetcher, settings=settings)
    if isinstance(response, ProfileResponse):
        raise SteamGroupNotFoundError(url)
    return response.group


async def check_sharedfile_exists(
    url: str,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> bool:
    """True unless the item page carries one of Steam's failure markers.

    A page that cannot be fetched counts as "does not exist".
    """

    fetcher = fetcher or HttpxFetcher(settings or ResolverSettings())
    logger.debug("Validating sharedfile: %s", url)
    try:
        result = await fetcher.fetch(url)
    except Exception as exc:
        logger.debug("Sharedfile validation failed: %s", exc)
        return False

    return not any(phrase in result.text for phrase in SHAREDFILE_FAILURE_PHRASES)
