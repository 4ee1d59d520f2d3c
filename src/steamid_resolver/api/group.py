"""Group lookups by group URL name (bare or full URL)."""

from __future__ import annotations

from steamid_resolver.api.dual_support import CallbackFunction, with_callback
from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.domain.models import GroupRecord, GroupResponse, extract_string
from steamid_resolver.core.errors import SteamGroupNotFoundError, SteamParseError
from steamid_resolver.core.interfaces.http import HTTPFetcher
from steamid_resolver.core.services.resolver import parse_steam_xml
from steamid_resolver.core.urls import build_group_url


async def fetch_group(
    identifier: str,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> GroupRecord:
    settings = settings or ResolverSettings()
    url = build_group_url(identifier, settings)
    response = await parse_steam_xml(url, fetcher=fetcher, settings=settings)
    if not isinstance(response, GroupResponse):
        raise SteamGroupNotFoundError(identifier)
    return response.group


async def _group_id64(
    identifier: str,
    fetcher: HTTPFetcher | None,
    settings: ResolverSettings | None,
) -> str:
    group = await fetch_group(identifier, fetcher=fetcher, settings=settings)
    group_id64 = extract_string(group.group_id64)
    if not group_id64:
        raise SteamParseError("Failed to resolve groupID64")
    return group_id64


async def group_url_to_group_id64(
    group_url: str,
    callback: CallbackFunction[str] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> str | None:
    return await with_callback(_group_id64(group_url, fetcher, settings), callback)


async def group_url_to_full_info(
    group_url: str,
    callback: CallbackFunction[GroupRecord] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> GroupRecord | None:
    """First member page plus group details; further pages are not fetched."""

    return await with_callback(
        fetch_group(group_url, fetcher=fetcher, settings=settings),
        callback,
    )
