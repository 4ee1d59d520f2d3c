"""Profile lookups by steamID64 or customURL (bare or full URL)."""

from __future__ import annotations

from steamid_resolver.api.dual_support import CallbackFunction, with_callback
from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.domain.models import ProfileRecord, ProfileResponse, extract_string
from steamid_resolver.core.errors import SteamParseError, SteamProfileNotFoundError
from steamid_resolver.core.interfaces.http import HTTPFetcher
from steamid_resolver.core.services.resolver import parse_steam_xml
from steamid_resolver.core.urls import build_profile_url


async def fetch_profile(
    identifier: str,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> ProfileRecord:
    settings = settings or ResolverSettings()
    url = build_profile_url(identifier, settings)
    response = await parse_steam_xml(url, fetcher=fetcher, settings=settings)
    if not isinstance(response, ProfileResponse):
        raise SteamProfileNotFoundError(identifier)
    return response.profile


async def _profile_value(
    identifier: str,
    field_name: str,
    label: str,
    fetcher: HTTPFetcher | None,
    settings: ResolverSettings | None,
) -> str:
    profile = await fetch_profile(identifier, fetcher=fetcher, settings=settings)
    value = extract_string(getattr(profile, field_name))
    if not value:
        raise SteamParseError(f"Failed to resolve {label}")
    return value


async def steam_id64_to_custom_url(
    steam_id64: str,
    callback: CallbackFunction[str] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> str | None:
    """customURL of a profile; recovered via redirect for private profiles."""

    return await with_callback(
        _profile_value(steam_id64, "custom_url", "customURL", fetcher, settings),
        callback,
    )


async def steam_id64_to_profile_name(
    steam_id64: str,
    callback: CallbackFunction[str] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> str | None:
    return await with_callback(
        _profile_value(steam_id64, "steam_id", "profile name", fetcher, settings),
        callback,
    )


async def custom_url_to_steam_id64(
    custom_url: str,
    callback: CallbackFunction[str] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> str | None:
    return await with_callback(
        _profile_value(custom_url, "steam_id64", "steamID64", fetcher, settings),
        callback,
    )


async def custom_url_to_profile_name(
    custom_url: str,
    callback: CallbackFunction[str] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> str | None:
    return await with_callback(
        _profile_value(custom_url, "steam_id", "profile name", fetcher, settings),
        callback,
    )


async def steam_id64_to_full_info(
    steam_id64: str,
    callback: CallbackFunction[ProfileRecord] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> ProfileRecord | None:
    return await with_callback(
        fetch_profile(steam_id64, fetcher=fetcher, settings=settings),
        callback,
    )


async def custom_url_to_full_info(
    custom_url: str,
    callback: CallbackFunction[ProfileRecord] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> ProfileRecord | None:
    return await with_callback(
        fetch_profile(custom_url, fetcher=fetcher, settings=settings),
        callback,
    )
