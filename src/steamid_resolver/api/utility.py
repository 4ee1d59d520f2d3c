"""Sharedfile validation."""

from __future__ import annotations

from steamid_resolver.api.dual_support import CallbackFunction, with_callback
from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.interfaces.http import HTTPFetcher
from steamid_resolver.core.services.resolver import check_sharedfile_exists
from steamid_resolver.core.urls import build_sharedfile_url


async def _sharedfile_exists(
    sharedfile_id: str,
    fetcher: HTTPFetcher | None,
    settings: ResolverSettings | None,
) -> bool:
    settings = settings or ResolverSettings()
    url = build_sharedfile_url(sharedfile_id, settings)
    return await check_sharedfile_exists(url, fetcher=fetcher, settings=settings)


async def is_valid_sharedfile_id(
    sharedfile_id: str,
    callback: CallbackFunction[bool] | None = None,
    *,
    fetcher: HTTPFetcher | None = None,
    settings: ResolverSettings | None = None,
) -> bool | None:
    return await with_callback(_sharedfile_exists(sharedfile_id, fetcher, settings), callback)
