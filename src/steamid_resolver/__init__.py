"""Resolve Steam Community profile IDs, custom URLs and group URLs."""

from steamid_resolver.api import (
    custom_url_to_full_info,
    custom_url_to_profile_name,
    custom_url_to_steam_id64,
    group_url_to_full_info,
    group_url_to_group_id64,
    is_valid_sharedfile_id,
    steam_id64_to_custom_url,
    steam_id64_to_full_info,
    steam_id64_to_profile_name,
)
from steamid_resolver.core.config import ResolverSettings
from steamid_resolver.core.domain.models import GroupRecord, ProfileRecord, extract_string
from steamid_resolver.core.errors import (
    ErrorCode,
    SteamAPIError,
    SteamEmptyResponseError,
    SteamGenericAPIError,
    SteamGroupNotFoundError,
    SteamNetworkError,
    SteamParseError,
    SteamProfileNotFoundError,
)
from steamid_resolver.core.services.resolver import (
    check_sharedfile_exists,
    parse_steam_xml,
    resolve_group,
    resolve_profile,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "GroupRecord",
    "ProfileRecord",
    "ResolverSettings",
    "SteamAPIError",
    "SteamEmptyResponseError",
    "SteamGenericAPIError",
    "SteamGroupNotFoundError",
    "SteamNetworkError",
    "SteamParseError",
    "SteamProfileNotFoundError",
    "check_sharedfile_exists",
    "custom_url_to_full_info",
    "custom_url_to_profile_name",
    "custom_url_to_steam_id64",
    "extract_string",
    "group_url_to_full_info",
    "group_url_to_group_id64",
    "is_valid_sharedfile_id",
    "parse_steam_xml",
    "resolve_group",
    "resolve_profile",
    "steam_id64_to_custom_url",
    "steam_id64_to_full_info",
    "steam_id64_to_profile_name",
]
