"""Public lookup API.

Why a package:
- Groups the identifier-level lookups (profiles, groups, sharedfiles).
- Each lookup supports both `await` and the callback convention
  (`api.dual_support`); the pipeline in `core` knows nothing about callbacks.
"""

from steamid_resolver.api.group import fetch_group, group_url_to_full_info, group_url_to_group_id64
from steamid_resolver.api.profile import (
    custom_url_to_full_info,
    custom_url_to_profile_name,
    custom_url_to_steam_id64,
    fetch_profile,
    steam_id64_to_custom_url,
    steam_id64_to_full_info,
    steam_id64_to_profile_name,
)
from steamid_resolver.api.utility import is_valid_sharedfile_id

__all__ = [
    "custom_url_to_full_info",
    "custom_url_to_profile_name",
    "custom_url_to_steam_id64",
    "fetch_group",
    "fetch_profile",
    "group_url_to_full_info",
    "group_url_to_group_id64",
    "is_valid_sharedfile_id",
    "steam_id64_to_custom_url",
    "steam_id64_to_full_info",
    "steam_id64_to_profile_name",
]
