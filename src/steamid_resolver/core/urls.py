"""Steam Community URL building from loosely formatted identifiers.

Accepted inputs: bare IDs/names or full `steamcommunity.com/...` URLs
(trailing slash allowed).
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlsplit

from steamid_resolver.core.config import ResolverSettings

STEAM_HOST_MARKER = "steamcommunity.com/"
SHAREDFILES_MARKER = "steamcommunity.com/sharedfiles/"

# 17 digits starting with 765611
_STEAM_ID64_RE = re.compile(r"^765611\d{11}$")
_CUSTOM_URL_RE = re.compile(r"^[\w-]{3,32}$")


def parse_param(param: str) -> str:
    """Last path segment of a full URL, or the stripped identifier."""

    if not param or not isinstance(param, str):
        raise ValueError("Parameter must be a non-empty string")

    if STEAM_HOST_MARKER in param:
        split = param.split("/")
        if split[-1] == "":
            split.pop()
        return split[-1] if split else ""

    return param.strip()


def is_valid_steam_id64(value: str) -> bool:
    return bool(_STEAM_ID64_RE.match(value))


def is_valid_custom_url(value: str) -> bool:
    return bool(_CUSTOM_URL_RE.match(value))


def _base_url(settings: ResolverSettings | None) -> str:
    return (settings or ResolverSettings()).base_url.rstrip("/")


def build_profile_url(identifier: str, settings: ResolverSettings | None = None) -> str:
    clean_id = parse_param(identifier)
    base = _base_url(settings)
    if is_valid_steam_id64(clean_id):
        return f"{base}/profiles/{clean_id}?xml=1"
    return f"{base}/id/{clean_id}?xml=1"


def build_group_url(identifier: str, settings: ResolverSettings | None = None) -> str:
    clean_id = parse_param(identifier)
    return f"{_base_url(settings)}/groups/{clean_id}/memberslistxml?xml=1"


def build_sharedfile_url(identifier: str, settings: ResolverSettings | None = None) -> str:
    base = _base_url(settings)
    if SHAREDFILES_MARKER in identifier:
        ids = parse_qs(urlsplit(identifier).query).get("id")
        if ids:
            return f"{base}/sharedfiles/filedetails/?id={ids[0]}"
        return identifier

    clean_id = parse_param(identifier)
    return f"{base}/sharedfiles/filedetails/?id={clean_id}"
