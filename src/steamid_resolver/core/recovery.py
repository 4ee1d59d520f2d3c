"""customURL recovery for non-public profiles.

Steam omits `customURL` from the XML of private/friends-only profiles. It can
still be recovered:
- `/profiles/<id>` requests: Steam redirects the numeric URL to `/id/<vanity>`
  when a vanity URL exists, so a non-following request exposes it in
  `Location`.
- `/id/<vanity>` requests: the vanity URL is the request itself.
Recovery is best-effort; failing to recover leaves the field absent.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from steamid_resolver.core.domain.models import ProfileRecord, extract_string
from steamid_resolver.core.errors import SteamAPIError
from steamid_resolver.core.interfaces.http import HTTPFetcher

logger = logging.getLogger(__name__)

PROFILES_PATH = "/profiles/"
VANITY_PATH = "/id/"
XML_SUFFIX = "?xml=1"


def _last_path_segment(path: str) -> str | None:
    parts = path.split("/")
    if parts and parts[-1] == "":
        parts.pop()
    return parts[-1] if parts and parts[-1] else None


def custom_url_from_request(url: str) -> str | None:
    """Vanity segment of an `/id/<vanity>?xml=1` URL."""

    segment = url.split("/")[-1].replace(XML_SUFFIX, "")
    return segment or None


async def resolve_custom_url_from_redirect(url: str, fetcher: HTTPFetcher) -> str | None:
    logger.debug("Attempting to resolve customURL from redirect: %s", url)
    try:
        result = await fetcher.fetch(url, follow_redirects=False)
    except SteamAPIError as exc:
        logger.debug("Redirect probe failed: %s", exc)
        return None

    location = result.header("location")
    if not location or VANITY_PATH not in location:
        return None

    custom_url = _last_path_segment(urlsplit(location).path)
    logger.debug("Resolved customURL from redirect: %s", custom_url)
    return custom_url


async def recover_custom_url(
    profile: ProfileRecord,
    url: str,
    fetcher: HTTPFetcher,
) -> ProfileRecord:
    """Return the profile with `customURL` filled in when it can be recovered."""

    if profile.is_public or extract_string(profile.custom_url):
        return profile

    logger.debug("Profile is not public, attempting customURL resolution")
    custom_url: str | None = None
    if PROFILES_PATH in url:
        custom_url = await resolve_custom_url_from_redirect(url, fetcher)
    elif VANITY_PATH in url:
        custom_url = custom_url_from_request(url)

    if not custom_url:
        return profile
    return profile.model_copy(update={"custom_url": [custom_url]})
