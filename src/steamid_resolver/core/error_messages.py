"""Mapping of Steam's error-envelope messages to typed errors.

Steam reports lookups that miss as `<response><error>...</error></response>`
with English prose. The phrases below are the only ones recognized; anything
else surfaces verbatim as `SteamGenericAPIError`.
"""

from __future__ import annotations

from steamid_resolver.core.errors import (
    SteamAPIError,
    SteamGenericAPIError,
    SteamGroupNotFoundError,
    SteamProfileNotFoundError,
)

PROFILE_NOT_FOUND_PHRASES: tuple[str, ...] = (
    "profile could not be found",
    "The specified profile could not be found",
    "Failed loading profile data",
)
GROUP_NOT_FOUND_PHRASES: tuple[str, ...] = ("group could not be found",)


def interpret_error_message(message: str, *, identifier: str = "profile") -> SteamAPIError:
    """Return (not raise) the error matching a service-supplied message."""

    if any(phrase in message for phrase in PROFILE_NOT_FOUND_PHRASES):
        return SteamProfileNotFoundError(identifier)
    if any(phrase in message for phrase in GROUP_NOT_FOUND_PHRASES):
        return SteamGroupNotFoundError(identifier)
    return SteamGenericAPIError(message)
