"""Minimal profile validation."""

from __future__ import annotations

from typing import Any

REQUIRED_PROFILE_FIELDS: tuple[str, ...] = (
    "steamID64",
    "steamID",
    "onlineState",
    "privacyState",
)


def has_minimal_profile_data(profile: Any) -> bool:
    """True when every required field is present as a non-empty list."""

    if not isinstance(profile, dict):
        return False
    for key in REQUIRED_PROFILE_FIELDS:
        value = profile.get(key)
        if not isinstance(value, list) or not value:
            return False
    return True
