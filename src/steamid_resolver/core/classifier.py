"""Classification of decoded Steam XML trees.

Steam's XML carries no type tag: the root element name is the signal
(`<profile>`, `<memberList>`, `<response><error>`). Checks run in order and
the first match wins:

1. empty tree                                  -> EmptyResponse
2. single key whose value holds an `error`     -> ErrorResponse
3. `profile`   (validated, built)              -> ProfileResponse
4. `memberList` (built)                        -> GroupResponse
5. anything else                               -> SteamParseError
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from steamid_resolver.core.domain.models import (
    ClassifiedResponse,
    EmptyResponse,
    ErrorResponse,
    GroupRecord,
    GroupResponse,
    ProfileRecord,
    ProfileResponse,
    extract_string,
)
from steamid_resolver.core.errors import SteamParseError
from steamid_resolver.core.validation import has_minimal_profile_data
from steamid_resolver.core.xml_tree import DecodedTree

logger = logging.getLogger(__name__)


def _error_envelope_message(tree: DecodedTree) -> str | None:
    if len(tree) != 1:
        return None
    (envelope,) = tree.values()
    if not isinstance(envelope, dict) or "error" not in envelope:
        return None
    return extract_string(envelope["error"]) or "Unknown error"


def _build_profile(subtree: Any) -> ProfileRecord:
    if not has_minimal_profile_data(subtree):
        raise SteamParseError("Profile missing required fields")
    try:
        return ProfileRecord.model_validate(subtree)
    except ValidationError as exc:
        raise SteamParseError("Profile missing required fields", exc) from exc


def _build_group(subtree: Any) -> GroupRecord:
    try:
        return GroupRecord.model_validate(subtree)
    except ValidationError as exc:
        raise SteamParseError(
            f"Group response missing required fields ({exc.error_count()} error(s))",
            exc,
        ) from exc


def classify(tree: DecodedTree | None) -> ClassifiedResponse:
    """Pure function of the tree; the requested endpoint plays no part."""

    if not tree:
        return EmptyResponse()

    message = _error_envelope_message(tree)
    if message is not None:
        return ErrorResponse(message=message)

    if "profile" in tree:
        return ProfileResponse(profile=_build_profile(tree["profile"]))

    if "memberList" in tree:
        return GroupResponse(group=_build_group(tree["memberList"]))

    logger.debug("Unrecognized response shape: keys=%s", sorted(tree))
    raise SteamParseError("Unexpected response format from Steam")
