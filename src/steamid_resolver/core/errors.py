"""Error taxonomy for Steam Community lookups.

Every failure raised by the pipeline is a `SteamAPIError`; the `code` lets
callers branch without matching on message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    API_ERROR = "API_ERROR"


class SteamAPIError(Exception):
    """Base error for Steam Community lookups."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.original_error = original_error


class SteamNetworkError(SteamAPIError):
    """Transport failure or non-2xx HTTP status."""

    def __init__(self, message: str, original_error: BaseException | None = None) -> None:
        super().__init__(message, ErrorCode.NETWORK_ERROR, original_error)


class SteamParseError(SteamAPIError):
    """Malformed XML, unknown response shape or missing required fields."""

    def __init__(self, message: str, original_error: BaseException | None = None) -> None:
        super().__init__(message, ErrorCode.PARSE_ERROR, original_error)


class SteamEmptyResponseError(SteamAPIError):
    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"Steam returned an empty response for: {identifier}",
            ErrorCode.EMPTY_RESPONSE,
        )


class SteamProfileNotFoundError(SteamAPIError):
    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"The specified profile could not be found: {identifier}",
            ErrorCode.PROFILE_NOT_FOUND,
        )


class SteamGroupNotFoundError(SteamAPIError):
    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"The specified group could not be found: {identifier}",
            ErrorCode.GROUP_NOT_FOUND,
        )


class SteamGenericAPIError(SteamAPIError):
    """Service-reported error that is not a known not-found message."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.API_ERROR)
