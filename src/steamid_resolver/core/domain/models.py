"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the decoded XML tree right at the classification step.
- Aliases keep the XML tag names (`steamID64`, `customURL`, ...) as the wire
  contract while Python code uses snake_case.

Note:
- Steam wraps every value in a one-element list (see `core.xml_tree`); the
  records keep that shape, `extract_string` reads position 0.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, Field
from pydantic.config import ConfigDict

StringList = list[str]


def extract_string(value: StringList | str | None) -> str | None:
    """First value of a Steam XML field, or None when the field is absent."""

    if isinstance(value, list):
        return value[0] if value else None
    if isinstance(value, str):
        return value
    return None


def _blank_blocks(value: Any) -> Any:
    # Empty XML elements decode to "", which stands for an empty block.
    if isinstance(value, list):
        return [{} if item == "" else item for item in value]
    return value


_BLANK_BLOCKS = BeforeValidator(_blank_blocks)


class SteamRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def to_xml_dict(self) -> dict[str, Any]:
        """Dump using the XML tag names, omitting absent fields."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GameInfo(SteamRecord):
    game_name: StringList | None = Field(default=None, alias="gameName")
    game_link: StringList | None = Field(default=None, alias="gameLink")
    game_icon: StringList | None = Field(default=None, alias="gameIcon")
    game_logo: StringList | None = Field(default=None, alias="gameLogo")
    game_logo_small: StringList | None = Field(default=None, alias="gameLogoSmall")
    hours_played: StringList | None = Field(default=None, alias="hoursPlayed")
    hours_on_record: StringList | None = Field(default=None, alias="hoursOnRecord")
    stats_name: StringList | None = Field(default=None, alias="statsName")


class MostPlayedGames(SteamRecord):
    most_played_game: list[GameInfo] | None = Field(default=None, alias="mostPlayedGame")


class GroupInfo(SteamRecord):
    """Group membership entry inside a profile; often just an ID."""

    attributes: dict[str, str] | None = Field(
        default=None,
        alias="$",
        description="XML attributes of <group>, e.g. isPrimary.",
    )
    group_id64: StringList | None = Field(default=None, alias="groupID64")
    group_name: StringList | None = Field(default=None, alias="groupName")
    group_url: StringList | None = Field(default=None, alias="groupURL")
    headline: StringList | None = None
    summary: StringList | None = None
    avatar_icon: StringList | None = Field(default=None, alias="avatarIcon")
    avatar_medium: StringList | None = Field(default=None, alias="avatarMedium")
    avatar_full: StringList | None = Field(default=None, alias="avatarFull")
    member_count: StringList | None = Field(default=None, alias="memberCount")
    members_in_chat: StringList | None = Field(default=None, alias="membersInChat")
    members_in_game: StringList | None = Field(default=None, alias="membersInGame")
    members_online: StringList | None = Field(default=None, alias="membersOnline")

    @property
    def is_primary(self) -> bool:
        return bool(self.attributes) and self.attributes.get("isPrimary") == "1"


class ProfileGroups(SteamRecord):
    group: list[GroupInfo] | None = None


class ProfileRecord(SteamRecord):
    """A Steam Community profile as returned by `/profiles/<id>?xml=1`.

    Required fields appear on every profile, private ones included. The rest
    are only present when the owner set them and the privacy state allows it;
    absence is not an error.
    """

    steam_id64: StringList = Field(
        ...,
        alias="steamID64",
        description="64-bit Steam ID as a decimal string.",
    )
    steam_id: StringList = Field(
        ...,
        alias="steamID",
        description="Display name.",
    )
    online_state: StringList = Field(..., alias="onlineState")
    privacy_state: StringList = Field(
        ...,
        alias="privacyState",
        description="'public', 'private', 'friendsonly', ...",
    )
    visibility_state: StringList = Field(..., alias="visibilityState")
    vac_banned: StringList = Field(..., alias="vacBanned")
    trade_ban_state: StringList = Field(..., alias="tradeBanState")
    is_limited_account: StringList = Field(..., alias="isLimitedAccount")

    custom_url: StringList | None = Field(
        default=None,
        alias="customURL",
        description="Vanity URL path segment (may be recovered for private profiles).",
    )
    state_message: StringList | None = Field(default=None, alias="stateMessage")
    avatar_icon: StringList | None = Field(default=None, alias="avatarIcon")
    avatar_medium: StringList | None = Field(default=None, alias="avatarMedium")
    avatar_full: StringList | None = Field(default=None, alias="avatarFull")
    headline: StringList | None = None
    location: StringList | None = None
    realname: StringList | None = None
    summary: StringList | None = None
    member_since: StringList | None = Field(default=None, alias="memberSince")
    steam_rating: StringList | None = Field(default=None, alias="steamRating")
    hours_played_2wk: StringList | None = Field(default=None, alias="hoursPlayed2Wk")
    most_played_games: Annotated[list[MostPlayedGames] | None, _BLANK_BLOCKS] = Field(
        default=None,
        alias="mostPlayedGames",
    )
    groups: Annotated[list[ProfileGroups] | None, _BLANK_BLOCKS] = None

    @property
    def is_public(self) -> bool:
        return extract_string(self.privacy_state) == "public"


class GroupDetails(SteamRecord):
    group_name: StringList | None = Field(default=None, alias="groupName")
    group_url: StringList | None = Field(default=None, alias="groupURL")
    headline: StringList | None = None
    summary: StringList | None = None
    avatar_icon: StringList | None = Field(default=None, alias="avatarIcon")
    avatar_medium: StringList | None = Field(default=None, alias="avatarMedium")
    avatar_full: StringList | None = Field(default=None, alias="avatarFull")
    member_count: StringList | None = Field(default=None, alias="memberCount")
    members_in_chat: StringList | None = Field(default=None, alias="membersInChat")
    members_in_game: StringList | None = Field(default=None, alias="membersInGame")
    members_online: StringList | None = Field(default=None, alias="membersOnline")


class GroupMembers(SteamRecord):
    steam_id64: StringList = Field(default_factory=list, alias="steamID64")


class GroupRecord(SteamRecord):
    """First page of `/groups/<name>/memberslistxml?xml=1`."""

    group_id64: StringList = Field(..., alias="groupID64")
    group_details: list[GroupDetails] = Field(..., alias="groupDetails")
    member_count: StringList = Field(..., alias="memberCount")
    total_pages: StringList = Field(..., alias="totalPages")
    current_page: StringList = Field(..., alias="currentPage")
    starting_member: StringList = Field(..., alias="startingMember")
    next_page_link: StringList | None = Field(
        default=None,
        alias="nextPageLink",
        description="Present when more member pages exist (never followed).",
    )
    members: Annotated[list[GroupMembers], _BLANK_BLOCKS] = Field(default_factory=list)

    @property
    def member_ids(self) -> list[str]:
        return [sid for block in self.members for sid in block.steam_id64]


class ProfileResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["profile"] = "profile"
    profile: ProfileRecord


class GroupResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    group: GroupRecord


class ErrorResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


class EmptyResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"


ClassifiedResponse = Annotated[
    Union[ProfileResponse, GroupResponse, ErrorResponse, EmptyResponse],
    Field(discriminator="kind"),
]
