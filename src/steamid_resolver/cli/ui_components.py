"""CLI UI components (Rich).

Why separate components:
- Keeps command logic free of presentation details.
- Tables are reused by several commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from steamid_resolver.core.domain.models import GroupRecord, ProfileRecord, extract_string


def print_banner(console: Console) -> None:
    title = Text("steamid-resolver", style="bold cyan")
    subtitle = Text("Steam Community profiles • groups • sharedfiles", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _add_rows(table: Table, rows: list[tuple[str, str | None]]) -> None:
    for label, value in rows:
        if value:
            table.add_row(label, value)


def build_profile_table(profile: ProfileRecord) -> Table:
    """Key/value table of the profile fields that are present."""

    table = Table(title="Steam Profile", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    _add_rows(
        table,
        [
            ("steamID64", extract_string(profile.steam_id64)),
            ("Name", extract_string(profile.steam_id)),
            ("customURL", extract_string(profile.custom_url)),
            ("Privacy", extract_string(profile.privacy_state)),
            ("Online", extract_string(profile.online_state)),
            ("VAC banned", extract_string(profile.vac_banned)),
            ("Trade ban", extract_string(profile.trade_ban_state)),
            ("Limited", extract_string(profile.is_limited_account)),
            ("Member since", extract_string(profile.member_since)),
            ("Location", extract_string(profile.location)),
            ("Real name", extract_string(profile.realname)),
            ("Avatar", extract_string(profile.avatar_full)),
        ],
    )

    group_count = sum(len(block.group or []) for block in profile.groups or [])
    if group_count:
        table.add_row("Groups", str(group_count))
    return table


def build_group_table(group: GroupRecord) -> Table:
    details = group.group_details[0] if group.group_details else None

    table = Table(title="Steam Group", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    rows: list[tuple[str, str | None]] = [("groupID64", extract_string(group.group_id64))]
    if details is not None:
        rows += [
            ("Name", extract_string(details.group_name)),
            ("URL", extract_string(details.group_url)),
            ("Headline", extract_string(details.headline)),
            ("Online", extract_string(details.members_online)),
            ("In game", extract_string(details.members_in_game)),
        ]
    rows += [
        ("Members", extract_string(group.member_count)),
        (
            "Page",
            f"{extract_string(group.current_page)}/{extract_string(group.total_pages)}",
        ),
        ("Members on page", str(len(group.member_ids))),
        ("Next page", extract_string(group.next_page_link)),
    ]
    _add_rows(table, rows)
    return table
