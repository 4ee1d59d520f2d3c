"""JSON export of resolved records.

Why JSON:
- Interoperability with other tooling and pipelines.
- Keeps Steam's tag names (`steamID64`, `customURL`, ...) so the output
  matches the source XML.
"""

from __future__ import annotations

import json
from pathlib import Path

from steamid_resolver.core.domain.models import SteamRecord


def export_record_json(*, record: SteamRecord, output_path: Path) -> Path:
    """Write a profile/group record as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = record.to_xml_dict()
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
