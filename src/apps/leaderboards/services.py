from typing import Any

from apps.store.document import Document
from apps.store.ids import parse_index, parse_number


def _sort_desc(entries: list[dict]) -> None:
    entries.sort(key=lambda entry: parse_number(entry.get("value")), reverse=True)


def update_stat(
    document: Document, kind: str, stat_index: Any, player_name: str, value: Any
) -> list[dict] | None:
    entries = document["leaderboards"].get(kind)
    if not isinstance(entries, list):
        return None

    position = parse_index(stat_index)
    if position is not None and position < len(entries):
        entries[position]["value"] = parse_number(value)
    elif player_name:
        entries.append({"name": player_name, "value": parse_number(value)})
    _sort_desc(entries)
    return entries


def delete_stat(document: Document, kind: str, stat_index: Any) -> dict | None:
    entries = document["leaderboards"].get(kind)
    if not isinstance(entries, list):
        return None
    position = parse_index(stat_index)
    if position is None or position >= len(entries):
        return None
    return entries.pop(position)
