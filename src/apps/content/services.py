from typing import Any, Mapping

from django.utils import timezone

from apps.store.document import Document
from apps.store.ids import new_id, parse_index, remove_by_id


def story_date(day=None) -> str:
    day = day or timezone.localdate()
    return f"{day.month}/{day.day}/{day.year}"


def add_record(document: Document, fields: Mapping[str, Any]) -> dict:
    record = {"id": new_id(r.get("id") for r in document["records"]), **fields}
    document["records"].append(record)
    return record


def delete_record(document: Document, record_id) -> None:
    document["records"] = remove_by_id(document["records"], record_id)


def add_story(document: Document, fields: Mapping[str, Any]) -> dict:
    story = {
        "id": new_id(s.get("id") for s in document["stories"]),
        **fields,
        "date": story_date(),
    }
    document["stories"].append(story)
    return story


def delete_story(document: Document, story_index) -> dict | None:
    position = parse_index(story_index)
    if position is None or position >= len(document["stories"]):
        return None
    return document["stories"].pop(position)


def set_live_link(document: Document, link: str) -> None:
    document["liveLink"] = link or ""
