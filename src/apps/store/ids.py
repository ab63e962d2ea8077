import re
import time
from typing import Any, Iterable

from .exceptions import EntityNotFound

_LEADING_INT = re.compile(r"\s*([-+]?\d+)")


def new_id(existing: Iterable[Any] = ()) -> int:
    """Millisecond timestamp id, bumped past any id already in use."""
    taken = {str(value) for value in existing}
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return candidate


def same_id(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return False
    return str(left).strip() == str(right).strip()


def find_by_id(items: list[dict], item_id: Any, label: str = "Item") -> dict:
    for item in items:
        if same_id(item.get("id"), item_id):
            return item
    raise EntityNotFound(f"{label} not found")


def remove_by_id(items: list[dict], item_id: Any) -> list[dict]:
    return [item for item in items if not same_id(item.get("id"), item_id)]


def parse_index(value: Any) -> int | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text.isdigit():
        return None
    return int(text)


def item_at(items: list, index: Any, label: str = "Item"):
    position = parse_index(index)
    if position is None or position >= len(items):
        raise EntityNotFound(f"{label} not found")
    return items[position]


def parse_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(value, 0)
    match = _LEADING_INT.match(str(value or ""))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def parse_number(value: Any) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0
    if number != number or number in (float("inf"), float("-inf")):
        return 0
    return int(number) if number.is_integer() else number
