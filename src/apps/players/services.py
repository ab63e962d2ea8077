import logging
from typing import Any, Mapping

from django.core.exceptions import ValidationError

from apps.store.document import Document
from apps.store.exceptions import EntityNotFound
from apps.store.ids import find_by_id, new_id, parse_int, remove_by_id, same_id

logger = logging.getLogger(__name__)

STAT_FIELDS = ("goals", "assists", "saves", "mvps")
PROTECTED_FIELDS = frozenset({"id", "verified", "views", "cardImage"})


def _same_name(player: dict, name: str) -> bool:
    return str(player.get("name", "")).lower() == name.lower()


def find_by_name(document: Document, name: str, *, ignore_case: bool = False) -> dict:
    for player in document["players"]:
        if _same_name(player, name) if ignore_case else player.get("name") == name:
            return player
    raise EntityNotFound("Player Not Found")


def _editable(fields: Mapping[str, Any]) -> dict:
    return {key: value for key, value in fields.items() if key not in PROTECTED_FIELDS}


def register_player(document: Document, name: str, password: str, extra=None) -> dict:
    name = (name or "").strip()
    if not name or not password:
        raise ValidationError("Name and password are required")
    if any(_same_name(player, name) for player in document["players"]):
        raise ValidationError("Username already taken!")

    player = {
        "id": new_id(p.get("id") for p in document["players"]),
        **_editable(extra or {}),
        "name": name,
        "password": password,
        "goals": 0,
        "assists": 0,
        "saves": 0,
        "mvps": 0,
        "views": [],
        "cardImage": "",
        "verified": False,
    }
    document["players"].append(player)
    logger.info("Registered player %s (%s)", name, player["id"])
    return player


def authenticate(document: Document, username: str, password: str) -> dict | None:
    username = (username or "").strip()
    if not username or password is None:
        return None
    for player in document["players"]:
        if _same_name(player, username) and player.get("password") == password:
            return player
    return None


def update_profile(document: Document, player_id, fields: Mapping[str, Any]) -> dict:
    player = find_by_id(document["players"], player_id, "Player")
    changes = _editable(fields)
    for stat in STAT_FIELDS:
        if stat in changes:
            changes[stat] = parse_int(changes[stat])
    player.update(changes)
    return player


def approve_player(document: Document, player_id, card_image: str) -> dict:
    player = find_by_id(document["players"], player_id, "Player")
    player["verified"] = True
    player["cardImage"] = card_image or ""
    return player


def update_market_player(document: Document, username: str, stats: Mapping[str, Any]) -> dict:
    player = find_by_name(document, username or "")
    for stat in STAT_FIELDS:
        player[stat] = parse_int(stats.get(stat))
    player["bio"] = stats.get("bio") or ""
    return player


def delete_player(document: Document, player_id) -> None:
    document["players"] = remove_by_id(document["players"], player_id)
    logger.info("Deleted player %s", player_id)


def record_view(document: Document, player_name: str, viewer_id) -> int:
    """Add ``viewer_id`` to the player's viewers once and return the viewer count."""
    player = find_by_name(document, player_name)
    views = player.get("views")
    if not isinstance(views, list):
        views = player["views"] = []
    if not any(same_id(seen, viewer_id) for seen in views):
        views.append(viewer_id)
    return len(views)


def market_players(document: Document) -> list[dict]:
    return [player for player in document["players"] if player.get("verified") is True]
