"""
Groups, teams and rosters.

Teams are addressed by their position inside a group and roster entries by
their position inside a team, so removing one shifts every later index. Any
index that no longer points at an entry raises ``EntityNotFound``.
"""
from typing import Any, Mapping

from apps.players.services import find_by_name
from apps.store.document import Document
from apps.store.exceptions import EntityNotFound
from apps.store.ids import find_by_id, item_at, new_id, parse_index, parse_int, remove_by_id

COUNTER_FIELDS = ("mp", "wins", "loses", "pts")


def add_group(document: Document, name: str) -> dict:
    group = {"id": new_id(g.get("id") for g in document["groups"]), "name": name, "teams": []}
    document["groups"].append(group)
    return group


def delete_group(document: Document, group_id) -> None:
    document["groups"] = remove_by_id(document["groups"], group_id)


def get_group(document: Document, group_id) -> dict:
    group = find_by_id(document["groups"], group_id, "Group")
    if not isinstance(group.get("teams"), list):
        group["teams"] = []
    return group


def team_at(document: Document, group_id, team_index) -> tuple[dict, dict]:
    group = get_group(document, group_id)
    return group, item_at(group["teams"], team_index, "Team")


def upsert_team(document: Document, group_id, team_index, fields: Mapping[str, Any]) -> dict | None:
    """Update counters of the team at ``team_index`` or, without one, create a team."""
    group = get_group(document, group_id)
    position = parse_index(team_index)
    if position is not None and position < len(group["teams"]):
        team = group["teams"][position]
        for counter in COUNTER_FIELDS:
            team[counter] = parse_int(fields.get(counter))
        return team

    name = fields.get("teamName")
    if not name:
        if str(team_index or "").strip():
            raise EntityNotFound("Team not found")
        return None
    team = {
        "name": name,
        "logo": fields.get("logo") or "",
        "mp": 0,
        "wins": 0,
        "loses": 0,
        "pts": 0,
        "roster": [],
    }
    group["teams"].append(team)
    return team


def delete_team(document: Document, group_id, team_index) -> dict:
    group, _ = team_at(document, group_id, team_index)
    return group["teams"].pop(parse_index(team_index))


def add_to_roster(
    document: Document, group_id, team_index, player_name: str, is_manager: bool
) -> dict:
    try:
        player = find_by_name(document, player_name or "", ignore_case=True)
    except EntityNotFound:
        raise EntityNotFound(f'Player "{player_name}" not found!') from None
    try:
        _, team = team_at(document, group_id, team_index)
    except EntityNotFound:
        raise EntityNotFound("Team not found") from None
    entry = {"name": player["name"], "isManager": is_manager}
    team.setdefault("roster", []).append(entry)
    return entry


def remove_from_roster(document: Document, group_id, team_index, player_index) -> dict:
    _, team = team_at(document, group_id, team_index)
    roster = team.setdefault("roster", [])
    item_at(roster, player_index, "Roster entry")
    return roster.pop(parse_index(player_index))
