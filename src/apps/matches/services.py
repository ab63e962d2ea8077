"""
Match lifecycle.

A match is created ``upcoming`` and becomes ``completed`` when the admin
submits its details. Completion is terminal: resubmitting details replaces
them but never moves the match back to ``upcoming``.
"""
import logging
from dataclasses import asdict, dataclass
from itertools import zip_longest
from typing import Any, Mapping, Sequence

from apps.store.document import Document
from apps.store.ids import find_by_id, new_id, remove_by_id

logger = logging.getLogger(__name__)

UPCOMING = "upcoming"
COMPLETED = "completed"

DETAIL_FIELDS = (
    "narrative",
    "possessionA",
    "possessionB",
    "highlights",
    "mvpName",
    "mvpCardUrl",
    "standouts",
    "goalsA",
    "assistsA",
    "savesA",
    "goalsB",
    "assistsB",
    "savesB",
    "lineupA",
    "lineupB",
)


@dataclass(frozen=True)
class PlayerLine:
    name: str
    type: Any = None
    value: Any = None
    assists: Any = None


def player_lines(
    names: Sequence[str],
    types: Sequence[Any] = (),
    values: Sequence[Any] = (),
    assists: Sequence[Any] = (),
) -> list[PlayerLine]:
    lines = []
    for name, kind, value, assist in zip_longest(names, types, values, assists):
        if name is None:
            break
        if not name:
            continue
        lines.append(PlayerLine(name=name, type=kind, value=value, assists=assist))
    return lines


def add_match(document: Document, fields: Mapping[str, Any]) -> dict:
    match = {
        "id": new_id(m.get("id") for m in document["matches"]),
        **fields,
        "status": UPCOMING,
    }
    document["matches"].append(match)
    return match


def delete_match(document: Document, match_id) -> None:
    document["matches"] = remove_by_id(document["matches"], match_id)


def submit_match_details(
    document: Document,
    match_id,
    fields: Mapping[str, Any],
    team_a: Sequence[PlayerLine] = (),
    team_b: Sequence[PlayerLine] = (),
) -> dict:
    match = find_by_id(document["matches"], match_id, "Match")
    details = {key: fields.get(key) for key in DETAIL_FIELDS}
    details["teamAPlayers"] = [asdict(line) for line in team_a]
    details["teamBPlayers"] = [asdict(line) for line in team_b]

    if match.get("status") != COMPLETED:
        logger.info("Match %s completed", match.get("id"))
    match["status"] = COMPLETED
    match["details"] = details
    return match
