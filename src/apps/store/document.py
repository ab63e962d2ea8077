"""
Persistence for the league document.

All league state is one JSON object stored in a single file. Readers load the
whole document; writers go through ``LeagueStore.transaction()`` which holds a
file lock for the full read-modify-write so concurrent requests cannot
overwrite each other's changes.

A file that cannot be parsed is replaced by a fresh default document. The
recovery is logged and reported through ``LoadResult.recovered`` so it is
distinguishable from a first start.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from django.conf import settings
from filelock import FileLock

logger = logging.getLogger(__name__)

LEADERBOARD_TYPES = ("scorers", "saves", "assists")

Document = dict[str, Any]


def default_document() -> Document:
    return {
        "players": [],
        "matches": [],
        "liveLink": "",
        "groups": [],
        "leaderboards": {kind: [] for kind in LEADERBOARD_TYPES},
        "records": [],
        "stories": [],
    }


def with_defaults(data: Document) -> Document:
    document = {**default_document(), **data}
    leaderboards = document.get("leaderboards")
    if not isinstance(leaderboards, dict):
        leaderboards = {}
    document["leaderboards"] = {
        **{kind: [] for kind in LEADERBOARD_TYPES},
        **leaderboards,
    }
    return document


@dataclass(frozen=True)
class LoadResult:
    document: Document
    recovered: bool = False


class LeagueStore:
    def __init__(self, path: str | Path, lock_timeout: float = 10):
        self.path = Path(path)
        self.lock = FileLock(f"{self.path}.lock", timeout=lock_timeout)

    def load_result(self) -> LoadResult:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug("No league document at %s, starting empty", self.path)
            return LoadResult(default_document())

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning(
                "League document %s is unreadable (%s); using defaults", self.path, exc
            )
            return LoadResult(default_document(), recovered=True)

        if not isinstance(data, dict):
            logger.warning(
                "League document %s is not a JSON object; using defaults", self.path
            )
            return LoadResult(default_document(), recovered=True)

        return LoadResult(with_defaults(data))

    def load(self) -> Document:
        return self.load_result().document

    def save(self, document: Document) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.lock:
            document = self.load()
            yield document
            self.save(document)


def get_store() -> LeagueStore:
    return LeagueStore(settings.LEAGUE_DATA_FILE, lock_timeout=settings.LEAGUE_LOCK_TIMEOUT)
