from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..core.exceptions import InvalidRecord
from .memory_roster_repository import InMemoryRosterRepository
from .model import RosterEntry

logger = logging.getLogger(__name__)


def entries_from_documents(docs: Iterable[Any]) -> list[RosterEntry]:
    """Validate raw roster documents, skipping the malformed ones."""

    entries: list[RosterEntry] = []
    for doc in docs:
        try:
            entries.append(RosterEntry.from_document(doc))
        except InvalidRecord as e:
            logger.warning("Skipping roster entry: %s", e)
    return entries


class JsonRosterRepository(InMemoryRosterRepository):
    """Roster read from a static JSON file (array of {id, name, class}).

    The file is read on first access and then served from memory.
    """

    def __init__(self, path: str | Path):
        super().__init__()
        self._path = Path(path)
        self._loaded = False

    def _load(self) -> list[RosterEntry]:
        if not self._loaded:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise InvalidRecord(f"Roster file {self._path} must contain a JSON array")
            self._entries = entries_from_documents(data)
            self._loaded = True
            logger.info("Loaded %d roster entries from %s", len(self._entries), self._path)
        return self._entries
