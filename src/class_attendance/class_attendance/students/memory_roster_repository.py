from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import RosterEntry
from .ordering import sort_class_names
from .repository import RosterRepository


class InMemoryRosterRepository(RosterRepository):
    def __init__(self, entries: Iterable[RosterEntry] = ()):
        self._entries: list[RosterEntry] = list(entries)

    def _load(self) -> list[RosterEntry]:
        return self._entries

    def list_all(self) -> Sequence[RosterEntry]:
        return list(self._load())

    def list_for_class(self, class_name: str) -> Sequence[RosterEntry]:
        items = [e for e in self._load() if e.class_name == class_name]
        items.sort(key=lambda e: e.id)
        return items

    def get_by_id(self, student_id: int) -> Optional[RosterEntry]:
        for e in self._load():
            if e.id == int(student_id):
                return e
        return None

    def class_names(self) -> Sequence[str]:
        return sort_class_names(e.class_name for e in self._load())
