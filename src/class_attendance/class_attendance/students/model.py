from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.exceptions import InvalidRecord


@dataclass(frozen=True)
class RosterEntry:
    """One student enrolled in a class."""

    id: int
    name: str
    class_name: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "RosterEntry":
        if not isinstance(doc, Mapping):
            raise InvalidRecord("Roster entry must be an object")

        raw_id = doc.get("id")
        # bool is an int subclass; "1" strings are accepted from hand-edited files
        if isinstance(raw_id, bool) or raw_id is None:
            raise InvalidRecord(f"Roster entry has no valid id: {doc!r}")
        try:
            student_id = int(raw_id)
        except (TypeError, ValueError):
            raise InvalidRecord(f"Roster entry has no valid id: {doc!r}")

        name = doc.get("name")
        class_name = doc.get("class", doc.get("class_name"))
        if not isinstance(name, str) or not name.strip():
            raise InvalidRecord(f"Roster entry {student_id} has no name")
        if not isinstance(class_name, str) or not class_name.strip():
            raise InvalidRecord(f"Roster entry {student_id} has no class")

        return cls(id=student_id, name=name.strip(), class_name=class_name.strip())
