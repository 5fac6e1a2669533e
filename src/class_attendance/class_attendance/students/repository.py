from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    def list_all(self) -> Sequence[RosterEntry]:
        raise NotImplementedError

    def list_for_class(self, class_name: str) -> Sequence[RosterEntry]:
        """Students of one class ordered by ascending id."""

        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[RosterEntry]:
        raise NotImplementedError

    def class_names(self) -> Sequence[str]:
        raise NotImplementedError
