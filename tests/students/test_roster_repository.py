import json

import pytest

from src.class_attendance.class_attendance.core.exceptions import InvalidRecord
from src.class_attendance.class_attendance.students.json_roster_repository import JsonRosterRepository
from src.class_attendance.class_attendance.students.memory_roster_repository import InMemoryRosterRepository
from src.class_attendance.class_attendance.students.model import RosterEntry
from src.class_attendance.class_attendance.students.ordering import sort_class_names


def test_from_document_accepts_roster_file_shape():
    entry = RosterEntry.from_document({"id": "7", "name": " Gopal ", "class": "Lkg - A"})
    assert entry == RosterEntry(id=7, name="Gopal", class_name="Lkg - A")


@pytest.mark.parametrize(
    "doc",
    [
        {"name": "A", "class": "First"},
        {"id": True, "name": "A", "class": "First"},
        {"id": 1, "class": "First"},
        {"id": 1, "name": "A", "class": ""},
        "not-a-dict",
    ],
)
def test_from_document_rejects_bad_shape(doc):
    with pytest.raises(InvalidRecord):
        RosterEntry.from_document(doc)


def test_json_repository_skips_malformed_entries(tmp_path):
    path = tmp_path / "students.json"
    path.write_text(
        json.dumps(
            [
                {"id": 2, "name": "Ben", "class": "First"},
                {"id": 1, "name": "Ann", "class": "First"},
                {"name": "No id", "class": "First"},
                {"id": 4, "name": "Dev", "class": "Second"},
            ]
        ),
        encoding="utf-8",
    )

    repo = JsonRosterRepository(path)

    assert [e.id for e in repo.list_for_class("First")] == [1, 2]
    assert len(repo.list_all()) == 3
    assert repo.get_by_id(4).name == "Dev"
    assert repo.get_by_id(99) is None


def test_json_repository_requires_array(tmp_path):
    path = tmp_path / "students.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")

    with pytest.raises(InvalidRecord):
        JsonRosterRepository(path).list_all()


def test_class_names_follow_school_order(roster):
    repo = InMemoryRosterRepository(roster + [RosterEntry(id=9, name="Z", class_name="Nursery")])
    assert list(repo.class_names()) == ["Nursery", "First", "Second"]


def test_unknown_classes_sort_after_known_ones():
    assert sort_class_names(["Zeta", "First", "Alpha", "Nursery", "First"]) == ["Nursery", "First", "Alpha", "Zeta"]
