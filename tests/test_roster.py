import logging

from models import new_member
from roster import GymManagementSystem, Roster


def make_roster() -> Roster:
    roster = Roster()
    roster.add_member(new_member("M001", "John Doe", "Premium"))
    roster.add_member(new_member("M002", "Jane Smith", "Standard"))
    roster.add_member(new_member("M003", "Alice Johnson", "Premium"))
    return roster


def names(members) -> list[str]:
    return [m.name for m in members]


def test_starts_empty() -> None:
    roster = Roster()
    assert len(roster) == 0
    assert list(roster.iterator()) == []
    assert roster.filter_members_by_type("Premium") == []
    assert roster.find_member_by_name("anyone") is None


def test_alias() -> None:
    assert GymManagementSystem is Roster


def test_add_keeps_insertion_order(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="roster"):
        roster = make_roster()
    assert names(roster.iterator()) == ["John Doe", "Jane Smith", "Alice Johnson"]
    assert "Member added: Jane Smith" in caplog.text


def test_duplicates_are_kept() -> None:
    roster = Roster()
    roster.add_member(new_member("M001", "John Doe"))
    roster.add_member(new_member("M001", "John Doe"))
    assert len(roster) == 2


def test_filter_is_case_insensitive_substring() -> None:
    roster = make_roster()
    assert names(roster.filter_members_by_type("Premium")) == ["John Doe", "Alice Johnson"]
    assert names(roster.filter_members_by_type("prem")) == ["John Doe", "Alice Johnson"]
    assert names(roster.filter_members_by_type("STANDARD")) == ["Jane Smith"]
    assert roster.filter_members_by_type("Gold") == []


def test_filter_matches_label_text() -> None:
    # the label prefix is part of what gets searched
    roster = make_roster()
    assert len(roster.filter_members_by_type("membership type")) == 3
    assert len(roster.filter_members_by_type("")) == 3


def test_filter_is_idempotent_and_read_only() -> None:
    roster = make_roster()
    before = names(roster)
    first = roster.filter_members_by_type("Premium")
    second = roster.filter_members_by_type("Premium")
    assert first == second
    assert names(roster) == before


def test_sort_by_name() -> None:
    roster = make_roster()
    summary = roster.sort_members_by_name()
    assert names(roster) == ["Alice Johnson", "Jane Smith", "John Doe"]
    assert summary == "Members sorted by name: Alice Johnson, Jane Smith, John Doe"


def test_sort_is_case_sensitive() -> None:
    roster = Roster()
    for name in ["bob", "Bob", "alice", "Alice"]:
        roster.add_member(new_member(name, name))
    roster.sort_members_by_name()
    assert names(roster) == ["Alice", "Bob", "alice", "bob"]


def test_sort_is_stable() -> None:
    roster = Roster()
    roster.add_member(new_member("A2", "Zed"))
    roster.add_member(new_member("B1", "Same"))
    roster.add_member(new_member("B2", "Same"))
    roster.add_member(new_member("B3", "Same"))
    roster.sort_members_by_name()
    assert [m.id for m in roster] == ["B1", "B2", "B3", "A2"]


def test_find_is_case_insensitive_and_exact() -> None:
    roster = make_roster()
    found = roster.find_member_by_name("JANE SMITH")
    assert found is not None and found.id == "M002"
    assert roster.find_member_by_name("Jan") is None
    assert roster.find_member_by_name("Bob") is None


def test_case_matching_is_per_character() -> None:
    roster = Roster()
    roster.add_member(new_member("D1", "Straße", "Café"))
    assert roster.find_member_by_name("STRASSE") is None
    assert roster.find_member_by_name("STRAßE").id == "D1"
    assert len(roster.filter_members_by_type("CAFÉ")) == 1


def test_find_returns_first_in_current_order() -> None:
    roster = Roster()
    roster.add_member(new_member("X2", "Kim"))
    roster.add_member(new_member("X1", "kim"))
    assert roster.find_member_by_name("KIM").id == "X2"


def test_iterator_reflects_sort_before_creation() -> None:
    roster = make_roster()
    roster.sort_members_by_name()
    assert names(roster.iterator()) == ["Alice Johnson", "Jane Smith", "John Doe"]


def test_iterator_is_a_snapshot() -> None:
    roster = make_roster()
    cursor = roster.iterator()
    roster.add_member(new_member("M004", "Zoe"))
    roster.sort_members_by_name()
    assert names(cursor) == ["John Doe", "Jane Smith", "Alice Johnson"]
    assert list(cursor) == []  # single pass
    assert names(roster.iterator())[-1] == "Zoe"


def test_members_property_is_a_copy() -> None:
    roster = make_roster()
    snapshot = roster.members
    roster.add_member(new_member("M004", "Zoe"))
    assert len(snapshot) == 3


def test_to_rows(clock) -> None:
    roster = Roster()
    m = new_member("M001", "John Doe", "Premium", clock=clock)
    roster.add_member(m)
    roster.add_member(new_member("M002", "Jane Smith"))
    m.check_in()
    assert roster.to_rows() == [
        {"id": "M001", "name": "John Doe", "membership_type": "Premium", "last_check_in": "2024-05-01T09:30:00"},
        {"id": "M002", "name": "Jane Smith", "membership_type": "Standard", "last_check_in": None},
    ]


def test_end_to_end_scenario() -> None:
    roster = make_roster()
    assert names(roster.filter_members_by_type("Premium")) == ["John Doe", "Alice Johnson"]
    roster.sort_members_by_name()
    assert names(roster) == ["Alice Johnson", "Jane Smith", "John Doe"]
    assert roster.find_member_by_name("Jane Smith").id == "M002"
    assert roster.find_member_by_name("Bob") is None
