"""
roster.py
In-memory member roster (add, filter by tier, sort, lookup, iterate).
"""

from __future__ import annotations

import logging
from typing import Iterator

from models import Member

logger = logging.getLogger(__name__)


class Roster:
    """
    Ordered, in-memory collection of members. Insertion order is kept until
    sort_members_by_name() is called. Duplicate ids/names are allowed.
    Not thread-safe; one Roster per Streamlit session.
    """

    def __init__(self) -> None:
        self._members: list[Member] = []

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return self.iterator()

    @property
    def members(self) -> tuple[Member, ...]:
        return tuple(self._members)

    def add_member(self, member: Member) -> None:
        self._members.append(member)
        logger.info("Member added: %s", member.name)

    def filter_members_by_type(self, type_text: str) -> list[Member]:
        # substring match against the rendered label, e.g. "Membership Type: Premium"
        needle = type_text.lower()
        return [m for m in self._members if needle in m.label.type_info().lower()]

    def sort_members_by_name(self) -> str:
        self._members.sort(key=lambda m: m.name)  # list.sort is stable
        summary = "Members sorted by name: " + ", ".join(m.name for m in self._members)
        logger.info(summary)
        return summary

    def find_member_by_name(self, name: str) -> Member | None:
        wanted = name.lower()
        return next((m for m in self._members if m.name.lower() == wanted), None)

    def iterator(self) -> Iterator[Member]:
        """
        Single-pass cursor over the current order. Each call snapshots the
        order at call time; later adds/sorts do not affect a live cursor.
        """
        return iter(list(self._members))

    def to_rows(self) -> list[dict]:
        return [
            {
                "id": m.id,
                "name": m.name,
                "membership_type": m.membership_type,
                "last_check_in": m.last_check_in.isoformat(timespec="seconds") if m.last_check_in else None,
            }
            for m in self._members
        ]


# Domain name for the roster aggregate.
GymManagementSystem = Roster
