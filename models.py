"""
models.py
Domain entities: people, membership labels, members (via builder), instructors, sessions.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

# Tier texts offered by the UI; any text is accepted as a tier.
DEFAULT_TIER = "Standard"
MEMBERSHIP_TIERS = (DEFAULT_TIER, "Premium")

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def _new_session_id() -> str:
    return str(uuid.uuid4())


class Displayable(Protocol):
    def display_info(self) -> str:
        ...


@dataclass(frozen=True)
class Person:
    id: str
    name: str

    def display_info(self) -> str:
        return f"ID: {self.id}, Name: {self.name}"


@dataclass(frozen=True)
class MembershipLabel:
    tier_text: str

    def type_info(self) -> str:
        return f"Membership Type: {self.tier_text}"


@dataclass(frozen=True)
class Member:
    """
    A gym member. Build through Member.builder() or new_member().
    id, name and label are fixed at build time; last_check_in stays None
    until check_in() is called and is the only field that changes.
    """
    id: str
    name: str
    label: MembershipLabel
    clock: Clock = field(default=datetime.now, repr=False, compare=False)
    last_check_in: datetime | None = field(default=None, init=False, hash=False)

    @staticmethod
    def builder(member_id: str, name: str) -> "MemberBuilder":
        return MemberBuilder(member_id, name)

    @property
    def membership_type(self) -> str:
        return self.label.tier_text

    def display_info(self) -> str:
        """
        Two lines: identity, then the label (e.g. "Membership Type: Premium").
        """
        return f"ID: {self.id}, Name: {self.name}\n{self.label.type_info()}"

    def renew_membership(self) -> str:
        msg = f"Membership renewed for member: {self.name}"
        logger.info(msg)
        return msg

    def check_in(self) -> datetime:
        object.__setattr__(self, "last_check_in", self.clock())
        logger.info("%s checked into the gym at %s.", self.name, self.last_check_in.isoformat())
        return self.last_check_in


class MemberBuilder:
    def __init__(self, member_id: str, name: str, clock: Clock = datetime.now):
        self._id = member_id
        self._name = name
        self._tier = DEFAULT_TIER
        self._clock = clock

    def membership_type(self, tier_text: str) -> "MemberBuilder":
        self._tier = tier_text
        return self

    def clock(self, clock: Clock) -> "MemberBuilder":
        self._clock = clock
        return self

    def build(self) -> Member:
        return Member(
            id=self._id,
            name=self._name,
            label=MembershipLabel(self._tier),
            clock=self._clock,
        )


def new_member(member_id: str, name: str, tier: str = DEFAULT_TIER, clock: Clock = datetime.now) -> Member:
    return MemberBuilder(member_id, name, clock=clock).membership_type(tier).build()


@dataclass(frozen=True)
class Instructor(Person):
    expertise: str

    def display_info(self) -> str:
        return f"{super().display_info()}\nExpertise: {self.expertise}"

    def schedule_training(self, details: str) -> str:
        msg = f"{self.name} scheduled training: {details}"
        logger.info(msg)
        return msg

    def conduct_training(self) -> str:
        msg = f"{self.name} is conducting training in {self.expertise}."
        logger.info(msg)
        return msg


@dataclass
class Session:
    """
    Access session timer. start_time is taken from the clock at creation;
    extend() pushes end_time forward from end_time (or start_time if unset).
    Negative durations are accepted and move end_time backward.
    """
    clock: Clock = field(default=datetime.now, repr=False, compare=False)
    id_factory: IdFactory = field(default=_new_session_id, repr=False, compare=False)
    session_id: str = field(init=False)
    start_time: datetime = field(init=False)
    end_time: datetime | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.session_id = self.id_factory()
        self.start_time = self.clock()

    def extend(self, duration_minutes: int) -> datetime:
        base = self.end_time if self.end_time is not None else self.start_time
        self.end_time = base + timedelta(minutes=duration_minutes)
        logger.info("Session extended. New end time: %s", self.end_time.isoformat())
        return self.end_time

    @property
    def duration_minutes(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds() / 60
