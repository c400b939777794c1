"""
demo.py
Console walkthrough of the roster: add, filter, sort, lookup, session, iterate.
Run: python demo.py
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager

from models import Member, Session
from roster import Roster

# Modules whose INFO messages are part of the walkthrough output
ECHOED_LOGGERS = ("models", "roster")


@contextmanager
def echo_to_console():
    """
    Send INFO records of the core modules to stdout as bare messages, and only
    there, so they are not repeated by handlers configured on the root logger.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    saved = []
    for name in ECHOED_LOGGERS:
        log = logging.getLogger(name)
        saved.append((log, log.level, log.propagate))
        log.addHandler(handler)
        log.setLevel(logging.INFO)
        log.propagate = False
    try:
        yield
    finally:
        for log, level, propagate in saved:
            log.removeHandler(handler)
            log.setLevel(level)
            log.propagate = propagate


def run_demo(roster: Roster | None = None, session: Session | None = None) -> Roster:
    roster = roster if roster is not None else Roster()

    with echo_to_console():
        roster.add_member(Member.builder("M001", "John Doe").membership_type("Premium").build())
        roster.add_member(Member.builder("M002", "Jane Smith").membership_type("Standard").build())
        roster.add_member(Member.builder("M003", "Alice Johnson").membership_type("Premium").build())

        print("Premium members:")
        for m in roster.filter_members_by_type("Premium"):
            print(m.display_info())

        roster.sort_members_by_name()

        search_name = "Jane Smith"
        found = roster.find_member_by_name(search_name)
        if found is not None:
            print(f"Found member: {found.name}")
        else:
            print(f"Member {search_name} not found.")

        session = session if session is not None else Session()
        session.extend(60)

        print("All gym members using iterator:")
        for m in roster.iterator():
            print(m.display_info())

    return roster


def main() -> None:
    level = os.environ.get("GYM_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_demo()


if __name__ == "__main__":
    main()
