"""
utils.py
Clock helpers, input validation, tabular exports, sample data.
"""

from __future__ import annotations

from datetime import datetime
import pandas as pd

from models import new_member
from roster import Roster

MEMBER_COLUMNS = ["id", "name", "membership_type", "last_check_in"]

SAMPLE_MEMBERS = [
    ("M001", "John Doe", "Premium"),
    ("M002", "Jane Smith", "Standard"),
    ("M003", "Alice Johnson", "Premium"),
]


def now() -> datetime:
    return datetime.now()


def now_iso() -> str:
    return now().isoformat(timespec="seconds")


def validate_member_inputs(member_id: str, name: str) -> list[str]:
    """
    Form-level checks for the UI. The roster itself accepts blank and duplicate values.
    """
    errors: list[str] = []
    if not member_id.strip():
        errors.append("Member ID is required.")
    if not name.strip():
        errors.append("Name is required.")
    return errors


def roster_to_dataframe(roster: Roster) -> pd.DataFrame:
    rows = roster.to_rows()
    if not rows:
        return pd.DataFrame(columns=MEMBER_COLUMNS)
    return pd.DataFrame(rows, columns=MEMBER_COLUMNS)


def members_to_csv_bytes(roster: Roster) -> bytes:
    df = roster_to_dataframe(roster)
    return df.to_csv(index=False).encode("utf-8")


def tier_summary(roster: Roster) -> pd.DataFrame:
    df = roster_to_dataframe(roster)
    if df.empty:
        return pd.DataFrame(columns=["membership_type", "members"])
    return (
        df.groupby("membership_type")
        .size()
        .reset_index(name="members")
        .sort_values("membership_type", ignore_index=True)
    )


def insert_sample_data(roster: Roster) -> None:
    """
    Add the three demo members (adds new entries each call; duplicates are allowed).
    """
    for member_id, name, tier in SAMPLE_MEMBERS:
        roster.add_member(new_member(member_id, name, tier))
