"""
app.py
Streamlit front end for the in-memory gym roster.
Run: streamlit run app.py
"""

from __future__ import annotations

import streamlit as st

import utils
from models import MEMBERSHIP_TIERS, Instructor, Session, new_member
from roster import Roster

st.set_page_config(page_title="Gym Roster", layout="wide")


def init_once():
    # One roster/session/instructor list per browser session
    if "roster" not in st.session_state:
        st.session_state.roster = Roster()
    if "session" not in st.session_state:
        st.session_state.session = None
    if "instructors" not in st.session_state:
        st.session_state.instructors = []
    if "log" not in st.session_state:
        st.session_state.log = []


def get_roster() -> Roster:
    return st.session_state.roster


def remember(msg: str) -> None:
    st.session_state.log.append(f"{utils.now_iso()}  {msg}")


# ---------- Pages ----------

def members_page():
    st.header("👥 Members")
    roster = get_roster()

    st.dataframe(utils.roster_to_dataframe(roster), hide_index=True)

    st.divider()

    col1, col2 = st.columns([1, 2])
    with col1:
        st.subheader("➕ Add Member")
        member_id = st.text_input("Member ID")
        name = st.text_input("Name")
        tier = st.selectbox("Membership type", options=list(MEMBERSHIP_TIERS))

        errors = utils.validate_member_inputs(member_id, name)
        for e in errors:
            st.error(e)

        if st.button("Add", type="primary", disabled=bool(errors)):
            roster.add_member(new_member(member_id.strip(), name.strip(), tier, clock=utils.now))
            remember(f"Member added: {name.strip()}")
            st.rerun()

        if st.button("Insert sample data"):
            utils.insert_sample_data(roster)
            remember("Sample members added.")
            st.rerun()

    with col2:
        st.subheader("Member actions")
        if not len(roster):
            st.caption("No members yet.")
            return

        options = {f"{m.name} ({m.id}) #{i}": m for i, m in enumerate(roster)}
        chosen = options[st.selectbox("Member", list(options.keys()))]
        st.text(chosen.display_info())

        c1, c2 = st.columns(2)
        with c1:
            if st.button("Check in"):
                when = chosen.check_in()
                remember(f"{chosen.name} checked into the gym at {when.isoformat(timespec='seconds')}.")
                st.rerun()
        with c2:
            if st.button("Renew membership"):
                remember(chosen.renew_membership())
                st.success("Membership renewed.")


def search_page():
    st.header("🔎 Filter, Sort & Search")
    roster = get_roster()

    st.subheader("Filter by membership type")
    type_text = st.text_input("Type contains", value="Premium")
    matches = roster.filter_members_by_type(type_text)
    if matches:
        for m in matches:
            st.text(m.display_info())
    else:
        st.caption("No members match this type.")

    st.divider()

    st.subheader("Sort")
    if st.button("Sort by name"):
        remember(roster.sort_members_by_name())
        st.rerun()
    st.caption(", ".join(m.name for m in roster) or "Roster is empty.")

    st.divider()

    st.subheader("Find by name")
    search = st.text_input("Exact name (case-insensitive)")
    if search.strip():
        found = roster.find_member_by_name(search.strip())
        if found is not None:
            st.success(f"Found member: {found.name}")
            st.text(found.display_info())
        else:
            st.warning(f"Member {search.strip()} not found.")


def session_page():
    st.header("⏱️ Session")

    if st.button("Start new session", type="primary"):
        st.session_state.session = Session(clock=utils.now)
        remember(f"Session started: {st.session_state.session.session_id}")
        st.rerun()

    session = st.session_state.session
    if session is None:
        st.caption("No session started.")
        return

    st.write(f"Session **{session.session_id}**")
    st.write(f"Start: **{session.start_time.isoformat(timespec='seconds')}**")
    end = session.end_time.isoformat(timespec="seconds") if session.end_time else "(open)"
    st.write(f"End: **{end}**")
    if session.duration_minutes is not None:
        st.metric("Booked minutes", f"{session.duration_minutes:.0f}")

    minutes = st.number_input("Extend by (minutes)", min_value=0, value=60, step=15)
    if st.button("Extend"):
        new_end = session.extend(int(minutes))
        remember(f"Session extended. New end time: {new_end.isoformat(timespec='seconds')}")
        st.rerun()


def instructors_page():
    st.header("🏋️ Instructors")

    col1, col2, col3 = st.columns(3)
    with col1:
        instructor_id = st.text_input("Instructor ID")
    with col2:
        name = st.text_input("Instructor name")
    with col3:
        expertise = st.text_input("Expertise", value="Yoga")

    if st.button("Add instructor", type="primary", disabled=not name.strip()):
        st.session_state.instructors.append(Instructor(instructor_id.strip(), name.strip(), expertise.strip()))
        st.rerun()

    instructors = st.session_state.instructors
    if not instructors:
        st.caption("No instructors yet.")
        return

    st.divider()

    options = {f"{i.name} ({i.id}) #{n}": i for n, i in enumerate(instructors)}
    chosen = options[st.selectbox("Instructor", list(options.keys()))]
    st.text(chosen.display_info())

    details = st.text_input("Training details", value="Morning class, 7:00")
    c1, c2 = st.columns(2)
    with c1:
        if st.button("Schedule training"):
            msg = chosen.schedule_training(details)
            remember(msg)
            st.success(msg)
    with c2:
        if st.button("Conduct training"):
            msg = chosen.conduct_training()
            remember(msg)
            st.success(msg)


def reports_page():
    st.header("🧾 Reports")
    roster = get_roster()

    st.subheader("Export members to CSV")
    if len(roster):
        st.download_button(
            "Download members.csv",
            data=utils.members_to_csv_bytes(roster),
            file_name="members.csv",
            mime="text/csv",
        )
    else:
        st.caption("No members to export.")

    st.divider()

    st.subheader("Members by type")
    st.dataframe(utils.tier_summary(roster), hide_index=True)

    st.divider()

    st.subheader("Activity")
    if st.session_state.log:
        st.code("\n".join(reversed(st.session_state.log)))
    else:
        st.caption("Nothing yet.")


def main_app():
    st.sidebar.title("🏋️ Gym Roster")
    st.sidebar.caption(f"{len(get_roster())} member(s)")

    pages = ["Members", "Search", "Session", "Instructors", "Reports"]
    if "page" not in st.session_state:
        st.session_state.page = "Members"
    st.session_state.page = st.sidebar.radio("Navigate", pages, index=pages.index(st.session_state.page))

    if st.session_state.page == "Members":
        members_page()
    elif st.session_state.page == "Search":
        search_page()
    elif st.session_state.page == "Session":
        session_page()
    elif st.session_state.page == "Instructors":
        instructors_page()
    elif st.session_state.page == "Reports":
        reports_page()


# --------- App entry ---------

def run():
    init_once()
    main_app()


if __name__ == "__main__":
    run()
