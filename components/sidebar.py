"""Global sidebar controls for the defaulter criteria."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import get_roster, get_criteria, set_criteria
from config.defaults import DAYS_IN_WINDOW


@dataclass
class SidebarState:
    absence_threshold: float   # fraction
    min_streak: int


def render_sidebar() -> SidebarState:
    """Render the criteria controls and return the current state."""
    criteria = get_criteria()
    with st.sidebar:
        st.title("Attendance Analyzer")
        st.divider()

        threshold_pct = st.slider(
            "Maximum acceptable absence rate (%)",
            min_value=0, max_value=100,
            value=int(round(criteria["absence_threshold"] * 100)),
            key="sidebar_threshold",
        )
        min_streak = st.number_input(
            "Minimum acceptable attendance streak (days)",
            min_value=0, max_value=DAYS_IN_WINDOW,
            value=int(criteria["min_streak"]),
            step=1,
            key="sidebar_min_streak",
        )
        set_criteria(threshold_pct / 100.0, int(min_streak))

        st.divider()
        count = len(get_roster())
        if count:
            st.success(f"{count} student{'s' if count != 1 else ''} on roster")
        else:
            st.warning("Roster is empty. Add students in the Roster tab")

    return SidebarState(absence_threshold=threshold_pct / 100.0, min_streak=int(min_streak))
