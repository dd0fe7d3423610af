"""Classroom Attendance Analyzer — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import tab_roster, tab_report


def main():
    st.set_page_config(
        page_title="Attendance Analyzer",
        page_icon="📋",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2 = st.tabs([
        "👥 Roster",
        "📊 Defaulter Report",
    ])

    with tab1:
        tab_roster.render(sidebar_state)
    with tab2:
        tab_report.render(sidebar_state)


if __name__ == "__main__":
    main()
