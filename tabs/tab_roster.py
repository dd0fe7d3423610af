"""Tab 1: Roster — add students one at a time, from a file, or from sample data."""

import streamlit as st
import pandas as pd

from config.defaults import DAYS_IN_WINDOW, NAME_COLUMN, ATTENDANCE_COLUMN
from components.metrics_cards import render_messages
from components.tables import render_styled_table
from data.loader import load_file, parse_roster, split_input_line
from data.validator import validate_roster
from data.sample_data import generate_roster_df
from data.session_store import get_roster, reset_roster, get_entry_errors, set_entry_errors
from models.errors import ValidationError


def _load_dataframe(df: pd.DataFrame):
    check = validate_roster(df)
    if not check.is_valid:
        render_messages(check.errors, check.warnings)
        return
    roster = get_roster()
    before = len(roster)
    _, row_errors = parse_roster(df, roster)
    set_entry_errors(row_errors)
    render_messages([], check.warnings)
    st.success(f"Added {len(roster) - before} of {len(df)} students")


def render(sidebar_state):
    """Render the Roster tab."""
    st.header("Roster")

    # --- Single entry ---
    st.subheader("Add Student")
    st.caption(f"Format: `StudentName YNNYNY...` ({DAYS_IN_WINDOW} days, Y/N or 1/0; spaces are ignored)")
    with st.form("add_student", clear_on_submit=True):
        line = st.text_input("Entry", placeholder="Alice YYYYNYYYYYYYYYYNYYYYYYYYYYYYYY")
        submitted = st.form_submit_button("Add", type="primary")
    if submitted and line.strip():
        try:
            name, raw = split_input_line(line)
            record = get_roster().add(name, raw)
            st.success(f"Added {record.name}")
        except ValidationError as e:
            st.error(f"Error: {e}")

    st.divider()

    # --- Bulk upload ---
    st.subheader("Upload Roster")
    st.caption(f"CSV or XLSX with columns **{NAME_COLUMN}** and **{ATTENDANCE_COLUMN}**.")
    uploaded = st.file_uploader("Roster file", type=["csv", "xlsx"], key="upload_roster")

    col_upload, col_sample, col_reset = st.columns(3)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload"):
            if uploaded:
                try:
                    _load_dataframe(load_file(uploaded))
                except Exception as e:
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please choose a file first.")
    with col_sample:
        if st.button("Load Sample Data", key="btn_sample"):
            _load_dataframe(generate_roster_df())
    with col_reset:
        if st.button("Clear Roster", key="btn_reset"):
            reset_roster()
            st.info("Roster cleared")

    errors = get_entry_errors()
    if errors:
        with st.expander(f"{len(errors)} rejected row{'s' if len(errors) != 1 else ''}"):
            render_messages(errors)

    st.divider()

    # --- Current roster, in entry order ---
    roster = get_roster()
    if not len(roster):
        st.info("No students yet.")
        return
    df = pd.DataFrame([
        {"#": i, "Student": r.name, "Attendance": r.attendance_string}
        for i, r in enumerate(roster, start=1)
    ])
    render_styled_table(df, title=f"Current Roster ({len(roster)})")
