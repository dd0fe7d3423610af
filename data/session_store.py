"""Typed wrapper around st.session_state for the current analysis session."""

import streamlit as st
from engine.roster import AttendanceRoster
from config.defaults import DEFAULT_ABSENCE_THRESHOLD_PCT, DEFAULT_MIN_STREAK


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "roster": AttendanceRoster(),
        "criteria": {
            "absence_threshold": DEFAULT_ABSENCE_THRESHOLD_PCT / 100.0,
            "min_streak": DEFAULT_MIN_STREAK,
        },
        "entry_errors": [],
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def get_roster() -> AttendanceRoster:
    return st.session_state["roster"]


def reset_roster() -> AttendanceRoster:
    st.session_state["roster"] = AttendanceRoster()
    st.session_state["entry_errors"] = []
    return st.session_state["roster"]


def get_criteria() -> dict:
    return st.session_state.get("criteria", {})


def set_criteria(absence_threshold: float, min_streak: int):
    st.session_state["criteria"] = {
        "absence_threshold": absence_threshold,
        "min_streak": min_streak,
    }


def get_entry_errors() -> list:
    return st.session_state.get("entry_errors", [])


def set_entry_errors(errors: list):
    st.session_state["entry_errors"] = list(errors)
