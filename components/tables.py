"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional

from models.attendance import format_percent


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def render_report_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render the report with defaulter rows highlighted."""
    def color_row(row):
        if row.get(status_column) == "DEFAULTER":
            return ["background-color: #ffcccc; color: #cc0000; font-weight: bold"] * len(row)
        return [""] * len(row)

    styled = df.style.apply(color_row, axis=1)
    if "Absence Rate" in df.columns:
        styled = styled.format({"Absence Rate": format_percent})
    st.dataframe(styled, use_container_width=True, hide_index=True)
