"""Tab 2: Defaulter Report — classification, cohort figures and charts."""

import streamlit as st

from components.metrics_cards import render_metric_row
from components.tables import render_report_table
from components.charts import absence_rate_bar, streak_bar, defaulter_donut, attendance_heatmap
from data.session_store import get_roster
from engine.report_frame import report_to_dataframe, summary_rows
from models.attendance import format_percent
from models.errors import EmptyRosterError


def render(sidebar_state):
    """Render the Defaulter Report tab."""
    st.header("Defaulter Report")

    try:
        result = get_roster().report(sidebar_state.absence_threshold, sidebar_state.min_streak)
    except EmptyRosterError:
        st.info("No students on the roster. Add some in the Roster tab.")
        return

    st.caption(
        f"A student is a defaulter when their absence rate is above "
        f"{format_percent(result.absence_threshold)} or their longest streak is below {result.min_streak} days."
    )
    render_metric_row(summary_rows(result))

    st.divider()

    df = report_to_dataframe(result)
    render_report_table(df)
    st.download_button(
        "Download report (CSV)",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="attendance_report.csv",
        mime="text/csv",
    )

    if result.defaulters:
        st.subheader("Why they were flagged")
        for row in result.defaulters:
            st.markdown(f"**{row.record.name}**")
            for reason in row.reasons:
                st.markdown(f"- {reason}")

    st.divider()

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(absence_rate_bar(df, result.absence_threshold), use_container_width=True)
    with col2:
        st.plotly_chart(defaulter_donut(result.defaulter_count, result.total_students),
                        use_container_width=True)

    st.plotly_chart(streak_bar(df, result.min_streak), use_container_width=True)
    st.plotly_chart(attendance_heatmap(df), use_container_width=True)
