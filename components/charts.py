"""Plotly chart builders for the attendance report."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd

from config.defaults import DEFAULTER_COLOR, OK_COLOR, DAYS_IN_WINDOW
from models.attendance import format_percent


def absence_rate_bar(report_df: pd.DataFrame, absence_threshold: float) -> go.Figure:
    """Per-student absence rate, colored by status, with the threshold line."""
    fig = px.bar(
        report_df, x="Student", y="Absence Rate",
        color="Status",
        color_discrete_map={"DEFAULTER": DEFAULTER_COLOR, "OK": OK_COLOR},
        title="Absence Rate by Student",
    )
    fig.add_hline(
        y=absence_threshold, line_dash="dash", line_color="#555555",
        annotation_text=f"Limit {format_percent(absence_threshold)}", annotation_position="top left",
    )
    fig.update_layout(height=400, yaxis_tickformat=".0%", yaxis_range=[0, 1], legend_title_text="")
    return fig


def streak_bar(report_df: pd.DataFrame, min_streak: int) -> go.Figure:
    """Max and current streak side by side, with the required minimum."""
    fig = px.bar(
        report_df, x="Student", y=["Max Streak", "Current Streak"],
        barmode="group",
        labels={"value": "Days", "variable": ""},
        title="Attendance Streaks",
        color_discrete_map={"Max Streak": OK_COLOR, "Current Streak": "#F5C542"},
    )
    fig.add_hline(
        y=min_streak, line_dash="dash", line_color=DEFAULTER_COLOR,
        annotation_text=f"Required {min_streak}", annotation_position="top left",
    )
    fig.update_layout(height=400, yaxis_range=[0, DAYS_IN_WINDOW], legend_title_text="")
    return fig


def defaulter_donut(defaulters: int, total: int, title: str = "Defaulters") -> go.Figure:
    fig = go.Figure(data=[go.Pie(
        labels=["Defaulter", "OK"],
        values=[defaulters, total - defaulters],
        hole=0.6,
        marker_colors=[DEFAULTER_COLOR, OK_COLOR],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{defaulters}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def attendance_heatmap(report_df: pd.DataFrame) -> go.Figure:
    """Student x day grid of presence (1) and absence (0)."""
    students = list(report_df["Student"])
    matrix = [[1 if c == "Y" else 0 for c in days] for days in report_df["Attendance"]]
    fig = go.Figure(data=go.Heatmap(
        z=matrix,
        x=list(range(1, DAYS_IN_WINDOW + 1)),
        y=students,
        colorscale=[[0, DEFAULTER_COLOR], [1, OK_COLOR]],
        showscale=False,
        hovertemplate="Student: %{y}<br>Day: %{x}<extra></extra>",
    ))
    fig.update_layout(
        title="Daily Attendance",
        xaxis_title="Day",
        yaxis_title="Student",
        yaxis_autorange="reversed",
        height=max(300, len(students) * 28),
    )
    return fig
