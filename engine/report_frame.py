"""Tabular views of a defaulter report for display and export."""

import pandas as pd
from models.attendance import format_percent
from models.report import ReportResult


REPORT_COLUMNS = [
    "Student", "Attendance", "Max Streak", "Current Streak",
    "Absence Rate", "Status", "Reasons",
]


def report_to_dataframe(result: ReportResult) -> pd.DataFrame:
    """One row per student in report order."""
    rows = []
    for row in result.rows:
        rec = row.record
        rows.append({
            "Student": rec.name,
            "Attendance": rec.attendance_string,
            "Max Streak": rec.max_streak,
            "Current Streak": rec.current_streak,
            "Absence Rate": rec.absence_rate,
            "Status": "DEFAULTER" if row.is_defaulter else "OK",
            "Reasons": "; ".join(row.reasons),
        })
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summary_rows(result: ReportResult) -> list[dict]:
    """Cohort-level figures as label/value pairs."""
    return [
        {"label": "Total Students", "value": f"{result.total_students}"},
        {"label": "Defaulters",
         "value": f"{result.defaulter_count} ({format_percent(result.defaulter_percentage)})"},
        {"label": "Overall Absence Rate", "value": f"{format_percent(result.overall_absence_rate)}"},
        {"label": "Average Maximum Streak", "value": f"{result.avg_max_streak:.1f} days"},
    ]
