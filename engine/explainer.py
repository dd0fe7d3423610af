"""Generates human-readable explanations for defaulter classifications."""

from typing import List
from models.attendance import AttendanceRecord, format_percent


def explain_defaulter(
    record: AttendanceRecord,
    absence_threshold: float,
    min_streak: int,
) -> List[str]:
    """List each criterion the student fails. Empty when the student is not a defaulter."""
    reasons = []

    if record.absence_rate > absence_threshold:
        reasons.append(
            f"Absence rate {format_percent(record.absence_rate)} ({record.absent_days} of "
            f"{len(record.days)} days) exceeds the {format_percent(absence_threshold)} limit"
        )

    if record.max_streak < min_streak:
        reasons.append(
            f"Longest attendance streak of {record.max_streak} "
            f"day{'s' if record.max_streak != 1 else ''} is below the required {min_streak}"
        )

    return reasons
