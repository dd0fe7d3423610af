"""Console rendering of a defaulter report with colorama highlighting."""

from typing import List
from colorama import Fore, Style

from config.defaults import REPORT_RULE_WIDTH, DEFAULTER_TAG
from models.attendance import format_percent
from models.report import ReportResult


def format_report(result: ReportResult, color: bool = True) -> List[str]:
    """Build the printable report, one string per line."""
    lines = [
        "",
        "Attendance Analysis Results",
        "=" * REPORT_RULE_WIDTH,
        "Legend: Y = Present, N = Absent",
        "-" * REPORT_RULE_WIDTH,
    ]

    for row in result.rows:
        text = row.record.render()
        if row.is_defaulter:
            text = f"{text} {DEFAULTER_TAG}"
        if color:
            shade = Fore.RED if row.is_defaulter else Fore.WHITE
            text = f"{shade}{text}{Style.RESET_ALL}"
        lines.append(text)

    lines.extend([
        "-" * REPORT_RULE_WIDTH,
        f"Total Students: {result.total_students}",
        f"Defaulters: {result.defaulter_count} ({format_percent(result.defaulter_percentage)})",
        "",
        f"Overall Absence Rate: {format_percent(result.overall_absence_rate)}",
        f"Average Maximum Streak: {result.avg_max_streak:.1f} days",
    ])
    return lines
