"""Roster of student attendance records and the defaulter report pass."""

import logging
from typing import Iterator, List, Tuple

from models.attendance import AttendanceRecord
from models.errors import EmptyRosterError
from models.report import ReportResult, ReportRow
from engine.explainer import explain_defaulter

logger = logging.getLogger(__name__)


class AttendanceRoster:
    """Append-only, insertion-ordered collection of attendance records.

    Holds no derived state: every report is computed from the current
    records. Not synchronized; callers serialize add/report calls.
    """

    def __init__(self):
        self._records: List[AttendanceRecord] = []

    @property
    def records(self) -> Tuple[AttendanceRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AttendanceRecord]:
        return iter(self._records)

    def add(self, name: str, raw_data: str) -> AttendanceRecord:
        """Validate and append a student. Validation errors propagate unchanged."""
        record = AttendanceRecord.create(name, raw_data)
        self._records.append(record)
        logger.debug("Added %s (absence %.2f, max streak %d)",
                     record.name, record.absence_rate, record.max_streak)
        return record

    def report(self, absence_threshold: float, min_streak: int) -> ReportResult:
        """Sort, classify and aggregate the roster against the given criteria."""
        if not self._records:
            raise EmptyRosterError()

        # sorted() is stable; str comparison is by code point
        ordered = sorted(self._records, key=lambda r: r.name)

        rows = []
        for record in ordered:
            flagged = record.is_defaulter(absence_threshold, min_streak)
            reasons = explain_defaulter(record, absence_threshold, min_streak) if flagged else []
            rows.append(ReportRow(record=record, is_defaulter=flagged, reasons=reasons))

        total = len(rows)
        defaulter_count = sum(1 for r in rows if r.is_defaulter)
        result = ReportResult(
            rows=rows,
            absence_threshold=absence_threshold,
            min_streak=min_streak,
            total_students=total,
            defaulter_count=defaulter_count,
            defaulter_percentage=defaulter_count / total,
            overall_absence_rate=sum(r.absence_rate for r in ordered) / total,
            avg_max_streak=sum(r.max_streak for r in ordered) / total,
        )
        logger.info("Report: %d students, %d defaulters (threshold %.2f, min streak %d)",
                    total, defaulter_count, absence_threshold, min_streak)
        return result
