from dataclasses import dataclass, field
from typing import List

from models.attendance import AttendanceRecord


@dataclass
class ReportRow:
    record: AttendanceRecord
    is_defaulter: bool
    reasons: List[str] = field(default_factory=list)  # empty unless flagged


@dataclass
class ReportResult:
    rows: List[ReportRow]
    absence_threshold: float   # fraction, e.g. 0.25
    min_streak: int
    total_students: int
    defaulter_count: int
    defaulter_percentage: float
    overall_absence_rate: float
    avg_max_streak: float

    @property
    def defaulters(self) -> List[ReportRow]:
        return [r for r in self.rows if r.is_defaulter]
