from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Tuple

from config.defaults import (
    DAYS_IN_WINDOW, PRESENT_CHARS, ABSENT_CHARS,
    PRESENT_SYMBOL, ABSENT_SYMBOL, NAME_COLUMN_WIDTH,
)
from models.errors import EmptyNameError, InvalidCharacterError, WrongLengthError


class Presence(Enum):
    PRESENT = 1
    ABSENT = 0

    @property
    def symbol(self) -> str:
        return PRESENT_SYMBOL if self is Presence.PRESENT else ABSENT_SYMBOL


def parse_days(raw_data: str) -> Tuple[Presence, ...]:
    """Map raw attendance characters to presence values.

    Fails on the first character outside the accepted set, then on a
    sequence that is not exactly one attendance window long.
    """
    days = []
    for char in raw_data:
        if char in PRESENT_CHARS:
            days.append(Presence.PRESENT)
        elif char in ABSENT_CHARS:
            days.append(Presence.ABSENT)
        else:
            raise InvalidCharacterError(char)
    if len(days) != DAYS_IN_WINDOW:
        raise WrongLengthError(len(days))
    return tuple(days)


def scan_streaks(days: Tuple[Presence, ...]) -> Tuple[int, int]:
    """Return (max_streak, current_streak) from a single pass over the days."""
    run = 0
    max_streak = 0
    for day in days:
        if day is Presence.PRESENT:
            run += 1
            max_streak = max(max_streak, run)
        else:
            run = 0
    return max_streak, run


def format_percent(fraction: float) -> str:
    """Whole-number percentage, rounding halves up (1/8 -> '13%')."""
    pct = (Decimal(str(fraction)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{pct}%"


@dataclass(frozen=True)
class AttendanceRecord:
    name: str
    days: Tuple[Presence, ...]
    absence_rate: float
    max_streak: int
    current_streak: int

    @classmethod
    def create(cls, name: str, raw_data: str) -> "AttendanceRecord":
        """Validate one student's entry and compute its statistics."""
        if not name or not name.strip():
            raise EmptyNameError()
        days = parse_days(raw_data)
        absent = sum(1 for d in days if d is Presence.ABSENT)
        max_streak, current_streak = scan_streaks(days)
        return cls(
            name=name,
            days=days,
            absence_rate=absent / len(days),
            max_streak=max_streak,
            current_streak=current_streak,
        )

    @property
    def absent_days(self) -> int:
        return sum(1 for d in self.days if d is Presence.ABSENT)

    @property
    def attendance_string(self) -> str:
        """Canonical Y/N form of the day sequence."""
        return "".join(d.symbol for d in self.days)

    def is_defaulter(self, absence_threshold: float, min_streak: int) -> bool:
        # Either condition flags the student; both comparisons are strict.
        return self.absence_rate > absence_threshold or self.max_streak < min_streak

    def render(self) -> str:
        return (
            f"{self.name:<{NAME_COLUMN_WIDTH}} {self.attendance_string} | "
            f"Max: {self.max_streak:2} days | "
            f"Current: {self.current_streak:2} days | "
            f"Absent: {format_percent(self.absence_rate)}"
        )
