"""Input parsing for console lines, threshold text and CSV/XLSX rosters."""

import logging
import pandas as pd
from typing import List, Tuple

from config.defaults import NAME_COLUMN, ATTENDANCE_COLUMN, DAYS_IN_WINDOW
from engine.roster import AttendanceRoster
from models.errors import InputFormatError, ValidationError

logger = logging.getLogger(__name__)


def split_input_line(line: str) -> Tuple[str, str]:
    """Split 'Name YNNY...' into the name and the whitespace-free attendance string."""
    parts = line.strip().split(None, 1)
    if len(parts) < 2:
        raise InputFormatError("Invalid format. Use: Name YNNY...")
    name, rest = parts
    return name, "".join(rest.split())


def parse_absence_threshold(text: str) -> float:
    """Convert a percentage (0-100, optional trailing %) into a fraction."""
    cleaned = text.strip().rstrip("%").strip()
    try:
        pct = float(cleaned)
    except ValueError:
        raise InputFormatError(f"Absence threshold must be a number between 0 and 100, got {text!r}")
    if not 0 <= pct <= 100:
        raise InputFormatError(f"Absence threshold must be between 0 and 100, got {text!r}")
    return pct / 100.0


def parse_min_streak(text: str) -> int:
    """Parse the minimum required streak as a whole number of days."""
    try:
        days = int(text.strip())
    except ValueError:
        raise InputFormatError(f"Minimum streak must be a whole number of days, got {text!r}")
    if days < 0:
        raise InputFormatError(f"Minimum streak cannot be negative, got {days}")
    if days > DAYS_IN_WINDOW:
        logger.warning("Minimum streak %d exceeds the %d-day window; every student will be flagged",
                       days, DAYS_IN_WINDOW)
    return days


def _cell_text(value) -> str:
    if pd.isna(value):
        return ""
    return str(value)


def parse_roster(df: pd.DataFrame, roster: AttendanceRoster = None) -> Tuple[AttendanceRoster, List[str]]:
    """Add every row of a roster DataFrame, collecting per-row rejections.

    Returns the roster and a list of row-numbered error messages. Rows are
    numbered as a spreadsheet user sees them (header is row 1).
    """
    roster = roster if roster is not None else AttendanceRoster()
    errors = []
    for idx, (_, row) in enumerate(df.iterrows(), start=2):
        name = _cell_text(row[NAME_COLUMN]).strip()
        raw = "".join(_cell_text(row[ATTENDANCE_COLUMN]).split())
        try:
            roster.add(name, raw)
        except ValidationError as e:
            errors.append(f"Row {idx} ({name or 'unnamed'}): {e}")
    if errors:
        logger.info("Rejected %d of %d roster rows", len(errors), len(df))
    return roster, errors


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame of strings."""
    name = uploaded_file.name.lower()
    # dtype=str keeps 1/0 attendance strings from being read as numbers
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype=str)
    elif name.endswith(".xlsx"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype=str)
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def load_path(path: str) -> pd.DataFrame:
    """Load a CSV or XLSX roster from a local path."""
    lower = path.lower()
    if lower.endswith(".csv"):
        return pd.read_csv(path, dtype=str)
    elif lower.endswith(".xlsx"):
        return pd.read_excel(path, engine="openpyxl", dtype=str)
    else:
        raise ValueError(f"Unsupported file format: {path}. Use CSV or XLSX.")
