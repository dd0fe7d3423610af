"""Schema validation for uploaded roster files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import REQUIRED_COLUMNS, NAME_COLUMN


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_roster(df: pd.DataFrame, file_label: str = "Roster") -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    if not result.is_valid:
        return result

    # Duplicate names are accepted, but usually a data-entry slip
    names = df[NAME_COLUMN].dropna().astype(str).str.strip()
    dupes = names[names.duplicated(keep=False)]
    if not dupes.empty:
        result.warnings.append(
            f"{file_label}: Duplicate student names: {', '.join(sorted(dupes.unique()))}. "
            "Each row is kept as a separate student."
        )
    return result
