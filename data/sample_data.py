"""Generate a synthetic class roster for demos and manual testing."""

import os
import random
import pandas as pd

from config.defaults import DAYS_IN_WINDOW, NAME_COLUMN, ATTENDANCE_COLUMN

SAMPLE_STUDENTS = [
    # (name, probability of being present on a given day)
    ("Aarav", 0.95),
    ("Beatriz", 0.70),
    ("Chen", 0.88),
    ("Dmitri", 0.55),
    ("Emeka", 0.92),
    ("Fatima", 0.80),
    ("Gustavo", 0.98),
    ("Hana", 0.65),
    ("Isla", 0.85),
    ("Jonas", 0.75),
]


def generate_roster_df(seed: int = 42) -> pd.DataFrame:
    """Generate one 30-day Y/N attendance string per sample student."""
    rng = random.Random(seed)
    rows = []
    for name, p_present in SAMPLE_STUDENTS:
        days = "".join("Y" if rng.random() < p_present else "N" for _ in range(DAYS_IN_WINDOW))
        rows.append({NAME_COLUMN: name, ATTENDANCE_COLUMN: days})
    return pd.DataFrame(rows)


def generate_sample_csv(output_dir: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "roster.csv")
    generate_roster_df().to_csv(path, index=False)
    return path


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    print(f"Sample roster written to {generate_sample_csv(out)}")
