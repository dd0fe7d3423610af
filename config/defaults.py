"""Default configuration constants for the Classroom Attendance Analyzer."""

# Attendance window
DAYS_IN_WINDOW = 30

# Accepted attendance characters
PRESENT_CHARS = frozenset("1Yy")
ABSENT_CHARS = frozenset("0Nn")
ACCEPTED_CHARS = PRESENT_CHARS | ABSENT_CHARS

# Rendered day symbols
PRESENT_SYMBOL = "Y"
ABSENT_SYMBOL = "N"

# Report layout
NAME_COLUMN_WIDTH = 15
REPORT_RULE_WIDTH = 80
DEFAULTER_TAG = "[DEFAULTER]"

# Defaulter criteria defaults
DEFAULT_ABSENCE_THRESHOLD_PCT = 25.0  # percent, 0-100
DEFAULT_MIN_STREAK = 5                # days

# Interactive session
DONE_COMMAND = "done"
PROMPT = "> "

# Tabular upload columns
NAME_COLUMN = "Student Name"
ATTENDANCE_COLUMN = "Attendance"
REQUIRED_COLUMNS = [NAME_COLUMN, ATTENDANCE_COLUMN]

# Chart palette
DEFAULTER_COLOR = "#E8734A"
OK_COLOR = "#4A90D9"
