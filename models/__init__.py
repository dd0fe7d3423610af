from models.attendance import AttendanceRecord, Presence
from models.report import ReportResult, ReportRow
from models.errors import (
    AttendanceError, ValidationError, EmptyNameError, InvalidCharacterError,
    WrongLengthError, InputFormatError, EmptyRosterError,
)
