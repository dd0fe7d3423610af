from config.defaults import DAYS_IN_WINDOW


class AttendanceError(Exception):
    """Base exception for attendance analysis failures."""


class ValidationError(AttendanceError):
    """Raised when a student entry is rejected."""


class EmptyNameError(ValidationError):
    def __init__(self):
        super().__init__("empty name")


class InvalidCharacterError(ValidationError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid character: {char!r}")


class WrongLengthError(ValidationError):
    def __init__(self, actual_count: int):
        self.actual_count = actual_count
        super().__init__(
            f"wrong length: expected {DAYS_IN_WINDOW} days, got {actual_count}"
        )


class InputFormatError(ValidationError):
    """Raised when a raw input line or threshold value cannot be parsed."""


class EmptyRosterError(AttendanceError):
    def __init__(self):
        super().__init__("cannot report on an empty roster")
