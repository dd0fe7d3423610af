"""Interactive console entry point for the Classroom Attendance Analyzer."""

import argparse
import logging
import sys
from typing import Callable, Optional

from colorama import init, Fore, Style

from config.defaults import (
    DAYS_IN_WINDOW, DONE_COMMAND, PROMPT,
    DEFAULT_ABSENCE_THRESHOLD_PCT, DEFAULT_MIN_STREAK,
)
from components.console_report import format_report
from data.loader import (
    split_input_line, parse_absence_threshold, parse_min_streak,
    load_path, parse_roster,
)
from data.validator import validate_roster
from engine.roster import AttendanceRoster
from models.errors import EmptyRosterError, ValidationError

logger = logging.getLogger(__name__)


class ConsoleSession:
    """Owns one roster and drives it from line-oriented input.

    `read` behaves like input(): it takes a prompt and raises EOFError when
    input is exhausted. `write` behaves like print().
    """

    def __init__(
        self,
        roster: Optional[AttendanceRoster] = None,
        read: Callable[[str], str] = input,
        write: Callable[..., None] = print,
        color: bool = True,
    ):
        self.roster = roster if roster is not None else AttendanceRoster()
        self.read = read
        self.write = write
        self.color = color

    def _paint(self, text: str, shade: str) -> str:
        return f"{shade}{text}{Style.RESET_ALL}" if self.color else text

    def error(self, message: str):
        self.write(self._paint(f"Error: {message}", Fore.RED))

    def print_banner(self):
        self.write(f"Enter students and their {DAYS_IN_WINDOW}-day attendance records (Y/N or 1/0 format)")
        self.write(f"Format: StudentName YNNYNY... ({DAYS_IN_WINDOW} characters)")
        self.write(f"Enter '{DONE_COMMAND}' when finished\n")

    def handle_line(self, line: str) -> bool:
        """Process one entry line. Returns False once the user is done."""
        line = line.strip()
        if line.lower() == DONE_COMMAND:
            return False
        if not line:
            return True
        try:
            name, raw = split_input_line(line)
            self.roster.add(name, raw)
        except ValidationError as e:
            logger.info("Rejected entry %r: %s", line, e)
            self.error(str(e))
        return True

    def collect_students(self):
        self.print_banner()
        while True:
            try:
                line = self.read(PROMPT)
            except EOFError:
                break
            if not self.handle_line(line):
                break
        logger.debug("Collected %d students", len(self.roster))

    def _ask(self, prompt: str, parse, default):
        while True:
            try:
                text = self.read(prompt)
            except EOFError:
                logger.warning("No value for %r, using default %s", prompt.strip(), default)
                return default
            try:
                return parse(text)
            except ValidationError as e:
                self.error(str(e))

    def ask_threshold(self) -> float:
        return self._ask(
            "Maximum acceptable absence rate (0-100%): ",
            parse_absence_threshold,
            DEFAULT_ABSENCE_THRESHOLD_PCT / 100.0,
        )

    def ask_min_streak(self) -> int:
        return self._ask(
            "Minimum acceptable attendance streak (days): ",
            parse_min_streak,
            DEFAULT_MIN_STREAK,
        )

    def ask_criteria(self, absence_threshold: Optional[float] = None,
                     min_streak: Optional[int] = None):
        """Prompt only for the criteria not already given."""
        if absence_threshold is not None and min_streak is not None:
            return absence_threshold, min_streak
        self.write("\nSet defaulter criteria:")
        if absence_threshold is None:
            absence_threshold = self.ask_threshold()
        if min_streak is None:
            min_streak = self.ask_min_streak()
        return absence_threshold, min_streak

    def print_report(self, absence_threshold: float, min_streak: int) -> int:
        try:
            result = self.roster.report(absence_threshold, min_streak)
        except EmptyRosterError as e:
            self.error(str(e))
            return 1
        for line in format_report(result, color=self.color):
            self.write(line)
        return 0

    def run(self, absence_threshold: Optional[float] = None,
            min_streak: Optional[int] = None, interactive: bool = True) -> int:
        if interactive:
            self.collect_students()
        absence_threshold, min_streak = self.ask_criteria(absence_threshold, min_streak)
        return self.print_report(absence_threshold, min_streak)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flag attendance defaulters in a 30-day class roster.")
    parser.add_argument("--input", help="CSV/XLSX roster with 'Student Name' and 'Attendance' columns")
    parser.add_argument("--threshold", help="Maximum acceptable absence rate, in percent (0-100)")
    parser.add_argument("--min-streak", help="Minimum acceptable attendance streak, in days")
    parser.add_argument("--batch", action="store_true", help="Skip interactive student entry")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not args.no_color:
        init()

    try:
        threshold = parse_absence_threshold(args.threshold) if args.threshold is not None else None
        min_streak = parse_min_streak(args.min_streak) if args.min_streak is not None else None
    except ValidationError as e:
        parser.error(str(e))

    session = ConsoleSession(color=not args.no_color)

    if args.input:
        try:
            df = load_path(args.input)
        except Exception as e:
            session.error(f"could not read {args.input}: {e}")
            return 1
        check = validate_roster(df, file_label=args.input)
        for w in check.warnings:
            session.write(w)
        if not check.is_valid:
            for e in check.errors:
                session.error(e)
            return 1
        _, row_errors = parse_roster(df, session.roster)
        for e in row_errors:
            session.error(e)

    return session.run(threshold, min_streak, interactive=not args.batch)


if __name__ == "__main__":
    sys.exit(main())
