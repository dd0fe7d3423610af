"""Tests for the interactive console session."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from cli import ConsoleSession, main


def make_session(lines):
    feed = iter(lines)
    out = []

    def read(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    session = ConsoleSession(read=read, write=lambda *a: out.append(" ".join(str(x) for x in a)), color=False)
    return session, out


class TestConsoleSession:
    def test_full_session(self):
        session, out = make_session([
            "Alice " + "Y" * 30,
            "Bob " + "N" * 30,
            "done",
            "20",
            "5",
        ])
        assert session.run() == 0
        assert len(session.roster) == 2
        assert any(l.startswith("Bob") and l.endswith("[DEFAULTER]") for l in out)
        assert "Defaulters: 1 (50%)" in out

    def test_bad_lines_do_not_abort(self):
        session, out = make_session([
            "Alice",
            "Bob " + "Y" * 29,
            "Carl " + "YX" * 15,
            "Dana " + "1" * 30,
            "DONE",
        ])
        session.collect_students()
        assert [r.name for r in session.roster] == ["Dana"]
        errors = [l for l in out if l.startswith("Error:")]
        assert len(errors) == 3
        assert "Invalid format" in errors[0]

    def test_criteria_reprompted(self):
        session, out = make_session(["abc", "150", "30", "-2", "4"])
        assert session.ask_criteria() == (0.30, 4)
        assert len([l for l in out if l.startswith("Error:")]) == 3

    def test_eof_ends_entry(self):
        session, _ = make_session(["Alice " + "Y" * 30])
        session.collect_students()
        assert len(session.roster) == 1

    def test_empty_roster(self):
        session, out = make_session(["done"])
        assert session.run(0.2, 5) == 1
        assert any("empty roster" in l for l in out)

    def test_given_criteria_skip_prompts(self):
        session, out = make_session(["Alice " + "Y" * 30, "done"])
        assert session.run(0.1, 3) == 0
        assert not any("Set defaulter criteria" in l for l in out)

    def test_only_threshold_given(self):
        session, out = make_session(["Alice " + "YN" * 15, "done", "2"])
        assert session.run(0.6, None) == 0
        assert not any(l.startswith("Error:") for l in out)
        # threshold kept at 60%, streak of 1 is below the 2 typed in
        assert any(l.startswith("Alice") and l.endswith("[DEFAULTER]") for l in out)

    def test_only_min_streak_given(self):
        session, out = make_session(["Alice " + "YN" * 15, "done", "60"])
        assert session.run(None, 1) == 0
        assert any(l.startswith("Alice") and not l.endswith("[DEFAULTER]") for l in out)

    def test_only_missing_criterion_prompted(self):
        prompts = []
        feed = iter(["done", "7"])

        def read(prompt):
            prompts.append(prompt)
            return next(feed)

        session = ConsoleSession(read=read, write=lambda *a: None, color=False)
        session.roster.add("Alice", "Y" * 30)
        assert session.run(0.25, None) == 0
        assert prompts == ["> ", "Minimum acceptable attendance streak (days): "]


class TestMain:
    def test_batch_from_file(self, tmp_path, capsys):
        path = tmp_path / "roster.csv"
        path.write_text("Student Name,Attendance\nAlice," + "Y" * 30 + "\nBob," + "N" * 30 + "\n")
        code = main(["--input", str(path), "--threshold", "25", "--min-streak", "5",
                     "--batch", "--no-color"])
        assert code == 0
        printed = capsys.readouterr().out
        assert "Total Students: 2" in printed
        assert "Defaulters: 1 (50%)" in printed

    def test_invalid_file_columns(self, tmp_path):
        path = tmp_path / "roster.csv"
        path.write_text("Name,Days\nAlice,YYY\n")
        assert main(["--input", str(path), "--threshold", "25", "--min-streak", "5",
                     "--batch", "--no-color"]) == 1

    def test_unreadable_xlsx(self, tmp_path):
        path = tmp_path / "roster.xlsx"
        path.write_text("Student Name,Attendance\nAlice," + "Y" * 30 + "\n")
        assert main(["--input", str(path), "--threshold", "25", "--min-streak", "5",
                     "--batch", "--no-color"]) == 1

    def test_xls_not_supported(self, tmp_path, capsys):
        path = tmp_path / "roster.xls"
        path.write_text("Student Name,Attendance\nAlice," + "Y" * 30 + "\n")
        assert main(["--input", str(path), "--threshold", "25", "--min-streak", "5",
                     "--batch", "--no-color"]) == 1
        assert "Unsupported file format" in capsys.readouterr().out
