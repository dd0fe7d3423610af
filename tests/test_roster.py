"""Tests for the roster and its report pass."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from engine.roster import AttendanceRoster
from models.errors import EmptyRosterError, WrongLengthError, EmptyNameError


def make_roster(entries):
    roster = AttendanceRoster()
    for name, raw in entries:
        roster.add(name, raw)
    return roster


class TestAdd:
    def test_appends_in_order(self):
        roster = make_roster([("Zoe", "Y" * 30), ("Adam", "N" * 30)])
        assert [r.name for r in roster] == ["Zoe", "Adam"]
        assert len(roster) == 2

    def test_duplicates_kept(self):
        roster = make_roster([("Sam", "Y" * 30), ("Sam", "N" * 30)])
        assert len(roster) == 2

    def test_rejected_entry_not_added(self):
        roster = make_roster([("Sam", "Y" * 30)])
        with pytest.raises(WrongLengthError):
            roster.add("Kim", "Y" * 29)
        with pytest.raises(EmptyNameError):
            roster.add(" ", "Y" * 30)
        assert len(roster) == 1

    def test_records_view_is_read_only(self):
        roster = make_roster([("Sam", "Y" * 30)])
        assert isinstance(roster.records, tuple)


class TestReport:
    def test_empty_roster_raises(self):
        with pytest.raises(EmptyRosterError):
            AttendanceRoster().report(0.2, 5)

    def test_sorted_by_ordinal_name(self):
        roster = make_roster([("bob", "Y" * 30), ("Carl", "Y" * 30), ("Alice", "Y" * 30)])
        result = roster.report(0.2, 5)
        # upper case sorts before lower case
        assert [r.record.name for r in result.rows] == ["Alice", "Carl", "bob"]

    def test_sort_is_stable_for_duplicate_names(self):
        roster = make_roster([("Sam", "N" * 30), ("Amy", "Y" * 30), ("Sam", "Y" * 30)])
        result = roster.report(0.2, 5)
        sams = [r.record for r in result.rows if r.record.name == "Sam"]
        assert sams[0].absence_rate == 1.0
        assert sams[1].absence_rate == 0.0

    def test_aggregates(self):
        roster = make_roster([
            ("A", "Y" * 30),                 # rate 0, max 30
            ("B", "N" * 30),                 # rate 1, max 0
            ("C", "N" * 6 + "Y" * 24),       # rate 0.2, max 24
            ("D", "YN" * 15),                # rate 0.5, max 1
        ])
        result = roster.report(0.25, 5)
        assert result.total_students == 4
        assert [r.is_defaulter for r in result.rows] == [False, True, False, True]
        assert result.defaulter_count == 2
        assert result.defaulter_percentage == pytest.approx(0.5)
        assert result.overall_absence_rate == pytest.approx((0 + 1 + 0.2 + 0.5) / 4)
        assert result.avg_max_streak == pytest.approx((30 + 0 + 24 + 1) / 4)
        assert [r.record.name for r in result.defaulters] == ["B", "D"]

    def test_avg_max_streak_not_rounded(self):
        roster = make_roster([("A", "Y" * 30), ("B", "N" * 29 + "Y")])
        assert roster.report(0.5, 0).avg_max_streak == 15.5

    def test_reasons_only_for_defaulters(self):
        roster = make_roster([("A", "Y" * 30), ("B", "N" * 30)])
        result = roster.report(0.1, 3)
        ok, flagged = result.rows
        assert ok.reasons == []
        assert len(flagged.reasons) == 2

    def test_report_reflects_later_additions(self):
        roster = make_roster([("A", "Y" * 30)])
        assert roster.report(0.1, 3).defaulter_count == 0
        roster.add("B", "N" * 30)
        assert roster.report(0.1, 3).defaulter_count == 1

    def test_thresholds_carried_on_result(self):
        result = make_roster([("A", "Y" * 30)]).report(0.3, 7)
        assert result.absence_threshold == 0.3
        assert result.min_streak == 7
