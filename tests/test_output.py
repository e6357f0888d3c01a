"""Tests for output.py - text, CSV and JSON formatting."""

import csv
import json
from io import StringIO

from courtrota.models import CourtAssignment, RoundResult, ScheduleResult
from courtrota.output import (
    format_round, format_schedule, format_schedule_csv, format_schedule_json,
    format_summary, write_schedule,
)


def _result():
    return ScheduleResult(
        rounds=(
            RoundResult(1, 2, (
                CourtAssignment(1, ("A", "B"), ("C", "D")),
                CourtAssignment(2, ("E", "F"), ("G", "H")),
            ), ("I", "J")),
            RoundResult(2, 2, (
                CourtAssignment(1, ("I", "A"), ("J", "C")),
                CourtAssignment(2, ("B", "D"), ("E", "F")),
            ), ("G", "H")),
        ),
        seed=42, max_played_minus_min_played=0,
        total_consecutive_rest_exceptions=0,
    )


class TestFormatRound:
    def test_lines(self):
        text = format_round(_result().rounds[0])
        assert text.splitlines() == [
            "Round 1/2",
            "  Court 1: A, B vs C, D",
            "  Court 2: E, F vs G, H",
            "  Rest: I, J",
        ]

    def test_no_rest_line_when_everyone_plays(self):
        rnd = RoundResult(1, 1, (CourtAssignment(1, ("A",), ("B",)),))
        assert "Rest" not in format_round(rnd)


class TestFormatSchedule:
    def test_summary(self):
        assert format_summary(_result()) == "Seed: 42  Spread: 0  Rest exceptions: 0"

    def test_title_and_rounds(self):
        text = format_schedule(_result(), title="Tuesday doubles")
        assert "TUESDAY DOUBLES" in text
        assert "Round 2/2" in text
        assert "Rest: G, H" in text

    def test_default_title(self):
        assert "COURT SCHEDULE" in format_schedule(_result())


class TestFormatCsv:
    def test_rows(self):
        rows = list(csv.reader(StringIO(format_schedule_csv(_result()))))
        assert rows[0] == ["Round", "Court", "Team_A", "Team_B", "Rest"]
        assert rows[1] == ["1", "1", "A / B", "C / D", "I / J"]
        assert rows[2] == ["1", "2", "E / F", "G / H", ""]
        assert len(rows) == 5


class TestWriteSchedule:
    def test_writes_files(self, tmp_path):
        out = tmp_path / "out"
        written = write_schedule(_result(), output_prefix=str(out))
        names = sorted(p.name for p in written)
        assert names == ["schedule.csv", "schedule.json", "schedule.txt"]
        for p in written:
            assert p.exists()

        data = json.loads((out / "schedule.json").read_text())
        assert data["seed"] == 42
        assert ScheduleResult.from_dict(data) == _result()

    def test_json_text(self):
        text = format_schedule_json(_result())
        assert text.endswith("\n")
        assert json.loads(text)["rounds"][1]["rests"] == ["G", "H"]
