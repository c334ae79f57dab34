from __future__ import annotations

import io
from datetime import datetime
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from saturn.application import ConsoleDisplay
from saturn.core.merge import merge_team_stats
from saturn.domain import TeamStat


def test_merge_sorts_by_date_and_keeps_first_duplicate():
    records = [
        TeamStat("Bears", "6", "24", datetime(2024, 1, 3)),
        TeamStat("Lions", "8", "10", datetime(2024, 1, 1)),
        TeamStat("Bears", "6", "99", datetime(2024, 1, 3)),
        TeamStat("Lions", "8", "31", datetime(2024, 1, 1)),
        TeamStat("Packers", "12", "7", datetime(2024, 1, 2)),
    ]

    merged = merge_team_stats(records)

    assert [(item.team_name, item.team_score) for item in merged] == [
        ("Lions", "10"),
        ("Packers", "7"),
        ("Bears", "24"),
    ]


def test_same_date_different_teams_are_both_kept_in_input_order():
    records = [
        TeamStat("Packers", "12", "7", datetime(2024, 1, 1)),
        TeamStat("Bears", "6", "24", datetime(2024, 1, 1)),
        TeamStat("Bears", "7", "24", datetime(2024, 1, 1)),
    ]

    assert merge_team_stats(records) == records


def test_merge_of_nothing_is_empty():
    assert merge_team_stats([]) == []


def test_console_display_prints_table():
    stream = io.StringIO()
    display = ConsoleDisplay(stream)

    display.set_busy(True)
    display.show_results([TeamStat("Bears", "6", "24", datetime(2024, 1, 2))])
    display.set_busy(False)

    lines = stream.getvalue().splitlines()
    assert lines[0] == "Fetching team data..."
    assert lines[1].split() == ["Team", "Number", "Score", "Game", "date"]
    assert lines[2].split() == ["Bears", "6", "24", "2024-01-02T00:00:00"]
    assert lines[3] == "1 record(s)"
