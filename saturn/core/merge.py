from __future__ import annotations

from typing import Iterable

from saturn.domain import TeamStat


def merge_team_stats(records: Iterable[TeamStat]) -> list[TeamStat]:
    """Sort records by game date and drop repeated (name, number, date) rows.

    ``sorted`` is stable, so among duplicates the one collected first wins.
    """

    ordered = sorted(records, key=lambda record: record.game_date)
    merged: list[TeamStat] = []
    seen: set[tuple] = set()
    for record in ordered:
        key = record.identity
        if key in seen:
            continue
        seen.add(key)
        merged.append(record)
    return merged
