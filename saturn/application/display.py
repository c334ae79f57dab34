"""Receivers for run progress, results and errors."""
from __future__ import annotations

import sys
from typing import Protocol, TextIO

from saturn.domain import TeamStat
from saturn.infrastructure import RunRepository


class TeamDataDisplay(Protocol):
    """Contract for whatever presents a run to the user."""

    def set_busy(self, busy: bool) -> None: ...

    def show_results(self, items: list[TeamStat]) -> None: ...

    def show_error(self, message: str) -> None: ...


class RunDisplay:
    """Writes run state into a repository read by the HTTP routes."""

    def __init__(self, repository: RunRepository, run_id: str) -> None:
        self._repository = repository
        self.run_id = run_id

    def set_busy(self, busy: bool) -> None:
        self._repository.set_busy(self.run_id, busy)

    def show_results(self, items: list[TeamStat]) -> None:
        self._repository.save_results(self.run_id, items)

    def show_error(self, message: str) -> None:
        self._repository.save_error(self.run_id, message)


class ConsoleDisplay:
    """Prints results as a plain table."""

    COLUMNS = ("Team", "Number", "Score", "Game date")

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def set_busy(self, busy: bool) -> None:
        if busy:
            print("Fetching team data...", file=self._stream)

    def show_results(self, items: list[TeamStat]) -> None:
        rows = [
            (item.team_name, item.team_number, item.team_score, item.game_date.isoformat())
            for item in items
        ]
        widths = [len(column) for column in self.COLUMNS]
        for row in rows:
            widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

        def render(cells: tuple[str, ...]) -> str:
            return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

        print(render(self.COLUMNS), file=self._stream)
        for row in rows:
            print(render(row), file=self._stream)
        print(f"{len(rows)} record(s)", file=self._stream)

    def show_error(self, message: str) -> None:
        print(message, file=self._stream)
