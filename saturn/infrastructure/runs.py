"""Infrastructure layer for run state shown to users."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol

from saturn.domain import RunRecord, TeamStat


class RunRepository(Protocol):
    """Storage contract for run display state."""

    def next_run_id(self) -> str: ...

    def create_run(self, run_id: str) -> RunRecord: ...

    def get_run(self, run_id: str) -> RunRecord | None: ...

    def list_runs(self) -> list[RunRecord]: ...

    def set_busy(self, run_id: str, busy: bool) -> None: ...

    def save_results(self, run_id: str, items: list[TeamStat]) -> None: ...

    def save_error(self, run_id: str, message: str) -> None: ...


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRunRepository:
    """Simple in-memory repository for the service process and tests."""

    def __init__(self) -> None:
        self._runs: dict[str, RunRecord] = {}
        self._run_counter = 0

    def _ensure_run(self, run_id: str) -> RunRecord:
        run = self._runs.get(run_id)
        if run is None:
            run = RunRecord(run_id=run_id)
            self._runs[run_id] = run
        return run

    def next_run_id(self) -> str:
        self._run_counter += 1
        return f"run-{self._run_counter:05d}"

    def create_run(self, run_id: str) -> RunRecord:
        return self._ensure_run(run_id)

    def get_run(self, run_id: str) -> RunRecord | None:
        return self._runs.get(run_id)

    def list_runs(self) -> list[RunRecord]:
        return list(reversed(self._runs.values()))

    def set_busy(self, run_id: str, busy: bool) -> None:
        run = self._ensure_run(run_id)
        run.busy = busy
        if busy:
            run.status = "running"
            run.started_at = _now()
        else:
            run.finished_at = _now()

    def save_results(self, run_id: str, items: list[TeamStat]) -> None:
        run = self._ensure_run(run_id)
        run.items = list(items)
        run.status = "completed"
        run.error = None

    def save_error(self, run_id: str, message: str) -> None:
        run = self._ensure_run(run_id)
        run.items = []
        run.status = "failed"
        run.error = message
