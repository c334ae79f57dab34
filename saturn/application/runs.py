"""Application service that starts runs and exposes their state."""
from __future__ import annotations

import asyncio
import logging

from saturn.core.config import Settings
from saturn.core.retry import SleepFunc
from saturn.domain import RunRecord
from saturn.infrastructure import RunRepository, TeamsApiClient

from .display import RunDisplay
from .orchestrator import TeamDataOrchestrator
from .poller import ResultPoller
from .submitter import JobSubmitter

logger = logging.getLogger(__name__)


def build_orchestrator(
    api: TeamsApiClient,
    settings: Settings,
    *,
    sleep: SleepFunc = asyncio.sleep,
) -> TeamDataOrchestrator:
    """Wire submitter, poller and orchestrator from settings."""

    poller = ResultPoller(
        api,
        max_retries=settings.poll_max_retries,
        delay_seconds=settings.poll_delay_seconds,
        sleep=sleep,
    )
    return TeamDataOrchestrator(
        JobSubmitter(api),
        poller,
        settings.team_numbers,
        run_timeout_seconds=settings.run_timeout_seconds,
    )


class RunService:
    """Starts orchestration runs as tasks and keeps a handle to each."""

    def __init__(self, repository: RunRepository, orchestrator: TeamDataOrchestrator) -> None:
        self._repository = repository
        self._orchestrator = orchestrator
        self._tasks: dict[str, asyncio.Task] = {}

    def start_run(self) -> str:
        """Schedule a run on the running event loop and return its id."""

        run_id = self._repository.next_run_id()
        self._repository.create_run(run_id)
        display = RunDisplay(self._repository, run_id)
        task = asyncio.create_task(self._orchestrator.run(display), name=run_id)
        task.add_done_callback(lambda _: self._tasks.pop(run_id, None))
        self._tasks[run_id] = task
        logger.info("Started run %s", run_id)
        return run_id

    async def wait(self, run_id: str) -> RunRecord | None:
        """Wait for ``run_id`` to finish and return its final state."""

        task = self._tasks.get(run_id)
        if task is not None:
            await task
            logger.info("Run %s finished", run_id)
        return self._repository.get_run(run_id)

    def get_run(self, run_id: str) -> RunRecord | None:
        return self._repository.get_run(run_id)

    def list_runs(self) -> list[RunRecord]:
        return self._repository.list_runs()

