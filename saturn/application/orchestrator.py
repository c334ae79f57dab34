"""Enqueue, poll and merge team data for every configured team."""
from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from saturn.core.merge import merge_team_stats
from saturn.domain import TeamStat

from .display import TeamDataDisplay
from .poller import ResultPoller
from .submitter import JobSubmitter

logger = logging.getLogger(__name__)


class TeamDataOrchestrator:
    """Runs the submit, poll and merge stages one after another.

    Collaborators are passed in so tests can supply fakes.
    """

    def __init__(
        self,
        submitter: JobSubmitter,
        poller: ResultPoller,
        team_numbers: Iterable[int] = range(1, 33),
        *,
        run_timeout_seconds: float | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._submitter = submitter
        self._poller = poller
        self._team_numbers = tuple(team_numbers)
        self._run_timeout_seconds = run_timeout_seconds
        self._logger = log or logger

    async def enqueue_all_teams(self) -> dict[int, str]:
        correlation_ids: dict[int, str] = {}
        for team_number in self._team_numbers:
            correlation_id = await self._submitter.submit(team_number)
            if not correlation_id:
                # an empty id is skipped, matching the upstream client
                self._logger.warning("Team %d returned no correlation id; skipping", team_number)
                continue
            correlation_ids[team_number] = correlation_id
        return correlation_ids

    async def fetch_all_processed_data(self, correlation_ids: dict[int, str]) -> list[TeamStat]:
        collected: list[TeamStat] = []
        for correlation_id in correlation_ids.values():
            fetched = await self._poller.poll(correlation_id)
            if fetched:
                collected.extend(fetched)
        return collected

    async def fetch_team_data(self) -> list[TeamStat]:
        """Run all stages and return the merged records; faults propagate."""

        correlation_ids = await self.enqueue_all_teams()
        self._logger.info(
            "Enqueued %d of %d teams",
            len(correlation_ids),
            len(self._team_numbers),
        )
        collected = await self.fetch_all_processed_data(correlation_ids)
        return merge_team_stats(collected)

    async def run(self, display: TeamDataDisplay) -> list[TeamStat] | None:
        """Fetch team data and hand the outcome to ``display``.

        Returns the published records, or ``None`` when the run failed and
        only an error message was shown.
        """

        display.set_busy(True)
        try:
            if self._run_timeout_seconds is not None:
                records = await asyncio.wait_for(self.fetch_team_data(), self._run_timeout_seconds)
            else:
                records = await self.fetch_team_data()
        except Exception as exc:
            display.show_error(f"An error occurred: {str(exc) or type(exc).__name__}")
            self._logger.exception("Failed to fetch and display team data.")
            return None
        else:
            display.show_results(records)
            self._logger.info("Published %d team record(s)", len(records))
            return records
        finally:
            display.set_busy(False)
