from __future__ import annotations

import asyncio
import logging

from saturn.core.retry import SleepFunc, retry_on_condition
from saturn.domain import TeamStat
from saturn.infrastructure import TeamsApiClient

logger = logging.getLogger(__name__)


def _not_ready(result: list[TeamStat] | None) -> bool:
    return not result


class ResultPoller:
    """Fetches processed rows for a correlation id, waiting for them to appear."""

    def __init__(
        self,
        api: TeamsApiClient,
        *,
        max_retries: int = 3,
        delay_seconds: float = 5.0,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self._api = api
        self._max_retries = max_retries
        self._delay_seconds = delay_seconds
        self._sleep = sleep

    async def poll(self, correlation_id: str) -> list[TeamStat]:
        """Return the job's rows, or an empty list if none arrived in time.

        A transport failure on the final attempt propagates.
        """

        async def fetch() -> list[TeamStat]:
            return await self._api.get_processed_data(correlation_id)

        result = await retry_on_condition(
            fetch,
            _not_ready,
            self._max_retries,
            self._delay_seconds,
            sleep=self._sleep,
        )
        if not result:
            logger.warning(
                "No processed data for correlation_id=%s after %d retries",
                correlation_id,
                self._max_retries,
            )
        return result or []
