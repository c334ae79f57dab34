from __future__ import annotations

import logging

from saturn.infrastructure import TeamsApiClient

logger = logging.getLogger(__name__)


class JobSubmitter:
    """Queues one team for server-side processing.

    Failures are not retried here; they abort the whole run.
    """

    def __init__(self, api: TeamsApiClient) -> None:
        self._api = api

    async def submit(self, team_number: int) -> str:
        correlation_id = await self._api.enqueue_team(team_number)
        logger.debug("Enqueued team %d correlation_id=%r", team_number, correlation_id)
        return correlation_id
