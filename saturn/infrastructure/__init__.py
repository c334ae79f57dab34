"""Infrastructure layer exports."""

from .runs import InMemoryRunRepository, RunRepository
from .teams_api import TeamsApiClient, TeamsApiError, TeamsPayloadError, TeamsTransportError

__all__ = [
    "InMemoryRunRepository",
    "RunRepository",
    "TeamsApiClient",
    "TeamsApiError",
    "TeamsPayloadError",
    "TeamsTransportError",
]
