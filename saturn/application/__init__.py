"""Application services."""

from .display import ConsoleDisplay, RunDisplay, TeamDataDisplay
from .orchestrator import TeamDataOrchestrator
from .poller import ResultPoller
from .runs import RunService, build_orchestrator
from .submitter import JobSubmitter

__all__ = [
    "ConsoleDisplay",
    "JobSubmitter",
    "ResultPoller",
    "RunDisplay",
    "RunService",
    "TeamDataDisplay",
    "TeamDataOrchestrator",
    "build_orchestrator",
]
