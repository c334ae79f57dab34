"""Domain entities for fetch runs shown to users."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .teams import TeamStat


@dataclass(slots=True)
class RunRecord:
    """Display state of one enqueue/poll/merge run."""

    run_id: str
    status: str = "pending"
    busy: bool = False
    items: list[TeamStat] = field(default_factory=list)
    error: str | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
