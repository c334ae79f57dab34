"""Domain entities for team processing results."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class TeamStat:
    """A single processed game line returned for a team."""

    team_name: str
    team_number: str
    team_score: str
    game_date: datetime

    @property
    def identity(self) -> tuple[str, str, datetime]:
        return (self.team_name, self.team_number, self.game_date)
