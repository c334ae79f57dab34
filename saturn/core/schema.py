from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from saturn.domain import TeamStat


class EnqueueTeamRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team_number: int = Field(alias="TeamNumber")


class EnqueueTeamResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    correlation_id: str | None = Field(default=None, alias="correlationId")


class TeamStatPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    team_name: str = Field(alias="teamName")
    team_number: str = Field(alias="teamNumber")
    team_score: str = Field(alias="teamScore")
    game_date: datetime = Field(alias="gameDate")

    @field_validator("game_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # naive and offset-aware dates must stay comparable when merged
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def to_domain(self) -> TeamStat:
        return TeamStat(
            team_name=self.team_name,
            team_number=self.team_number,
            team_score=self.team_score,
            game_date=self.game_date,
        )

    @classmethod
    def from_domain(cls, stat: TeamStat) -> "TeamStatPayload":
        return cls(
            team_name=stat.team_name,
            team_number=stat.team_number,
            team_score=stat.team_score,
            game_date=stat.game_date,
        )


ProcessedDataPayload = TypeAdapter(list[TeamStatPayload] | None)
