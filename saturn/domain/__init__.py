"""Domain layer definitions."""

from .runs import RunRecord
from .teams import TeamStat

__all__ = [
    "RunRecord",
    "TeamStat",
]
