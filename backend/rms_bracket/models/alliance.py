from enum import Enum
from typing import List, Optional

from rms_bracket.models.base import BracketModel


class AllianceColor(str, Enum):
    RED = "RED"
    BLUE = "BLUE"


class TeamAlliance(BracketModel):
    """One team's seat within an alliance."""

    team_id: str
    team_number: Optional[str] = None
    team_name: Optional[str] = None
    # Not range-checked here: bad station layouts are reported by the validator
    station_position: int
    is_surrogate: bool = False
    id: Optional[str] = None


class Alliance(BracketModel):
    id: Optional[str] = None
    color: AllianceColor
    score: Optional[float] = None
    auto_score: Optional[float] = None
    drive_score: Optional[float] = None
    team_alliances: List[TeamAlliance] = []  # empty = unresolved (TBD)
