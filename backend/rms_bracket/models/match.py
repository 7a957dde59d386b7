from enum import Enum
from typing import List, Optional, Union

from rms_bracket.models.alliance import Alliance
from rms_bracket.models.base import BracketModel


class MatchStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class WinningAlliance(str, Enum):
    RED = "RED"
    BLUE = "BLUE"
    TIE = "TIE"


class Match(BracketModel):
    id: str
    match_number: Optional[Union[int, str]] = None
    # Kept as a plain string so unknown backend states survive parsing
    status: str = MatchStatus.PENDING.value
    round_number: Optional[int] = None
    bracket_slot: Optional[int] = None
    record_bucket: Optional[str] = None  # Swiss record, e.g. "2-0"
    winning_alliance: Optional[WinningAlliance] = None
    alliances: List[Alliance] = []

    # Advancement graph edges (plain id references, may dangle)
    feeds_into_match_id: Optional[str] = None
    loser_feeds_into_match_id: Optional[str] = None

    scheduled_time: Optional[str] = None
    start_time: Optional[str] = None
