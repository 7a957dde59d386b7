from rms_bracket.models.alliance import Alliance, AllianceColor, TeamAlliance
from rms_bracket.models.bracket import BracketSnapshot
from rms_bracket.models.match import Match, MatchStatus, WinningAlliance
from rms_bracket.models.structure import (
    EliminationStructure,
    RecordBucket,
    StageRound,
    StageStructure,
    StandardStructure,
    SwissStructure,
)

__all__ = [
    "Alliance",
    "AllianceColor",
    "TeamAlliance",
    "Match",
    "MatchStatus",
    "WinningAlliance",
    "StageRound",
    "RecordBucket",
    "EliminationStructure",
    "SwissStructure",
    "StandardStructure",
    "StageStructure",
    "BracketSnapshot",
]
