"""
Bracket statistics and display hints.

Advisory metadata only: nothing computed here feeds back into validation.
The dashboard uses it to pick a renderer (single vs double elimination),
size columns, and decide which badges to show. Pixel sizing stays in the
UI layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from rms_bracket.models import (
    BracketSnapshot,
    EliminationStructure,
    MatchStatus,
    StandardStructure,
)

# Brackets estimated at this many teams or more get the center-final layout
CENTER_FINAL_MIN_TEAMS = 16


@dataclass
class BracketStats:
    total_matches: int
    completed_matches: int
    teams_per_alliance: int
    max_teams_in_match: int
    has_double_elimination: bool
    round_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalMatches": self.total_matches,
            "completedMatches": self.completed_matches,
            "teamsPerAlliance": self.teams_per_alliance,
            "maxTeamsInMatch": self.max_teams_in_match,
            "hasDoubleElimination": self.has_double_elimination,
            "roundCount": self.round_count,
        }


@dataclass
class BracketDisplayHints:
    show_alliance_size: bool
    show_bracket_type: bool
    round_count: int
    compact_mode: bool
    use_center_final_layout: bool
    progress: Optional[str]  # "completed/total" while the stage is still running

    def to_dict(self) -> Dict[str, Any]:
        return {
            "showAllianceSize": self.show_alliance_size,
            "showBracketType": self.show_bracket_type,
            "roundCount": self.round_count,
            "compactMode": self.compact_mode,
            "useCenterFinalLayout": self.use_center_final_layout,
            "progress": self.progress,
        }


def has_double_elimination(snapshot: BracketSnapshot) -> bool:
    """Elimination stage with at least one loser-path edge."""
    return isinstance(snapshot.structure, EliminationStructure) and any(
        m.loser_feeds_into_match_id for m in snapshot.matches
    )


def _round_count(snapshot: BracketSnapshot) -> int:
    if isinstance(snapshot.structure, StandardStructure):
        return max((m.round_number or 1 for m in snapshot.matches), default=0)
    return len(snapshot.structure.rounds)


def analyze_bracket(snapshot: BracketSnapshot) -> BracketStats:
    matches = snapshot.matches
    completed = sum(1 for m in matches if m.status == MatchStatus.COMPLETED)
    max_teams = max(
        (sum(len(a.team_alliances) for a in m.alliances) for m in matches),
        default=0,
    )

    return BracketStats(
        total_matches=len(matches),
        completed_matches=completed,
        teams_per_alliance=snapshot.teams_per_alliance,
        max_teams_in_match=max_teams,
        has_double_elimination=has_double_elimination(snapshot),
        round_count=_round_count(snapshot),
    )


def _estimated_team_count(snapshot: BracketSnapshot) -> int:
    """Rough field size used to choose between bracket layouts.

    Elimination: first-round match count. Other formats: matches with at
    least one resolved alliance. Either way, times two alliances of
    teams_per_alliance teams.
    """
    structure = snapshot.structure
    if isinstance(structure, EliminationStructure):
        seeded_matches = len(structure.rounds[0].matches) if structure.rounds else 0
    else:
        seeded_matches = sum(
            1 for m in snapshot.matches
            if any(a.team_alliances for a in m.alliances)
        )
    return seeded_matches * snapshot.teams_per_alliance * 2


def get_bracket_display_hints(snapshot: BracketSnapshot) -> BracketDisplayHints:
    stats = analyze_bracket(snapshot)
    progress = None
    if stats.completed_matches < stats.total_matches:
        progress = f"{stats.completed_matches}/{stats.total_matches}"

    return BracketDisplayHints(
        show_alliance_size=stats.teams_per_alliance > 2,
        show_bracket_type=stats.has_double_elimination,
        round_count=stats.round_count,
        compact_mode=True,
        use_center_final_layout=_estimated_team_count(snapshot) >= CENTER_FINAL_MIN_TEAMS,
        progress=progress,
    )
