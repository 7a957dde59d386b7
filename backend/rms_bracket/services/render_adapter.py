"""
Render adapter: bracket snapshot -> bracket-visualization match records.

The visualization component expects a fixed match/participant shape
(id, name, nextMatchId, nextLooserMatchId, tournamentRoundText, state,
participants). One record is produced per snapshot match, in snapshot
order; the component regroups them by round text itself.

Unresolved alliance slots get a synthetic participant named after the
upstream match that will fill them ("Winner of Match 3"), or a generic
"Red Alliance" / "Blue Alliance" placeholder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from rms_bracket.models import (
    Alliance,
    AllianceColor,
    BracketSnapshot,
    EliminationStructure,
    Match,
    MatchStatus,
    TeamAlliance,
)
from rms_bracket.services.advancement_graph import index_source_matches, pick_source_for_slot
from rms_bracket.services.bracket_stats import has_double_elimination

logger = logging.getLogger(__name__)

# Match status -> visualization match state
STATUS_MAP = {
    MatchStatus.COMPLETED.value: "DONE",
    MatchStatus.IN_PROGRESS.value: "SCORE_DONE",
    MatchStatus.PENDING.value: "NO_PARTY",
    MatchStatus.CANCELLED.value: "NO_SHOW",
}
DEFAULT_STATE = "NO_PARTY"

PARTICIPANT_PLAYED = "PLAYED"
TEAM_SEPARATOR = " • "
MAX_LISTED_TEAMS = 3

FALLBACK_NAMES = {
    AllianceColor.RED: "Red Alliance",
    AllianceColor.BLUE: "Blue Alliance",
}


@dataclass
class RenderParticipant:
    id: str
    name: str
    is_winner: bool
    status: Optional[str]
    result_text: Optional[str]
    alliance_color: str
    teams: List[Dict[str, Any]] = field(default_factory=list)
    score: Optional[float] = None
    auto_score: Optional[float] = None
    drive_score: Optional[float] = None
    team_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "isWinner": self.is_winner,
            "status": self.status,
            "resultText": self.result_text,
            "allianceColor": self.alliance_color,
            "teams": [dict(t) for t in self.teams],
            "score": self.score,
            "autoScore": self.auto_score,
            "driveScore": self.drive_score,
            "teamCount": self.team_count,
        }


@dataclass
class RenderMatch:
    id: str
    name: str
    next_match_id: Optional[str]
    tournament_round_text: str
    start_time: Optional[str]
    state: str
    participants: List[RenderParticipant]
    match_number: Optional[Union[int, str]]
    bracket_slot: Optional[int]
    teams_per_alliance: int
    # Only populated for double elimination; see to_dict
    next_looser_match_id: Optional[str] = None
    has_loser_path: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "nextMatchId": self.next_match_id,
            "tournamentRoundText": self.tournament_round_text,
            "startTime": self.start_time,
            "state": self.state,
            "participants": [p.to_dict() for p in self.participants],
            "matchNumber": self.match_number,
            "scheduledTime": self.start_time,
            "bracketSlot": self.bracket_slot,
            "teamsPerAlliance": self.teams_per_alliance,
        }
        # Consumers branch on the key's presence, so single-elimination
        # brackets must not carry it at all
        if self.has_loser_path:
            data["nextLooserMatchId"] = self.next_looser_match_id
        return data


# ─── Display names ───────────────────────────────────────────────────────

def format_team_display(team: TeamAlliance) -> str:
    if team.team_number and team.team_name:
        return f"{team.team_number} {team.team_name}"
    return team.team_number or team.team_name or f"Team {team.team_id}"


def format_alliance_name(alliance: Alliance, fallback: str, teams_per_alliance: int) -> str:
    teams = sorted(alliance.team_alliances, key=lambda t: t.station_position)
    parts = [p for p in (format_team_display(t) for t in teams) if p]
    if not parts:
        return fallback

    if teams_per_alliance > 2 and len(parts) > MAX_LISTED_TEAMS:
        shown = TEAM_SEPARATOR.join(parts[:MAX_LISTED_TEAMS])
        return f"{shown} +{len(parts) - MAX_LISTED_TEAMS} more"
    return TEAM_SEPARATOR.join(parts)


def _match_display_number(match: Match) -> Union[int, str]:
    if match.match_number is None or match.match_number == "":
        return match.id
    return match.match_number


# ─── Participants ────────────────────────────────────────────────────────

def _find_alliance(match: Match, color: AllianceColor) -> Optional[Alliance]:
    return next((a for a in match.alliances if a.color == color), None)


def _build_participant(
    match: Match,
    alliance: Optional[Alliance],
    color: AllianceColor,
    teams_per_alliance: int,
    source_match: Optional[Match],
) -> RenderParticipant:
    fallback = FALLBACK_NAMES[color]
    if alliance is None or not alliance.team_alliances:
        if source_match is not None:
            name = f"Winner of Match {_match_display_number(source_match)}"
        else:
            name = fallback
    else:
        name = format_alliance_name(alliance, fallback, teams_per_alliance)

    teams = []
    if alliance is not None:
        teams = [
            {
                "id": t.team_id,
                "teamNumber": t.team_number,
                "teamName": t.team_name,
                "stationPosition": t.station_position,
                "isSurrogate": t.is_surrogate,
                "displayName": format_team_display(t),
            }
            for t in alliance.team_alliances
        ]

    score = alliance.score if alliance is not None else None
    winning = match.winning_alliance.value if match.winning_alliance is not None else None
    return RenderParticipant(
        id=(alliance.id if alliance is not None and alliance.id else f"{match.id}-{color.value.lower()}"),
        name=name,
        is_winner=winning == color.value,
        status=PARTICIPANT_PLAYED if match.status == MatchStatus.COMPLETED else None,
        result_text=_format_score(score),
        alliance_color=color.value,
        teams=teams,
        score=score,
        auto_score=alliance.auto_score if alliance is not None else None,
        drive_score=alliance.drive_score if alliance is not None else None,
        team_count=len(teams),
    )


def _format_score(score: Optional[float]) -> Optional[str]:
    if score is None:
        return None
    if float(score).is_integer():
        return str(int(score))
    return str(score)


# ─── Round labels ────────────────────────────────────────────────────────

def _round_label_map(snapshot: BracketSnapshot) -> Dict[str, str]:
    """match id -> owning round's label (elimination only)."""
    labels: Dict[str, str] = {}
    if isinstance(snapshot.structure, EliminationStructure):
        for rnd in snapshot.structure.rounds:
            for match_id in rnd.matches:
                labels[match_id] = rnd.label or f"Round {rnd.round_number}"
    return labels


def format_match_title(match: Match, snapshot: BracketSnapshot) -> str:
    """Human-readable title such as "Semifinals - Match 5" or "1-1 - Match 12"."""
    base = f"Match {_match_display_number(match)}"

    structure = snapshot.structure
    if isinstance(structure, EliminationStructure) and match.round_number:
        rnd = next((r for r in structure.rounds if r.round_number == match.round_number), None)
        if rnd is not None and rnd.label:
            return f"{rnd.label} - {base}"

    if match.record_bucket:
        return f"{match.record_bucket} - {base}"
    return base


# ─── Public API ──────────────────────────────────────────────────────────

def to_render_matches(snapshot: BracketSnapshot) -> List[RenderMatch]:
    round_labels = _round_label_map(snapshot)
    sources_by_target = index_source_matches(snapshot)
    double_elim = has_double_elimination(snapshot)
    tpa = snapshot.teams_per_alliance

    render_matches = []
    for match in snapshot.matches:
        sources = sources_by_target.get(match.id, [])
        participants = []
        for color in (AllianceColor.RED, AllianceColor.BLUE):
            alliance = _find_alliance(match, color)
            source = None
            if alliance is None or not alliance.team_alliances:
                source = pick_source_for_slot(sources, color)
            participants.append(_build_participant(match, alliance, color, tpa, source))

        render_matches.append(RenderMatch(
            id=match.id,
            name=f"Match {_match_display_number(match)}",
            next_match_id=match.feeds_into_match_id,
            next_looser_match_id=match.loser_feeds_into_match_id if double_elim else None,
            has_loser_path=double_elim,
            tournament_round_text=round_labels.get(match.id, f"Round {match.round_number or 1}"),
            start_time=match.start_time or match.scheduled_time,
            state=STATUS_MAP.get(match.status, DEFAULT_STATE),
            participants=participants,
            match_number=match.match_number,
            bracket_slot=match.bracket_slot,
            teams_per_alliance=tpa,
        ))

    logger.debug(
        "to_render_matches: stage_id=%s matches=%d double_elim=%s",
        snapshot.stage_id, len(render_matches), double_elim
    )
    return render_matches


def split_double_elimination(render_matches: List[RenderMatch]) -> Dict[str, List[RenderMatch]]:
    """
    Partition matches into upper and lower brackets.

    A match with a loser path is upper; a match some loser feeds into is
    lower; anything else is upper.
    """
    loser_targets = {m.next_looser_match_id for m in render_matches if m.next_looser_match_id}
    upper: List[RenderMatch] = []
    lower: List[RenderMatch] = []
    for match in render_matches:
        if not match.next_looser_match_id and match.id in loser_targets:
            lower.append(match)
        else:
            upper.append(match)
    return {"upper": upper, "lower": lower}
