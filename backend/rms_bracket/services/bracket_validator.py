"""
Bracket Consistency Validator
=============================
Advisory structural checks over a bracket snapshot.

Nothing here raises. Every problem found becomes one human-readable issue
and the scan continues, so the dashboard can keep rendering a malformed
bracket while surfacing warnings.

Checks (per match, in match order):
  A) Exactly two alliances (otherwise skip B and C for that match)
  B) A resolved alliance seats exactly teams_per_alliance teams
  C) Station positions of a resolved alliance are exactly 1..N
Elimination structures only, per match, in match order:
  D) feeds_into_match_id points at an existing match
  E) loser_feeds_into_match_id points at an existing match
Every structure, after A–E:
  F) Round (then Swiss bucket) entries name existing matches
  G) Match ids are unique
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from rms_bracket.models import (
    Alliance,
    BracketSnapshot,
    EliminationStructure,
    Match,
    SwissStructure,
)

logger = logging.getLogger(__name__)


@dataclass
class BracketValidation:
    is_valid: bool
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "issues": list(self.issues)}


def match_label(match: Match, index: int) -> Union[int, str]:
    """Match number when present, otherwise its position in the snapshot."""
    if match.match_number is None or match.match_number == "":
        return index
    return match.match_number


# ─── A–C: alliance shape ─────────────────────────────────────────────────

def _check_alliance(alliance: Alliance, label: Union[int, str], teams_per_alliance: int) -> List[str]:
    issues: List[str] = []
    color = alliance.color.value
    team_count = len(alliance.team_alliances)
    if team_count == 0:
        return issues

    if team_count != teams_per_alliance:
        issues.append(
            f"Match {label}, {color} alliance has {team_count} teams, expected {teams_per_alliance}"
        )

    stations = sorted(t.station_position for t in alliance.team_alliances)
    if stations != list(range(1, team_count + 1)):
        issues.append(
            f"Match {label}, {color} alliance has invalid station positions: "
            f"{', '.join(str(s) for s in stations)}"
        )
    return issues


def _check_alliances(snapshot: BracketSnapshot) -> List[str]:
    issues: List[str] = []
    for index, match in enumerate(snapshot.matches):
        label = match_label(match, index)
        if len(match.alliances) != 2:
            issues.append(f"Match {label} does not have exactly 2 alliances")
            continue
        for alliance in match.alliances:
            issues.extend(_check_alliance(alliance, label, snapshot.teams_per_alliance))
    return issues


# ─── D–E: advancement links ──────────────────────────────────────────────

def _check_advancement_links(snapshot: BracketSnapshot) -> List[str]:
    issues: List[str] = []
    known_ids = {m.id for m in snapshot.matches}
    for index, match in enumerate(snapshot.matches):
        label = match_label(match, index)
        if match.feeds_into_match_id and match.feeds_into_match_id not in known_ids:
            issues.append(
                f"Match {label} advances to non-existent match {match.feeds_into_match_id}"
            )
        if match.loser_feeds_into_match_id and match.loser_feeds_into_match_id not in known_ids:
            issues.append(
                f"Match {label} loser advances to non-existent match {match.loser_feeds_into_match_id}"
            )
    return issues


# ─── F–G: structure references, duplicate ids ───────────────────────────

def _check_structure_references(snapshot: BracketSnapshot) -> List[str]:
    issues: List[str] = []
    known_ids = {m.id for m in snapshot.matches}
    structure = snapshot.structure
    for rnd in structure.rounds:
        for match_id in rnd.matches:
            if match_id not in known_ids:
                issues.append(
                    f"Round {rnd.round_number} references non-existent match {match_id}"
                )
    if isinstance(structure, SwissStructure):
        for bucket in structure.buckets:
            for match_id in bucket.matches:
                if match_id not in known_ids:
                    issues.append(
                        f"Bucket {bucket.record} references non-existent match {match_id}"
                    )
    return issues


def _check_duplicate_ids(snapshot: BracketSnapshot) -> List[str]:
    """One issue per repeated id, in order of first repeat."""
    seen = set()
    reported = set()
    issues: List[str] = []
    for match in snapshot.matches:
        if match.id in seen and match.id not in reported:
            issues.append(f"Duplicate match id {match.id}")
            reported.add(match.id)
        seen.add(match.id)
    return issues


def validate_bracket_consistency(snapshot: BracketSnapshot) -> BracketValidation:
    """Run every structural check and collect the issues in a stable order."""
    issues = _check_alliances(snapshot)
    if isinstance(snapshot.structure, EliminationStructure):
        issues.extend(_check_advancement_links(snapshot))
    issues.extend(_check_structure_references(snapshot))
    issues.extend(_check_duplicate_ids(snapshot))

    logger.debug(
        "validate_bracket_consistency: stage_id=%s matches=%d issues=%d",
        snapshot.stage_id, len(snapshot.matches), len(issues)
    )
    return BracketValidation(is_valid=not issues, issues=issues)
