"""
Bracket normalizer: stage structure -> renderer-neutral columns/buckets.

One column per round for every format; Swiss stages also get one bucket
per win-loss record. Both Swiss views reference the same Match objects.

Match ids a round or bucket lists but the snapshot lacks are dropped from
that column; the consistency validator reports them.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

from rms_bracket.models import (
    BracketSnapshot,
    EliminationStructure,
    Match,
    StageRound,
    SwissStructure,
)
from rms_bracket.services.advancement_graph import numeric_match_number

logger = logging.getLogger(__name__)


@dataclass
class BracketColumn:
    key: str
    label: str
    matches: List[Match] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "matches": [_match_to_dict(m) for m in self.matches],
        }


@dataclass
class BracketBucket:
    record: str
    matches: List[Match] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"record": self.record, "matches": [_match_to_dict(m) for m in self.matches]}


@dataclass
class EliminationLayout:
    columns: List[BracketColumn]
    type: Literal["elimination"] = "elimination"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "columns": [c.to_dict() for c in self.columns]}


@dataclass
class SwissLayout:
    columns: List[BracketColumn]
    buckets: List[BracketBucket]
    type: Literal["swiss"] = "swiss"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "columns": [c.to_dict() for c in self.columns],
            "buckets": [b.to_dict() for b in self.buckets],
        }


@dataclass
class StandardLayout:
    columns: List[BracketColumn]
    type: Literal["standard"] = "standard"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "columns": [c.to_dict() for c in self.columns]}


NormalizedBracket = Union[EliminationLayout, SwissLayout, StandardLayout]


def _match_to_dict(match: Match) -> Dict[str, Any]:
    return match.model_dump(mode="json", by_alias=True)


def _resolve(match_ids: List[str], by_id: Dict[str, Match]) -> List[Match]:
    return [by_id[mid] for mid in match_ids if mid in by_id]


def _round_columns(
    rounds: List[StageRound],
    by_id: Dict[str, Match],
    use_round_labels: bool,
) -> List[BracketColumn]:
    columns = []
    for rnd in rounds:
        label = f"Round {rnd.round_number}"
        if use_round_labels and rnd.label:
            label = rnd.label
        columns.append(BracketColumn(
            key=f"round-{rnd.round_number}",
            label=label,
            matches=_resolve(rnd.matches, by_id),
        ))
    return columns


def _display_order_key(match: Match):
    number = numeric_match_number(match)
    slot = match.bracket_slot
    return (
        slot if slot is not None else float("inf"),
        number if number is not None else float("inf"),
        match.id,
    )


def _columns_from_round_numbers(matches: List[Match]) -> List[BracketColumn]:
    """Group matches by round_number (unset = round 1) when no rounds are listed."""
    by_round: Dict[int, List[Match]] = defaultdict(list)
    for match in matches:
        by_round[match.round_number or 1].append(match)

    return [
        BracketColumn(
            key=f"round-{round_number}",
            label=f"Round {round_number}",
            matches=sorted(by_round[round_number], key=_display_order_key),
        )
        for round_number in sorted(by_round)
    ]


def normalize_bracket(snapshot: Optional[BracketSnapshot]) -> Optional[NormalizedBracket]:
    """
    Convert a snapshot into the layout variant matching its structure type.

    Returns None only for a missing snapshot ("no bracket yet").
    """
    if snapshot is None:
        return None

    by_id = {m.id: m for m in snapshot.matches}
    structure = snapshot.structure

    if isinstance(structure, EliminationStructure):
        layout: NormalizedBracket = EliminationLayout(
            columns=_round_columns(structure.rounds, by_id, use_round_labels=True),
        )
    elif isinstance(structure, SwissStructure):
        layout = SwissLayout(
            columns=_round_columns(structure.rounds, by_id, use_round_labels=False),
            buckets=[
                BracketBucket(record=bucket.record, matches=_resolve(bucket.matches, by_id))
                for bucket in structure.buckets
            ],
        )
    else:
        if structure.rounds:
            columns = _round_columns(structure.rounds, by_id, use_round_labels=False)
        else:
            columns = _columns_from_round_numbers(snapshot.matches)
        layout = StandardLayout(columns=columns)

    logger.debug(
        "normalize_bracket: stage_id=%s type=%s columns=%d",
        snapshot.stage_id, layout.type, len(layout.columns)
    )
    return layout
