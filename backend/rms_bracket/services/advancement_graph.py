"""
Advancement graph lookups: which upstream match feeds a given match.

The graph is never stored. It is rebuilt from feeds_into_match_id on every
call, so results depend only on the snapshot passed in.

Slot convention for a target match fed by two winners: the first source in
source order fills RED, the second fills BLUE. Swapping this silently swaps
displayed alliance identities.

Source order: when every source has a numeric match_number, by
(match number, id); otherwise by id alone. For two sources this is the
pairwise rule "numeric when both have numbers, else by id". More than two
incoming winner edges is undefined; the first two in source order are used.
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, List, Optional, Union

from rms_bracket.models import AllianceColor, BracketSnapshot, Match


def numeric_match_number(match: Match) -> Optional[float]:
    """Match number as a number, or None when absent or non-numeric ("QF1")."""
    value = match.match_number
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(value.strip())
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def sort_source_matches(sources: List[Match]) -> List[Match]:
    if all(numeric_match_number(m) is not None for m in sources):
        return sorted(sources, key=lambda m: (numeric_match_number(m), m.id))
    return sorted(sources, key=lambda m: m.id)


def index_source_matches(snapshot: BracketSnapshot) -> Dict[str, List[Match]]:
    """target match id -> winner-path source matches, in source order."""
    by_target: Dict[str, List[Match]] = defaultdict(list)
    for match in snapshot.matches:
        if match.feeds_into_match_id:
            by_target[match.feeds_into_match_id].append(match)
    return {target: sort_source_matches(sources) for target, sources in by_target.items()}


def pick_source_for_slot(
    sources: List[Match],
    alliance_color: Union[AllianceColor, str],
) -> Optional[Match]:
    if len(sources) < 2:
        return None
    return sources[0] if AllianceColor(alliance_color) == AllianceColor.RED else sources[1]


def find_source_match(
    snapshot: BracketSnapshot,
    target_match_id: str,
    alliance_color: Union[AllianceColor, str],
) -> Optional[Match]:
    """
    Upstream match whose winner fills alliance_color in the target match.

    Returns None when fewer than two matches feed the target: with a single
    source there is no way to tell which slot it fills. None is the normal
    state for early-stage slots, not an error.
    """
    sources = [m for m in snapshot.matches if m.feeds_into_match_id == target_match_id]
    return pick_source_for_slot(sort_source_matches(sources), alliance_color)


def get_source_match_ids(snapshot: BracketSnapshot, match_id: str) -> List[str]:
    """Ids of every match whose winner feeds match_id, in snapshot order."""
    return [m.id for m in snapshot.matches if m.feeds_into_match_id == match_id]
