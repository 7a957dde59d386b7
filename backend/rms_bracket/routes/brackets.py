"""
Bracket engine endpoints.

Every route takes a full bracket snapshot in the request body and returns
a derived structure. Nothing is stored; a structurally broken snapshot is
still a 200 with the problems listed under "issues".
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Query

from rms_bracket import config
from rms_bracket.models import AllianceColor, BracketSnapshot
from rms_bracket.services.advancement_graph import find_source_match
from rms_bracket.services.bracket_normalizer import normalize_bracket
from rms_bracket.services.bracket_stats import analyze_bracket, get_bracket_display_hints
from rms_bracket.services.bracket_validator import validate_bracket_consistency
from rms_bracket.services.render_adapter import split_double_elimination, to_render_matches

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_color(color: str) -> AllianceColor:
    try:
        return AllianceColor(color.upper())
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid alliance color: {color}")


@router.post("/brackets/validate")
def validate_bracket(snapshot: BracketSnapshot) -> Dict[str, Any]:
    return validate_bracket_consistency(snapshot).to_dict()


@router.post("/brackets/stats")
def bracket_stats(snapshot: BracketSnapshot) -> Dict[str, Any]:
    return analyze_bracket(snapshot).to_dict()


@router.post("/brackets/display-hints")
def bracket_display_hints(snapshot: BracketSnapshot) -> Dict[str, Any]:
    return get_bracket_display_hints(snapshot).to_dict()


@router.post("/brackets/normalize")
def normalized_bracket(snapshot: BracketSnapshot) -> Dict[str, Any]:
    return normalize_bracket(snapshot).to_dict()


@router.post("/brackets/render")
def render_bracket(snapshot: BracketSnapshot) -> Dict[str, Any]:
    """Visualization records; double-elimination stages also get upper/lower splits."""
    render_matches = to_render_matches(snapshot)
    response: Dict[str, Any] = {"matches": [m.to_dict() for m in render_matches]}

    if analyze_bracket(snapshot).has_double_elimination:
        split = split_double_elimination(render_matches)
        response["upper"] = [m.to_dict() for m in split["upper"]]
        response["lower"] = [m.to_dict() for m in split["lower"]]
    return response


@router.post("/brackets/source-match")
def bracket_source_match(
    snapshot: BracketSnapshot,
    target_match_id: str = Query(..., alias="targetMatchId"),
    color: str = Query(...),
) -> Dict[str, Any]:
    """Upstream match feeding one alliance slot of the target match (or null)."""
    source = find_source_match(snapshot, target_match_id, _parse_color(color))
    return {
        "sourceMatch": source.model_dump(mode="json", by_alias=True) if source else None,
    }


@router.post("/brackets/analysis")
def bracket_analysis(snapshot: BracketSnapshot) -> Dict[str, Any]:
    """Validation, stats, hints and normalized layout in a single round trip."""
    validation = validate_bracket_consistency(snapshot)
    if not validation.is_valid and config.BRACKET_LOG_ISSUES:
        logger.warning(
            "Bracket consistency issues for stage %s: %s",
            snapshot.stage_id, "; ".join(validation.issues)
        )

    return {
        "validation": validation.to_dict(),
        "stats": analyze_bracket(snapshot).to_dict(),
        "hints": get_bracket_display_hints(snapshot).to_dict(),
        "layout": normalize_bracket(snapshot).to_dict(),
    }
