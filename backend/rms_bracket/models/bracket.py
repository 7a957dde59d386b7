from typing import List, Optional

from pydantic import Field

from rms_bracket.models.base import BracketModel
from rms_bracket.models.match import Match
from rms_bracket.models.structure import StageStructure


class BracketSnapshot(BracketModel):
    """Matches and structure of one stage, as supplied by the backend.

    Built fresh for each engine call and never mutated. Dangling match
    references in the structure or advancement links are allowed here and
    reported by the consistency validator.
    """

    matches: List[Match] = []
    structure: StageStructure
    teams_per_alliance: int = Field(ge=1)

    # Stage metadata, carried through untouched
    stage_id: Optional[str] = None
    stage_name: Optional[str] = None
    stage_type: Optional[str] = None
    tournament_id: Optional[str] = None
    generated_at: Optional[str] = None
