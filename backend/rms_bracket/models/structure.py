from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from rms_bracket.models.base import BracketModel


class StageRound(BracketModel):
    round_number: int
    label: Optional[str] = None
    matches: List[str] = []  # match ids, display order


class RecordBucket(BracketModel):
    record: str  # win-loss record label, e.g. "2-0"
    matches: List[str] = []


class EliminationStructure(BracketModel):
    type: Literal["elimination"] = "elimination"
    rounds: List[StageRound] = []


class SwissStructure(BracketModel):
    """Rounds and record buckets are two views over the same matches."""

    type: Literal["swiss"] = "swiss"
    rounds: List[StageRound] = []
    buckets: List[RecordBucket] = []


class StandardStructure(BracketModel):
    """Generic round-based playoff staging; no advancement semantics."""

    type: Literal["standard"] = "standard"
    rounds: List[StageRound] = []


StageStructure = Annotated[
    Union[EliminationStructure, SwissStructure, StandardStructure],
    Field(discriminator="type"),
]
