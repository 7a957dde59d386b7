"""Snapshot parsing: wire names, structure variants, immutability."""

import pytest
from pydantic import ValidationError

from rms_bracket.models import (
    AllianceColor,
    BracketSnapshot,
    EliminationStructure,
    Match,
    StandardStructure,
    SwissStructure,
)


def test_camel_case_payload_parses():
    snapshot = BracketSnapshot.model_validate({
        "teamsPerAlliance": 3,
        "structure": {"type": "swiss", "buckets": [{"record": "0-0", "matches": ["m1"]}]},
        "matches": [{
            "id": "m1",
            "matchNumber": "QF1",
            "recordBucket": "0-0",
            "alliances": [{"color": "RED", "teamAlliances": [
                {"teamId": "t1", "stationPosition": 1, "isSurrogate": True},
            ]}],
        }],
    })
    assert snapshot.teams_per_alliance == 3
    assert isinstance(snapshot.structure, SwissStructure)
    match = snapshot.matches[0]
    assert match.match_number == "QF1"
    assert match.status == "PENDING"
    assert match.alliances[0].color is AllianceColor.RED
    assert match.alliances[0].team_alliances[0].is_surrogate is True


def test_snake_case_names_also_accepted():
    match = Match(id="m1", match_number=4, feeds_into_match_id="m9")
    assert match.model_dump(by_alias=True)["feedsIntoMatchId"] == "m9"


@pytest.mark.parametrize(
    "structure, expected",
    [
        ({"type": "elimination"}, EliminationStructure),
        ({"type": "swiss"}, SwissStructure),
        ({"type": "standard"}, StandardStructure),
    ],
)
def test_structure_discriminator(structure, expected):
    snapshot = BracketSnapshot.model_validate({"structure": structure, "teamsPerAlliance": 2})
    assert isinstance(snapshot.structure, expected)
    assert snapshot.teams_per_alliance == 2


def test_unknown_structure_type_rejected():
    with pytest.raises(ValidationError):
        BracketSnapshot.model_validate({"structure": {"type": "ladder"}, "teamsPerAlliance": 2})


def test_teams_per_alliance_must_be_positive():
    with pytest.raises(ValidationError):
        BracketSnapshot.model_validate({"structure": {"type": "standard"}, "teamsPerAlliance": 0})


def test_unknown_status_kept_verbatim():
    assert Match(id="m1", status="DELAYED").status == "DELAYED"


def test_snapshot_is_frozen():
    snapshot = BracketSnapshot(structure=StandardStructure(), teams_per_alliance=2)
    with pytest.raises(ValidationError):
        snapshot.teams_per_alliance = 4


def test_teams_per_alliance_is_required():
    with pytest.raises(ValidationError) as exc_info:
        BracketSnapshot.model_validate({"structure": {"type": "standard"}, "matches": []})
    assert exc_info.value.errors()[0]["loc"] == ("teamsPerAlliance",)
