"""Snapshot builders shared by the bracket engine tests."""

from rms_bracket.models import (
    Alliance,
    BracketSnapshot,
    EliminationStructure,
    Match,
    StageRound,
    TeamAlliance,
)

# ============================================================================
# Builders
# ============================================================================
# Plain helpers (not fixtures) so each test can shape its own bracket.
# Team ids are "<match>-<color>-<n>" (n = listing order) so assertions can name them.


def make_teams(prefix, count, stations=None):
    stations = stations or list(range(1, count + 1))
    return [
        TeamAlliance(
            team_id=f"{prefix}-{i}",
            team_number=str(1000 + i),
            team_name=f"Bots {i}",
            station_position=station,
        )
        for i, station in enumerate(stations, start=1)
    ]


def make_alliance(match_id, color, team_count, stations=None, score=None):
    prefix = f"{match_id}-{color.lower()}"
    return Alliance(
        id=f"{match_id}-alliance-{color.lower()}",
        color=color,
        score=score,
        team_alliances=make_teams(prefix, team_count, stations) if team_count else [],
    )


def make_match(match_id, match_number=None, teams=2, **kwargs):
    """Match with a RED and a BLUE alliance of `teams` teams each (0 = TBD)."""
    alliances = kwargs.pop("alliances", None)
    if alliances is None:
        alliances = [
            make_alliance(match_id, "RED", teams),
            make_alliance(match_id, "BLUE", teams),
        ]
    return Match(id=match_id, match_number=match_number, alliances=alliances, **kwargs)


def make_single_elimination(teams_per_alliance=2):
    """
    4-alliance single elimination:

        SF1 (m1) ─┐
                  ├─ F (m3)
        SF2 (m2) ─┘
    """
    tpa = teams_per_alliance
    matches = [
        make_match("m1", 1, teams=tpa, round_number=1, feeds_into_match_id="m3"),
        make_match("m2", 2, teams=tpa, round_number=1, feeds_into_match_id="m3"),
        make_match("m3", 3, teams=0, round_number=2),
    ]
    structure = EliminationStructure(rounds=[
        StageRound(round_number=1, label="Semifinals", matches=["m1", "m2"]),
        StageRound(round_number=2, label="Final", matches=["m3"]),
    ])
    return BracketSnapshot(matches=matches, structure=structure, teams_per_alliance=tpa)


