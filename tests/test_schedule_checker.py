import json

import pytest

from americanopairing.constants import MATCH_COMPLETED
from americanopairing.models.player import Player
from americanopairing.models.tournament import Match, Round, Score
from americanopairing.pairing import generate_schedule
from americanopairing.validation import (
    CheckStatus,
    ViolationType,
    create_schedule_checker,
)


def _players(count):
    return [Player(id=f"p{i}", name=f"Player {i}") for i in range(1, count + 1)]


def _failed_ids(report):
    return {r.check_id for r in report.violations}


@pytest.mark.parametrize("num_players", [8, 12, 16])
def test_generated_schedules_pass_absolute_checks(num_players):
    players = _players(num_players)

    report = create_schedule_checker().check_schedule(
        players, generate_schedule(players)
    )

    assert report.is_valid
    assert report.overall_status == CheckStatus.COMPLIANT
    assert not report.violations


def test_four_player_schedule_warns_about_repeats():
    players = _players(4)

    report = create_schedule_checker().check_schedule(
        players, generate_schedule(players)
    )

    assert report.is_valid
    warnings = {r.check_id: r for r in report.quality_warnings}
    assert set(warnings) == {"Q1", "Q2"}
    assert warnings["Q1"].violation_type == ViolationType.QUALITY
    assert warnings["Q1"].details["pairs"] == [
        {"players": ["p1", "p2"], "count": 2},
        {"players": ["p3", "p4"], "count": 2},
    ]


def test_repeat_checks_keep_int_and_str_ids_apart():
    players = [Player(id=i, name=f"Int {i}") for i in range(1, 5)] + [
        Player(id=str(i), name=f"Str {i}") for i in range(1, 5)
    ]
    matches = [
        Match(id="m1", team1=(1, 2), team2=(3, 4), court=1),
        Match(id="m2", team1=("1", "2"), team2=("3", "4"), court=2),
    ]
    rounds = [Round(id="round-0", round_number=1, matches=matches)]

    report = create_schedule_checker().check_schedule(players, rounds)

    assert report.is_valid
    assert report.quality_warnings == []

    rounds.append(
        Round(
            id="round-1",
            round_number=2,
            matches=[Match(id="m3", team1=(2, 1), team2=("3", 4), court=1)],
        )
    )
    report = create_schedule_checker().check_schedule(players, rounds)

    warnings = {r.check_id: r for r in report.quality_warnings}
    assert warnings["Q1"].details["pairs"] == [{"players": [1, 2], "count": 2}]
    assert warnings["Q2"].details["pairs"] == [
        {"players": [1, 4], "count": 2},
        {"players": [2, 4], "count": 2},
    ]
    assert json.loads(json.dumps(report.to_dict()))["quality_warnings"]


def test_score_check_only_applies_to_completed_matches():
    players = _players(8)

    report = create_schedule_checker().check_schedule(
        players, generate_schedule(players)
    )

    s8 = next(r for r in report.check_results if r.check_id == "S8")
    assert s8.status == CheckStatus.NOT_APPLICABLE
    assert report.total_checks == len(report.check_results) - 1


def test_broken_schedule_reports_each_rule():
    players = _players(4)
    rounds = [
        Round(
            id="round-0",
            round_number=2,
            matches=[
                Match(id="m1", team1=("p1", "p1"), team2=("p1", "p9"), court=3),
                Match(
                    id="m2",
                    team1=("p2", "p3"),
                    team2=("p4", "p2"),
                    court=1,
                    score=Score(-1, 4),
                    status=MATCH_COMPLETED,
                ),
            ],
        ),
        Round(id="round-1", round_number=1),
        Round(id="round-2", round_number=3),
    ]

    report = create_schedule_checker().check_schedule(players, rounds)

    assert not report.is_valid
    assert _failed_ids(report) == {"S1", "S2", "S3", "S4", "S5", "S6", "S7", "S8"}
    assert report.compliance_percentage < 50.0

    by_id = {r.check_id: r for r in report.violations}
    assert by_id["S4"].details["players"] == ["p9"]
    assert by_id["S5"].details["found"] == [2, 1, 3]
    assert by_id["S7"].details == {"rounds": 3, "limit": 2}


def test_report_to_dict():
    players = _players(4)

    data = create_schedule_checker().check_schedule(
        players, generate_schedule(players)
    ).to_dict()

    assert data["overall_status"] == "COMPLIANT"
    assert data["violations"] == []
    assert [w["check"] for w in data["quality_warnings"]] == [
        "Q1: Repeated partnerships",
        "Q2: Repeated opponents",
    ]
