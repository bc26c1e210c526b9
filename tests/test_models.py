import pytest

from americanopairing.constants import MATCH_COMPLETED, TEAM1, TEAM2
from americanopairing.exceptions import (
    InvalidPlayerDataException,
    InvalidScoreException,
    InvalidTournamentDataException,
    TournamentStateException,
)
from americanopairing.models import (
    LeaderboardEntry,
    Match,
    Player,
    Round,
    Score,
    TournamentConfig,
    create_player,
)


def test_create_player_generates_id():
    first = create_player(" Ana ")
    second = create_player("Ana")

    assert first.name == "Ana"
    assert first.id != second.id
    assert str(first) == "Ana"


def test_player_from_dict_requires_id():
    assert Player.from_dict({"id": 3, "name": "Ben"}) == Player(id=3, name="Ben")
    with pytest.raises(InvalidPlayerDataException):
        Player.from_dict({"name": "Ben"})


def test_players_are_immutable():
    player = Player(id="a", name="Ana")

    with pytest.raises(AttributeError):
        player.name = "Other"


def test_score_from_each_side():
    score = Score(6, 3)

    assert score.for_team(TEAM1) == (6, 3)
    assert score.for_team(TEAM2) == (3, 6)
    with pytest.raises(InvalidScoreException):
        score.for_team("team3")


def test_match_winner_and_membership():
    match = Match(id="m", team1=("a", "b"), team2=("c", "d"), court=1)

    assert match.winning_team is None
    match.score = Score(2, 5)
    assert match.winning_team == TEAM2
    assert match.team_of("a") == TEAM1
    assert match.team_of("d") == TEAM2
    assert match.team_of("z") is None
    assert match.player_ids == ("a", "b", "c", "d")


def test_match_dict_format():
    match = Match(
        id="round-0-match-0",
        team1=("a", "b"),
        team2=("c", "d"),
        court=1,
        score=Score(6, 4),
        status=MATCH_COMPLETED,
    )

    data = match.to_dict()

    assert data == {
        "id": "round-0-match-0",
        "team1": ["a", "b"],
        "team2": ["c", "d"],
        "court": 1,
        "score": {"team1": 6, "team2": 4},
        "status": "completed",
    }
    assert Match.from_dict(data) == match


def test_unknown_statuses_are_rejected():
    with pytest.raises(InvalidScoreException):
        Match.from_dict(
            {"id": "m", "team1": ["a", "b"], "team2": ["c", "d"], "status": "done"}
        )
    with pytest.raises(TournamentStateException):
        Round.from_dict({"id": "r", "roundNumber": 1, "status": "finished"})


def test_null_scores_read_as_zero():
    assert Score.from_dict({"team1": None, "team2": 4}) == Score(0, 4)
    assert Score.from_dict({"team2": 5}) == Score(0, 5)
    assert Score.from_dict(None) == Score(0, 0)


@pytest.mark.parametrize(
    "score", [{"team1": "six", "team2": 1}, {"team1": -3}, {"team2": 2.5}, [6, 4]]
)
def test_bad_stored_scores_raise(score):
    with pytest.raises(InvalidScoreException):
        Score.from_dict(score)


@pytest.mark.parametrize(
    "data",
    [
        {"id": "m", "team1": ["a", "b"]},
        {"team1": ["a", "b"], "team2": ["c", "d"]},
        {"id": "m", "team1": 7, "team2": ["c", "d"]},
        {"id": "m", "team1": ["a", "b"], "team2": ["c", "d"], "court": "centre"},
        "round-0-match-0",
    ],
)
def test_malformed_match_data_raises(data):
    with pytest.raises(InvalidTournamentDataException):
        Match.from_dict(data)


def test_malformed_round_data_raises():
    with pytest.raises(InvalidTournamentDataException, match="roundNumber"):
        Round.from_dict({"id": "round-0", "matches": []})
    with pytest.raises(InvalidTournamentDataException):
        Round.from_dict({"id": "round-0", "roundNumber": "first"})
    with pytest.raises(InvalidTournamentDataException):
        Round.from_dict(None)


def test_round_lookup_and_completion():
    matches = [
        Match(id="m1", team1=("a", "b"), team2=("c", "d"), court=1),
        Match(id="m2", team1=("e", "f"), team2=("g", "h"), court=2),
    ]
    round_data = Round(id="round-0", round_number=1, matches=matches)

    assert round_data.get_match("m2") is matches[1]
    assert round_data.get_match("m3") is None
    assert round_data.player_ids == list("abcdefgh")
    assert not round_data.all_matches_completed


def test_config_dict_uses_camel_case():
    config = TournamentConfig(name="Open", courts=3, match_duration=20)

    data = config.to_dict()

    assert data == {"name": "Open", "courts": 3, "matchDuration": 20, "breakDuration": 5}
    assert TournamentConfig.from_dict(data) == config


def test_leaderboard_entry_dict():
    entry = LeaderboardEntry(
        id="a", name="Ana", matches_played=2, matches_won=1, sets_won=9, sets_lost=7, points=4
    )

    assert entry.set_difference == 2
    assert entry.ranking_key == (4, 1, 2)
    assert LeaderboardEntry.from_dict(entry.to_dict()) == entry
    assert entry.to_dict()["setsLost"] == 7
