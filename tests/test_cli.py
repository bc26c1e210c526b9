import json

import pytest

from americanopairing.cli import load_roster, main
from americanopairing.constants import MATCH_COMPLETED
from americanopairing.exceptions import FileLoadException, InvalidPlayerDataException


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.txt"
    path.write_text("Ana\nBen\n\nCid\nDee\nEve\nFay\nGus\nHal\n", encoding="utf-8")
    return path


@pytest.fixture
def tournament_file(tmp_path, roster_file):
    path = tmp_path / "tournament.json"
    assert main(["schedule", str(roster_file), "--output", str(path)]) == 0
    return path


def test_load_text_roster_numbers_players(roster_file):
    players = load_roster(roster_file)

    assert [p.id for p in players[:3]] == ["1", "2", "3"]
    assert [p.name for p in players[:3]] == ["Ana", "Ben", "Cid"]
    assert len(players) == 8


def test_load_json_roster(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(
        json.dumps([{"id": 10, "name": "Ana"}, "Ben"]), encoding="utf-8"
    )

    players = load_roster(path)

    assert [(p.id, p.name) for p in players] == [(10, "Ana"), ("2", "Ben")]


def test_load_roster_errors(tmp_path):
    with pytest.raises(FileLoadException):
        load_roster(tmp_path / "missing.txt")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_roster(broken)

    nameless = tmp_path / "nameless.json"
    nameless.write_text(json.dumps([{"id": 1, "name": " "}]), encoding="utf-8")
    with pytest.raises(InvalidPlayerDataException):
        load_roster(nameless)


def test_schedule_writes_tournament(tournament_file):
    data = json.loads(tournament_file.read_text(encoding="utf-8"))

    assert data["status"] == "in_progress"
    assert len(data["players"]) == 8
    assert len(data["schedule"]) == 5
    assert data["schedule"][0]["matches"][0]["team1"] == ["1", "2"]


def test_schedule_text_output(roster_file, capsys):
    assert main(["schedule", str(roster_file), "--format", "text"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Round 1 (active)")
    assert "Court 1: Ana + Ben vs Cid + Dee  [PENDING]" in out


def test_invalid_roster_size_exits_with_error(tmp_path, capsys):
    path = tmp_path / "small.txt"
    path.write_text("Ana\nBen\nCid\n", encoding="utf-8")

    assert main(["schedule", str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_record_and_leaderboard(tournament_file, capsys):
    assert main(["record", str(tournament_file), "round-0-match-0", "6", "3"]) == 0

    data = json.loads(tournament_file.read_text(encoding="utf-8"))
    match = data["schedule"][0]["matches"][0]
    assert match["status"] == MATCH_COMPLETED
    assert match["score"] == {"team1": 6, "team2": 3}

    capsys.readouterr()
    assert main(["leaderboard", str(tournament_file), "--format", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [row["name"] for row in rows[:2]] == ["Ana", "Ben"]
    assert rows[0]["points"] == 3


def test_leaderboard_table(tournament_file, capsys):
    main(["record", str(tournament_file), "round-0-match-0", "6", "3"])
    capsys.readouterr()

    assert main(["leaderboard", str(tournament_file)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split()[:2] == ["#", "Player"]
    assert set(lines[1]) <= {"-", " "}
    assert lines[2].split()[1] == "Ana"
    assert lines[2].split()[-2:] == ["+3", "3"]


def test_record_unknown_match(tournament_file, caplog):
    assert main(["record", str(tournament_file), "round-7-match-9", "1", "0"]) == 1

    (record,) = [r for r in caplog.records if r.levelname == "ERROR"]
    assert record.getMessage().startswith("Command failed: ")
    assert "round-7-match-9" in record.getMessage()


def test_check_command(tournament_file, capsys):
    assert main(["check", str(tournament_file), "--detailed"]) == 0

    out = capsys.readouterr().out
    assert "0 violations" in out
    assert "Compliance:" in out


def test_check_command_reports_violations(tournament_file, capsys):
    data = json.loads(tournament_file.read_text(encoding="utf-8"))
    data["schedule"][0]["matches"][0]["team2"] = ["1", "9"]
    tournament_file.write_text(json.dumps(data), encoding="utf-8")

    assert main(["check", str(tournament_file)]) == 2
    assert "S2: Disjoint teams" in capsys.readouterr().out


def test_missing_tournament_file(tmp_path):
    assert main(["leaderboard", str(tmp_path / "nope.json")]) == 1


def _rewrite(path, edit):
    data = json.loads(path.read_text(encoding="utf-8"))
    edit(data)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_null_scores_load_as_zero(tournament_file, capsys):
    def clear_score(data):
        data["schedule"][0]["matches"][0]["score"] = {"team1": None, "team2": 3}

    _rewrite(tournament_file, clear_score)

    assert main(["record", str(tournament_file), "round-0-match-1", "5", "4"]) == 0
    data = json.loads(tournament_file.read_text(encoding="utf-8"))
    assert data["schedule"][0]["matches"][0]["score"] == {"team1": 0, "team2": 3}

    capsys.readouterr()
    assert main(["leaderboard", str(tournament_file), "--format", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert sum(row["matchesPlayed"] for row in rows) == 4


@pytest.mark.parametrize("command", [["leaderboard"], ["check"], ["record"]])
def test_match_without_team2_exits_with_error(tournament_file, capsys, command):
    def drop_team2(data):
        del data["schedule"][0]["matches"][0]["team2"]

    _rewrite(tournament_file, drop_team2)
    argv = command + [str(tournament_file)]
    if command == ["record"]:
        argv += ["round-0-match-0", "6", "3"]

    assert main(argv) == 1
    assert "team2" in capsys.readouterr().err


@pytest.mark.parametrize(
    "edit",
    [
        lambda data: data.update(createdAt="last tuesday"),
        lambda data: data["schedule"][1].pop("roundNumber"),
        lambda data: data["schedule"][0]["matches"][1]["score"].update(team2="x"),
        lambda data: data.update(players={"1": "Ana"}),
    ],
)
def test_malformed_tournament_document_exits_with_error(tournament_file, capsys, edit):
    _rewrite(tournament_file, edit)

    assert main(["leaderboard", str(tournament_file)]) == 1
    assert capsys.readouterr().err.startswith("Error: ")
