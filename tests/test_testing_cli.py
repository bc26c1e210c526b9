import json

import pytest

from americanopairing.exceptions import AmericanoPairingException
from americanopairing.testing.__main__ import (
    COMMANDS,
    create_completer,
    execute_command,
    main,
)


def test_completer_has_slash_and_plain_commands():
    completer = create_completer()

    for command in COMMANDS:
        assert command in completer.options
        assert f"/{command}" in completer.options
    assert "/list" in completer.options


def test_generate_and_validate_round_trip(tmp_path, capsys):
    output = tmp_path / "simulated.json"

    assert (
        main(
            [
                "generate",
                "--players",
                "8",
                "--seed",
                "3",
                "--output",
                str(output),
                "--leaderboard",
            ]
        )
        == 0
    )
    out = capsys.readouterr().out
    assert "Players: 8" in out
    assert "Status: completed" in out

    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["schedule"]) == 5

    report_path = tmp_path / "report.json"
    assert (
        main(["validate", "--file", str(output), "--export", str(report_path)]) == 0
    )
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["violations"] == []


def test_invalid_roster_is_reported(capsys):
    assert main(["generate", "--players", "5"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_benchmark_runs(capsys):
    assert main(["benchmark", "--players", "4", "--iterations", "2"]) == 0
    assert "Average:" in capsys.readouterr().out


def test_execute_command_help(capsys):
    assert execute_command("help", ["/generate"]) is None
    assert "--completion" in capsys.readouterr().out


def test_validate_rejects_malformed_document(tmp_path, capsys):
    output = tmp_path / "simulated.json"
    assert main(["generate", "--players", "4", "--output", str(output)]) == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    del data["schedule"][0]["matches"][0]["team2"]
    data["schedule"][1]["matches"][0]["score"]["team1"] = None
    output.write_text(json.dumps(data), encoding="utf-8")
    capsys.readouterr()

    assert main(["validate", "--file", str(output)]) == 1
    assert "team2" in capsys.readouterr().err

    # The interactive shell catches domain errors, so the loop survives
    with pytest.raises(AmericanoPairingException):
        execute_command("validate", ["--file", str(output)])
