import logging

import pytest

from americanopairing.exceptions import (
    InvalidConfigurationException,
    InvalidPlayerDataException,
    InvalidScoreException,
)
from americanopairing.utils import LOG_LEVEL_ENV_VAR, ROOT_LOGGER_NAME, _level_from_env
from americanopairing.utils.validation import (
    raise_for_configuration,
    validate_courts,
    validate_duration,
    validate_player_name,
    validate_player_name_strict,
    validate_score,
    validate_score_strict,
    validate_team_key_strict,
    validate_tournament_name,
)


def test_player_name_is_stripped():
    result = validate_player_name("  Ana  ")

    assert result
    assert result.sanitized_value == "Ana"


@pytest.mark.parametrize("name", [None, "", "   "])
def test_empty_player_names(name):
    assert not validate_player_name(name)
    with pytest.raises(InvalidPlayerDataException):
        validate_player_name_strict(name)


@pytest.mark.parametrize("value,expected", [(0, 0), (6, 6), ("7", 7), (" 3 ", 3)])
def test_valid_scores(value, expected):
    assert validate_score_strict(value) == expected


@pytest.mark.parametrize(
    "value", [-1, "-2", "six", 2.5, None, True, "", "\u00b2", "--5", "-"]
)
def test_invalid_scores(value):
    assert not validate_score(value)
    with pytest.raises(InvalidScoreException):
        validate_score_strict(value)


def test_team_keys():
    assert validate_team_key_strict("team1") == "team1"
    assert validate_team_key_strict("team2") == "team2"
    with pytest.raises(InvalidScoreException):
        validate_team_key_strict("team3")


@pytest.mark.parametrize("courts,valid", [(1, True), (10, True), (0, False), (11, False), ("2", False)])
def test_courts(courts, valid):
    assert bool(validate_courts(courts)) is valid


def test_durations():
    assert validate_duration(0, "Break duration", minimum=0)
    assert not validate_duration(0, "Match duration", minimum=1)
    assert "Match duration" in validate_duration(
        "15", "Match duration"
    ).error_message


def test_raise_for_configuration():
    raise_for_configuration(validate_tournament_name("Open"))
    with pytest.raises(InvalidConfigurationException, match="name is required"):
        raise_for_configuration(validate_tournament_name(" "))


@pytest.mark.parametrize(
    "value,expected",
    [("", logging.WARNING), ("debug", logging.DEBUG), ("10", 10), ("loud", logging.WARNING)],
)
def test_log_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)

    assert _level_from_env() == expected


def test_module_loggers_share_the_package_root():
    logger = logging.getLogger("americanopairing.pairing.americano")

    assert logger.name.startswith(ROOT_LOGGER_NAME)
    assert logging.getLogger(ROOT_LOGGER_NAME).handlers
