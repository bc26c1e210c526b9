"""Input validation helpers for players, scores and tournament settings.

Each ``validate_*`` function returns a :class:`ValidationResult` that can be
used in a boolean context. The ``*_strict`` variants raise the matching
exception instead.
"""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Any, Optional

from americanopairing.constants import MAX_COURTS, MIN_COURTS, TEAMS
from americanopairing.exceptions import (
    InvalidConfigurationException,
    InvalidPlayerDataException,
    InvalidScoreException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a player name.

    Surrounding whitespace is stripped; the result must not be empty.

    Example:
        >>> validate_player_name("  Ana ").sanitized_value
        'Ana'
    """
    if name is None or not str(name).strip():
        return ValidationResult(
            is_valid=False, error_message="Player name is required"
        )
    return ValidationResult(is_valid=True, sanitized_value=str(name).strip())


def validate_player_name_strict(name: Optional[str]) -> str:
    """Validate a player name and raise if invalid.

    Returns:
        The stripped name

    Raises:
        InvalidPlayerDataException: If the name is empty
    """
    result = validate_player_name(name)
    if not result:
        raise InvalidPlayerDataException(result.error_message)
    return result.sanitized_value


# ========== Score Validation ==========


def validate_score(value: Any) -> ValidationResult:
    """Validate a team score: a non-negative integer.

    Integral strings such as ``"6"`` are accepted and converted, the way
    score inputs arrive from forms.
    """
    # bool is an int subclass, but True is not a score
    if isinstance(value, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Invalid score: {value!r}"
        )

    if isinstance(value, str):
        value = value.strip()
        digits = value[1:] if value.startswith("-") else value
        if not digits.isdecimal():
            return ValidationResult(
                is_valid=False, error_message=f"Score must be an integer: {value!r}"
            )
        value = int(value)

    if not isinstance(value, int):
        return ValidationResult(
            is_valid=False, error_message=f"Score must be an integer: {value!r}"
        )

    if value < 0:
        return ValidationResult(
            is_valid=False, error_message=f"Score cannot be negative: {value}"
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_score_strict(value: Any) -> int:
    """Validate a score and raise if invalid.

    Raises:
        InvalidScoreException: If the score is not a non-negative integer
    """
    result = validate_score(value)
    if not result:
        raise InvalidScoreException(result.error_message)
    return result.sanitized_value


def validate_team_key(team: str) -> ValidationResult:
    """Validate a team selector (``"team1"`` or ``"team2"``)."""
    if team in TEAMS:
        return ValidationResult(is_valid=True, sanitized_value=team)
    return ValidationResult(
        is_valid=False,
        error_message=f"Unknown team {team!r}, expected one of {', '.join(TEAMS)}",
    )


def validate_team_key_strict(team: str) -> str:
    """Validate a team selector and raise if invalid.

    Raises:
        InvalidScoreException: If the team is not ``team1`` or ``team2``
    """
    result = validate_team_key(team)
    if not result:
        raise InvalidScoreException(result.error_message)
    return result.sanitized_value


# ========== Configuration Validation ==========


def validate_courts(courts: Any) -> ValidationResult:
    """Validate the number of courts (1 to 10)."""
    if isinstance(courts, bool) or not isinstance(courts, int):
        return ValidationResult(
            is_valid=False, error_message=f"Courts must be an integer: {courts!r}"
        )
    if courts < MIN_COURTS or courts > MAX_COURTS:
        return ValidationResult(
            is_valid=False,
            error_message=f"Courts must be between {MIN_COURTS}-{MAX_COURTS}",
        )
    return ValidationResult(is_valid=True, sanitized_value=courts)


def validate_duration(
    minutes: Any, field_name: str, minimum: int = 0
) -> ValidationResult:
    """Validate a duration in whole minutes.

    Args:
        minutes: Value to check
        field_name: Name used in the error message
        minimum: Smallest accepted value
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a whole number of minutes",
        )
    if minutes < minimum:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be at least {minimum} minutes",
        )
    return ValidationResult(is_valid=True, sanitized_value=minutes)


def validate_tournament_name(name: Optional[str]) -> ValidationResult:
    """Validate a tournament name (required, stripped)."""
    if name is None or not str(name).strip():
        return ValidationResult(
            is_valid=False, error_message="Tournament name is required"
        )
    return ValidationResult(is_valid=True, sanitized_value=str(name).strip())


def raise_for_configuration(result: ValidationResult) -> None:
    """Raise InvalidConfigurationException for a failed result."""
    if not result:
        raise InvalidConfigurationException(result.error_message)
