"""Exceptions for use in Americano Pairing"""

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


# ========== Base Application Exception ==========


class AmericanoPairingException(Exception):
    """Base exception for all Americano Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(AmericanoPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidRosterError(PairingException):
    """Raised when the roster cannot be scheduled.

    Americano needs at least four players and a multiple of four.
    """

    def __init__(self, num_players: int, message: str = ""):
        self.num_players = num_players
        super().__init__(
            message
            or (
                "Americano format requires multiples of 4 players "
                f"(at least 4), got {num_players}"
            )
        )


# ========== Tournament Exceptions ==========


class TournamentException(AmericanoPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a requested match does not exist."""

    pass


class InvalidTournamentDataException(TournamentException):
    """Raised when a stored tournament document is malformed or incomplete."""

    pass


# ========== Player Exceptions ==========


class PlayerException(AmericanoPairingException):
    """Base exception for player-related errors."""

    pass


class DuplicatePlayerException(PlayerException):
    """Raised when attempting to add a player that already exists."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(AmericanoPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidScoreException(ResultException):
    """Raised when a score is invalid (negative, not an integer, unknown team)."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(AmericanoPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(AmericanoPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
