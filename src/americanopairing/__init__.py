"""Americano Pairing - scheduling and scoring for Americano doubles tournaments."""

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

__version__ = "0.1.0"

from americanopairing.exceptions import AmericanoPairingException, InvalidRosterError
from americanopairing.models import Player
from americanopairing.pairing import calculate_total_rounds, generate_schedule
from americanopairing.tournament import Tournament, calculate_leaderboard

__all__ = [
    "__version__",
    "AmericanoPairingException",
    "InvalidRosterError",
    "Player",
    "Tournament",
    "calculate_leaderboard",
    "calculate_total_rounds",
    "generate_schedule",
]
