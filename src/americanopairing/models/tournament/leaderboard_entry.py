"""Leaderboard entry data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from americanopairing.type_hints import PlayerId


@dataclass
class LeaderboardEntry:
    """One player's aggregated results.

    Attributes
    ----------
    id : str or int
        Player id.
    name : str
        Player name, taken from the roster.
    matches_played : int
        Completed matches the player took part in.
    matches_won : int
        Completed matches the player's team won outright.
    sets_won : int
        Sum of the player's team scores.
    sets_lost : int
        Sum of the opposing team scores.
    points : int
        3 per win, 2 per draw, 1 per loss.
    """

    id: PlayerId
    name: str
    matches_played: int = 0
    matches_won: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    points: int = 0

    @property
    def set_difference(self) -> int:
        return self.sets_won - self.sets_lost

    @property
    def ranking_key(self) -> Tuple[int, int, int]:
        """Sort key, larger is better: points, wins, set difference."""
        return (self.points, self.matches_won, self.set_difference)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize entry to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "matchesPlayed": self.matches_played,
            "matchesWon": self.matches_won,
            "setsWon": self.sets_won,
            "setsLost": self.sets_lost,
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaderboardEntry":
        """Deserialize entry from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            matches_played=data.get("matchesPlayed", 0),
            matches_won=data.get("matchesWon", 0),
            sets_won=data.get("setsWon", 0),
            sets_lost=data.get("setsLost", 0),
            points=data.get("points", 0),
        )
