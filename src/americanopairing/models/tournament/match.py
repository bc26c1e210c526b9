"""Match and score data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from americanopairing.constants import (
    MATCH_COMPLETED,
    MATCH_PENDING,
    MATCH_STATUSES,
    TEAM1,
    TEAM2,
)
from americanopairing.exceptions import (
    InvalidScoreException,
    InvalidTournamentDataException,
)
from americanopairing.type_hints import PlayerId, Team
from americanopairing.utils.validation import validate_score_strict


@dataclass
class Score:
    """Games won by each side of a match.

    Attributes
    ----------
    team1 : int
        Score of the first team.
    team2 : int
        Score of the second team.
    """

    team1: int = 0
    team2: int = 0

    def for_team(self, team: str) -> Tuple[int, int]:
        """Return ``(own, opposing)`` score from one team's point of view."""
        if team == TEAM1:
            return self.team1, self.team2
        if team == TEAM2:
            return self.team2, self.team1
        raise InvalidScoreException(f"Unknown team {team!r}")

    def to_dict(self) -> Dict[str, int]:
        """Serialize score to dictionary."""
        return {TEAM1: self.team1, TEAM2: self.team2}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Score":
        """Deserialize score from dictionary.

        Missing or null scores read as 0, the way an empty score field
        displays.

        Raises:
            InvalidScoreException: If a stored score is not a non-negative integer
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise InvalidScoreException(f"Score must be an object: {data!r}")

        values = []
        for team in (TEAM1, TEAM2):
            value = data.get(team)
            values.append(0 if value is None else validate_score_strict(value))
        return cls(team1=values[0], team2=values[1])


@dataclass
class Match:
    """A doubles match: two teams of two on one court.

    Attributes
    ----------
    id : str
        Identifier, unique within the tournament.
    team1 : tuple of two player ids
    team2 : tuple of two player ids
        Disjoint from ``team1``.
    court : int
        1-based court index within the round.
    score : Score
    status : str
        One of ``pending``, ``in_progress``, ``completed``.
    """

    id: str
    team1: Team
    team2: Team
    court: int
    score: Score = field(default_factory=Score)
    status: str = MATCH_PENDING

    @property
    def player_ids(self) -> Tuple[PlayerId, ...]:
        """All four participants, team1 first."""
        return tuple(self.team1) + tuple(self.team2)

    @property
    def is_completed(self) -> bool:
        return self.status == MATCH_COMPLETED

    @property
    def winning_team(self) -> Optional[str]:
        """``"team1"``, ``"team2"`` or None for a draw."""
        if self.score.team1 > self.score.team2:
            return TEAM1
        if self.score.team2 > self.score.team1:
            return TEAM2
        return None

    def team_of(self, player_id: PlayerId) -> Optional[str]:
        """Return which team a player is on, or None if not in this match."""
        if player_id in self.team1:
            return TEAM1
        if player_id in self.team2:
            return TEAM2
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "team1": list(self.team1),
            "team2": list(self.team2),
            "court": self.court,
            "score": self.score.to_dict(),
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        Raises:
            InvalidTournamentDataException: If a required field is missing or malformed
            InvalidScoreException: If the status or score is invalid
        """
        if not isinstance(data, dict):
            raise InvalidTournamentDataException(f"Match must be an object: {data!r}")

        status = data.get("status", MATCH_PENDING)
        if status not in MATCH_STATUSES:
            raise InvalidScoreException(
                f"Match {data.get('id')!r} has unknown status {status!r}"
            )
        try:
            match_id = data["id"]
            team1 = tuple(data["team1"])
            team2 = tuple(data["team2"])
            court = int(data.get("court", 1))
        except KeyError as e:
            raise InvalidTournamentDataException(
                f"Match {data.get('id')!r} is missing field {e}"
            ) from e
        except (TypeError, ValueError) as e:
            raise InvalidTournamentDataException(
                f"Match {data.get('id')!r} is malformed: {e}"
            ) from e

        return cls(
            id=match_id,
            team1=team1,
            team2=team2,
            court=court,
            score=Score.from_dict(data.get("score")),
            status=status,
        )
