"""Data model for tournament round."""

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
from typing import Any, Dict, List, Optional

from americanopairing.constants import ROUND_COMPLETED, ROUND_PENDING, ROUND_STATUSES
from americanopairing.exceptions import (
    InvalidTournamentDataException,
    TournamentStateException,
)
from americanopairing.type_hints import PlayerId

from .match import Match


@dataclass
class Round:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    id : str
        Round identifier.
    round_number : int
        Round number (1-indexed).
    matches : list of Match
        Simultaneous, player-disjoint matches in court order.
    status : str
        Administrative status (``pending``, ``active``, ``completed``); set by
        whoever runs the tournament, never recomputed from the matches.
    """

    id: str
    round_number: int
    matches: List[Match] = field(default_factory=list)
    status: str = ROUND_PENDING

    @property
    def player_ids(self) -> List[PlayerId]:
        """Every player scheduled in this round, in court order."""
        return [pid for match in self.matches for pid in match.player_ids]

    @property
    def is_completed(self) -> bool:
        return self.status == ROUND_COMPLETED

    @property
    def all_matches_completed(self) -> bool:
        return all(match.is_completed for match in self.matches)

    def get_match(self, match_id: str) -> Optional[Match]:
        """Find a match of this round by id."""
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "id": self.id,
            "roundNumber": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary.

        Raises:
            InvalidTournamentDataException: If a required field is missing or malformed
            TournamentStateException: If the status is unknown
        """
        if not isinstance(data, dict):
            raise InvalidTournamentDataException(f"Round must be an object: {data!r}")

        status = data.get("status", ROUND_PENDING)
        if status not in ROUND_STATUSES:
            raise TournamentStateException(
                f"Round {data.get('id')!r} has unknown status {status!r}"
            )
        try:
            round_id = data["id"]
            round_number = int(data["roundNumber"])
            matches = list(data.get("matches") or [])
        except KeyError as e:
            raise InvalidTournamentDataException(
                f"Round {data.get('id')!r} is missing field {e}"
            ) from e
        except (TypeError, ValueError) as e:
            raise InvalidTournamentDataException(
                f"Round {data.get('id')!r} is malformed: {e}"
            ) from e

        return cls(
            id=round_id,
            round_number=round_number,
            matches=[Match.from_dict(m) for m in matches],
            status=status,
        )
