"""Player data class."""

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

import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from americanopairing.exceptions import InvalidPlayerDataException
from americanopairing.type_hints import PlayerId
from americanopairing.utils.validation import validate_player_name_strict


@dataclass(frozen=True)
class Player:
    """
    A tournament participant.

    Players are immutable once created. Only roster membership changes
    over the life of a tournament, never the player record itself.

    Attributes
    ----------
    id : str or int
        Opaque identifier, unique within a tournament.
    name : str
        Display name.

    Examples
    --------
    ::

        player = Player(id="p-001", name="Ana")
        create_player("Ana")  # generated id
    """

    id: PlayerId
    name: str

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        if not isinstance(data, dict) or "id" not in data:
            raise InvalidPlayerDataException(f"Player has no id: {data!r}")
        return cls(id=data["id"], name=validate_player_name_strict(data.get("name")))


def generate_player_id() -> str:
    """Generate a short random player id."""
    return uuid.uuid4().hex[:8]


def create_player(name: str, player_id: Optional[PlayerId] = None) -> Player:
    """Create a player, validating the name and generating an id if needed.

    Raises:
        InvalidPlayerDataException: If the name is empty
    """
    return Player(
        id=player_id if player_id is not None else generate_player_id(),
        name=validate_player_name_strict(name),
    )
