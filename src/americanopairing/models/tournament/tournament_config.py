"""TournamentConfig data class."""

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
from typing import Any, Dict

from americanopairing.constants import (
    DEFAULT_BREAK_DURATION,
    DEFAULT_COURTS,
    DEFAULT_MATCH_DURATION,
    DEFAULT_TOURNAMENT_NAME,
)
from americanopairing.utils.validation import (
    raise_for_configuration,
    validate_courts,
    validate_duration,
    validate_tournament_name,
)


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    courts : int
        Number of courts available (1 to 10). Informational only: court
        numbers in the schedule are sequential within each round.
    match_duration : int
        Planned match length in minutes.
    break_duration : int
        Planned break between rounds in minutes.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    courts: int = DEFAULT_COURTS
    match_duration: int = DEFAULT_MATCH_DURATION
    break_duration: int = DEFAULT_BREAK_DURATION

    def validate(self) -> None:
        """Check every setting, normalizing the name.

        Raises:
            InvalidConfigurationException: On the first invalid setting
        """
        name_result = validate_tournament_name(self.name)
        raise_for_configuration(name_result)
        self.name = name_result.sanitized_value

        raise_for_configuration(validate_courts(self.courts))
        raise_for_configuration(
            validate_duration(self.match_duration, "Match duration", minimum=1)
        )
        raise_for_configuration(
            validate_duration(self.break_duration, "Break duration", minimum=0)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "courts": self.courts,
            "matchDuration": self.match_duration,
            "breakDuration": self.break_duration,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            courts=data.get("courts", DEFAULT_COURTS),
            match_duration=data.get("matchDuration", DEFAULT_MATCH_DURATION),
            break_duration=data.get("breakDuration", DEFAULT_BREAK_DURATION),
        )
