"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for running an Americano tournament: it owns
the roster and the schedule and changes them only through the transition
methods below.
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

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from americanopairing.constants import (
    TOURNAMENT_ACTIVE,
    TOURNAMENT_COMPLETED,
    TOURNAMENT_IN_PROGRESS,
    TOURNAMENT_STATUSES,
)
from americanopairing.controllers.tournament import ResultRecorder, RoundManager
from americanopairing.exceptions import (
    DuplicatePlayerException,
    InvalidTournamentDataException,
    PlayerNotFoundException,
    TournamentStateException,
)
from americanopairing.models.player import Player, create_player
from americanopairing.models.tournament import (
    LeaderboardEntry,
    Match,
    Round,
    TournamentConfig,
)
from americanopairing.tournament.leaderboard import LeaderboardCalculator
from americanopairing.type_hints import PlayerId
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: creates the schedule and moves rounds forward
    - ResultRecorder: validates and records scores
    - LeaderboardCalculator: ranks the players

    Lifecycle: ``active`` while the roster is being built, ``in_progress``
    once the schedule exists, ``completed`` after the last round.
    """

    def __init__(
        self,
        config: Optional[TournamentConfig] = None,
        players: Optional[List[Player]] = None,
        tournament_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        config: Tournament settings, validated here
        players: Initial roster
        tournament_id: Identifier, generated when omitted
        created_at: Creation time, now when omitted

        Raises
        ------
        InvalidConfigurationException: If the settings are invalid
        DuplicatePlayerException: If two initial players share an id
        """
        self.config = config or TournamentConfig()
        self.config.validate()

        self.id = tournament_id or uuid.uuid4().hex
        self.created_at = created_at or datetime.now(timezone.utc)
        self.status = TOURNAMENT_ACTIVE

        self.players: List[Player] = []
        for player in players or []:
            self._add_player_record(player)

        # Specialized managers
        self.round_manager = RoundManager()
        self.result_recorder = ResultRecorder()
        self.leaderboard_calculator = LeaderboardCalculator()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def schedule(self) -> List[Round]:
        return self.round_manager.rounds

    @property
    def has_schedule(self) -> bool:
        return self.round_manager.has_schedule

    @property
    def current_round(self) -> Optional[Round]:
        """The round being played, or None."""
        return self.round_manager.current_round

    def get_player(self, player_id: PlayerId) -> Player:
        """Look up a roster player by id.

        Raises:
            PlayerNotFoundException: If the id is not on the roster
        """
        for player in self.players:
            if player.id == player_id:
                return player
        raise PlayerNotFoundException(f"Player {player_id!r} is not in the tournament")

    # ========== Player Management ==========

    def add_player(self, name: str, player_id: Optional[PlayerId] = None) -> Player:
        """Add a player to the roster.

        Raises:
            TournamentStateException: If the schedule was already generated
            InvalidPlayerDataException: If the name is empty
            DuplicatePlayerException: If the id is already taken
        """
        self._require_no_schedule("add players")
        player = create_player(name, player_id)
        self._add_player_record(player)
        logger.info(f"Added player: {player.name} ({player.id})")
        return player

    def remove_player(self, player_id: PlayerId) -> Player:
        """Remove a player from the roster.

        Raises:
            TournamentStateException: If the schedule was already generated
            PlayerNotFoundException: If the id is not on the roster
        """
        self._require_no_schedule("remove players")
        player = self.get_player(player_id)
        self.players.remove(player)
        logger.info(f"Removed player: {player.name} ({player_id})")
        return player

    def _add_player_record(self, player: Player) -> None:
        if any(p.id == player.id for p in self.players):
            raise DuplicatePlayerException(
                f"A player with id {player.id!r} is already in the tournament"
            )
        self.players.append(player)

    def _require_no_schedule(self, action: str) -> None:
        if self.has_schedule:
            logger.warning(f"Refused to {action}: schedule already generated")
            raise TournamentStateException(
                f"Cannot {action} after schedule is generated"
            )

    # ========== Round Management ==========

    def generate_schedule(self) -> List[Round]:
        """Generate the full schedule from the current roster.

        Raises:
            TournamentStateException: If a schedule already exists
            InvalidRosterError: If the roster size is not a multiple of four
        """
        rounds = self.round_manager.create_schedule(self.players)
        self.status = TOURNAMENT_IN_PROGRESS

        busiest = max((len(r.matches) for r in rounds), default=0)
        if busiest > self.config.courts:
            logger.warning(
                f"Rounds need {busiest} courts but only {self.config.courts} "
                "are configured"
            )

        logger.info(f"Tournament {self.name}: schedule generated, {len(rounds)} rounds")
        return rounds

    def complete_round(self, round_number: int) -> Round:
        """Close a round whose matches are all completed.

        Completing the last round finishes the tournament.

        Raises:
            RoundNotFoundException: If the round does not exist
            TournamentStateException: If matches are still unfinished
        """
        round_data = self.round_manager.mark_round_completed(round_number)
        if self.round_manager.is_finished:
            self.status = TOURNAMENT_COMPLETED
            logger.info(f"Tournament {self.name} completed")
        return round_data

    # ========== Result Management ==========

    def update_score(self, match_id: str, team: str, score: Any) -> Match:
        """Enter one team's score for a match.

        Raises:
            MatchNotFoundException: If no match has this id
            InvalidScoreException: If the team or score is invalid
        """
        match = self.round_manager.find_match(match_id)
        return self.result_recorder.update_score(match, team, score)

    def record_result(self, match_id: str, team1_score: Any, team2_score: Any) -> Match:
        """Enter both scores and complete the match."""
        match = self.round_manager.find_match(match_id)
        return self.result_recorder.record_result(match, team1_score, team2_score)

    def complete_match(self, match_id: str) -> Match:
        """Mark a match as completed with its current score."""
        match = self.round_manager.find_match(match_id)
        return self.result_recorder.complete_match(match)

    # ========== Standings ==========

    def leaderboard(self) -> List[LeaderboardEntry]:
        """Current ranked leaderboard, rebuilt from all completed matches."""
        return self.leaderboard_calculator.calculate(self.players, self.schedule)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        data: Dict[str, Any] = {"id": self.id}
        data.update(self.config.to_dict())
        data.update(
            {
                "players": [p.to_dict() for p in self.players],
                "schedule": [r.to_dict() for r in self.schedule],
                "status": self.status,
                "createdAt": self.created_at.isoformat(),
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object

        Raises:
            InvalidTournamentDataException: If the document is malformed
        """
        created_at = None
        if data.get("createdAt"):
            try:
                created_at = isoparse(data["createdAt"])
            except (TypeError, ValueError) as e:
                raise InvalidTournamentDataException(
                    f"Invalid createdAt {data['createdAt']!r}: {e}"
                ) from e

        players = data.get("players") or []
        schedule = data.get("schedule") or []
        if not isinstance(players, list) or not isinstance(schedule, list):
            raise InvalidTournamentDataException("players and schedule must be lists")

        tournament = cls(
            config=TournamentConfig.from_dict(data),
            players=[Player.from_dict(p) for p in players],
            tournament_id=data.get("id"),
            created_at=created_at,
        )
        tournament.round_manager = RoundManager(
            [Round.from_dict(r) for r in schedule]
        )

        status = data.get("status")
        if status not in TOURNAMENT_STATUSES:
            status = (
                TOURNAMENT_IN_PROGRESS if tournament.has_schedule else TOURNAMENT_ACTIVE
            )
        tournament.status = status

        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament
