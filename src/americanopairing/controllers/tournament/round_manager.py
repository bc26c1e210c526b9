"""Round management for tournaments.

This module handles schedule creation, round lookup and round progression.
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

from typing import List, Optional, Sequence

from americanopairing.constants import ROUND_ACTIVE, ROUND_COMPLETED, ROUND_PENDING
from americanopairing.exceptions import (
    MatchNotFoundException,
    RoundNotFoundException,
    TournamentStateException,
)
from americanopairing.models.player import Player
from americanopairing.models.tournament import Match, Round
from americanopairing.pairing import generate_schedule
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages the schedule of a tournament.

    This class is responsible for:
    - Generating the schedule once from the roster
    - Looking up rounds and matches
    - Moving the active marker from round to round
    """

    def __init__(self, rounds: Optional[List[Round]] = None):
        """Initialize the round manager.

        Args:
            rounds: Existing schedule, e.g. one loaded from a saved tournament
        """
        self.rounds: List[Round] = list(rounds) if rounds else []

    @property
    def has_schedule(self) -> bool:
        return bool(self.rounds)

    @property
    def current_round(self) -> Optional[Round]:
        """The active round, or None before scheduling and after the last round."""
        for round_data in self.rounds:
            if round_data.status == ROUND_ACTIVE:
                return round_data
        return None

    @property
    def completed_rounds_count(self) -> int:
        """Get the number of completed rounds."""
        return sum(1 for round_data in self.rounds if round_data.is_completed)

    @property
    def is_finished(self) -> bool:
        """True once a schedule exists and every round is completed."""
        return self.has_schedule and all(r.is_completed for r in self.rounds)

    def create_schedule(self, players: Sequence[Player]) -> List[Round]:
        """Generate the schedule for the roster.

        Raises:
            TournamentStateException: If a schedule already exists
            InvalidRosterError: If the roster size is not schedulable
        """
        if self.has_schedule:
            logger.warning("Schedule already generated, refusing to regenerate")
            raise TournamentStateException("Schedule has already been generated")

        self.rounds = generate_schedule(players)
        logger.info(f"Created schedule with {len(self.rounds)} rounds")
        return self.rounds

    def get_round(self, round_number: int) -> Round:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Raises:
            RoundNotFoundException: If no such round exists
        """
        for round_data in self.rounds:
            if round_data.round_number == round_number:
                return round_data
        raise RoundNotFoundException(f"Round {round_number} does not exist")

    def find_match(self, match_id: str) -> Match:
        """Find a match anywhere in the schedule.

        Raises:
            MatchNotFoundException: If no match has this id
        """
        for round_data in self.rounds:
            match = round_data.get_match(match_id)
            if match is not None:
                return match
        raise MatchNotFoundException(f"Match {match_id!r} does not exist")

    def mark_round_completed(self, round_number: int) -> Round:
        """Mark a round as completed and activate the next pending one.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            The completed round

        Raises:
            RoundNotFoundException: If the round does not exist
            TournamentStateException: If it is already completed, is not
                the active round or has unfinished matches
        """
        round_data = self.get_round(round_number)

        if round_data.is_completed:
            logger.warning(f"Round {round_number} is already completed")
            raise TournamentStateException(f"Round {round_number} is already completed")

        if round_data.status != ROUND_ACTIVE:
            logger.warning(f"Round {round_number} is not the active round")
            raise TournamentStateException(f"Round {round_number} is not active yet")

        if not round_data.all_matches_completed:
            pending = [m.id for m in round_data.matches if not m.is_completed]
            logger.warning(
                f"Cannot complete round {round_number}: unfinished matches {pending}"
            )
            raise TournamentStateException(
                f"Round {round_number} still has unfinished matches: {', '.join(pending)}"
            )

        round_data.status = ROUND_COMPLETED
        logger.info(f"Round {round_number} marked as completed")

        next_round = self._next_pending_round(round_number)
        if next_round is not None:
            next_round.status = ROUND_ACTIVE
            logger.info(f"Round {next_round.round_number} is now active")

        return round_data

    def _next_pending_round(self, after_round_number: int) -> Optional[Round]:
        for round_data in self.rounds:
            if (
                round_data.round_number > after_round_number
                and round_data.status == ROUND_PENDING
            ):
                return round_data
        return None
