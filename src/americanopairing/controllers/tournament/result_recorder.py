"""Result recording and validation for tournaments.

This module handles score entry and match completion with proper validation.
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

from typing import Any

from americanopairing.constants import MATCH_COMPLETED, MATCH_IN_PROGRESS, TEAM1
from americanopairing.models.tournament import Match
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import (
    validate_score_strict,
    validate_team_key_strict,
)

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Validating scores before they reach a match
    - Moving matches from pending to in progress to completed
    - Reopening a completed match when its score is edited
    """

    def update_score(self, match: Match, team: str, score: Any) -> Match:
        """Set one team's score and move the match to ``in_progress``.

        Editing a completed match reopens it, so it drops out of the
        leaderboard until it is completed again.

        Args:
            match: Match to update
            team: ``"team1"`` or ``"team2"``
            score: Non-negative integer (integral strings are accepted)

        Raises:
            InvalidScoreException: If the team or score is invalid
        """
        team = validate_team_key_strict(team)
        value = validate_score_strict(score)

        if team == TEAM1:
            match.score.team1 = value
        else:
            match.score.team2 = value

        if match.is_completed:
            logger.info(f"Reopened completed match {match.id} for a score edit")
        match.status = MATCH_IN_PROGRESS
        logger.debug(f"Match {match.id} score {match.score.team1}-{match.score.team2}")

        return match

    def record_result(self, match: Match, team1_score: Any, team2_score: Any) -> Match:
        """Set both scores and complete the match in one step.

        Raises:
            InvalidScoreException: If either score is invalid
        """
        # Validate both before touching the match
        team1_value = validate_score_strict(team1_score)
        team2_value = validate_score_strict(team2_score)

        match.score.team1 = team1_value
        match.score.team2 = team2_value
        match.status = MATCH_IN_PROGRESS
        return self.complete_match(match)

    def complete_match(self, match: Match) -> Match:
        """Mark a match as completed with its current score."""
        if match.is_completed:
            logger.warning(f"Match {match.id} is already completed")
            return match

        match.status = MATCH_COMPLETED
        logger.info(
            f"Match {match.id} completed: {match.score.team1}-{match.score.team2}"
        )
        return match
