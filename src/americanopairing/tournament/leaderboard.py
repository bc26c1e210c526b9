"""Leaderboard calculation for tournaments.

This module folds completed match results into per-player standings.
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

from typing import Dict, Iterable, List, Sequence

from americanopairing.constants import (
    DRAW_POINTS,
    LOSS_POINTS,
    TEAM1,
    TEAM2,
    WIN_POINTS,
)
from americanopairing.models.player import Player
from americanopairing.models.tournament import LeaderboardEntry, Match, Round
from americanopairing.type_hints import PlayerId
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)


class LeaderboardCalculator:
    """Calculates the ranked leaderboard of an Americano tournament.

    Scoring per completed match:
    - Win: 3 points and one match won
    - Draw: 2 points
    - Loss: 1 point
    - Sets won/lost: the team's own and the opposing score

    Ranking: points, then matches won, then set difference, all descending.
    Players tied on all three keep roster order.

    The calculator keeps no state between calls. Scores can be edited after
    a match was completed, so the leaderboard is always rebuilt from the
    whole match history.
    """

    def calculate(
        self, players: Sequence[Player], rounds: Iterable[Round]
    ) -> List[LeaderboardEntry]:
        """Build the ranked leaderboard.

        Args:
            players: Tournament roster; every player gets an entry
            rounds: Schedule in any state of completion

        Returns:
            New list of entries, best first
        """
        entries: Dict[PlayerId, LeaderboardEntry] = {}
        for player in players:
            entries[player.id] = LeaderboardEntry(id=player.id, name=player.name)

        for round_data in rounds:
            for match in round_data.matches:
                if match.is_completed:
                    self._apply_match(match, entries)

        # sorted() is stable, so full ties stay in roster order
        return sorted(entries.values(), key=lambda e: e.ranking_key, reverse=True)

    def _apply_match(self, match: Match, entries: Dict[PlayerId, LeaderboardEntry]) -> None:
        """Add one completed match to the running totals."""
        winner = match.winning_team

        for team, player_ids in ((TEAM1, match.team1), (TEAM2, match.team2)):
            own, opposing = match.score.for_team(team)
            for player_id in player_ids:
                entry = entries.get(player_id)
                if entry is None:
                    logger.debug(
                        f"Match {match.id}: player {player_id!r} not on roster, skipped"
                    )
                    continue

                entry.matches_played += 1
                entry.sets_won += own
                entry.sets_lost += opposing

                if winner is None:
                    entry.points += DRAW_POINTS
                elif winner == team:
                    entry.matches_won += 1
                    entry.points += WIN_POINTS
                else:
                    entry.points += LOSS_POINTS


def calculate_leaderboard(
    players: Sequence[Player], rounds: Iterable[Round]
) -> List[LeaderboardEntry]:
    """Compute the ranked leaderboard for a roster and its schedule.

    Never raises; an empty schedule gives every player a zero entry in
    roster order.
    """
    return LeaderboardCalculator().calculate(players, rounds)
