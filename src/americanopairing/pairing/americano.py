"""Americano Pairing System Implementation.

Builds every round up front with a greedy search: in each round the
cheapest group of four still available becomes the next match, where cost
is the number of partnerships and opponent pairings the match would repeat.

The search scans every 4-subset of the available pool, so each round costs
O(m^4) in the pool size m. That is a few thousand candidates per round for
16 players and acceptable up to roughly 24 to 32 players. Replacing the
scan would change which schedules come out, so it stays as is.
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

from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from americanopairing.constants import (
    MATCH_PENDING,
    MAX_ROUNDS,
    MIN_PLAYERS,
    PLAYERS_PER_MATCH,
    ROUND_ACTIVE,
    ROUND_PENDING,
)
from americanopairing.exceptions import InvalidRosterError
from americanopairing.models.player import Player
from americanopairing.models.tournament import ConflictTracker, Match, Round, Score
from americanopairing.type_hints import PlayerId, Team
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)

Candidate = Tuple[Team, Team]


def is_valid_roster_size(num_players: int) -> bool:
    """Americano needs at least four players and a multiple of four."""
    return num_players >= MIN_PLAYERS and num_players % PLAYERS_PER_MATCH == 0


def calculate_total_rounds(num_players: int) -> int:
    """Number of rounds generated for a roster: ``min((n - 1) * 3 // 4, 8)``.

    >>> calculate_total_rounds(4), calculate_total_rounds(8), calculate_total_rounds(16)
    (2, 5, 8)
    """
    return min((num_players - 1) * 3 // 4, MAX_ROUNDS)


def generate_schedule(players: Sequence[Player]) -> List[Round]:
    """
    Create the full Americano schedule for a roster.

    - players: roster in seeding order; the order drives tie-breaking, so the
      same roster in the same order always yields the same schedule.

    Returns: list of rounds. Round 1 is ``active``, the rest ``pending``;
    every match starts ``pending`` at 0-0.

    Raises InvalidRosterError when fewer than four players are given or the
    count is not a multiple of four. Nothing is computed in that case.
    """
    num_players = len(players)
    if not is_valid_roster_size(num_players):
        logger.warning(f"Rejected roster of {num_players} players")
        raise InvalidRosterError(num_players)

    player_ids = [p.id for p in players]
    total_rounds = calculate_total_rounds(num_players)
    tracker = ConflictTracker.for_players(player_ids)

    logger.info(
        f"Generating Americano schedule: {num_players} players, {total_rounds} rounds"
    )

    rounds: List[Round] = []
    for round_index in range(total_rounds):
        matches = _build_round_matches(round_index, player_ids, tracker)
        if not matches:
            continue
        rounds.append(
            Round(
                id=f"round-{round_index}",
                round_number=round_index + 1,
                matches=matches,
                status=ROUND_ACTIVE if round_index == 0 else ROUND_PENDING,
            )
        )

    return rounds


def _build_round_matches(
    round_index: int, player_ids: List[PlayerId], tracker: ConflictTracker
) -> List[Match]:
    """Fill one round greedily, committing each chosen match to the tracker."""
    available = list(player_ids)
    matches: List[Match] = []

    while len(available) >= PLAYERS_PER_MATCH:
        best = _find_best_match(available, tracker)
        if best is None:
            break

        (team1, team2), conflicts = best
        match_index = len(matches)
        matches.append(
            Match(
                id=f"round-{round_index}-match-{match_index}",
                team1=team1,
                team2=team2,
                court=match_index + 1,
                score=Score(),
                status=MATCH_PENDING,
            )
        )
        logger.debug(
            f"Round {round_index + 1} court {match_index + 1}: "
            f"{team1} vs {team2} (conflicts: {conflicts})"
        )

        tracker.record_match(team1, team2)
        for pid in team1 + team2:
            available.remove(pid)

    if available:
        # Leftovers sit the round out; no bye is recorded
        logger.debug(f"Round {round_index + 1}: {available} not scheduled")

    return matches


def _find_best_match(
    available: List[PlayerId], tracker: ConflictTracker
) -> Optional[Tuple[Candidate, int]]:
    """
    Pick the 4-subset of ``available`` with the fewest repeats.

    combinations() yields positions i < j < k < l in lexicographic order;
    the first two positions form team1 and the last two team2. The other
    two ways of splitting the same four players are never evaluated.
    Ties keep the earliest candidate.

    Returns ((team1, team2), conflict_score), or None if fewer than four
    players are available.
    """
    best: Optional[Candidate] = None
    min_conflicts: Optional[int] = None

    for p1, p2, p3, p4 in combinations(available, PLAYERS_PER_MATCH):
        team1, team2 = (p1, p2), (p3, p4)
        conflicts = tracker.conflict_score(team1, team2)
        if min_conflicts is None or conflicts < min_conflicts:
            best = (team1, team2)
            min_conflicts = conflicts
            if conflicts == 0:
                # Nothing later can be strictly lower
                break

    if best is None:
        return None
    return best, min_conflicts
