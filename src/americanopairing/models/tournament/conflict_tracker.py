"""Partner and opponent history used while building a schedule."""

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
from typing import Dict, Iterable, Set

from americanopairing.type_hints import PlayerId, Team


@dataclass
class ConflictTracker:
    """
    Tracks who has partnered and who has faced whom.

    Both relations are symmetric: recording a match updates the sets of
    every participant. The tracker lives only for one schedule generation.

    Attributes
    ----------
    partners : dict of player id to set of player ids
        Players each player has already shared a team with.
    opponents : dict of player id to set of player ids
        Players each player has already played against.
    """

    partners: Dict[PlayerId, Set[PlayerId]] = field(default_factory=dict)
    opponents: Dict[PlayerId, Set[PlayerId]] = field(default_factory=dict)

    @classmethod
    def for_players(cls, player_ids: Iterable[PlayerId]) -> "ConflictTracker":
        """Create an empty tracker with a slot for every player."""
        tracker = cls()
        for pid in player_ids:
            tracker.partners[pid] = set()
            tracker.opponents[pid] = set()
        return tracker

    def have_partnered(self, player1_id: PlayerId, player2_id: PlayerId) -> bool:
        """Check if two players have already been on the same team."""
        return player2_id in self.partners.get(player1_id, ())

    def have_opposed(self, player1_id: PlayerId, player2_id: PlayerId) -> bool:
        """Check if two players have already played against each other."""
        return player2_id in self.opponents.get(player1_id, ())

    def conflict_score(self, team1: Team, team2: Team) -> int:
        """Count repeats a candidate match would introduce.

        One point per team that already partnered and one per cross-team
        pair that already opposed, so the result lies in 0..6.
        """
        score = int(self.have_partnered(team1[0], team1[1]))
        score += int(self.have_partnered(team2[0], team2[1]))
        for p1 in team1:
            for p2 in team2:
                score += int(self.have_opposed(p1, p2))
        return score

    def record_match(self, team1: Team, team2: Team) -> None:
        """Record a committed match."""
        for team in (team1, team2):
            a, b = team
            self.partners.setdefault(a, set()).add(b)
            self.partners.setdefault(b, set()).add(a)

        for p1 in team1:
            for p2 in team2:
                self.opponents.setdefault(p1, set()).add(p2)
                self.opponents.setdefault(p2, set()).add(p1)

