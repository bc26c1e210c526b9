"""
Unified printing utilities for tournament output.
This module renders schedules and leaderboards as plain-text tables.
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

from typing import Dict, List, Sequence

from americanopairing.constants import LEADERBOARD_COLUMNS, MATCH_COMPLETED
from americanopairing.models.player import Player
from americanopairing.models.tournament import LeaderboardEntry, Match, Round
from americanopairing.type_hints import PlayerId

UNKNOWN_PLAYER = "Unknown"


class TournamentPrintUtils:
    """Utility class for plain-text tournament output."""

    @staticmethod
    def team_label(team: Sequence[PlayerId], names: Dict[PlayerId, str]) -> str:
        """
        Join a team's player names the way match cards show them.

        Args:
            team: Player ids of one team
            names: Mapping of player id to name

        Returns:
            Names joined with " + ", "Unknown" for ids not on the roster
        """
        return " + ".join(names.get(pid, UNKNOWN_PLAYER) for pid in team)

    @staticmethod
    def format_match(match: Match, names: Dict[PlayerId, str]) -> str:
        """One line per match: court, teams, score and status."""
        team1 = TournamentPrintUtils.team_label(match.team1, names)
        team2 = TournamentPrintUtils.team_label(match.team2, names)
        line = f"  Court {match.court}: {team1} vs {team2}"
        if match.status == MATCH_COMPLETED:
            return f"{line}  {match.score.team1}-{match.score.team2}"
        return f"{line}  [{match.status.upper()}]"

    @staticmethod
    def format_schedule(players: Sequence[Player], rounds: Sequence[Round]) -> str:
        """
        Render every round of a schedule.

        Returns:
            Multi-line text, one block per round
        """
        if not rounds:
            return "No schedule generated"

        names = {p.id: p.name for p in players}
        lines: List[str] = []
        for round_data in rounds:
            lines.append(f"Round {round_data.round_number} ({round_data.status})")
            for match in round_data.matches:
                lines.append(TournamentPrintUtils.format_match(match, names))
            lines.append("")
        return "\n".join(lines).rstrip()

    @staticmethod
    def format_leaderboard(entries: Sequence[LeaderboardEntry]) -> str:
        """
        Render a leaderboard as an aligned table.

        Returns:
            Header, separator and one row per entry
        """
        keys = list(LEADERBOARD_COLUMNS)
        rows = [[LEADERBOARD_COLUMNS[k] for k in keys]]
        for rank, entry in enumerate(entries, start=1):
            values = {
                "rank": rank,
                "name": entry.name,
                "matches_played": entry.matches_played,
                "matches_won": entry.matches_won,
                "sets_won": entry.sets_won,
                "sets_lost": entry.sets_lost,
                "set_difference": f"{entry.set_difference:+d}",
                "points": entry.points,
            }
            rows.append([str(values[k]) for k in keys])

        widths = [max(len(row[i]) for row in rows) for i in range(len(keys))]
        lines = []
        for index, row in enumerate(rows):
            cells = [
                cell.ljust(width) if keys[i] == "name" else cell.rjust(width)
                for i, (cell, width) in enumerate(zip(row, widths))
            ]
            lines.append("  ".join(cells).rstrip())
            if index == 0:
                lines.append("  ".join("-" * w for w in widths))
        return "\n".join(lines)
