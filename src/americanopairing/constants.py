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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Match outcome points
WIN_POINTS = 3
DRAW_POINTS = 2
LOSS_POINTS = 1

# Doubles format
PLAYERS_PER_TEAM = 2
PLAYERS_PER_MATCH = 4

# Schedule size
MAX_ROUNDS = 8
MIN_PLAYERS = PLAYERS_PER_MATCH

# Conflict score range for one candidate match:
# two partnerships plus four opponent pairs
MAX_CONFLICT_SCORE = 6

# Match status
MATCH_PENDING = "pending"
MATCH_IN_PROGRESS = "in_progress"
MATCH_COMPLETED = "completed"
MATCH_STATUSES = (MATCH_PENDING, MATCH_IN_PROGRESS, MATCH_COMPLETED)

# Round status
ROUND_PENDING = "pending"
ROUND_ACTIVE = "active"
ROUND_COMPLETED = "completed"
ROUND_STATUSES = (ROUND_PENDING, ROUND_ACTIVE, ROUND_COMPLETED)

# Tournament status
TOURNAMENT_ACTIVE = "active"  # Accepting players, no schedule yet
TOURNAMENT_IN_PROGRESS = "in_progress"
TOURNAMENT_COMPLETED = "completed"
TOURNAMENT_STATUSES = (TOURNAMENT_ACTIVE, TOURNAMENT_IN_PROGRESS, TOURNAMENT_COMPLETED)

# Team keys used in scores and serialized documents
TEAM1 = "team1"
TEAM2 = "team2"
TEAMS = (TEAM1, TEAM2)

# Tournament configuration
MIN_COURTS = 1
MAX_COURTS = 10
DEFAULT_COURTS = 2
DEFAULT_MATCH_DURATION = 15  # minutes
DEFAULT_BREAK_DURATION = 5  # minutes
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# Leaderboard column names for display
LEADERBOARD_COLUMNS = {
    "rank": "#",
    "name": "Player",
    "matches_played": "Played",
    "matches_won": "Won",
    "sets_won": "Sets Won",
    "sets_lost": "Sets Lost",
    "set_difference": "Diff",
    "points": "Points",
}
