from americanopairing.models.tournament.conflict_tracker import ConflictTracker
from americanopairing.models.tournament.leaderboard_entry import LeaderboardEntry
from americanopairing.models.tournament.match import Match, Score
from americanopairing.models.tournament.round_data import Round
from americanopairing.models.tournament.tournament_config import TournamentConfig

__all__ = [
    "ConflictTracker",
    "LeaderboardEntry",
    "Match",
    "Score",
    "Round",
    "TournamentConfig",
]
