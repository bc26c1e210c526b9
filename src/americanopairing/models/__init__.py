from americanopairing.models.player import Player, create_player, generate_player_id
from americanopairing.models.tournament import (
    ConflictTracker,
    LeaderboardEntry,
    Match,
    Round,
    Score,
    TournamentConfig,
)

__all__ = [
    "Player",
    "create_player",
    "generate_player_id",
    "ConflictTracker",
    "LeaderboardEntry",
    "Match",
    "Round",
    "Score",
    "TournamentConfig",
]
