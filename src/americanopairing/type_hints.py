"""Type hints used in Americano Pairing."""

from typing import List, Literal, Tuple, Union

# Player identifiers are opaque: whatever the caller hands us
PlayerId = Union[str, int]

# Two player ids playing on the same side
Team = Tuple[PlayerId, PlayerId]

# Status literals (for type hints)
MatchStatus = Literal["pending", "in_progress", "completed"]
RoundStatus = Literal["pending", "active", "completed"]
TournamentStatus = Literal["active", "in_progress", "completed"]
TeamKey = Literal["team1", "team2"]

# All rounds of a tournament
Schedule = List["Round"]
Roster = List["Player"]

#  LocalWords:  PlayerId
