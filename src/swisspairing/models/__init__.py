"""Data models for Swiss tournaments."""

from swisspairing.models.match import Match, outcome_from_draw
from swisspairing.models.tournament_config import TournamentConfig

__all__ = [
    "Match",
    "TournamentConfig",
    "outcome_from_draw",
]
