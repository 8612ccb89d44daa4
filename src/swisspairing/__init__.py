"""Swiss-system tournament management: pairing, results and standings."""

from swisspairing.enums import MatchOutcome, ParticipantStatus
from swisspairing.models import Match
from swisspairing.participant import Participant
from swisspairing.tournament import Tournament

__version__ = "0.1.0"

__all__ = [
    "Match",
    "MatchOutcome",
    "Participant",
    "ParticipantStatus",
    "Tournament",
]
