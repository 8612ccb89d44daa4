from swisspairing.participant.participant import Participant

__all__ = [
    "Participant",
]
