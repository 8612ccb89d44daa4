"""Type hints used in Swiss Pairing."""

from typing import Dict, List

# Participant ids are positive integers
ParticipantId = int

# Participants indexed by id
ParticipantArena = Dict[ParticipantId, "Participant"]
# All matches of one round, bye first
RoundMatches = List["Match"]
