"""Tiebreak calculation and standings order for tournaments.

This module handles the Buchholz-based tiebreak system used to rank
participants of a Swiss tournament.
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
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

import functools
from typing import Dict, Iterable, List, Optional

from swisspairing.constants import DEFAULT_TIEBREAK_ORDER, TB_BUCHHOLZ, TB_WINS
from swisspairing.participant import Participant
from swisspairing.type_hints import ParticipantArena, ParticipantId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class TiebreakCalculator:
    """Calculates tiebreak scores and the standings order.

    Standings are ordered by:
    - Score (descending)
    - Buchholz: sum of opponents' current scores (descending)
    - Number of wins, byes included (descending)
    - Participant id (ascending), so the order is always strict

    Nothing is cached; every call reflects the participants' live state.
    """

    def __init__(self, tiebreak_order: Optional[List[str]] = None) -> None:
        self.tiebreak_order = list(tiebreak_order or DEFAULT_TIEBREAK_ORDER)

    def calculate_all_tiebreaks(
        self, arena: ParticipantArena
    ) -> Dict[ParticipantId, Dict[str, float]]:
        """Calculate all tiebreaks for all participants.

        Args:
            arena: All participants indexed by id

        Returns:
            Mapping of participant id to its tiebreak values
        """
        return {
            participant.id: self.calculate_participant_tiebreaks(participant, arena)
            for participant in arena.values()
        }

    def calculate_participant_tiebreaks(
        self, participant: Participant, arena: ParticipantArena
    ) -> Dict[str, float]:
        """Calculate the tiebreak scores of a single participant."""
        return {
            TB_BUCHHOLZ: participant.buchholz(arena),
            TB_WINS: float(participant.wins),
        }

    def get_standings(self, participants: Iterable[Participant]) -> List[Participant]:
        """Rank participants from first to last.

        Args:
            participants: Participants to rank; Buchholz is resolved among them

        Returns:
            New list of participants in standings order
        """
        pool = list(participants)
        arena = {p.id: p for p in pool}
        tiebreaks = self.calculate_all_tiebreaks(arena)

        def compare(p1: Participant, p2: Participant) -> int:
            return self._compare_participants(p1, p2, tiebreaks)

        standings = sorted(pool, key=functools.cmp_to_key(compare))
        logger.debug("Standings: %s", [p.id for p in standings])
        return standings

    def _compare_participants(
        self,
        p1: Participant,
        p2: Participant,
        tiebreaks: Dict[ParticipantId, Dict[str, float]],
    ) -> int:
        """Compare two participants for standings order.

        Returns:
            -1 if p1 ranks higher, 1 if p2 ranks higher, 0 only for the
            same participant
        """
        # Compare scores
        if p1.score != p2.score:
            return -1 if p1.score > p2.score else 1

        # Compare tiebreaks in order
        for tb_key in self.tiebreak_order:
            tb1 = tiebreaks[p1.id].get(tb_key, 0.0)
            tb2 = tiebreaks[p2.id].get(tb_key, 0.0)
            if tb1 != tb2:
                return -1 if tb1 > tb2 else 1

        # Lower id first
        if p1.id != p2.id:
            return -1 if p1.id < p2.id else 1

        return 0
