"""Round management for tournaments.

This module handles all round-related operations including pairing generation,
round progression, and round history management.
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

from typing import Iterable, List

from swisspairing.exceptions import (
    InvalidArgumentException,
    RoundNotFoundException,
    TournamentStateException,
)
from swisspairing.models import Match
from swisspairing.pairing import create_swiss_pairings
from swisspairing.participant import Participant
from swisspairing.type_hints import RoundMatches
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Generating pairings for the next round
    - Keeping the ordered, append-only match history
    - Refusing rounds before the start or past the last round
    """

    def __init__(self, total_rounds: int = 0) -> None:
        """Initialize the round manager.

        Args:
            total_rounds: Total number of rounds, 0 until the tournament starts
        """
        self.total_rounds = total_rounds
        self.current_round = 0
        self._matches: List[Match] = []

    @property
    def matches(self) -> List[Match]:
        """All matches generated so far, in order (a copy)."""
        return list(self._matches)

    @property
    def is_complete(self) -> bool:
        """True once every round has been generated."""
        return self.total_rounds > 0 and self.current_round >= self.total_rounds

    def contains(self, match: Match) -> bool:
        """Check whether ``match`` was generated by this manager."""
        return any(m is match for m in self._matches)

    def get_round_matches(self, round_number: int) -> RoundMatches:
        """Get the matches of a specific round.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            Matches of the round in pairing order

        Raises:
            InvalidArgumentException: If round_number is not positive
            RoundNotFoundException: If the round has not been generated yet
        """
        if round_number <= 0:
            raise InvalidArgumentException("Round number must be positive")
        if round_number > self.current_round:
            raise RoundNotFoundException(
                f"Round {round_number} has not been generated yet"
            )
        return [m for m in self._matches if m.round_number == round_number]

    def create_next_round(self, participants: Iterable[Participant]) -> RoundMatches:
        """Generate pairings for the next round.

        Args:
            participants: All tournament participants

        Returns:
            The new matches, bye first

        Raises:
            TournamentStateException: If the tournament has not started or all
                rounds have already been created
        """
        if self.total_rounds == 0:
            raise TournamentStateException(
                "Tournament has not been started. Call start_tournament() first."
            )
        if self.current_round >= self.total_rounds:
            raise TournamentStateException(
                f"All rounds have been completed ({self.total_rounds} rounds)"
            )

        round_number = self.current_round + 1
        logger.info("Creating round %s of %s", round_number, self.total_rounds)

        round_matches = create_swiss_pairings(participants, round_number)
        self._matches.extend(round_matches)
        self.current_round = round_number

        return round_matches
