"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

import random
from typing import List, Optional, Sequence

from swisspairing.enums import MatchOutcome
from swisspairing.exceptions import (
    DuplicateResultException,
    InvalidResultException,
    TournamentStateException,
)
from swisspairing.models import Match
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

PLAYABLE_OUTCOMES = (
    MatchOutcome.WIN_PLAYER1,
    MatchOutcome.WIN_PLAYER2,
    MatchOutcome.DRAW,
)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Recording single results and whole rounds
    - Generating random results from an injectable random source
    - Preventing duplicate result recording
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def record_result(self, match: Match, outcome: MatchOutcome) -> None:
        """Record the result of a single match.

        Raises:
            InvalidResultException: If outcome is not a playable result
            DuplicateResultException: If the match cannot take this result
        """
        match.set_result(outcome)
        logger.info("Recorded: %s", match)

    def record_round_results(
        self, round_matches: Sequence[Match], outcomes: Sequence[MatchOutcome]
    ) -> None:
        """Record one outcome per non-bye match of a round.

        Every entry is validated before any result is applied, so a bad
        entry leaves the whole round untouched.

        Args:
            round_matches: Matches of the round, byes included
            outcomes: Outcomes for the non-bye matches, in order

        Raises:
            InvalidResultException: If the outcome count or an outcome is wrong
            DuplicateResultException: If a match already has a result
        """
        playable = [m for m in round_matches if not m.is_bye]
        if len(outcomes) != len(playable):
            raise InvalidResultException(
                f"Expected {len(playable)} results, got {len(outcomes)}"
            )

        for match, outcome in zip(playable, outcomes):
            self._validate_result_entry(match, outcome)

        for match, outcome in zip(playable, outcomes):
            self.record_result(match, outcome)

    def auto_generate_round_results(self, round_matches: Sequence[Match]) -> List[Match]:
        """Generate random results for every unplayed, non-bye match.

        Args:
            round_matches: Matches of the round

        Returns:
            The matches that received a result

        Raises:
            TournamentStateException: If the round has no matches
        """
        if not round_matches:
            raise TournamentStateException(
                "No matches in current round to generate results for"
            )

        resolved = []
        for match in round_matches:
            if match.is_bye or match.is_played:
                continue
            match.auto_resolve(self.rng)
            logger.info("Generated: %s", match)
            resolved.append(match)

        return resolved

    def _validate_result_entry(self, match: Match, outcome: MatchOutcome) -> None:
        """Validate a result entry before recording."""
        if outcome not in PLAYABLE_OUTCOMES:
            raise InvalidResultException(f"Invalid result: {outcome!r}")
        if match.is_played:
            raise DuplicateResultException(
                f"Result for {match.player1.name} vs {match.player2.name} "
                "already recorded"
            )
