"""A single match of a Swiss tournament and the rule applying its result."""

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
from typing import Dict, Optional, Tuple

from swisspairing.constants import (
    DRAW_SCORE,
    OUTCOME_RANGE,
    RESULT_BYE,
    RESULT_DRAW,
    RESULT_NOT_PLAYED,
    RESULT_PLAYER1_WIN,
    RESULT_PLAYER2_WIN,
    WIN_SCORE,
)
from swisspairing.enums import MatchOutcome, ParticipantStatus
from swisspairing.exceptions import (
    ByeResultException,
    DuplicateResultException,
    InvalidMatchException,
    InvalidResultException,
)
from swisspairing.participant import Participant
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

LOW = ParticipantStatus.LOW
MEDIUM = ParticipantStatus.MEDIUM
HIGH = ParticipantStatus.HIGH

# (player1 status, player2 status) -> (player1 win %, draw %)
# player2 wins the remaining share
OUTCOME_PROBABILITIES: Dict[
    Tuple[ParticipantStatus, ParticipantStatus], Tuple[int, int]
] = {
    (LOW, LOW): (45, 10),
    (LOW, MEDIUM): (35, 15),
    (LOW, HIGH): (30, 15),
    (MEDIUM, LOW): (50, 15),
    (MEDIUM, MEDIUM): (45, 10),
    (MEDIUM, HIGH): (35, 15),
    (HIGH, LOW): (55, 15),
    (HIGH, MEDIUM): (50, 15),
    (HIGH, HIGH): (45, 10),
}

RESULT_CODES = {
    MatchOutcome.WIN_PLAYER1: RESULT_PLAYER1_WIN,
    MatchOutcome.WIN_PLAYER2: RESULT_PLAYER2_WIN,
    MatchOutcome.DRAW: RESULT_DRAW,
    MatchOutcome.NOT_PLAYED: RESULT_NOT_PLAYED,
}


def outcome_from_draw(
    draw: int, status1: ParticipantStatus, status2: ParticipantStatus
) -> MatchOutcome:
    """Map a uniform draw in [0, 100) to an outcome for the given statuses.

    Args:
        draw: Random integer in [0, 100)
        status1: Status of player 1
        status2: Status of player 2

    Returns:
        WIN_PLAYER1 below the player 1 win chance, DRAW below the win plus
        draw chance, WIN_PLAYER2 otherwise
    """
    player1_win_chance, draw_chance = OUTCOME_PROBABILITIES[(status1, status2)]
    if draw < player1_win_chance:
        return MatchOutcome.WIN_PLAYER1
    if draw < player1_win_chance + draw_chance:
        return MatchOutcome.DRAW
    return MatchOutcome.WIN_PLAYER2


def _check_round_number(round_number: int) -> None:
    if isinstance(round_number, bool) or not isinstance(round_number, int):
        raise InvalidMatchException(
            f"Round number must be an integer, got {round_number!r}"
        )
    if round_number <= 0:
        raise InvalidMatchException(f"Round number must be > 0, got {round_number}")


class Match:
    """A pairing of two participants, or a bye for one, in a given round.

    A regular match starts NOT_PLAYED and is resolved exactly once through
    :meth:`set_result`. A bye match is created already resolved to
    WIN_PLAYER1; the bye itself is credited by the pairing engine.

    Attributes:
        round_number: Round the match belongs to
        player1: First participant
        player2: Second participant, or None for a bye
        result: Current outcome
    """

    def __init__(
        self,
        player1: Participant,
        player2: Participant,
        round_number: int,
    ) -> None:
        """Create a regular match between two different participants.

        Raises:
            InvalidMatchException: If a player is missing, both are the same,
                or round_number is not a positive integer
        """
        if player1 is None or player2 is None:
            raise InvalidMatchException("Players cannot be None")
        if player1 is player2 or player1.id == player2.id:
            raise InvalidMatchException("A player cannot play against themselves")
        _check_round_number(round_number)

        self._round_number = round_number
        self._player1 = player1
        self._player2: Optional[Participant] = player2
        self._result = MatchOutcome.NOT_PLAYED

    @classmethod
    def bye(cls, player: Participant, round_number: int) -> "Match":
        """Create a bye match, already resolved as a win for ``player``.

        Raises:
            InvalidMatchException: If player is None or round_number is not
                a positive integer
        """
        if player is None:
            raise InvalidMatchException("Player cannot be None")
        _check_round_number(round_number)

        match = cls.__new__(cls)
        match._round_number = round_number
        match._player1 = player
        match._player2 = None
        match._result = MatchOutcome.WIN_PLAYER1
        return match

    # ========== Properties ==========

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def player1(self) -> Participant:
        return self._player1

    @property
    def player2(self) -> Optional[Participant]:
        return self._player2

    @property
    def result(self) -> MatchOutcome:
        return self._result

    @property
    def is_bye(self) -> bool:
        return self._player2 is None

    @property
    def is_played(self) -> bool:
        return self._result != MatchOutcome.NOT_PLAYED

    # ========== Results ==========

    def set_result(self, outcome: MatchOutcome) -> None:
        """Record the outcome and apply it to both participants.

        Args:
            outcome: WIN_PLAYER1, WIN_PLAYER2 or DRAW

        Raises:
            InvalidResultException: If outcome is not a playable MatchOutcome
            ByeResultException: If the match is a bye and outcome is not
                WIN_PLAYER1
            DuplicateResultException: If the match already has a result
        """
        if not isinstance(outcome, MatchOutcome):
            raise InvalidResultException(f"Unknown match result: {outcome!r}")
        if outcome == MatchOutcome.NOT_PLAYED:
            raise InvalidResultException("NOT_PLAYED cannot be set as a result")

        if self.is_bye:
            if outcome != MatchOutcome.WIN_PLAYER1:
                raise ByeResultException("Bye match result must be WIN_PLAYER1")
            # The bye was credited when the match was created
            return

        if self.is_played:
            raise DuplicateResultException(
                f"Result already recorded for {self.player1.name} vs "
                f"{self.player2.name}: {self._result.value}"
            )

        self._result = outcome
        self._apply_result()

    def _apply_result(self) -> None:
        """Update opponents, scores and counters of both participants."""
        player1, player2 = self._player1, self._player2
        player1.add_opponent(player2)
        player2.add_opponent(player1)

        if self._result == MatchOutcome.WIN_PLAYER1:
            player1.add_point(WIN_SCORE)
            player1.add_win()
            player2.add_loss()
        elif self._result == MatchOutcome.WIN_PLAYER2:
            player2.add_point(WIN_SCORE)
            player2.add_win()
            player1.add_loss()
        elif self._result == MatchOutcome.DRAW:
            player1.add_point(DRAW_SCORE)
            player2.add_point(DRAW_SCORE)
            player1.add_draw()
            player2.add_draw()

        logger.debug(
            "Round %s: %s vs %s => %s",
            self._round_number,
            player1.name,
            player2.name,
            self._result.value,
        )

    def auto_resolve(self, rng: Optional[random.Random] = None) -> MatchOutcome:
        """Generate and apply a random result weighted by participant status.

        Args:
            rng: Source of randomness; a fresh ``random.Random`` if omitted

        Returns:
            The outcome that was applied

        Raises:
            ByeResultException: If this is a bye
            DuplicateResultException: If the match was already played
        """
        if self.is_bye:
            raise ByeResultException("Cannot generate a random result for a bye match")
        rng = rng if rng is not None else random.Random()

        draw = rng.randrange(OUTCOME_RANGE)
        outcome = outcome_from_draw(draw, self._player1.status, self._player2.status)
        self.set_result(outcome)
        return outcome

    # ========== Display ==========

    @property
    def result_code(self) -> str:
        """Short result code such as ``1-0`` or ``NOT_PLAYED``."""
        if self.is_bye:
            return RESULT_BYE
        return RESULT_CODES[self._result]

    def to_file_string(self) -> str:
        """Format the match as a row of the tournament text file."""
        if self.is_bye:
            return f"{self._player1.name} {RESULT_BYE}"
        return (
            f"{self._player1.name} vs {self._player2.name} => {self.result_code}"
        )

    def __str__(self) -> str:
        if self.is_bye:
            return f"Round {self._round_number}: {self._player1.name} (BYE)"

        if self._result == MatchOutcome.WIN_PLAYER1:
            result_str = f"{self._player1.name} wins"
        elif self._result == MatchOutcome.WIN_PLAYER2:
            result_str = f"{self._player2.name} wins"
        elif self._result == MatchOutcome.DRAW:
            result_str = "Draw"
        else:
            result_str = "Not played yet"

        return (
            f"Round {self._round_number}: {self._player1.name} vs "
            f"{self._player2.name} => {result_str}"
        )

    def __repr__(self) -> str:
        player2_id = self._player2.id if self._player2 else None
        return (
            f"Match(round={self._round_number}, player1={self._player1.id}, "
            f"player2={player2_id}, result={self._result.value})"
        )
