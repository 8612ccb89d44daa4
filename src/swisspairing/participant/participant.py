"""A participant in a Swiss tournament."""

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

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set

from swisspairing.constants import BYE_SCORE
from swisspairing.enums import ParticipantStatus
from swisspairing.exceptions import (
    ByeAlreadyAwardedException,
    InvalidArgumentException,
)
from swisspairing.type_hints import ParticipantArena, ParticipantId
from swisspairing.utils import setup_logger
from swisspairing.utils.validation import (
    validate_name_strict,
    validate_participant_id_strict,
    validate_status_strict,
)

logger = setup_logger(__name__)


class Participant:
    """Represents a participant in the tournament.

    Opponents are tracked by id rather than by reference; the tournament's
    id-indexed arena resolves them when their scores are needed.

    Attributes:
        id: Unique positive identifier, immutable after creation
        name: Participant's name (never empty)
        status: Skill tier, only used for random outcomes
        score: Current tournament score
        opponent_ids: Ids of participants already played (byes excluded)
        was_byed: Whether the participant has received a bye
        wins: Number of wins, a bye counts as a win
        draws: Number of draws
        losses: Number of losses
    """

    def __init__(
        self,
        participant_id: ParticipantId,
        name: str,
        status: ParticipantStatus = ParticipantStatus.LOW,
    ) -> None:
        self._id: ParticipantId = validate_participant_id_strict(participant_id)
        self._name: str = validate_name_strict(name)
        self._status: ParticipantStatus = validate_status_strict(status)

        self.score: float = 0.0
        self.opponent_ids: Set[ParticipantId] = set()
        self.was_byed: bool = False

        self.wins: int = 0
        self.draws: int = 0
        self.losses: int = 0

    # ========== Properties ==========

    @property
    def id(self) -> ParticipantId:
        """Participant id (read-only)."""
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_name_strict(value)

    @property
    def status(self) -> ParticipantStatus:
        return self._status

    @status.setter
    def status(self, value: ParticipantStatus) -> None:
        self._status = validate_status_strict(value)

    # ========== Score and statistics ==========

    def add_point(self, amount: float) -> None:
        """Add points to the participant's score.

        Args:
            amount: Non-negative number of points

        Raises:
            InvalidArgumentException: If amount is negative
        """
        if amount < 0:
            raise InvalidArgumentException(
                f"points must be non-negative, got {amount}"
            )
        self.score += amount

    def add_win(self) -> None:
        self.wins += 1

    def add_draw(self) -> None:
        self.draws += 1

    def add_loss(self) -> None:
        self.losses += 1

    def award_bye(self) -> None:
        """Award a bye: one point and a win.

        A participant can only be awarded one bye this way.

        Raises:
            ByeAlreadyAwardedException: If the participant already had a bye
        """
        if self.was_byed:
            raise ByeAlreadyAwardedException(
                f"{self.name} ({self.id}) already received a bye"
            )
        self.was_byed = True
        self.add_point(BYE_SCORE)
        self.add_win()
        logger.debug("Participant %s received a bye", self.name)

    # ========== Opponent history ==========

    def add_opponent(self, opponent: Optional["Participant"]) -> None:
        """Record an opponent. No-op for None, self, or a known opponent."""
        if opponent is None or opponent.id == self.id:
            return
        self.opponent_ids.add(opponent.id)

    def has_played_with(self, opponent: Optional["Participant"]) -> bool:
        """Check if this participant has already played ``opponent``."""
        if opponent is None:
            return False
        return opponent.id in self.opponent_ids

    def get_opponent_objects(self, arena: ParticipantArena) -> List["Participant"]:
        """Resolve opponent ids to Participant objects.

        Ids missing from ``arena`` are skipped.
        """
        return [arena[opp_id] for opp_id in self.opponent_ids if opp_id in arena]

    def buchholz(self, arena: ParticipantArena) -> float:
        """Sum of the current scores of all recorded opponents.

        Recomputed on every call, so it reflects opponents' scores at query
        time rather than when the games were played.

        Args:
            arena: All tournament participants indexed by id

        Returns:
            The Buchholz score
        """
        return sum(opponent.score for opponent in self.get_opponent_objects(arena))

    # ========== Serialization ==========

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Create a Participant from roster data.

        Only id, name and status are restored; scores and history start
        fresh. A missing status defaults to LOW.
        """
        status = ParticipantStatus.parse(data.get("status")) or ParticipantStatus.LOW
        return cls(data["id"], data["name"], status)

    def __repr__(self) -> str:
        return (
            f"Participant(id={self.id}, name='{self.name}', "
            f"status={self.status.value}, score={self.score})"
        )

    def __str__(self) -> str:
        return f"ID - {self.id} | {self.name} | {self.score}"
