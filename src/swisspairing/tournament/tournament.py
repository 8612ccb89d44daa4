"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
round manager, result recorder and tiebreak calculator.
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

import math
import random
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from swisspairing.constants import MIN_PARTICIPANTS
from swisspairing.enums import MatchOutcome
from swisspairing.exceptions import (
    DuplicateParticipantException,
    InvalidArgumentException,
    MatchNotFoundException,
    ParticipantNotFoundException,
    TournamentStateException,
)
from swisspairing.models import Match, TournamentConfig
from swisspairing.participant import Participant
from swisspairing.tournament.result_recorder import ResultRecorder
from swisspairing.tournament.round_manager import RoundManager
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator
from swisspairing.type_hints import ParticipantArena, ParticipantId
from swisspairing.utils import setup_logger
from swisspairing.utils.validation import (
    validate_name_strict,
    validate_participant_id,
)

logger = setup_logger(__name__)


def compute_total_rounds(participant_count: int) -> int:
    """Number of Swiss rounds for a pool: ceil(log2(n)).

    Raises:
        TournamentStateException: If fewer than two participants
    """
    if participant_count < MIN_PARTICIPANTS:
        raise TournamentStateException(
            f"Tournament needs at least {MIN_PARTICIPANTS} participants"
        )
    return math.ceil(math.log2(participant_count))


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: handles round creation and pairing
    - ResultRecorder: manages result entry and random results
    - TiebreakCalculator: computes the standings order

    Lifecycle: participants are added to an empty tournament, the
    tournament is started (freezing the roster and fixing the number of
    rounds), then rounds are generated and resolved one at a time until
    ``current_round == total_rounds``.
    """

    def __init__(
        self,
        name: str,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a new, empty tournament.

        Args
        ----
        name: Tournament name
        seed: Seed for automatically generated results
        rng: Random source for automatically generated results, overrides seed
        """
        self.config = TournamentConfig(name=validate_name_strict(name), seed=seed)

        self.participants: ParticipantArena = {}

        self.round_manager = RoundManager()
        self.result_recorder = ResultRecorder(
            rng if rng is not None else random.Random(seed)
        )
        self.tiebreak_calculator = TiebreakCalculator()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @name.setter
    def name(self, value: str) -> None:
        """Set tournament name."""
        self.config.name = validate_name_strict(value)

    @property
    def total_rounds(self) -> int:
        """Number of rounds, 0 until the tournament starts."""
        return self.round_manager.total_rounds

    @property
    def current_round(self) -> int:
        """Number of rounds generated so far."""
        return self.round_manager.current_round

    @property
    def matches(self) -> List[Match]:
        """All matches generated so far, in order."""
        return self.round_manager.matches

    @property
    def is_started(self) -> bool:
        return self.total_rounds > 0

    @property
    def is_complete(self) -> bool:
        """Is every round generated?"""
        return self.round_manager.is_complete

    @property
    def tournament_over(self) -> bool:
        """Is the last round generated and fully resolved?"""
        return self.config.tournament_over

    # ========== Participant Management ==========

    def get_participant_list(self) -> List[Participant]:
        """Get participants in the order they were added."""
        return list(self.participants.values())

    def get_participant(self, participant_id: ParticipantId) -> Participant:
        """Look up a participant by id.

        Raises:
            ParticipantNotFoundException: If no participant has this id
        """
        participant = self.participants.get(participant_id)
        if participant is None:
            raise ParticipantNotFoundException(
                f"Participant with ID {participant_id} not found"
            )
        return participant

    def add_participant(self, participant: Participant) -> None:
        """Add a participant to the tournament.

        Participants can only be added before the tournament starts.

        Raises:
            InvalidArgumentException: If participant is None
            TournamentStateException: If the tournament has started
            DuplicateParticipantException: If the id is already taken
        """
        if participant is None:
            raise InvalidArgumentException("Participant cannot be None")
        if self.is_started:
            raise TournamentStateException(
                "Cannot add participants after tournament has started"
            )
        if participant.id in self.participants:
            raise DuplicateParticipantException(
                f"Participant with ID {participant.id} already exists"
            )

        self.participants[participant.id] = participant
        logger.info("Added participant: %s (%s)", participant.name, participant.id)

    def remove_participant(self, participant_id: ParticipantId) -> Participant:
        """Remove a participant before the tournament starts.

        Returns:
            The removed participant

        Raises:
            TournamentStateException: If the tournament has started
            InvalidArgumentException: If the id is not positive
            ParticipantNotFoundException: If no participant has this id
        """
        if self.is_started:
            raise TournamentStateException(
                "Cannot remove participants after tournament has started"
            )
        if not validate_participant_id(participant_id):
            raise InvalidArgumentException("participant_id must be positive")

        participant = self.get_participant(participant_id)
        del self.participants[participant_id]
        logger.info("Removed participant: %s (%s)", participant.name, participant_id)
        return participant

    # ========== Round Management ==========

    def start_tournament(self) -> int:
        """Freeze the roster and compute the number of rounds.

        Returns:
            The total number of rounds

        Raises:
            TournamentStateException: If already started or fewer than two
                participants
        """
        if self.is_started:
            raise TournamentStateException("Tournament has already started")

        total_rounds = compute_total_rounds(len(self.participants))
        self.round_manager.total_rounds = total_rounds
        logger.info(
            "Tournament %s started with %s participants and %s rounds",
            self.name,
            len(self.participants),
            total_rounds,
        )
        return total_rounds

    def generate_next_round(self) -> List[Match]:
        """Generate pairings for the next round.

        Returns:
            The new matches, bye first

        Raises:
            TournamentStateException: If not started or already complete
        """
        round_matches = self.round_manager.create_next_round(
            self.get_participant_list()
        )
        logger.info(
            "Round %s pairings: %s",
            self.current_round,
            ", ".join(m.to_file_string() for m in round_matches),
        )
        return round_matches

    def get_round_matches(self, round_number: int) -> List[Match]:
        """Get all matches from a specific round.

        Raises:
            InvalidArgumentException: If round_number is not positive
            RoundNotFoundException: If the round has not been generated
        """
        return self.round_manager.get_round_matches(round_number)

    def get_current_round_matches(self) -> List[Match]:
        """Get the matches of the latest generated round.

        Raises:
            TournamentStateException: If no round has been generated
        """
        if self.current_round == 0:
            raise TournamentStateException("No rounds have been generated yet")
        return self.get_round_matches(self.current_round)

    # ========== Result Management ==========

    def set_match_result(self, match: Match, outcome: MatchOutcome) -> None:
        """Manually set the result of a match of this tournament.

        Raises:
            InvalidArgumentException: If match is None
            MatchNotFoundException: If the match is not part of this tournament
            InvalidResultException: If outcome is not a playable result
            DuplicateResultException: If the match already has a result
        """
        if match is None:
            raise InvalidArgumentException("Match cannot be None")
        if not self.round_manager.contains(match):
            raise MatchNotFoundException("Match does not belong to this tournament")

        self.result_recorder.record_result(match, outcome)
        self._update_tournament_over()

    def record_round_results(self, outcomes: Sequence[MatchOutcome]) -> None:
        """Record the outcomes of every non-bye match of the current round.

        Raises:
            TournamentStateException: If no round has been generated
            InvalidResultException: If the outcomes do not fit the round
            DuplicateResultException: If a match already has a result
        """
        self.result_recorder.record_round_results(
            self.get_current_round_matches(), outcomes
        )
        self._update_tournament_over()

    def auto_generate_round_results(self) -> List[Match]:
        """Randomly resolve all unplayed matches of the current round.

        Returns:
            The matches that received a result

        Raises:
            TournamentStateException: If no round has been generated
        """
        resolved = self.result_recorder.auto_generate_round_results(
            self.get_current_round_matches()
        )
        self._update_tournament_over()
        return resolved

    def _update_tournament_over(self) -> None:
        if self.is_complete and all(m.is_played for m in self.round_manager.matches):
            if not self.config.tournament_over:
                logger.info("Tournament %s is over", self.name)
            self.config.tournament_over = True

    # ========== Standings and Tiebreaks ==========

    def get_standings(self) -> List[Participant]:
        """Get current tournament standings.

        Returns:
            List of participants sorted by rank (best to worst)
        """
        return self.tiebreak_calculator.get_standings(self.get_participant_list())

    def compute_tiebreakers(self) -> Dict[ParticipantId, Dict[str, float]]:
        """Calculate tiebreak scores for all participants."""
        return self.tiebreak_calculator.calculate_all_tiebreaks(self.participants)

    def buchholz(self, participant: Participant) -> float:
        """Buchholz score of ``participant`` within this tournament."""
        return participant.buchholz(self.participants)

    # ========== Serialization ==========

    def save_to_file(self, path: Union[str, Path]) -> Path:
        """Save the tournament as a plain-text document.

        Raises:
            InvalidArgumentException: If path is empty
            FileSaveException: If the file cannot be written
        """
        from swisspairing.persistence import save_tournament

        return save_tournament(self, path)

    @classmethod
    def load_from_file(cls, path: Union[str, Path]) -> "Tournament":
        """Load the name and roster of a saved tournament.

        Match history and scores are not replayed.

        Raises:
            InvalidArgumentException: If path is empty
            FileLoadException: If the file is missing or malformed
        """
        from swisspairing.persistence import load_tournament

        return load_tournament(path)

    def __repr__(self) -> str:
        return (
            f"Tournament(name='{self.name}', participants={len(self.participants)}, "
            f"round={self.current_round}/{self.total_rounds})"
        )
