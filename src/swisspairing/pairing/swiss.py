"""Swiss Pairing System Implementation."""

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

from typing import Iterable, List, Optional, Set, Tuple

from swisspairing.constants import BYE_SCORE
from swisspairing.models.match import Match
from swisspairing.participant import Participant
from swisspairing.type_hints import ParticipantArena, ParticipantId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def create_swiss_pairings(
    participants: Iterable[Participant], round_number: int
) -> List[Match]:
    """
    Create the matches of one Swiss round.

    - participants: every participant of the tournament
    - round_number: the 1-based number of the round being paired

    Participants are ranked by score, then Buchholz. With an odd pool the
    lowest-ranked participant without a bye sits out and is credited
    immediately. The rest are paired top-down, each with the first
    lower-ranked participant they have not met yet, falling back to a
    repeat pairing only when nobody new is left.

    Returns: bye match first (if any), then the pairs in rank order.
    """
    pool = list(participants)
    arena = {p.id: p for p in pool}
    sorted_participants = _sort_participants_for_pairing(pool, arena)

    matches: List[Match] = []
    paired: Set[ParticipantId] = set()

    if len(sorted_participants) % 2 == 1:
        bye_participant = _select_bye_participant(sorted_participants)
        matches.append(_create_bye_match(bye_participant, round_number))
        paired.add(bye_participant.id)

    for player1, player2 in _pair_in_rank_order(sorted_participants, paired):
        matches.append(Match(player1, player2, round_number))

    logger.info(
        "Paired round %s: %s matches for %s participants",
        round_number,
        len(matches),
        len(sorted_participants),
    )
    return matches


def _sort_participants_for_pairing(
    participants: List[Participant], arena: ParticipantArena
) -> List[Participant]:
    """Sort participants by score desc, then Buchholz desc.

    The sort is stable, so remaining ties keep roster order.
    """
    return sorted(participants, key=lambda p: (-p.score, -p.buchholz(arena)))


def _select_bye_participant(sorted_participants: List[Participant]) -> Participant:
    """Pick the bye recipient, scanning from the lowest rank upward.

    The first participant who never had a bye is chosen. When every
    participant already had one, the lowest-ranked participant gets a
    second bye.
    """
    for participant in reversed(sorted_participants):
        if not participant.was_byed:
            return participant

    # Second-bye exception: the whole pool has been byed once
    fallback = sorted_participants[-1]
    logger.warning(
        "All participants have already received a bye. "
        "Assigning second bye to %s as last resort.",
        fallback.name,
    )
    return fallback


def _create_bye_match(participant: Participant, round_number: int) -> Match:
    """Create the bye match and credit the bye to ``participant``."""
    match = Match.bye(participant, round_number)
    if participant.was_byed:
        # award_bye() refuses a second bye, so credit the win directly
        participant.add_point(BYE_SCORE)
        participant.add_win()
    else:
        participant.award_bye()

    logger.info(
        "Round %s: %s receives a bye (score: %s)",
        round_number,
        participant.name,
        participant.score,
    )
    return match


def _pair_in_rank_order(
    sorted_participants: List[Participant], paired: Set[ParticipantId]
) -> List[Tuple[Participant, Participant]]:
    """Greedily pair participants in rank order, avoiding rematches.

    ``paired`` is updated in place with every participant that gets paired.
    """
    pairings = []

    for i, player1 in enumerate(sorted_participants):
        if player1.id in paired:
            continue

        remaining = [p for p in sorted_participants[i + 1 :] if p.id not in paired]
        player2 = _find_opponent(player1, remaining)
        if player2 is None:
            continue

        pairings.append((player1, player2))
        paired.add(player1.id)
        paired.add(player2.id)

    return pairings


def _find_opponent(
    player: Participant, candidates: List[Participant]
) -> Optional[Participant]:
    """First candidate ``player`` has not met, else the first candidate."""
    for candidate in candidates:
        if not player.has_played_with(candidate):
            return candidate

    if candidates:
        logger.warning(
            "No new opponent left for %s, repeating pairing with %s",
            player.name,
            candidates[0].name,
        )
        return candidates[0]

    return None
