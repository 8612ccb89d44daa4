"""
Plain-text rendering of rosters, rounds and standings.
Shared by the console front end and the tournament text file writer.
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

from typing import TYPE_CHECKING, Iterable, List

from swisspairing.constants import (
    SECTION_CURRENT_STANDINGS,
    SECTION_FINAL_STANDINGS,
    SECTION_ROUND,
)
from swisspairing.models import Match
from swisspairing.participant import Participant
from swisspairing.type_hints import ParticipantArena

if TYPE_CHECKING:
    from swisspairing.tournament import Tournament

PARTICIPANT_HEADER = "%-4s | %-20s | %-8s | %-8s | %-12s" % (
    "ID",
    "Name",
    "Score",
    "Status",
    "W-D-L",
)
PARTICIPANT_ROW = "%-4d | %-20s | %-8.1f | %-8s | %-12s"
PARTICIPANT_RULE_WIDTH = 70

STANDINGS_HEADER = "%-5s | %-4s | %-20s | %-8s | %-12s | %-10s" % (
    "Rank",
    "ID",
    "Name",
    "Score",
    "W-D-L",
    "Buchholz",
)
STANDINGS_ROW = "%-5d | %-4d | %-20s | %-8.1f | %-12s | %-10.1f"
STANDINGS_RULE_WIDTH = 75


def format_wdl(participant: Participant) -> str:
    """Win-draw-loss record, e.g. ``2-1-0``."""
    return f"{participant.wins}-{participant.draws}-{participant.losses}"


def participant_table_lines(participants: Iterable[Participant]) -> List[str]:
    """Render the roster table: header, rule, then one row per participant."""
    lines = [PARTICIPANT_HEADER, "-" * PARTICIPANT_RULE_WIDTH]
    for p in participants:
        lines.append(
            PARTICIPANT_ROW % (p.id, p.name, p.score, p.status.name, format_wdl(p))
        )
    return lines


def standings_table_lines(
    standings: Iterable[Participant], arena: ParticipantArena
) -> List[str]:
    """Render a standings table for participants already in rank order.

    Args:
        standings: Participants, best first
        arena: All participants indexed by id, for Buchholz lookups
    """
    lines = [STANDINGS_HEADER, "-" * STANDINGS_RULE_WIDTH]
    for rank, p in enumerate(standings, 1):
        lines.append(
            STANDINGS_ROW
            % (rank, p.id, p.name, p.score, format_wdl(p), p.buchholz(arena))
        )
    return lines


def standings_title(complete: bool) -> str:
    return SECTION_FINAL_STANDINGS if complete else SECTION_CURRENT_STANDINGS


def round_lines(round_number: int, round_matches: Iterable[Match]) -> List[str]:
    """Render one round section with numbered match lines."""
    lines = [SECTION_ROUND.format(number=round_number)]
    for number, match in enumerate(round_matches, 1):
        lines.append(f"Match {number}: {match.to_file_string()}")
    return lines


def format_standings(tournament: "Tournament") -> str:
    """Standings block of ``tournament`` as printed on the console."""
    lines = [standings_title(tournament.is_complete)]
    lines.extend(
        standings_table_lines(tournament.get_standings(), tournament.participants)
    )
    return "\n".join(lines)


def format_matches(tournament: "Tournament") -> str:
    """Every generated round of ``tournament``, one section per round."""
    if tournament.current_round == 0:
        return "No rounds have been generated yet."

    blocks = []
    for round_number in range(1, tournament.current_round + 1):
        blocks.append(
            "\n".join(
                round_lines(round_number, tournament.get_round_matches(round_number))
            )
        )
    return "\n\n".join(blocks)


def format_roster(participants: Iterable[Participant]) -> str:
    return "\n".join(participant_table_lines(participants))
