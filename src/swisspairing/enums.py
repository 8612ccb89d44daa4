"""Enumerations shared across Swiss Pairing."""

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

from enum import Enum
from typing import Optional


class ParticipantStatus(Enum):
    """Skill tier of a participant.

    Only used to weight randomly generated match outcomes.
    """

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["ParticipantStatus"]:
        """Look up a status by name, case-insensitively.

        Returns None when the text does not name a status.
        """
        if not text:
            return None
        try:
            return cls[text.strip().upper()]
        except KeyError:
            return None


class MatchOutcome(Enum):
    """Possible outcomes of a match."""

    WIN_PLAYER1 = "WIN_PLAYER1"
    WIN_PLAYER2 = "WIN_PLAYER2"
    DRAW = "DRAW"
    NOT_PLAYED = "NOT_PLAYED"
