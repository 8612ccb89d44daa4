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

# --- Constants ---
SAVE_FILE_EXTENSION = ".txt"

# A tournament cannot start with fewer participants
MIN_PARTICIPANTS = 2

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
BYE_SCORE = WIN_SCORE

# Result codes (for display and serialization)
RESULT_PLAYER1_WIN = "1-0"
RESULT_PLAYER2_WIN = "0-1"
RESULT_DRAW = "0.5-0.5"
RESULT_NOT_PLAYED = "NOT_PLAYED"
RESULT_BYE = "(BYE) => WIN"

# Random outcome draws are uniform integers in [0, OUTCOME_RANGE)
OUTCOME_RANGE = 100

# Tiebreak keys
TB_BUCHHOLZ = "buchholz"
TB_WINS = "wins"

# Standings order after score; participant id is the final tiebreak
DEFAULT_TIEBREAK_ORDER = [TB_BUCHHOLZ, TB_WINS]

# --- Tournament text file layout ---
HEADER_TOURNAMENT = "TOURNAMENT: "
HEADER_PARTICIPANTS = "PARTICIPANTS: "
HEADER_ROUNDS = "ROUNDS: "
HEADER_CURRENT_ROUND = "CURRENT_ROUND: "
HEADER_DATE = "DATE: "
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SECTION_PARTICIPANTS = "=== PARTICIPANTS ==="
SECTION_ROUND = "=== ROUND {number} ==="
SECTION_CURRENT_STANDINGS = "=== CURRENT STANDINGS ==="
SECTION_FINAL_STANDINGS = "=== FINAL STANDINGS ==="
COLUMN_SEPARATOR = "|"

LOG_LEVEL_ENV = "SWISSPAIRING_LOG_LEVEL"
