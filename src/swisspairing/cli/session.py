"""Command interpreter behind the interactive shell.

A ``TournamentSession`` owns the tournament being edited and turns one
command line into one block of output text. It never prints, so the
shell and the tests drive it the same way.
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

import shlex
from pathlib import Path
from typing import Callable, Dict, List, Optional

from swisspairing.constants import SAVE_FILE_EXTENSION
from swisspairing.enums import MatchOutcome, ParticipantStatus
from swisspairing.participant import Participant
from swisspairing.persistence import load_tournament_report, save_tournament
from swisspairing.tournament import Tournament
from swisspairing.utils import setup_logger
from swisspairing.utils.print import format_matches, format_roster, format_standings

logger = setup_logger(__name__)

# Command definitions with their argument synopsis
COMMANDS = {
    "create": {"usage": "create <name>", "description": "Create a new tournament"},
    "add": {
        "usage": "add <id> <name> [LOW|MEDIUM|HIGH]",
        "description": "Add a participant",
    },
    "remove": {"usage": "remove <id>", "description": "Remove a participant"},
    "roster": {"usage": "roster", "description": "Show the participants"},
    "start": {"usage": "start", "description": "Start the tournament"},
    "next": {"usage": "next", "description": "Generate the next round"},
    "auto": {
        "usage": "auto",
        "description": "Generate random results for the current round",
    },
    "result": {
        "usage": "result <match> <1|2|draw>",
        "description": "Set the result of a match in the current round",
    },
    "standings": {"usage": "standings", "description": "Show the standings"},
    "matches": {"usage": "matches", "description": "Show all matches"},
    "save": {"usage": "save <file>", "description": "Save the tournament"},
    "load": {"usage": "load <file>", "description": "Load a tournament roster"},
}

RESULT_ALIASES = {
    "1": MatchOutcome.WIN_PLAYER1,
    "1-0": MatchOutcome.WIN_PLAYER1,
    "2": MatchOutcome.WIN_PLAYER2,
    "0-1": MatchOutcome.WIN_PLAYER2,
    "d": MatchOutcome.DRAW,
    "draw": MatchOutcome.DRAW,
    "=": MatchOutcome.DRAW,
    "0.5-0.5": MatchOutcome.DRAW,
}


class CommandError(Exception):
    """A command line that could not be understood."""

    pass


class TournamentSession:
    """Interactive tournament state for one shell run."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.tournament: Optional[Tournament] = None
        self._handlers: Dict[str, Callable[[List[str]], str]] = {
            "create": self.do_create,
            "add": self.do_add,
            "remove": self.do_remove,
            "roster": self.do_roster,
            "start": self.do_start,
            "next": self.do_next,
            "auto": self.do_auto,
            "result": self.do_result,
            "standings": self.do_standings,
            "matches": self.do_matches,
            "save": self.do_save,
            "load": self.do_load,
        }

    def execute(self, line: str) -> str:
        """Run one command line and return its output.

        Raises:
            CommandError: For unknown commands or bad arguments
            SwissPairingException: When the tournament rejects the operation
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            raise CommandError(f"Could not parse command: {e}") from e
        if not parts:
            return ""

        command = parts[0].lstrip("/").lower()
        handler = self._handlers.get(command)
        logger.debug("Command %s %s", command, parts[1:])
        if handler is None:
            raise CommandError(f"Unknown command: {command}")
        return handler(parts[1:])

    def _require_tournament(self) -> Tournament:
        if self.tournament is None:
            raise CommandError("No tournament. Use 'create <name>' or 'load <file>'")
        return self.tournament

    @staticmethod
    def _usage(command: str) -> CommandError:
        return CommandError(f"Usage: {COMMANDS[command]['usage']}")

    @staticmethod
    def _parse_int(text: str, what: str) -> int:
        try:
            return int(text)
        except ValueError as e:
            raise CommandError(f"{what} must be a number, got {text!r}") from e

    # ========== Commands ==========

    def do_create(self, args: List[str]) -> str:
        if not args:
            raise self._usage("create")
        self.tournament = Tournament(" ".join(args), seed=self.seed)
        return f"Tournament '{self.tournament.name}' created"

    def do_add(self, args: List[str]) -> str:
        if len(args) not in (2, 3):
            raise self._usage("add")
        tournament = self._require_tournament()

        participant_id = self._parse_int(args[0], "Participant id")
        status = ParticipantStatus.LOW
        if len(args) == 3:
            status = ParticipantStatus.parse(args[2])
            if status is None:
                raise CommandError(f"Unknown status: {args[2]}")

        participant = Participant(participant_id, args[1], status)
        tournament.add_participant(participant)
        return f"Added {participant}"

    def do_remove(self, args: List[str]) -> str:
        if len(args) != 1:
            raise self._usage("remove")
        tournament = self._require_tournament()
        removed = tournament.remove_participant(
            self._parse_int(args[0], "Participant id")
        )
        return f"Removed {removed.name}"

    def do_roster(self, args: List[str]) -> str:
        tournament = self._require_tournament()
        if not tournament.participants:
            return "No participants yet."
        return format_roster(tournament.get_participant_list())

    def do_start(self, args: List[str]) -> str:
        total_rounds = self._require_tournament().start_tournament()
        return f"Tournament started: {total_rounds} rounds"

    def do_next(self, args: List[str]) -> str:
        tournament = self._require_tournament()
        round_matches = tournament.generate_next_round()
        lines = [f"Round {tournament.current_round} of {tournament.total_rounds}"]
        for number, match in enumerate(round_matches, 1):
            lines.append(f"  {number}. {match.to_file_string()}")
        return "\n".join(lines)

    def do_auto(self, args: List[str]) -> str:
        resolved = self._require_tournament().auto_generate_round_results()
        if not resolved:
            return "Every match of the current round already has a result"
        return "\n".join(str(match) for match in resolved)

    def do_result(self, args: List[str]) -> str:
        if len(args) != 2:
            raise self._usage("result")
        tournament = self._require_tournament()

        round_matches = tournament.get_current_round_matches()
        number = self._parse_int(args[0], "Match number")
        if not 1 <= number <= len(round_matches):
            raise CommandError(
                f"Match number must be between 1 and {len(round_matches)}"
            )

        outcome = RESULT_ALIASES.get(args[1].lower())
        if outcome is None:
            raise CommandError(f"Unknown result: {args[1]}")

        match = round_matches[number - 1]
        tournament.set_match_result(match, outcome)
        return str(match)

    def do_standings(self, args: List[str]) -> str:
        return format_standings(self._require_tournament())

    def do_matches(self, args: List[str]) -> str:
        return format_matches(self._require_tournament())

    def do_save(self, args: List[str]) -> str:
        if len(args) != 1:
            raise self._usage("save")
        path = Path(args[0])
        if not path.suffix:
            path = path.with_suffix(SAVE_FILE_EXTENSION)
        path = save_tournament(self._require_tournament(), path)
        return f"Tournament saved to {path}"

    def do_load(self, args: List[str]) -> str:
        if len(args) != 1:
            raise self._usage("load")
        report = load_tournament_report(args[0])
        self.tournament = report.tournament

        lines = [
            f"Tournament '{report.tournament.name}' loaded: "
            f"{len(report.tournament.participants)} participants"
        ]
        if report.saved_at is not None:
            lines.append(f"Saved at {report.saved_at:%Y-%m-%d %H:%M:%S}")
        lines.append("Note: match history is not reconstructed, only the roster")
        return "\n".join(lines)
