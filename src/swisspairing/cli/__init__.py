"""Command-line front end for Swiss Pairing.

Running without a subcommand opens an interactive shell with tab
completion. The ``simulate`` and ``roster`` subcommands run once and exit.
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

import argparse
import logging
import random
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from swisspairing.cli.session import COMMANDS, CommandError, TournamentSession
from swisspairing.enums import ParticipantStatus
from swisspairing.exceptions import SwissPairingException
from swisspairing.participant import Participant
from swisspairing.persistence import load_tournament_report, save_tournament
from swisspairing.tournament import Tournament
from swisspairing.utils import setup_logger
from swisspairing.utils.print import format_roster, format_standings

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                     SWISS PAIRING - CLI                       ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for info in COMMANDS.values():
        print(f"  {Colors.OKGREEN}{info['usage']:36}{Colors.ENDC} {info['description']}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {cmd: None for cmd in COMMANDS}
    completions["add"] = WordCompleter([s.name for s in ParticipantStatus])
    completions["help"] = None
    completions["exit"] = None

    return NestedCompleter.from_nested_dict(completions)


def run_interactive_mode(seed: Optional[int] = None) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    prompt_session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )
    session = TournamentSession(seed=seed)

    while True:
        try:
            user_input = prompt_session.prompt("swiss> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?"]:
                print_commands_list()
                continue

            try:
                output = session.execute(user_input)
            except (CommandError, SwissPairingException) as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                continue

            if output:
                print(output)

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def build_random_tournament(
    num_participants: int, name: str, seed: Optional[int] = None
) -> Tournament:
    """Create a started tournament of ``num_participants`` with random statuses."""
    rng = random.Random(seed)
    tournament = Tournament(name, rng=rng)
    statuses = list(ParticipantStatus)
    for participant_id in range(1, num_participants + 1):
        tournament.add_participant(
            Participant(participant_id, f"Player {participant_id}", rng.choice(statuses))
        )
    tournament.start_tournament()
    return tournament


def play_out(tournament: Tournament) -> None:
    """Generate and randomly resolve every remaining round."""
    while not tournament.is_complete:
        tournament.generate_next_round()
        tournament.auto_generate_round_results()


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run the simulate command."""
    print(
        f"\n{Colors.BOLD}Simulating {args.participants} participants...{Colors.ENDC}"
    )

    tournament = build_random_tournament(args.participants, args.name, args.seed)
    play_out(tournament)

    print(f"  Rounds: {tournament.total_rounds}")
    print(f"  Matches: {len(tournament.matches)}\n")
    print(format_standings(tournament))

    if args.output:
        path = save_tournament(tournament, args.output)
        print(f"\n{Colors.OKGREEN}Tournament saved to: {path}{Colors.ENDC}")

    return 0


def run_roster_command(args: argparse.Namespace) -> int:
    """Run the roster command."""
    report = load_tournament_report(args.file)

    print(f"\n{Colors.BOLD}Tournament: {report.tournament.name}{Colors.ENDC}")
    if report.saved_at is not None:
        print(f"  Saved at: {report.saved_at:%Y-%m-%d %H:%M:%S}")
    if report.declared_rounds is not None:
        print(f"  Rounds: {report.declared_current_round}/{report.declared_rounds}")
    if report.legacy_rows:
        print(
            f"  {Colors.WARNING}Rows without status (loaded as LOW): "
            f"{', '.join(str(i) for i in report.legacy_rows)}{Colors.ENDC}"
        )
    print()
    print(format_roster(report.tournament.get_participant_list()))
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="swiss-pairing",
        description="Swiss-system tournament manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  swiss-pairing

  # Play a random 12-player tournament and save it
  swiss-pairing --seed 7 simulate --participants 12 --output cup.txt

  # Show the roster recovered from a saved file
  swiss-pairing roster cup.txt
        """,
    )

    parser.add_argument("--seed", type=int, help="Random seed for generated results")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log lifecycle events"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sim_parser = subparsers.add_parser(
        "simulate", help="Play a random tournament to the end"
    )
    sim_parser.add_argument("--participants", type=int, default=8)
    sim_parser.add_argument("--name", default="Simulated Tournament")
    sim_parser.add_argument("--output", help="Save the finished tournament here")
    sim_parser.set_defaults(func=run_simulate_command)

    roster_parser = subparsers.add_parser(
        "roster", help="Show the roster stored in a tournament file"
    )
    roster_parser.add_argument("file")
    roster_parser.set_defaults(func=run_roster_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("swisspairing").setLevel(logging.INFO)

    if not hasattr(args, "func"):
        return run_interactive_mode(args.seed)

    try:
        return args.func(args)
    except SwissPairingException as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1


__all__ = ["TournamentSession", "CommandError", "main"]
