"""Tournament orchestration for Swiss Pairing."""

from swisspairing.tournament.result_recorder import ResultRecorder
from swisspairing.tournament.round_manager import RoundManager
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator
from swisspairing.tournament.tournament import Tournament, compute_total_rounds

__all__ = [
    "ResultRecorder",
    "RoundManager",
    "TiebreakCalculator",
    "Tournament",
    "compute_total_rounds",
]
