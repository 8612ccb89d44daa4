"""Saving and loading tournaments as plain-text files."""

from swisspairing.persistence.text_file import (
    LoadReport,
    TournamentTextExporter,
    TournamentTextImporter,
    load_tournament,
    load_tournament_report,
    save_tournament,
)

__all__ = [
    "LoadReport",
    "TournamentTextExporter",
    "TournamentTextImporter",
    "load_tournament",
    "load_tournament_report",
    "save_tournament",
]
