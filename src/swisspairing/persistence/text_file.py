"""Plain-text tournament files.

A saved tournament is a human-readable report: a header block, the
roster, every generated round and the standings. Loading is lossy on
purpose: only the tournament name and the roster (id, name, status) are
recovered, match history and scores are not replayed.
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

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Union

from dateutil import parser as date_parser

from swisspairing.constants import (
    COLUMN_SEPARATOR,
    DATE_FORMAT,
    HEADER_CURRENT_ROUND,
    HEADER_DATE,
    HEADER_PARTICIPANTS,
    HEADER_ROUNDS,
    HEADER_TOURNAMENT,
    SECTION_PARTICIPANTS,
)
from swisspairing.enums import ParticipantStatus
from swisspairing.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidArgumentException,
    SwissPairingException,
)
from swisspairing.participant import Participant
from swisspairing.tournament import Tournament
from swisspairing.utils import setup_logger
from swisspairing.utils.print import (
    participant_table_lines,
    round_lines,
    standings_table_lines,
    standings_title,
)

logger = setup_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class LoadReport:
    """Outcome of reading a tournament file.

    Attributes:
        tournament: Fresh, unstarted tournament holding the recovered roster
        saved_at: Timestamp from the DATE header, None if absent or unreadable
        declared_rounds: ROUNDS header value, None if absent or unreadable
        declared_current_round: CURRENT_ROUND header value, None if absent
        legacy_rows: Ids of roster rows written without a status column
    """

    tournament: Tournament
    saved_at: Optional[datetime] = None
    declared_rounds: Optional[int] = None
    declared_current_round: Optional[int] = None
    legacy_rows: List[int] = field(default_factory=list)


def _check_path(path: Optional[PathLike]) -> Path:
    if path is None or not str(path).strip():
        raise InvalidArgumentException("Filename cannot be empty")
    return Path(path)


class TournamentTextExporter:
    """Render a tournament as a plain-text report."""

    def export_tournament(
        self, tournament: Tournament, saved_at: Optional[datetime] = None
    ) -> str:
        """Build the full document text.

        Args:
            tournament: Tournament to render
            saved_at: Timestamp for the DATE header, defaults to now
        """
        saved_at = saved_at or datetime.now()
        participants = tournament.get_participant_list()

        lines = [
            f"{HEADER_TOURNAMENT}{tournament.name}",
            f"{HEADER_PARTICIPANTS}{len(participants)}",
            f"{HEADER_ROUNDS}{tournament.total_rounds}",
            f"{HEADER_CURRENT_ROUND}{tournament.current_round}",
            f"{HEADER_DATE}{saved_at.strftime(DATE_FORMAT)}",
            "",
            SECTION_PARTICIPANTS,
        ]
        lines.extend(participant_table_lines(participants))
        lines.append("")

        for round_number in range(1, tournament.current_round + 1):
            lines.extend(
                round_lines(round_number, tournament.get_round_matches(round_number))
            )
            lines.append("")

        lines.append(standings_title(tournament.is_complete))
        lines.extend(
            standings_table_lines(tournament.get_standings(), tournament.participants)
        )

        return "\n".join(lines) + "\n"

    def export_to_file(
        self,
        tournament: Tournament,
        path: PathLike,
        saved_at: Optional[datetime] = None,
    ) -> Path:
        """Write the document to ``path``.

        Raises:
            InvalidArgumentException: If path is empty
            FileSaveException: If the file cannot be written
        """
        file_path = _check_path(path)
        content = self.export_tournament(tournament, saved_at)

        try:
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not save tournament to {file_path}: {e}")
            raise FileSaveException(f"Could not save tournament to {file_path}") from e

        logger.info(f"Tournament saved to {file_path}")
        return file_path


class TournamentTextImporter:
    """Read the name and roster back from a plain-text report."""

    def import_file(self, path: PathLike) -> LoadReport:
        """Load a tournament file.

        Raises:
            InvalidArgumentException: If path is empty
            FileLoadException: If the file cannot be read or is malformed
        """
        file_path = _check_path(path)
        logger.info(f"Loading tournament file: {file_path}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not read tournament file {file_path}: {e}")
            raise FileLoadException(f"Could not read tournament file {file_path}") from e

        report = self.parse_text(content)
        logger.info(
            f"Tournament loaded from {file_path}: "
            f"{len(report.tournament.participants)} participants "
            "(match history is not reconstructed)"
        )
        return report

    def parse_text(self, content: str) -> LoadReport:
        """Parse document text into a load report.

        Raises:
            FileLoadException: If the TOURNAMENT header is missing or a
                roster row is malformed
        """
        lines = iter(content.splitlines())

        name = self._read_name(lines)
        try:
            report = LoadReport(tournament=Tournament(name))
        except SwissPairingException as e:
            logger.error(f"Invalid tournament name in file: {name!r}")
            raise FileLoadException(f"Invalid tournament name: {name!r}") from e

        for line in lines:
            if line.startswith(HEADER_ROUNDS):
                report.declared_rounds = self._parse_int_header(line, HEADER_ROUNDS)
            elif line.startswith(HEADER_CURRENT_ROUND):
                report.declared_current_round = self._parse_int_header(
                    line, HEADER_CURRENT_ROUND
                )
            elif line.startswith(HEADER_DATE):
                report.saved_at = self._parse_date(line[len(HEADER_DATE) :])
            elif SECTION_PARTICIPANTS in line:
                self._read_roster(lines, report)
                break

        return report

    def _read_name(self, lines: Iterator[str]) -> str:
        for line in lines:
            if line.startswith(HEADER_TOURNAMENT):
                return line[len(HEADER_TOURNAMENT) :]

        logger.error("Invalid tournament file format: missing TOURNAMENT header")
        raise FileLoadException("Invalid tournament file format")

    def _read_roster(self, lines: Iterator[str], report: LoadReport) -> None:
        # Column header and rule
        next(lines, None)
        next(lines, None)

        for line in lines:
            if not line.strip():
                break
            participant = self._parse_participant_row(line, report)
            if participant is None:
                continue
            try:
                report.tournament.add_participant(participant)
            except SwissPairingException as e:
                logger.error(f"Invalid participant line: {line!r}: {e}")
                raise FileLoadException(f"Invalid participant line: {line}") from e

    def _parse_participant_row(
        self, line: str, report: LoadReport
    ) -> Optional[Participant]:
        """Parse one roster row.

        Rows with a status column use it, falling back to LOW for unknown
        text. Rows with only ``ID | Name`` are legacy rows and load as LOW.
        The score and W-D-L columns are checked but not restored.

        Raises:
            FileLoadException: If the id, score or W-D-L column is malformed
        """
        parts = [part.strip() for part in line.split(COLUMN_SEPARATOR)]
        if len(parts) < 2:
            logger.warning(f"Skipping unrecognised roster line: {line!r}")
            return None

        try:
            participant_id = int(parts[0])
            if len(parts) >= 3:
                float(parts[2])
            if len(parts) >= 5:
                self._parse_wdl(parts[4])
        except ValueError as e:
            logger.error(f"Invalid participant line: {line!r}: {e}")
            raise FileLoadException(f"Invalid participant line: {line}") from e

        data = {"id": participant_id, "name": parts[1]}
        if len(parts) >= 4:
            status = ParticipantStatus.parse(parts[3])
            if status is None:
                logger.warning(
                    f"Unknown status {parts[3]!r} for participant {participant_id}, "
                    "using LOW"
                )
            else:
                data["status"] = status.value
        else:
            report.legacy_rows.append(participant_id)

        try:
            return Participant.from_dict(data)
        except SwissPairingException as e:
            logger.error(f"Invalid participant line: {line!r}: {e}")
            raise FileLoadException(f"Invalid participant line: {line}") from e

    @staticmethod
    def _parse_wdl(text: str) -> List[int]:
        counts = [int(count) for count in text.split("-")]
        if len(counts) != 3:
            raise ValueError(f"expected W-D-L, got {text!r}")
        return counts

    def _parse_int_header(self, line: str, header: str) -> Optional[int]:
        text = line[len(header) :].strip()
        try:
            return int(text)
        except ValueError:
            logger.warning(f"Ignoring unreadable header value: {line!r}")
            return None

    def _parse_date(self, text: str) -> Optional[datetime]:
        try:
            return date_parser.parse(text.strip())
        except (ValueError, OverflowError):
            logger.warning(f"Ignoring unreadable DATE header: {text!r}")
            return None


def save_tournament(
    tournament: Tournament, path: PathLike, saved_at: Optional[datetime] = None
) -> Path:
    """Save ``tournament`` as a plain-text report at ``path``."""
    return TournamentTextExporter().export_to_file(tournament, path, saved_at)


def load_tournament_report(path: PathLike) -> LoadReport:
    """Load a tournament file and return the full load report."""
    return TournamentTextImporter().import_file(path)


def load_tournament(path: PathLike) -> Tournament:
    """Load a tournament file and return the recovered tournament."""
    return load_tournament_report(path).tournament
