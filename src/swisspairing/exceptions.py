"""Exceptions for use in Swiss Pairing"""

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


# ========== Base Application Exception ==========


class SwissPairingException(Exception):
    """Base exception for all Swiss Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


class InvalidArgumentException(SwissPairingException):
    """Raised when an operation receives malformed or missing input.

    Detected synchronously at the call that receives the bad input,
    before any state is touched.
    """

    pass


class InvalidStateException(SwissPairingException):
    """Raised when an operation is requested out of sequence.

    The tournament, its participants and its matches are left untouched.
    """

    pass


# ========== Participant Exceptions ==========


class InvalidParticipantDataException(InvalidArgumentException):
    """Raised when participant data is invalid (empty name, bad id, bad status)."""

    pass


class DuplicateParticipantException(InvalidArgumentException):
    """Raised when attempting to add a participant whose id already exists."""

    pass


class ParticipantNotFoundException(InvalidArgumentException):
    """Raised when a requested participant cannot be found."""

    pass


class ByeAlreadyAwardedException(InvalidStateException):
    """Raised when a participant would receive a second bye."""

    pass


# ========== Match / Result Exceptions ==========


class InvalidMatchException(InvalidArgumentException):
    """Raised when a match is built from missing or identical players."""

    pass


class MatchNotFoundException(InvalidArgumentException):
    """Raised when a match does not belong to the tournament."""

    pass


class InvalidResultException(InvalidArgumentException):
    """Raised when a result value is missing or unknown."""

    pass


class DuplicateResultException(InvalidStateException):
    """Raised when a result is set on a match that already has one."""

    pass


class ByeResultException(InvalidStateException):
    """Raised when a bye match is given anything but a player 1 win."""

    pass


# ========== Tournament Exceptions ==========


class TournamentStateException(InvalidStateException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundNotFoundException(InvalidStateException):
    """Raised when a requested round has not been generated yet."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(SwissPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a tournament file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a tournament file cannot be saved."""

    pass
