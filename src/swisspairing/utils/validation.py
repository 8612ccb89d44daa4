"""Validation utilities for Swiss Pairing.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional

from swisspairing.constants import COLUMN_SEPARATOR
from swisspairing.enums import ParticipantStatus
from swisspairing.exceptions import InvalidParticipantDataException

FORBIDDEN_NAME_CHARACTERS = (COLUMN_SEPARATOR, "\r", "\n")


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a participant or tournament name.

    The name must contain at least one non-whitespace character and no
    column separator or line break, as names are written as cells of the
    saved roster table. The sanitized value is the stripped name.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with validation status
    """
    if name is None or not isinstance(name, str) or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="name must not be empty",
        )

    for char in FORBIDDEN_NAME_CHARACTERS:
        if char in name:
            return ValidationResult(
                is_valid=False,
                error_message=f"name must not contain {char!r}, got {name!r}",
            )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_name_strict(name: Optional[str]) -> str:
    """Validate a name and raise exception if invalid.

    Raises:
        InvalidParticipantDataException: If the name is empty or holds a
            column separator or line break
    """
    result = validate_name(name)
    if not result.is_valid:
        raise InvalidParticipantDataException(result.error_message)
    return result.sanitized_value


# ========== Id Validation ==========


def validate_participant_id(participant_id: Any) -> ValidationResult:
    """Validate a participant id.

    Ids are positive integers. Booleans are rejected even though they are
    ``int`` instances.

    Args:
        participant_id: Id to validate

    Returns:
        ValidationResult with validation status
    """
    if isinstance(participant_id, bool) or not isinstance(participant_id, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"id must be an integer, got {participant_id!r}",
        )
    if participant_id <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"id must be > 0, got {participant_id}",
        )
    return ValidationResult(is_valid=True, sanitized_value=participant_id)


def validate_participant_id_strict(participant_id: Any) -> int:
    """Validate a participant id and raise exception if invalid.

    Raises:
        InvalidParticipantDataException: If the id is not a positive integer
    """
    result = validate_participant_id(participant_id)
    if not result.is_valid:
        raise InvalidParticipantDataException(result.error_message)
    return result.sanitized_value


# ========== Status Validation ==========


def validate_status(status: Any) -> ValidationResult:
    """Validate a participant status.

    Accepts a ``ParticipantStatus`` member or its name as text.

    Args:
        status: Status to validate

    Returns:
        ValidationResult whose sanitized value is a ``ParticipantStatus``
    """
    if isinstance(status, ParticipantStatus):
        return ValidationResult(is_valid=True, sanitized_value=status)

    if isinstance(status, str):
        parsed = ParticipantStatus.parse(status)
        if parsed is not None:
            return ValidationResult(is_valid=True, sanitized_value=parsed)

    return ValidationResult(
        is_valid=False,
        error_message=f"status must be one of LOW, MEDIUM, HIGH, got {status!r}",
    )


def validate_status_strict(status: Any) -> ParticipantStatus:
    """Validate a status and raise exception if invalid.

    Raises:
        InvalidParticipantDataException: If the status is unknown
    """
    result = validate_status(status)
    if not result.is_valid:
        raise InvalidParticipantDataException(result.error_message)
    return result.sanitized_value
