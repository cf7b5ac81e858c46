"""Validation utilities for Debate Tab.

This module provides reusable validation functions with consistent error handling.
"""

import math
from numbers import Real
from typing import Any, Optional, Sequence

from debatetab.constants import BP_RANKS
from debatetab.exceptions import InvalidTournamentDataException


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


# ========== Score Validation ==========


def validate_speaker_score(score: Any) -> ValidationResult:
    """Validate a single speaker score.

    Any finite real number is accepted; booleans are rejected even though
    Python treats them as integers.

    Args:
        score: Score to validate

    Returns:
        ValidationResult with the score as a float when valid
    """
    if isinstance(score, bool) or not isinstance(score, Real):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a number: {score!r}",
        )

    float_score = float(score)
    if not math.isfinite(float_score):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be finite: {score!r}",
        )

    return ValidationResult(is_valid=True, sanitized_value=float_score)


def validate_score_list(
    scores: Sequence[Any], expected_length: int, label: str = "Scores"
) -> ValidationResult:
    """Validate one team's per-speaker scores.

    Args:
        scores: Per-speaker scores in speaking order
        expected_length: Number of speakers on the team
        label: Prefix for error messages

    Returns:
        ValidationResult with the scores as floats when valid
    """
    if isinstance(scores, (str, bytes)) or not isinstance(scores, Sequence):
        return ValidationResult(
            is_valid=False, error_message=f"{label} must be a list of numbers"
        )

    if len(scores) != expected_length:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"{label} must have {expected_length} entries, got {len(scores)}"
            ),
        )

    cleaned = []
    for score in scores:
        result = validate_speaker_score(score)
        if not result:
            return ValidationResult(
                is_valid=False, error_message=f"{label}: {result.error_message}"
            )
        cleaned.append(result.sanitized_value)

    return ValidationResult(is_valid=True, sanitized_value=cleaned)


# ========== Rank Validation ==========


def validate_bp_ranks(ranks: Sequence[Any]) -> ValidationResult:
    """Validate that four BP ranks are a permutation of 1..4.

    Args:
        ranks: The ranks given to the four teams of a room

    Returns:
        ValidationResult with validation status
    """
    if len(ranks) != len(BP_RANKS):
        return ValidationResult(
            is_valid=False,
            error_message=f"A BP ballot needs 4 ranks, got {len(ranks)}",
        )

    if any(isinstance(rank, bool) or rank not in BP_RANKS for rank in ranks):
        return ValidationResult(
            is_valid=False,
            error_message=f"Ranks must be between 1 and 4: {list(ranks)}",
        )

    if len(set(ranks)) != len(BP_RANKS):
        return ValidationResult(
            is_valid=False,
            error_message="All teams must have a unique rank from 1 to 4",
        )

    return ValidationResult(is_valid=True, sanitized_value=[int(r) for r in ranks])


# ========== Generic Validation ==========


def validate_non_empty(
    value: Optional[str], field_name: str = "Field"
) -> ValidationResult:
    """Validate that a field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if not value or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


def require_field(data: Any, key: str, record: str = "Record") -> Any:
    """Return ``data[key]`` from a serialized record.

    Raises:
        InvalidTournamentDataException: If ``data`` is not a mapping or lacks ``key``
    """
    if not isinstance(data, dict) or key not in data:
        raise InvalidTournamentDataException(f"{record} record has no '{key}'")
    return data[key]
