"""Form validation results and regular expression checks."""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ValidationKind(str, Enum):
    """Outcome of a form validation."""

    OK = "ok"
    ERROR = "error"


class ValidationErrorType(str, Enum):
    """Why a form validation failed."""

    VALIDATION_FAILED = "validation_failed"
    INVALID_PATTERN = "invalid_pattern"


@dataclass(frozen=True)
class FormValidation:
    """Result of validating a user-entered value.

    Errors are reported as values so the caller can show them next to the
    form field; nothing here is raised.
    """

    kind: ValidationKind
    message: str | None = None
    error_type: ValidationErrorType | None = None

    @classmethod
    def ok(cls) -> FormValidation:
        return cls(kind=ValidationKind.OK)

    @classmethod
    def error(
        cls,
        message: str,
        error_type: ValidationErrorType = ValidationErrorType.VALIDATION_FAILED,
    ) -> FormValidation:
        return cls(kind=ValidationKind.ERROR, message=message, error_type=error_type)

    @property
    def is_ok(self) -> bool:
        return self.kind is ValidationKind.OK

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape returned by the validation endpoint."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "error_type": self.error_type.value if self.error_type else None,
        }


@functools.lru_cache(maxsize=64)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def _describe(error: re.error) -> str:
    if error.pos is None:
        return error.msg
    return f"{error.msg} at position {error.pos}"


def validate(
    pattern: str,
    value: str | None,
    failed_validation_message: str | None = None,
) -> FormValidation:
    """Check that ``value`` fully matches ``pattern``.

    Args:
        pattern: Regular expression the whole value must match
        value: User-entered value; None is treated as an empty string
        failed_validation_message: Message to report instead of the generic
            one when the value does not match

    Returns:
        ``FormValidation.ok()`` on a match, otherwise an error result. An
        unparseable pattern yields an ``INVALID_PATTERN`` error naming the
        pattern and the parser diagnostic.
    """
    try:
        compiled = _compile(pattern)
    except re.error as e:
        logger.debug("Invalid regular expression %r: %s", pattern, e)
        return FormValidation.error(
            f"Invalid regular expression [{pattern}]: {_describe(e)}",
            ValidationErrorType.INVALID_PATTERN,
        )

    if compiled.fullmatch(value or ""):
        return FormValidation.ok()

    if failed_validation_message:
        return FormValidation.error(failed_validation_message)
    return FormValidation.error(f"Value entered does not match regular expression: {pattern}")
