"""Structured validation error model for API server admission checks."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any


class ErrorType(enum.Enum):
    """Kind of field-level validation failure."""

    INVALID = "Invalid value"
    REQUIRED = "Required value"
    FORBIDDEN = "Forbidden"


@dataclass(frozen=True)
class ValidationError:
    """A single validation error with stable code and field location."""

    code: str
    type: ErrorType
    field: str
    detail: str
    value: Any = None

    def format(self) -> str:
        """Format as ``<field>: <type>: <value>: <detail>``.

        Only ``Invalid value`` errors carry an offending value.
        """
        parts = [self.field, self.type.value]
        if self.type is ErrorType.INVALID:
            parts.append(_render_value(self.value))
        if self.detail:
            parts.append(self.detail)
        return ": ".join(parts)


def invalid(code: str, field: object, value: Any, detail: str) -> ValidationError:
    """Build an ``Invalid value`` error for ``field``."""
    return ValidationError(code=code, type=ErrorType.INVALID, field=str(field), value=value, detail=detail)


def required(code: str, field: object, detail: str) -> ValidationError:
    """Build a ``Required value`` error for ``field``."""
    return ValidationError(code=code, type=ErrorType.REQUIRED, field=str(field), detail=detail)


def forbidden(code: str, field: object, detail: str) -> ValidationError:
    """Build a ``Forbidden`` error for a field that must not be set."""
    return ValidationError(code=code, type=ErrorType.FORBIDDEN, field=str(field), detail=detail)


def format_errors(errors: list[ValidationError]) -> str:
    """Format validation errors as ``[code] message`` lines, preserving order."""
    return "\n".join(f"[{e.code}] {e.format()}" for e in errors)


def _render_value(value: Any) -> str:
    if isinstance(value, tuple):
        value = list(value)
    return json.dumps(value, default=str)
