"""Employee field validation and partial-update merge.

Two validation policies live here:

- ``validate_employee`` (POST / PUT) collects every field error, name
  before email.
- ``merge_partial`` (PATCH) stops at the first recognized field that fails
  and reports only that one.

Nothing in this module touches storage.  Results are returned as frozen
pydantic models, never raised.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from api.models import Employee
from config import EMAIL_PATTERN, EMPTY_NAME_MESSAGE, INVALID_EMAIL_MESSAGE

_EMAIL_RE = re.compile(EMAIL_PATTERN)
_TRIMMED = "".join(chr(c) for c in range(0x21))


class ErrorKind(str, Enum):
    EMPTY_NAME = "EmptyName"
    INVALID_EMAIL = "InvalidEmail"
    INVALID_FIELD_TYPE = "InvalidFieldType"
    NOT_FOUND = "NotFound"


class FieldError(BaseModel):
    """A single rejected field."""

    model_config = {"frozen": True}

    field: str
    kind: ErrorKind
    message: str


class ValidationOutcome(BaseModel):
    """Result of one or more field checks.

    Attributes:
        errors: Failed fields in the order they were checked.
    """

    model_config = {"frozen": True}

    errors: list[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def error_map(self) -> dict[str, str]:
        """``{field: message}`` in check order, as sent in 400 responses."""
        return {e.field: e.message for e in self.errors}


class MergeResult(BaseModel):
    """Outcome of a PATCH merge: the merged record, or the one field that failed."""

    model_config = {"frozen": True}

    employee: Employee | None = None
    error: FieldError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def error_map(self) -> dict[str, str]:
        return {self.error.field: self.error.message} if self.error else {}


# =====================================================================
# FIELD VALIDATORS
# =====================================================================


def _trim(value: str) -> str:
    """Strip ASCII control characters and space only, not other Unicode whitespace."""
    return value.strip(_TRIMMED)


def validate_name(value: str | None) -> ValidationOutcome:
    if value is None or not _trim(value):
        return ValidationOutcome(
            errors=[FieldError(field="name", kind=ErrorKind.EMPTY_NAME, message=EMPTY_NAME_MESSAGE)]
        )
    return ValidationOutcome()


def validate_email(value: str | None) -> ValidationOutcome:
    """Email is optional: ``None`` passes, anything else must match the pattern."""
    if value is not None and not _EMAIL_RE.fullmatch(value):
        return ValidationOutcome(
            errors=[FieldError(field="email", kind=ErrorKind.INVALID_EMAIL, message=INVALID_EMAIL_MESSAGE)]
        )
    return ValidationOutcome()


def validate_employee(employee: Employee) -> ValidationOutcome:
    """Collect-all validation for create and replace.

    An empty email counts as absent here; PATCH still runs ``validate_email``
    on it and rejects it.
    """
    errors = list(validate_name(employee.name).errors)
    if employee.email:
        errors += validate_email(employee.email).errors
    return ValidationOutcome(errors=errors)


# =====================================================================
# PARTIAL UPDATE
# =====================================================================


def _type_error(field: str, expected: str) -> MergeResult:
    return MergeResult(
        error=FieldError(
            field=field,
            kind=ErrorKind.INVALID_FIELD_TYPE,
            message=f"{field} must be {expected}",
        )
    )


def _is_number(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass;
    # 1e400 decodes to inf, which cannot be sent back as JSON
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:  # int too large for a float
        return False


def merge_partial(existing: Employee, updates: dict[str, Any]) -> MergeResult:
    """Apply a sparse ``updates`` map onto a copy of ``existing``.

    Only ``name``, ``position``, ``salary`` and ``email`` are recognized, in
    that order; any other key is ignored.  The first recognized field that
    fails stops the merge and ``existing`` is left untouched either way.
    """
    merged = existing.model_copy()

    if "name" in updates:
        name = updates["name"]
        if name is not None and not isinstance(name, str):
            return _type_error("name", "a string")
        outcome = validate_name(name)
        if not outcome.ok:
            return MergeResult(error=outcome.errors[0])
        merged.name = name

    if "position" in updates:
        position = updates["position"]
        if position is not None and not isinstance(position, str):
            return _type_error("position", "a string or null")
        merged.position = position

    if "salary" in updates:
        salary = updates["salary"]
        if not _is_number(salary):
            return _type_error("salary", "a number")
        merged.salary = float(salary)

    if "email" in updates:
        email = updates["email"]
        if email is not None and not isinstance(email, str):
            return _type_error("email", "a string or null")
        outcome = validate_email(email)
        if not outcome.ok:
            return MergeResult(error=outcome.errors[0])
        merged.email = email

    return MergeResult(employee=merged)
