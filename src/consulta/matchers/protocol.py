"""Validator protocol and result type for field matchers.

A validator answers "are these legal values for this field?" once a
downstream stage has bound values to a field. Validators are coroutines so
they can consult a remote catalog without blocking; the lexer never calls
them.

Example:
    >>> async def validate_store(values):
    ...     known = await catalog.stores()
    ...     if all(v in known for v in values):
    ...         return ValidationResult.ok()
    ...     return ValidationResult.reject("Loja não encontrada")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating the values bound to a field.

    Truthy when the values were accepted. ``message`` explains a rejection
    and is meant to be shown to the user as is.

    """

    accepted: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.accepted

    @classmethod
    def ok(cls, message: str = "") -> ValidationResult:
        return cls(True, message)

    @classmethod
    def reject(cls, message: str) -> ValidationResult:
        return cls(False, message)


@runtime_checkable
class FieldValidator(Protocol):
    """Async callable checking candidate values for one field."""

    async def __call__(self, values: Sequence[str]) -> ValidationResult: ...
