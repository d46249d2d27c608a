"""Category field: ``categoria em 12345, 1234, 1233``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from consulta.matchers.field import FieldMatcher, field_matcher
from consulta.matchers.protocol import ValidationResult

FIELD_NAME = "categoria"

DEFAULT_CATEGORY_CODES: frozenset[str] = frozenset({"12345", "1234", "1233"})


class CategoryCodeValidator:
    """Accepts a list of values when every one is a known category code."""

    __slots__ = ("codes",)

    def __init__(self, codes: Iterable[str] = DEFAULT_CATEGORY_CODES) -> None:
        self.codes = frozenset(codes)

    async def __call__(self, values: Sequence[str]) -> ValidationResult:
        if all(v in self.codes for v in values):
            return ValidationResult.ok()
        return ValidationResult.reject("Código de categoria não encontrado")


def category_matcher(
    codes: Iterable[str] = DEFAULT_CATEGORY_CODES,
    *,
    exact: bool = False,
) -> FieldMatcher:
    """Matcher for the ``categoria`` field."""
    return field_matcher(FIELD_NAME, CategoryCodeValidator(codes), exact=exact)
