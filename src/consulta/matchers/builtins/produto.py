"""Product field: ``produto é 102234``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from consulta.matchers.field import FieldMatcher, field_matcher
from consulta.matchers.protocol import ValidationResult

FIELD_NAME = "produto"

DEFAULT_PRODUCT_CODES: frozenset[str] = frozenset({"102234", "12233"})


class ProductCodeValidator:
    """Accepts values whose first entry is a known product code.

    Only the first value is looked up; a product comparison binds a
    single code.
    """

    __slots__ = ("codes",)

    def __init__(self, codes: Iterable[str] = DEFAULT_PRODUCT_CODES) -> None:
        self.codes = frozenset(codes)

    async def __call__(self, values: Sequence[str]) -> ValidationResult:
        if not values:
            return ValidationResult.reject("Código de produto não informado")
        code = values[0]
        if code in self.codes:
            return ValidationResult.ok()
        return ValidationResult.reject(f"Código de produto {code} não encontrado")


def product_matcher(
    codes: Iterable[str] = DEFAULT_PRODUCT_CODES,
    *,
    exact: bool = False,
) -> FieldMatcher:
    """Matcher for the ``produto`` field."""
    return field_matcher(FIELD_NAME, ProductCodeValidator(codes), exact=exact)
