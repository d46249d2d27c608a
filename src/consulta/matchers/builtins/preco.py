"""Price field: ``preço maior que 1000``."""

from __future__ import annotations

import re
from collections.abc import Sequence

from consulta.matchers.field import FieldMatcher, field_matcher
from consulta.matchers.protocol import ValidationResult

FIELD_NAME = "preço"

# Leading integer, as a lenient integer parse reads it: "1000", " 12.5", "-3abc"
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(value: str) -> int | None:
    """Parse the integer prefix of value, ignoring what follows.

    Example:
        >>> parse_leading_int("12.5")
        12
        >>> parse_leading_int("abc") is None
        True
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


class PriceValidator:
    """Accepts exactly one value that starts with an integer."""

    __slots__ = ()

    async def __call__(self, values: Sequence[str]) -> ValidationResult:
        if len(values) != 1:
            return ValidationResult.reject("Preço deve ter um valor e apenas um valor")
        if parse_leading_int(values[0]) is None:
            return ValidationResult.reject("Preço inválido")
        return ValidationResult.ok()


def price_matcher(*, exact: bool = False) -> FieldMatcher:
    """Matcher for the ``preço`` field."""
    return field_matcher(FIELD_NAME, PriceValidator(), exact=exact)
