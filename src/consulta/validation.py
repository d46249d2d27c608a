"""Awaiting field validators on behalf of a downstream consumer.

The lexer only recognizes field names. A later stage that binds values to
a field (``categoria em 12345, 1234``) asks the field's matcher whether the
values are legal. Validators are coroutines that may wait on a catalog, so
the helpers here take an optional timeout.

Example:
    >>> result = asyncio.run(
    ...     validate_values_by_name(registry, "categoria", ["12345", "1234"])
    ... )
    >>> result.accepted
    True
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING

from consulta.errors import ValidationTimeoutError
from consulta.matchers.protocol import ValidationResult
from consulta.utils.logger import get_logger

if TYPE_CHECKING:
    from consulta.matchers.field import FieldMatcher
    from consulta.matchers.registry import MatcherRegistry

logger = get_logger(__name__)


async def validate_values(
    matcher: FieldMatcher,
    values: Sequence[str],
    *,
    timeout: float | None = None,
) -> ValidationResult:
    """Run a matcher's validator on the values bound to its field.

    Args:
        matcher: Matcher of the field the values belong to
        values: Candidate values, as token texts
        timeout: Seconds to wait before giving up; None waits indefinitely

    Returns:
        The validator's result

    Raises:
        ValidationTimeoutError: The validator did not finish in time
    """
    values = tuple(values)
    if timeout is None:
        result = await matcher.validate(values)
    else:
        try:
            result = await asyncio.wait_for(matcher.validate(values), timeout)
        except TimeoutError as e:
            logger.warning("validator for %r timed out after %ss", matcher.name, timeout)
            raise ValidationTimeoutError(matcher.name, timeout) from e

    if not result.accepted:
        logger.debug("field %r rejected %r: %s", matcher.name, values, result.message)
    return result


async def validate_values_by_name(
    registry: MatcherRegistry,
    name: str,
    values: Sequence[str],
    *,
    timeout: float | None = None,
) -> ValidationResult:
    """Look up a field's matcher by name and validate values against it.

    Raises:
        KeyError: No matcher is registered under name
        ValidationTimeoutError: The validator did not finish in time
    """
    matcher = registry.get(name)
    if matcher is None:
        raise KeyError(name)
    return await validate_values(matcher, values, timeout=timeout)


__all__ = ["validate_values", "validate_values_by_name"]
