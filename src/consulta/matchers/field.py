"""Field matchers: how the lexer recognizes a field name.

A FieldMatcher pairs a single-character predicate, used to recognize the
field's name in query text, with a validator for the values later bound
to that field. The lexer tries matchers in registration order and the
first one that consumes at least one character wins.

Matching modes:
- Character class (default): a maximal run of characters accepted by the
  predicate. With the predicate built from the letters of the name, any
  arrangement of those letters matches ("pod", "tudo", "produtooo").
- Exact: the literal name, not followed by another character accepted by
  the predicate.

Thread Safety:
FieldMatcher is frozen and holds no mutable state. Safe to share.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from consulta.charsets import name_charset
from consulta.matchers.protocol import FieldValidator
from consulta.tokens import TokenKind


@dataclass(frozen=True, slots=True)
class FieldMatcher:
    """Recognition rule and value validator for one field.

    Attributes:
        name: Field name (e.g. "produto"); unique within a registry
        predicate: Accepts a single character that may appear in the name
        validate: Async validator for values bound to this field
        kind: Token kind emitted on a match
        exact: Require the literal name instead of any run of predicate chars

    """

    name: str
    predicate: Callable[[str], bool]
    validate: FieldValidator
    kind: TokenKind = TokenKind.IDENT
    exact: bool = False

    def scan(self, source: str, pos: int) -> int:
        """Match against source starting at pos.

        Args:
            source: Full input text
            pos: Offset to start matching at

        Returns:
            End offset of the match (exclusive); equals pos when nothing matches.

        Complexity: O(k) where k = length of the match
        """
        if self.exact:
            return self._scan_exact(source, pos)

        predicate = self.predicate
        end = pos
        source_len = len(source)
        while end < source_len and predicate(source[end]):
            end += 1
        return end

    def _scan_exact(self, source: str, pos: int) -> int:
        if not self.name or not source.startswith(self.name, pos):
            return pos
        end = pos + len(self.name)
        # "produtor" must not match as "produto" followed by a stray "r"
        if end < len(source) and self.predicate(source[end]):
            return pos
        return end


def field_matcher(
    name: str,
    validate: FieldValidator,
    *,
    exact: bool = False,
) -> FieldMatcher:
    """Build a matcher whose predicate admits the letters of ``name``.

    Example:
        >>> m = field_matcher("preço", validate_price)
        >>> m.scan("preço maior que 10", 0)
        5
    """
    charset = name_charset(name)
    return FieldMatcher(
        name=name,
        predicate=charset.__contains__,
        validate=validate,
        exact=exact,
    )
