"""Token and TokenKind definitions for the Consulta lexer.

The lexer produces a sequence of Token objects for a downstream parser or a
display surface. Each Token has a kind, the literal text it consumed, and
a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Coordinates take no part in equality: two tokens are equal when their kind
and text are equal, wherever they came from.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from consulta.location import SourceLocation


class TokenKind(Enum):
    """Kinds of token in the query language.

    Values are the display labels of each kind; operator kinds are labelled
    with the Portuguese words that spell them.

    The lexer currently emits only EOF, IDENT, NUMBER and STRING. The
    operator and punctuation kinds name the rest of the language's
    vocabulary for consumers that classify identifier text further.

    """

    # Structure
    ILLEGAL = "illegal"
    EOF = "eof"

    # Literals and fields
    IDENT = "ident"
    NUMBER = "number"
    STRING = "string"

    # Punctuation
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"

    # Comparison
    EQ = "é"
    NEQ = "não é"
    GT = "maior que"
    LT = "menor que"
    GTE = "maior ou igual a"
    LTE = "menor ou igual a"

    # Logical
    AND = "e"
    OR = "ou"
    NOT = "não"

    @property
    def label(self) -> str:
        """Display label (the enum value)."""
        return self.value


OPERATOR_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.EQ,
        TokenKind.NEQ,
        TokenKind.GT,
        TokenKind.LT,
        TokenKind.GTE,
        TokenKind.LTE,
        TokenKind.AND,
        TokenKind.OR,
        TokenKind.NOT,
    }
)

LITERAL_KINDS: frozenset[TokenKind] = frozenset({TokenKind.NUMBER, TokenKind.STRING})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The exact text consumed; string literals exclude their quotes
        _start_offset: Absolute start position in the input
        _end_offset: Absolute end position in the input (exclusive)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)

    Tokens built by hand (e.g. in tests) may omit the coordinates.

    """

    kind: TokenKind
    text: str
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _lineno: int = field(default=1, compare=False)
    _col: int = field(default=1, compare=False)
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from consulta.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def offset(self) -> int:
        """Start offset (convenience accessor)."""
        return self._start_offset

    @property
    def end_offset(self) -> int:
        """End offset (convenience accessor)."""
        return self._end_offset

    def __str__(self) -> str:
        """Display form, e.g. ``ident: produto``."""
        return f"{self.kind.label}: {self.text}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self._lineno}:{self._col})"
