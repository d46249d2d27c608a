"""Query lexer: turns query text into a list of tokens.

Scanning rules, tried at the cursor after skipping plain spaces:
1. ``"``        string literal up to the next ``"``
2. a digit      number, optionally with ``.`` and a fractional part
3. otherwise    field name, via the registered field matchers

Anything else fails the whole tokenization with InvalidTokenError.

Operator words ("é", "e", "não é", "maior que" ...) have no rule of their
own. They lex as identifiers only when some matcher's alphabet covers
them, and otherwise fail as invalid tokens.

Thread Safety:
A Lexer holds mutable cursor state. Use one instance per thread, or lock
around reset() and tokenize_all(). Matchers are immutable and shareable.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from consulta.charsets import DIGITS, SPACE, STRING_QUOTE
from consulta.config import get_lexer_config
from consulta.lexer.scanners import FieldScannerMixin, LiteralScannerMixin
from consulta.matchers.registry import create_default_registry
from consulta.tokens import Token, TokenKind

if TYPE_CHECKING:
    from consulta.config import LexerConfig
    from consulta.matchers.field import FieldMatcher


class Lexer(
    LiteralScannerMixin,
    FieldScannerMixin,
):
    """Stateful scanner over one query at a time.

    Usage:
            >>> lexer = Lexer()
            >>> lexer.reset("produto é 102234")
            >>> lexer.tokenize_all()
            Traceback (most recent call last):
            ...
            consulta.errors.InvalidTokenError: 1:9 Invalid token 'é'

            >>> lexer.reset('categoria 12345 "abc"')
            >>> [str(t) for t in lexer.tokenize_all()]
            ['ident: categoria', 'number: 12345', 'string: abc']

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_saved_lineno",
        "_saved_col",
        "_matchers",
        "_config",
    )

    def __init__(
        self,
        matchers: Iterable[FieldMatcher] | None = None,
        *,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer with its field matchers.

        Args:
            matchers: Field matchers in precedence order. A MatcherRegistry
                works as is. Defaults to the configured registry, or the
                built-in one.
            config: Lexer configuration; defaults to the active context config
        """
        self._config = config if config is not None else get_lexer_config()
        if matchers is None:
            matchers = self._config.matcher_registry
            if matchers is None:
                matchers = create_default_registry(exact=self._config.exact_field_names)
        self._matchers: tuple[FieldMatcher, ...] = tuple(matchers)
        self.reset("")

    def reset(self, source: str) -> None:
        """Replace the input and rewind to its start."""
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    @property
    def matchers(self) -> tuple[FieldMatcher, ...]:
        return self._matchers

    def next_token(self) -> Token:
        """Consume and return the next token.

        At end of input returns an EOF token, and keeps doing so on
        further calls.

        Raises:
            InvalidTokenError: No rule matches at the cursor
            UnterminatedStringError: Unclosed string with strict_strings set
        """
        self._skip_spaces()

        if self._pos >= self._source_len:
            return self._make_token_at_current(TokenKind.EOF, "")

        char = self._source[self._pos]
        if char == STRING_QUOTE:
            return self._scan_string()
        if char in DIGITS:
            return self._scan_number()
        return self._scan_field()

    def tokenize_all(self) -> list[Token]:
        """Tokenize the rest of the input, excluding the final EOF token.

        Fails fast: the first error propagates and no tokens are returned.

        Complexity: O(n * m) where n = len(source), m = number of matchers
        """
        tokens: list[Token] = []
        token = self.next_token()
        while token.kind is not TokenKind.EOF:
            tokens.append(token)
            token = self.next_token()
        return tokens

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _skip_spaces(self) -> None:
        pos = self._pos
        source = self._source
        source_len = self._source_len
        while pos < source_len and source[pos] == SPACE:
            pos += 1
        self._advance_to(pos)

    def _advance_to(self, end: int) -> None:
        """Move the cursor to end, updating line and column.

        Args:
            end: Target offset; clamped to the input length.
        """
        end = min(end, self._source_len)
        if end <= self._pos:
            return

        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)

        self._pos = end

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the token being scanned."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, kind: TokenKind, text: str, start_pos: int) -> Token:
        """Create a Token spanning start_pos to the cursor.

        Uses the location saved by _save_location() as the token start.
        """
        return Token(
            kind=kind,
            text=text,
            _start_offset=start_pos,
            _end_offset=self._pos,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
        )

    def _make_token_at_current(self, kind: TokenKind, text: str) -> Token:
        """Create a zero-width Token at the cursor (for EOF)."""
        return Token(
            kind=kind,
            text=text,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _lineno=self._lineno,
            _col=self._col,
        )
