"""Scanner mixins for the three token shapes the lexer recognizes.

Each scanner starts at the cursor, consumes one token and returns it.
Scanners only move the cursor through ``_advance_to``, which keeps line
and column tracking in step with the offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from consulta.charsets import DECIMAL_POINT, DIGITS, STRING_QUOTE
from consulta.errors import InvalidTokenError, UnterminatedStringError
from consulta.tokens import Token, TokenKind
from consulta.utils.logger import get_logger

if TYPE_CHECKING:
    from consulta.config import LexerConfig
    from consulta.matchers.field import FieldMatcher

logger = get_logger(__name__)


class LiteralScannerMixin:
    """Mixin scanning string and number literals."""

    __slots__ = ()

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _lineno: int
    _col: int
    _config: LexerConfig

    def _save_location(self) -> None:
        raise NotImplementedError

    def _advance_to(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, text: str, start_pos: int) -> Token:
        raise NotImplementedError

    def _scan_string(self) -> Token:
        """Scan a double-quoted string; the token text excludes the quotes.

        Without a closing quote the literal runs to end of input, unless
        strict strings are enabled.

        Raises:
            UnterminatedStringError: No closing quote and strict_strings is set
        """
        start = self._pos
        self._save_location()

        close = self._source.find(STRING_QUOTE, start + 1)
        if close == -1:
            if self._config.strict_strings:
                raise UnterminatedStringError(start, self._lineno, self._col)
            text = self._source[start + 1 :]
            self._advance_to(self._source_len)
        else:
            text = self._source[start + 1 : close]
            self._advance_to(close + 1)

        return self._make_token(TokenKind.STRING, text, start)

    def _scan_number(self) -> Token:
        """Scan digits with an optional ``.`` and fractional digits.

        "12." is a number: the fractional run may be empty.
        """
        start = self._pos
        self._save_location()

        end = self._digits_end(start)
        if end < self._source_len and self._source[end] == DECIMAL_POINT:
            end = self._digits_end(end + 1)

        self._advance_to(end)
        return self._make_token(TokenKind.NUMBER, self._source[start:end], start)

    def _digits_end(self, pos: int) -> int:
        source = self._source
        source_len = self._source_len
        while pos < source_len and source[pos] in DIGITS:
            pos += 1
        return pos


class FieldScannerMixin:
    """Mixin matching field names against the registered matchers."""

    __slots__ = ()

    _source: str
    _pos: int
    _lineno: int
    _col: int
    _matchers: tuple[FieldMatcher, ...]

    def _save_location(self) -> None:
        raise NotImplementedError

    def _advance_to(self, end: int) -> None:
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, text: str, start_pos: int) -> Token:
        raise NotImplementedError

    def _scan_field(self) -> Token:
        """Try each matcher in order; the first to consume input wins.

        Raises:
            InvalidTokenError: No matcher consumed a character. The cursor
                is left where it was.
        """
        start = self._pos
        for matcher in self._matchers:
            end = matcher.scan(self._source, start)
            if end > start:
                text = self._source[start:end]
                logger.debug("field %r matched %r at %d", matcher.name, text, start)
                self._save_location()
                self._advance_to(end)
                return self._make_token(matcher.kind, text, start)
            logger.debug("field %r did not match at %d", matcher.name, start)

        char = self._source[start]
        logger.debug("invalid token %r at %d:%d", char, self._lineno, self._col)
        raise InvalidTokenError(char, start, self._lineno, self._col)
