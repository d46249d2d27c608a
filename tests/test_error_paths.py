"""Error-path and malformed input tests.

Tests exception construction and formatting, and that the lexer fails the
whole tokenization on the first unrecognized character.
"""

import pytest

from consulta import tokenize
from consulta.errors import (
    ConsultaError,
    InvalidTokenError,
    LexError,
    UnterminatedStringError,
    ValidationTimeoutError,
)
from consulta.lexer import Lexer

# =========================================================================
# LexError construction and formatting
# =========================================================================


class TestLexErrorFormatting:
    """Verify LexError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = LexError("unexpected input")
        assert str(err) == "unexpected input"
        assert err.offset is None
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = LexError("bad input", lineno=2)
        assert str(err) == "2 bad input"

    def test_with_line_and_column(self) -> None:
        err = LexError("bad input", offset=4, lineno=1, col_offset=5)
        assert str(err) == "1:5 bad input"

    def test_is_consulta_error(self) -> None:
        assert isinstance(LexError("x"), ConsultaError)


# =========================================================================
# InvalidTokenError
# =========================================================================


class TestInvalidTokenError:
    """Verify InvalidTokenError formatting and hierarchy."""

    def test_message_is_fixed(self) -> None:
        err = InvalidTokenError("@", offset=8, lineno=1, col_offset=9)
        assert err.message == "Invalid token"

    def test_str_includes_char_and_location(self) -> None:
        err = InvalidTokenError("@", offset=8, lineno=1, col_offset=9)
        assert str(err) == "1:9 Invalid token '@'"

    def test_attributes(self) -> None:
        err = InvalidTokenError("\t", offset=3, lineno=2, col_offset=1)
        assert err.char == "\t"
        assert err.offset == 3
        assert err.lineno == 2
        assert err.col_offset == 1

    def test_is_lex_error(self) -> None:
        assert isinstance(InvalidTokenError("@"), LexError)


class TestOtherErrors:
    def test_unterminated_string_format(self) -> None:
        err = UnterminatedStringError(offset=8, lineno=1, col_offset=9)
        assert str(err) == "1:9 Unterminated string"
        assert isinstance(err, LexError)

    def test_validation_timeout_format(self) -> None:
        err = ValidationTimeoutError("categoria", 0.5)
        assert "categoria" in str(err)
        assert "0.5" in str(err)
        assert err.field_name == "categoria"
        assert isinstance(err, ConsultaError)


# =========================================================================
# Lexer failure behaviour
# =========================================================================


class TestFailFast:
    """The first unrecognized character aborts the whole tokenization."""

    @pytest.mark.parametrize("source", ["@", "produto @", "12 # 13", "produto,", "(produto)"])
    def test_invalid_character_raises(self, source: str) -> None:
        with pytest.raises(InvalidTokenError):
            tokenize(source)

    def test_error_points_at_offending_character(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            tokenize("produto 102234 @ 12")
        err = exc_info.value
        assert err.char == "@"
        assert err.offset == 15
        assert (err.lineno, err.col_offset) == (1, 16)

    def test_no_partial_result(self) -> None:
        """Tokens scanned before the error are discarded with it."""
        lexer = Lexer()
        lexer.reset("produto 12 @")
        result = None
        with pytest.raises(InvalidTokenError):
            result = lexer.tokenize_all()
        assert result is None

    def test_cursor_stays_on_invalid_character(self) -> None:
        lexer = Lexer()
        lexer.reset("produto @")
        lexer.next_token()
        with pytest.raises(InvalidTokenError):
            lexer.next_token()
        assert lexer.position == 8
        # Still stuck on the same character
        with pytest.raises(InvalidTokenError):
            lexer.next_token()
        assert lexer.position == 8

    @pytest.mark.parametrize("whitespace", ["\t", "\n", "\r"])
    def test_other_whitespace_is_not_skipped(self, whitespace: str) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            tokenize(f"produto{whitespace}102234")
        assert exc_info.value.char == whitespace

    def test_lone_decimal_point(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            tokenize(".5")
        assert exc_info.value.offset == 0
