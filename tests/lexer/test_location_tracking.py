"""Tests for accurate source location tracking in the lexer.

Token locations feed error messages and editor highlighting. These tests
verify that line numbers, columns and offsets are correctly tracked.
"""

import pytest

from consulta.errors import InvalidTokenError
from consulta.lexer import Lexer


def lex(source: str):
    lexer = Lexer()
    lexer.reset(source)
    return lexer.tokenize_all()


class TestSingleLineLocations:
    def test_first_token(self) -> None:
        token = lex("produto")[0]
        assert token.location.lineno == 1
        assert token.location.col_offset == 1
        assert token.location.offset == 0
        assert token.location.end_offset == 7

    def test_after_spaces(self) -> None:
        tokens = lex("produto   102234")
        assert tokens[1].location.col_offset == 11
        assert tokens[1].location.offset == 10

    def test_string_span_includes_quotes(self) -> None:
        token = lex('1 "abc" 2')[1]
        assert token.location.offset == 2
        assert token.location.end_offset == 7
        assert token.location.col_offset == 3

    def test_non_ascii_counts_characters(self) -> None:
        tokens = lex('"ção" 1')
        assert tokens[1].location.col_offset == 7


class TestMultilineLocations:
    def test_newline_inside_string(self) -> None:
        tokens = lex('"a\nb" 12')
        assert tokens[1].location.lineno == 2
        assert tokens[1].location.col_offset == 4
        assert tokens[1].location.offset == 6

    def test_error_location_on_second_line(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            lex('"x\ny" @')
        err = exc_info.value
        assert (err.lineno, err.col_offset) == (2, 4)
        assert str(err).startswith("2:4 ")


class TestEofLocation:
    def test_eof_at_end(self) -> None:
        lexer = Lexer()
        lexer.reset("produto  ")
        lexer.tokenize_all()
        eof = lexer.next_token()
        assert eof.location.offset == 9
        assert eof.location.col_offset == 10
        assert eof.location.length == 0
