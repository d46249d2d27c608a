"""Tests for Token and TokenKind."""

import pytest

from consulta.location import SourceLocation
from consulta.tokens import LITERAL_KINDS, OPERATOR_KINDS, Token, TokenKind


class TestTokenEquality:
    """Tokens compare by kind and text only."""

    def test_equal_kind_and_text(self) -> None:
        assert Token(TokenKind.NUMBER, "12") == Token(TokenKind.NUMBER, "12")

    def test_coordinates_ignored(self) -> None:
        a = Token(TokenKind.IDENT, "produto", _start_offset=0, _end_offset=7)
        b = Token(TokenKind.IDENT, "produto", _start_offset=20, _end_offset=27, _col=21)
        assert a == b
        assert hash(a) == hash(b)

    def test_different_kind(self) -> None:
        assert Token(TokenKind.NUMBER, "12") != Token(TokenKind.STRING, "12")

    def test_different_text(self) -> None:
        assert Token(TokenKind.NUMBER, "12") != Token(TokenKind.NUMBER, "12.0")

    def test_frozen(self) -> None:
        token = Token(TokenKind.NUMBER, "12")
        with pytest.raises(AttributeError):
            token.text = "13"  # type: ignore[misc]


class TestTokenLocation:
    def test_location_from_coordinates(self) -> None:
        token = Token(TokenKind.NUMBER, "102234", _start_offset=8, _end_offset=14, _col=9)
        assert token.location == SourceLocation(lineno=1, col_offset=9, offset=8, end_offset=14)
        assert token.location.length == 6

    def test_location_is_cached(self) -> None:
        token = Token(TokenKind.NUMBER, "1")
        assert token.location is token.location

    def test_offset_accessors(self) -> None:
        token = Token(TokenKind.STRING, "abc", _start_offset=3, _end_offset=8)
        assert token.offset == 3
        assert token.end_offset == 8


class TestTokenFormatting:
    def test_str_uses_kind_label(self) -> None:
        assert str(Token(TokenKind.IDENT, "produto")) == "ident: produto"
        assert str(Token(TokenKind.STRING, "abc")) == "string: abc"

    def test_repr_is_compact(self) -> None:
        token = Token(TokenKind.IDENT, "produto", _lineno=1, _col=5)
        assert repr(token) == "Token(IDENT, 'produto', 1:5)"

    def test_repr_truncates_long_text(self) -> None:
        token = Token(TokenKind.STRING, "x" * 40)
        assert "..." in repr(token)
        assert "x" * 40 not in repr(token)


class TestTokenKind:
    def test_operator_labels_are_portuguese_words(self) -> None:
        assert TokenKind.EQ.label == "é"
        assert TokenKind.NEQ.label == "não é"
        assert TokenKind.GTE.label == "maior ou igual a"
        assert TokenKind.AND.label == "e"
        assert TokenKind.OR.label == "ou"

    def test_operator_kinds(self) -> None:
        assert TokenKind.GT in OPERATOR_KINDS
        assert TokenKind.NOT in OPERATOR_KINDS
        assert TokenKind.IDENT not in OPERATOR_KINDS
        assert TokenKind.COMMA not in OPERATOR_KINDS

    def test_literal_kinds(self) -> None:
        assert LITERAL_KINDS == {TokenKind.NUMBER, TokenKind.STRING}

    def test_labels_are_unique(self) -> None:
        labels = [kind.label for kind in TokenKind]
        assert len(labels) == len(set(labels))
