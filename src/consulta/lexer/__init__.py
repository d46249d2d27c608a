"""Lexer for the filter-query language.

lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (dispatch + cursor navigation)
└── scanners.py          # String, number and field-name scanners

Usage:
    >>> from consulta.lexer import Lexer
    >>> lexer = Lexer()
    >>> lexer.reset("produto 102234")
    >>> lexer.tokenize_all()
    [Token(IDENT, 'produto', 1:1), Token(NUMBER, '102234', 1:9)]

"""

from consulta.lexer.core import Lexer

__all__ = ["Lexer"]
