"""
Consulta — lexer for a Portuguese filter-query language.

Queries read like ``produto é 102234 e categoria em 12345, 1234, 1233 e
preço maior que 1000``. This package turns such text into tokens: string
and number literals, and field names recognized by configurable field
matchers. Each matcher also carries an async validator for the values a
downstream parser binds to its field.

Quick Start:
    >>> from consulta import tokenize
    >>> [str(t) for t in tokenize('categoria 12345 "caixa"')]
    ['ident: categoria', 'number: 12345', 'string: caixa']

Custom Fields:
    >>> from consulta import Lexer, create_registry_with_defaults, field_matcher
    >>>
    >>> builder = create_registry_with_defaults()
    >>> builder.register(field_matcher("loja", validate_store))
    >>> lexer = Lexer(builder.build())
    >>> lexer.reset("loja 7")
    >>> lexer.tokenize_all()

Installation:
    pip install consulta              # Zero runtime dependencies
"""

from collections.abc import Iterable

from consulta.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from consulta.errors import (
    ConsultaError,
    InvalidTokenError,
    LexError,
    UnterminatedStringError,
    ValidationTimeoutError,
)
from consulta.lexer import Lexer
from consulta.location import SourceLocation
from consulta.matchers import (
    FieldMatcher,
    FieldValidator,
    MatcherRegistry,
    MatcherRegistryBuilder,
    ValidationResult,
    category_matcher,
    create_default_registry,
    create_registry_with_defaults,
    field_matcher,
    price_matcher,
    product_matcher,
)
from consulta.tokens import LITERAL_KINDS, OPERATOR_KINDS, Token, TokenKind
from consulta.validation import validate_values, validate_values_by_name

__version__ = "0.1.0"


def tokenize(
    source: str,
    matchers: Iterable[FieldMatcher] | None = None,
    *,
    config: LexerConfig | None = None,
) -> list[Token]:
    """Tokenize query text with a fresh Lexer.

    Args:
        source: Query text
        matchers: Field matchers in precedence order (defaults as for Lexer)
        config: Lexer configuration (defaults to the active context config)

    Returns:
        Tokens in input order, without the EOF token

    Raises:
        InvalidTokenError: A character no rule can consume
    """
    lexer = Lexer(matchers, config=config)
    lexer.reset(source)
    return lexer.tokenize_all()


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Lexer",
    # Tokens
    "Token",
    "TokenKind",
    "OPERATOR_KINDS",
    "LITERAL_KINDS",
    "SourceLocation",
    # Field matchers
    "FieldMatcher",
    "FieldValidator",
    "ValidationResult",
    "MatcherRegistry",
    "MatcherRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    "field_matcher",
    "product_matcher",
    "category_matcher",
    "price_matcher",
    # Validation
    "validate_values",
    "validate_values_by_name",
    # Errors
    "ConsultaError",
    "LexError",
    "InvalidTokenError",
    "UnterminatedStringError",
    "ValidationTimeoutError",
    # Configuration (ContextVar-based)
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
