"""Field matchers and their registry.

Field names are not keywords baked into the lexer: each field is described
by a FieldMatcher (which characters form its name, and how to validate the
values bound to it) registered in an ordered MatcherRegistry.

Example:
    >>> from consulta.matchers import create_registry_with_defaults, field_matcher
    >>> builder = create_registry_with_defaults()
    >>> builder.register(field_matcher("loja", validate_store))
    >>> lexer = Lexer(builder.build())
"""

from consulta.matchers.builtins import category_matcher, price_matcher, product_matcher
from consulta.matchers.field import FieldMatcher, field_matcher
from consulta.matchers.protocol import FieldValidator, ValidationResult
from consulta.matchers.registry import (
    MatcherRegistry,
    MatcherRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__all__ = [
    "FieldMatcher",
    "FieldValidator",
    "MatcherRegistry",
    "MatcherRegistryBuilder",
    "ValidationResult",
    "category_matcher",
    "create_default_registry",
    "create_registry_with_defaults",
    "field_matcher",
    "price_matcher",
    "product_matcher",
]
