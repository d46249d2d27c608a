"""Built-in field matchers.

Provides:
- produto: product codes (first value must be a known code)
- categoria: category codes (every value must be a known code)
- preço: price (exactly one value, starting with an integer)

The default code catalogs are small fixed sets; pass ``codes=`` to the
factories to validate against a real catalog.
"""

from consulta.matchers.builtins.categoria import (
    DEFAULT_CATEGORY_CODES,
    CategoryCodeValidator,
    category_matcher,
)
from consulta.matchers.builtins.preco import PriceValidator, price_matcher
from consulta.matchers.builtins.produto import (
    DEFAULT_PRODUCT_CODES,
    ProductCodeValidator,
    product_matcher,
)

__all__ = [
    "DEFAULT_CATEGORY_CODES",
    "DEFAULT_PRODUCT_CODES",
    "CategoryCodeValidator",
    "PriceValidator",
    "ProductCodeValidator",
    "category_matcher",
    "price_matcher",
    "product_matcher",
]
