"""Add a field with its own validator, then check values bound to it."""

import asyncio

from consulta import (
    Lexer,
    ValidationResult,
    create_registry_with_defaults,
    field_matcher,
    validate_values_by_name,
)

STORES = {"7", "12"}


async def validate_store(values):
    if all(v in STORES for v in values):
        return ValidationResult.ok()
    return ValidationResult.reject("Loja não encontrada")


builder = create_registry_with_defaults(exact=True)
builder.register(field_matcher("loja", validate_store, exact=True))
registry = builder.build()

lexer = Lexer(registry)
lexer.reset("loja 7 12 preço 1000")
print(lexer.tokenize_all())

result = asyncio.run(validate_values_by_name(registry, "loja", ["7", "99"], timeout=1.0))
print(result)
