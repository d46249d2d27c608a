"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from consulta.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

# Only the plain space is skipped between tokens. Tabs and newlines are left
# for the scanners, which reject them unless a field matcher admits them.
SPACE = " "

# ASCII digits only; str.isdigit() would also accept "²" and Arabic-Indic digits
DIGITS: frozenset[str] = frozenset("0123456789")

DECIMAL_POINT = "."

STRING_QUOTE = '"'


def name_charset(name: str) -> frozenset[str]:
    """Characters a field name is built from.

    The character-class matching rule accepts any run drawn from this set,
    so ``name_charset("produto")`` also admits "pod", "tudo" or "ooo".

    Example:
        >>> sorted(name_charset("preço"))
        ['e', 'o', 'p', 'r', 'ç']
    """
    return frozenset(name)
