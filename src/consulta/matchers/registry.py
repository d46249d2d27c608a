"""Matcher registry for ordered field-matcher lookup and registration.

The registry holds field matchers in registration order. Order is
significant: the lexer tries matchers first to last and the first one
that consumes input wins, so a matcher registered earlier shadows later
matchers whose alphabets overlap.

Thread Safety:
MatcherRegistry is immutable after creation. Safe to share.
Use MatcherRegistryBuilder for mutable construction.

Example:
    >>> builder = MatcherRegistryBuilder()
    >>> builder.register(product_matcher())
    >>> builder.register(field_matcher("loja", validate_store))
    >>> registry = builder.build()
    >>> registry.get("loja")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from consulta.matchers.field import FieldMatcher


class MatcherRegistry:
    """Immutable, ordered registry of field matchers.

    Iterating yields matchers in registration order, so a registry can be
    passed anywhere an ordered matcher list is expected.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_matchers", "_by_name")

    def __init__(
        self,
        matchers: tuple[FieldMatcher, ...],
        by_name: dict[str, FieldMatcher],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use MatcherRegistryBuilder to create instances.
        """
        self._matchers = matchers
        self._by_name = by_name

    def get(self, name: str) -> FieldMatcher | None:
        """Get matcher for field name.

        Args:
            name: Field name (e.g., "produto", "preço")

        Returns:
            Matcher if registered, None otherwise
        """
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if field name is registered."""
        return name in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        """Registered field names, in registration order."""
        return tuple(m.name for m in self._matchers)

    @property
    def matchers(self) -> tuple[FieldMatcher, ...]:
        """Registered matchers, in registration order."""
        return self._matchers

    def __iter__(self) -> Iterator[FieldMatcher]:
        return iter(self._matchers)

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        return len(self._matchers)

    def __repr__(self) -> str:
        return f"MatcherRegistry({list(self.names)!r})"


class MatcherRegistryBuilder:
    """Mutable builder for MatcherRegistry.

    Register matchers in precedence order, then call build() to create
    an immutable registry.
    """

    __slots__ = ("_matchers", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._matchers: list[FieldMatcher] = []
        self._by_name: dict[str, FieldMatcher] = {}

    def register(self, matcher: FieldMatcher) -> MatcherRegistryBuilder:
        """Register a field matcher after those already registered.

        Args:
            matcher: Matcher providing name, scan() and validate

        Returns:
            Self for chaining

        Raises:
            TypeError: If matcher is missing a required attribute
            ValueError: If a matcher with the same name is already registered
        """
        for attr in ("name", "scan", "validate"):
            if not hasattr(matcher, attr):
                msg = f"Matcher {type(matcher).__name__} missing '{attr}' attribute"
                raise TypeError(msg)

        if matcher.name in self._by_name:
            msg = f"Field '{matcher.name}' already registered"
            raise ValueError(msg)

        self._by_name[matcher.name] = matcher
        self._matchers.append(matcher)
        return self

    def register_all(self, matchers: Iterable[FieldMatcher]) -> MatcherRegistryBuilder:
        """Register multiple matchers, preserving their order.

        Returns:
            Self for chaining
        """
        for matcher in matchers:
            self.register(matcher)
        return self

    def build(self) -> MatcherRegistry:
        """Build immutable registry from registered matchers."""
        return MatcherRegistry(
            matchers=tuple(self._matchers),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered matchers."""
        return len(self._matchers)


# Cached singletons, one per matching mode. Safe to share since
# MatcherRegistry is immutable.
_DEFAULT_REGISTRIES: dict[bool, MatcherRegistry] = {}


def create_default_registry(*, exact: bool = False) -> MatcherRegistry:
    """Get the default matcher registry (cached singleton).

    Args:
        exact: Build matchers that accept only the literal field names

    Returns:
        Registry with the built-in fields, in order: produto, categoria, preço
    """
    registry = _DEFAULT_REGISTRIES.get(exact)
    if registry is None:
        registry = create_registry_with_defaults(exact=exact).build()
        _DEFAULT_REGISTRIES[exact] = registry
    return registry


def create_registry_with_defaults(*, exact: bool = False) -> MatcherRegistryBuilder:
    """Create a builder pre-populated with the built-in matchers.

    Use this to add fields after the defaults:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(field_matcher("loja", validate_store))
        >>> registry = builder.build()

    Returns:
        MatcherRegistryBuilder with defaults already registered
    """
    from consulta.matchers.builtins import category_matcher, price_matcher, product_matcher

    builder = MatcherRegistryBuilder()
    builder.register(product_matcher(exact=exact))
    builder.register(category_matcher(exact=exact))
    builder.register(price_matcher(exact=exact))
    return builder
