"""ContextVar-based lexer configuration for Consulta.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and each asyncio
    task) has independent storage, so no locks are needed.

Usage:
    from consulta.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(strict_strings=True)):
        lexer = Lexer()
        lexer.reset('produto é "abc')
        lexer.tokenize_all()  # raises UnterminatedStringError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from consulta.matchers.registry import MatcherRegistry


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        strict_strings: Raise UnterminatedStringError for a string literal
            with no closing quote instead of consuming to end of input
        exact_field_names: Build the default matchers so that only the exact
            field name is accepted, instead of any run of its letters
        matcher_registry: Matchers used by a Lexer constructed without an
            explicit matcher list (defaults to the built-in registry)

    """

    strict_strings: bool = False
    exact_field_names: bool = False
    matcher_registry: "MatcherRegistry | None" = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "strict_strings": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_strings
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with lexer_config_context(LexerConfig(exact_field_names=True)):
        ...     lexer = Lexer()
        >>> # Previous config is active again here

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
