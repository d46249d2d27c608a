"""Exception classes for Consulta.

Provides standardized exceptions for error handling throughout Consulta.
"""

from __future__ import annotations


class ConsultaError(Exception):
    """Base exception for all Consulta errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(ConsultaError):
    """Error while scanning query text.

    Carries the offending position so callers can point at it.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            offset: Absolute offset in the input (0-indexed)
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
        """
        self.message = message
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{self.describe()}")

    def describe(self) -> str:
        """Message body without the location prefix."""
        return self.message


class InvalidTokenError(LexError):
    """No rule could consume the character at the cursor.

    ``message`` is always "Invalid token"; the offending character and
    its location are attached and included in ``str(err)``.
    """

    def __init__(
        self,
        char: str,
        offset: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        self.char = char
        super().__init__("Invalid token", offset, lineno, col_offset)

    def describe(self) -> str:
        return f"{self.message} {self.char!r}"


class UnterminatedStringError(LexError):
    """A string literal has no closing quote.

    Only raised when ``LexerConfig.strict_strings`` is enabled; the
    location is that of the opening quote.
    """

    def __init__(
        self,
        offset: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        super().__init__("Unterminated string", offset, lineno, col_offset)


class ValidationTimeoutError(ConsultaError):
    """A field validator did not finish within the allotted time."""

    def __init__(self, field_name: str, timeout: float) -> None:
        """Initialize validation timeout error.

        Args:
            field_name: Name of the field whose validator timed out
            timeout: Timeout in seconds that elapsed
        """
        self.field_name = field_name
        self.timeout = timeout
        super().__init__(f"Field '{field_name}': validation timed out after {timeout}s")
