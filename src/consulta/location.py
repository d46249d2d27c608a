"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in query text.
Queries are usually a single line, but pasted input may contain newlines,
so line and column are tracked alongside the absolute offset.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a fragment of query text.

    Line and column are 1-indexed; offsets are 0-indexed into the input.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start offset in the input
        end_offset: Absolute end offset in the input (exclusive)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=9, offset=8, end_offset=10)
            >>> str(loc)
            '1:9'
            >>> loc.length
            2

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "1:9"
        """
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end_offset - self.offset
