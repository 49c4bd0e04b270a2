"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.
Used by tokens (lazily) and by lexer errors.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Line and column are 1-indexed; offsets are 0-indexed positions in the
    source buffer, with ``end_offset`` exclusive.

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=1)
            >>> str(loc)
            '1:1'

            >>> loc = SourceLocation(3, 5, source_file="contracts/Token.sol")
            >>> str(loc)
            'contracts/Token.sol:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as "file.sol:10:5" or "10:5"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute line/column for an absolute offset in source.

        For callers holding a bare offset; the lexer tracks lines incrementally.
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        col = offset - (source.rfind("\n", 0, offset) + 1) + 1
        return cls(
            lineno=lineno,
            col_offset=col,
            offset=offset,
            end_offset=offset,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location."""
        return cls(lineno=0, col_offset=0)
