"""Exception classes for solex.

Bad *source* text never raises: it is reported with ERROR tokens. These
exceptions describe defects in the rule table itself, either found while
building it (RuleTableError) or while driving a session (LexerStateError).
"""

from __future__ import annotations


class SolexError(Exception):
    """Base exception for all solex errors.

    Subclass this for specific error categories.
    """

    pass


class RuleTableError(SolexError):
    """Invalid rule table, detected at build time.

    Raised for unknown mixins, mixin cycles, transitions into undefined
    states, empty-match rules without a transition and invalid patterns.
    """

    def __init__(self, message: str, state: str | None = None) -> None:
        """Initialize rule table error.

        Args:
            message: Description of the defect
            state: Name of the state being built (optional)
        """
        self.message = message
        self.state = state

        location = f"state '{state}': " if state else ""
        super().__init__(f"{location}{message}")


class LexerStateError(SolexError):
    """The state machine could not make progress.

    Raised when no rule of the active state matches, or when fallback
    rules keep firing without consuming input. Both mean the table is
    malformed; a well-formed table never raises this on any input.
    """

    def __init__(
        self,
        message: str,
        state: str,
        offset: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer state error with optional location.

        Args:
            message: Error description
            state: Name of the active state
            offset: Absolute cursor position
            lineno: Line number where lexing stopped (1-indexed)
            col_offset: Column where lexing stopped (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.state = state
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message} (state '{state}', offset {offset})")
