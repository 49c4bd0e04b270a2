"""Token and TokenKind definitions for the solex lexer.

The lexer produces a stream of Token objects that a renderer consumes.
Each Token has a kind, the lexeme it covers, and its source position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Highlighters only read kind and value, so most tokens never allocate one.

"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solex.location import SourceLocation


class TokenKind(Enum):
    """Closed set of lexical classifications.

    The value of each member is its short CSS class, following the naming
    shared by Pygments-compatible stylesheets (``k``, ``kt``, ``c1`` ...).
    TEXT has no class; renderers emit it unwrapped.

    """

    # Keywords
    KEYWORD = "k"
    KEYWORD_TYPE = "kt"
    KEYWORD_RESERVED = "kr"
    KEYWORD_CONSTANT = "kc"

    # Names
    NAME = "n"
    NAME_BUILTIN = "nb"
    NAME_FUNCTION = "nf"
    NAME_LABEL = "nl"

    # Numbers
    NUMBER_HEX = "mh"
    NUMBER_OCT = "mo"
    NUMBER_INTEGER = "mi"

    # Strings
    STRING = "s"
    STRING_CHAR = "sc"
    STRING_ESCAPE = "se"

    # Symbols
    OPERATOR = "o"
    PUNCTUATION = "p"

    # Comments
    COMMENT = "c"
    COMMENT_SINGLE = "c1"
    COMMENT_MULTILINE = "cm"
    COMMENT_PREPROC = "cp"

    TEXT = ""
    ERROR = "err"

    @property
    def css_class(self) -> str:
        """Short CSS class for this kind ("" for plain text)."""
        return self.value

    @property
    def is_comment(self) -> bool:
        return self.name.startswith("COMMENT")

    @property
    def is_keyword(self) -> bool:
        return self.name.startswith("KEYWORD")


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The classification (from TokenKind enum)
        value: The exact lexeme from source
        offset: Absolute start position in source (0-indexed)
        lineno: Start line number (1-indexed)
        col: Start column (1-indexed)
        source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    value: str
    offset: int
    lineno: int = 1
    col: int = 1
    source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: "SourceLocation | None" = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def end_offset(self) -> int:
        """Absolute end position (exclusive)."""
        return self.offset + len(self.value)

    @property
    def location(self) -> "SourceLocation":
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from solex.location import SourceLocation

        newlines = self.value.count("\n")
        if newlines:
            end_lineno = self.lineno + newlines
            end_col = len(self.value) - self.value.rfind("\n")
        else:
            end_lineno = self.lineno
            end_col = self.col + len(self.value)

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.end_offset,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=self.source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.lineno}:{self.col})"
