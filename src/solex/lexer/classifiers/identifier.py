"""Identifier classifier."""

from solex.lexer.keywords import BUILTINS, CONSTANTS, KEYWORD_TYPES, KEYWORDS, RESERVED
from solex.tokens import TokenKind

# Checked in order; first hit wins.
_PRIORITY: tuple[tuple[frozenset[str], TokenKind], ...] = (
    (KEYWORDS, TokenKind.KEYWORD),
    (KEYWORD_TYPES, TokenKind.KEYWORD_TYPE),
    (CONSTANTS, TokenKind.KEYWORD_CONSTANT),
    (RESERVED, TokenKind.KEYWORD_RESERVED),
    (BUILTINS, TokenKind.NAME_BUILTIN),
)


def classify_identifier(name: str) -> TokenKind:
    """Classify an identifier lexeme by exact membership.

    Pure function: no state, safe to call from any thread.

    Args:
        name: The full identifier text (``[a-zA-Z_][a-zA-Z0-9_]*``)

    Returns:
        KEYWORD, KEYWORD_TYPE, KEYWORD_CONSTANT, KEYWORD_RESERVED,
        NAME_BUILTIN, or NAME when no set contains it.

    Example:
        >>> classify_identifier("uint256")
        <TokenKind.KEYWORD_TYPE: 'kt'>
    """
    for words, kind in _PRIORITY:
        if name in words:
            return kind
    return TokenKind.NAME
