"""
solex: rule-ordered Solidity lexer for syntax highlighting

A stateful, regex-driven tokenizer: an ordered table of named states,
a state stack, and identifier classification against keyword sets.
Produces a lazy token stream that always covers the input exactly.

Quick Start:
    >>> from solex import tokenize
    >>> for token in tokenize("uint256 supply = 1 ether;"):
    ...     print(token.kind.name, repr(token.value))
    KEYWORD_TYPE 'uint256'
    TEXT ' '
    NAME 'supply'
    TEXT ' '
    OPERATOR '='
    TEXT ' '
    NUMBER_INTEGER '1'
    TEXT ' '
    KEYWORD_CONSTANT 'ether'
    PUNCTUATION ';'

    >>> # HTML for a page
    >>> from solex import highlight
    >>> html = highlight("contract C {}")

Installation:
    pip install solex              # Core lexer (zero deps)
"""

from collections.abc import Iterator

from solex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from solex.errors import LexerStateError, RuleTableError, SolexError
from solex.highlighting import format_html, highlight
from solex.language import SOLIDITY, LanguageInfo, analyze_text, guess_language
from solex.lexer import Lexer, StateTable, StateTableBuilder, get_state_table
from solex.location import SourceLocation
from solex.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from solex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> Iterator[Token]:
    """Tokenize Solidity source into a lazy token stream.

    Args:
        source: Solidity source text
        source_file: Optional source file path attached to tokens

    Returns:
        Iterator of Token; stop consuming at any time to abandon the work

    Example:
        >>> [t.value for t in tokenize("x=1")]
        ['x', '=', '1']
    """
    return Lexer(source, source_file=source_file).tokenize()


def lex(source: str) -> Iterator[tuple[TokenKind, str]]:
    """Tokenize source into (kind, lexeme) pairs.

    Example:
        >>> list(lex("true"))
        [(<TokenKind.NAME_BUILTIN: 'nb'>, 'true')]
    """
    for token in tokenize(source):
        yield token.kind, token.value


__all__ = [
    # Main API
    "tokenize",
    "lex",
    "highlight",
    "format_html",
    # Lexer
    "Lexer",
    "StateTable",
    "StateTableBuilder",
    "get_state_table",
    # Tokens
    "Token",
    "TokenKind",
    "SourceLocation",
    # Language metadata
    "SOLIDITY",
    "LanguageInfo",
    "analyze_text",
    "guess_language",
    # Configuration
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
    # Profiling
    "LexAccumulator",
    "get_lex_accumulator",
    "profiled_lex",
    # Errors
    "SolexError",
    "RuleTableError",
    "LexerStateError",
    # Version
    "__version__",
]
