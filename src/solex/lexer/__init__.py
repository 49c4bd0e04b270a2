"""Rule-ordered state-stack lexer for Solidity.

This package provides a regex-driven lexer in the style of syntax
highlighters: a table of named states, each an ordered list of rules,
driven by a stack machine.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, StateTable, get_state_table
├── core.py              # Lexer (engine loop, sub-sessions, coalescing)
├── rules.py             # Rule/action/transition types, StateTableBuilder
├── states.py            # The Solidity state table
├── keywords.py          # Keyword, type, constant, reserved sets
├── classifiers/         # Lexeme classifiers
│   └── identifier.py    # Identifier -> token kind
└── scanners/            # Hand-written matchers
    └── signature.py     # Function signature look-ahead

Usage:
    >>> from solex.lexer import Lexer
    >>> for token in Lexer("uint x;").tokenize():
    ...     print(token)
    Token(KEYWORD_TYPE, 'uint', 1:1)
    Token(TEXT, ' ', 1:5)
    Token(NAME, 'x', 1:6)
    Token(PUNCTUATION, ';', 1:7)

"""

from solex.lexer.core import Lexer
from solex.lexer.rules import StateTable, StateTableBuilder
from solex.lexer.states import get_state_table

__all__ = ["Lexer", "StateTable", "StateTableBuilder", "get_state_table"]
