"""Lexeme classifiers for the solex lexer.

Classifiers are pure functions that decide a token kind from the matched
text. They run at match time and never touch session state.
"""

from solex.lexer.classifiers.identifier import classify_identifier

__all__ = ["classify_identifier"]
