"""Function signature scanner.

Recognizes a function definition or declaration at the cursor:

    <return text> <name> <ws>( <parameters> ) <ws/comments> { or ;

and reports it as five groups (return text, name, parameter list,
trailing whitespace, terminator) so the engine can emit the name as a
function and re-lex the rest.

Uses the window approach: find the next ``{`` or ``;`` (the window),
check the pieces inside it with linear scans and anchored patterns, then
report. Work is bounded by the window length; no pattern backtracks over
the whole parameter list.

Thread Safety:
SignatureMatcher holds only immutable configuration. Safe to share.
"""

from __future__ import annotations

import re

# Next statement-level terminator
_TERMINATOR = re.compile(r"[{;]")

# Return text, then the name, then any spacing before "("
_HEADER = re.compile(r"([\w*\s]+[\s*])([a-zA-Z_][a-zA-Z0-9_]*)(\s*)", re.ASCII)

# A ")" outside comments; comments are matched whole so their ")" is skipped
_CLOSE = re.compile(r"/\*.*?(?:\*/|\Z)|//[^\n]*|\)", re.DOTALL)

# Whitespace and comments between ")" and the terminator
_TRAILER = re.compile(r"(?:\s|//[^\n]*\n|/\*(?:[^*]|\*(?!/))*\*/)*", re.ASCII)


class SignatureMatch:
    """Match result with the re.Match accessors the engine reads.

    Group 0 is the whole signature through the terminator; groups 1-5 are
    return text, name, parameter list, trailer, terminator.
    """

    __slots__ = ("_string", "_spans")

    def __init__(self, string: str, spans: tuple[tuple[int, int], ...]) -> None:
        self._string = string
        self._spans = spans

    def start(self, group: int = 0) -> int:
        return self._spans[group][0]

    def end(self, group: int = 0) -> int:
        return self._spans[group][1]

    def span(self, group: int = 0) -> tuple[int, int]:
        return self._spans[group]

    def group(self, group: int = 0) -> str:
        start, end = self._spans[group]
        return self._string[start:end]

    def __repr__(self) -> str:
        return f"<SignatureMatch span={self._spans[0]} name={self.group(2)!r}>"


class SignatureMatcher:
    """Matcher for a function signature closed by a given terminator.

    Args:
        terminator: "{" for definitions, ";" for declarations

    Example:
        >>> m = SignatureMatcher("{").match("function f(uint a) {")
        >>> m.group(2)
        'f'
    """

    __slots__ = ("terminator",)

    def __init__(self, terminator: str) -> None:
        if terminator not in ("{", ";"):
            msg = f"terminator must be '{{' or ';', got {terminator!r}"
            raise ValueError(msg)
        self.terminator = terminator

    def match(self, string: str, pos: int = 0, endpos: int | None = None) -> SignatureMatch | None:
        """Match a signature anchored at pos.

        Returns:
            SignatureMatch, or None if the window does not hold a signature
        """
        if endpos is None or endpos > len(string):
            endpos = len(string)

        found = _TERMINATOR.search(string, pos, endpos)
        if found is None or found.group() != self.terminator:
            return None
        term = found.start()

        paren = string.find("(", pos, term)
        if paren == -1:
            return None

        header = _HEADER.fullmatch(string, pos, paren)
        if header is None:
            return None

        close = -1
        for found in _CLOSE.finditer(string, paren, term):
            if found.group() == ")":
                close = found.start()
        if close == -1:
            return None

        if _TRAILER.fullmatch(string, close + 1, term) is None:
            return None

        return SignatureMatch(
            string,
            (
                (pos, term + 1),
                header.span(1),
                header.span(2),
                (header.start(3), close + 1),
                (close + 1, term),
                (term, term + 1),
            ),
        )

    def __repr__(self) -> str:
        return f"SignatureMatcher({self.terminator!r})"
