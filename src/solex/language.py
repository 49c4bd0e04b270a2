"""Language metadata and content sniffing for Solidity.

Describes how a host highlighter registers this lexer: a tag, filename
globs, MIME types, a title, and a cheap text sniffer.

Example:
    >>> from solex.language import SOLIDITY, analyze_text
    >>> SOLIDITY.matches_filename("contracts/Token.sol")
    True
    >>> analyze_text("pragma solidity ^0.8.0;")
    1.0
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import PurePath

# Confidence returned when the sniffer recognizes the text
PRAGMA_CONFIDENCE = 1.0

_PRAGMA_MARKER = re.compile(r"pragma solidity\b")


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """Registration data for a lexer.

    Attributes:
        tag: Canonical language identifier
        title: Human-readable name
        description: One-line description
        aliases: Extra identifiers accepted as this language
        filenames: Glob patterns for file names
        mimetypes: MIME types

    """

    tag: str
    title: str
    description: str
    aliases: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    mimetypes: tuple[str, ...] = ()

    def matches_filename(self, filename: str) -> bool:
        """Check the file's base name against the filename globs."""
        name = PurePath(filename).name
        return any(fnmatch(name, pattern) for pattern in self.filenames)

    def matches_name(self, name: str) -> bool:
        """Check a language identifier against the tag and aliases."""
        name = name.lower()
        return name == self.tag or name in self.aliases


SOLIDITY = LanguageInfo(
    tag="solidity",
    title="Solidity",
    description="Solidity, an Ethereum smart contract programming language",
    filenames=("*.sol", "*.solidity"),
    mimetypes=("text/solidity",),
)


def analyze_text(text: str) -> float | None:
    """Sniff whether text looks like Solidity.

    Returns:
        PRAGMA_CONFIDENCE if the text opens with a ``pragma solidity``
        directive at its very first character, otherwise None (no opinion).
    """
    if _PRAGMA_MARKER.match(text):
        return PRAGMA_CONFIDENCE
    return None


def guess_language(filename: str | None = None, text: str | None = None) -> LanguageInfo | None:
    """Return SOLIDITY if the filename or the text identifies it.

    The filename is checked first; the sniffer only runs when the name
    does not decide.
    """
    if filename is not None and SOLIDITY.matches_filename(filename):
        return SOLIDITY
    if text is not None and analyze_text(text) is not None:
        return SOLIDITY
    return None
