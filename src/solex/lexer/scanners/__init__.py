"""Hand-written scanners for the solex lexer.

Scanners implement the same ``match(string, pos, endpos)`` signature as a
compiled pattern, so the rule table can hold them in place of a regex
where a regex would need unbounded backtracking.
"""

from __future__ import annotations

from solex.lexer.scanners.signature import SignatureMatch, SignatureMatcher

__all__ = [
    "SignatureMatch",
    "SignatureMatcher",
]
