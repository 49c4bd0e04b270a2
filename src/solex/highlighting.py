"""Syntax highlighting protocol and HTML token formatting for solex.

Turns the token stream into HTML with short CSS classes, and lets a host
swap in its own highlighter.

Usage:
    from solex.highlighting import highlight

    html = highlight("uint x = 1;")
    # <pre class="highlight"><code><span class="kt">uint</span> ...

    # Manual injection
    from solex.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="language-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from html import escape
from typing import Protocol

from solex.language import SOLIDITY
from solex.tokens import Token
from solex.utils.stringbuilder import StringBuilder


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(self, code: str, language: str) -> str:
        """Highlight code with syntax colors.

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
        """
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str, str], str]


def format_html(tokens: Iterable[Token]) -> str:
    """Render tokens as escaped HTML spans.

    TEXT tokens are emitted unwrapped; every other kind becomes
    ``<span class="{kind.css_class}">``.

    Example:
        >>> from solex import tokenize
        >>> format_html(tokenize("x < 1"))
        '<span class="n">x</span> <span class="o">&lt;</span> <span class="mi">1</span>'
    """
    sb = StringBuilder()
    for token in tokens:
        css_class = token.kind.css_class
        if css_class:
            sb.append(f'<span class="{css_class}">')
            sb.append(escape(token.value, quote=False))
            sb.append("</span>")
        else:
            sb.append(escape(token.value, quote=False))
    return sb.build()


class SolidityHighlighter:
    """Highlighter backed by the solex lexer, implementing Highlighter."""

    def highlight(self, code: str, language: str) -> str:
        """Highlight Solidity code; other languages are escaped as plain text."""
        from solex import tokenize

        if self.supports_language(language):
            body = format_html(tokenize(code))
        else:
            body = escape(code, quote=False)
        return f'<pre class="highlight"><code>{body}</code></pre>'

    def supports_language(self, language: str) -> bool:
        """Check if the language names Solidity."""
        return SOLIDITY.matches_name(language)


_DEFAULT_HIGHLIGHTER = SolidityHighlighter()

# Global highlighter
_highlighter: Highlighter | SimpleHighlighter = _DEFAULT_HIGHLIGHTER


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the global syntax highlighter.

    Args:
        highlighter: A Highlighter protocol implementation, or a simple
            function that takes (code, language) and returns HTML.
            Pass None to restore the built-in Solidity highlighter.
    """
    global _highlighter
    _highlighter = highlighter if highlighter is not None else _DEFAULT_HIGHLIGHTER


def get_highlighter() -> Highlighter | SimpleHighlighter:
    """Get the current highlighter instance."""
    return _highlighter


def highlight(code: str, language: str = "solidity") -> str:
    """Highlight code using the configured highlighter.

    Args:
        code: Source code to highlight
        language: Language identifier

    Returns:
        HTML markup
    """
    if hasattr(_highlighter, "highlight") and callable(_highlighter.highlight):
        return _highlighter.highlight(code, language)
    return _highlighter(code, language)
