"""Solidity state table.

Declares every lexer state and the order of its rules. Rule order is
priority: the first rule that matches at the cursor wins.

States:
- root: function definitions/declarations, else a statement
- statement: one statement, popped on ";"
- function: a function body, balanced on braces
- case: tokens up to the ":" of a case label
- bol / expr_bol: start of a line (labels, preprocessor lines)
- macro: a preprocessor line
- if_0: a block excluded by "#if 0"
- string_double / string_single: string literal bodies

Fragments (mixin only): statements, whitespace, expr_whitespace,
inline_whitespace, string_common.

The table is built once, on first use, and shared by every session.
"""

from __future__ import annotations

from solex.lexer.classifiers import classify_identifier
from solex.lexer.rules import POP, StateTable, StateTableBuilder, fallback, mixin, rule
from solex.lexer.scanners import SignatureMatcher
from solex.tokens import TokenKind

IDENTIFIER = r"[a-zA-Z_][a-zA-Z0-9_]*"

# Return text and parameters are re-lexed; name and terminator are emitted.
_SIGNATURE_GROUPS = (None, TokenKind.NAME_FUNCTION, None, None, TokenKind.PUNCTUATION)


def _build_solidity_table() -> StateTable:
    """Build the Solidity table (internal, not cached)."""
    builder = StateTableBuilder(initial=("root", "bol"))

    # Beginning of line, mid-expression: no labels
    builder.state(
        "expr_bol",
        mixin("inline_whitespace"),
        rule(r"#if\s0", TokenKind.COMMENT, "if_0"),
        rule(r"#", TokenKind.COMMENT_PREPROC, "macro"),
        fallback(POP),
    )

    # Beginning of a statement: labels allowed
    builder.state(
        "bol",
        rule(rf"{IDENTIFIER}:(?!:)", TokenKind.NAME_LABEL),
        mixin("expr_bol"),
    )

    builder.fragment(
        "inline_whitespace",
        rule(r"[ \t\r]+", TokenKind.TEXT),
        rule(r"\\\n", TokenKind.TEXT),  # line continuation
        # Unterminated block comments run to end of input
        rule(r"(?s)/(?:\\\n)?\*.*?(?:\*(?:\\\n)?/|\Z)", TokenKind.COMMENT_MULTILINE),
    )

    builder.fragment(
        "whitespace",
        rule(r"\n+", TokenKind.TEXT, "bol"),
        rule(r"//[^\n]*\n?", TokenKind.COMMENT_SINGLE, "bol"),
        mixin("inline_whitespace"),
    )

    builder.fragment(
        "expr_whitespace",
        rule(r"\n+", TokenKind.TEXT, "expr_bol"),
        mixin("whitespace"),
    )

    builder.fragment(
        "statements",
        mixin("whitespace"),
        rule(r'(?:u8|u|U|L)?"', TokenKind.STRING, "string_double"),
        rule(
            r"(?i)(?:u8|u|U|L)?'(?:\\.|\\[0-7]{1,3}|\\x[a-f0-9]{1,2}|[^\\'\n])'",
            TokenKind.STRING_CHAR,
        ),
        rule(r"(?:u8|u|U|L)?'", TokenKind.STRING, "string_single"),
        rule(r"(?i)0x[0-9a-f]+[lu]*", TokenKind.NUMBER_HEX),
        rule(r"(?i)0[0-7]+[lu]*", TokenKind.NUMBER_OCT),
        rule(r"(?i)\d+[lu]*", TokenKind.NUMBER_INTEGER),
        rule(r"\*/", TokenKind.ERROR),
        rule(r"[~!%^&*+=|?:<>/-]", TokenKind.OPERATOR),
        rule(r"[()\[\],.]", TokenKind.PUNCTUATION),
        rule(r"\bcase\b", TokenKind.KEYWORD, "case"),
        rule(r"(?:true|false|NULL)\b", TokenKind.NAME_BUILTIN),
        rule(IDENTIFIER, classify_identifier),
    )

    builder.state(
        "case",
        rule(r":", TokenKind.PUNCTUATION, POP),
        mixin("statements"),
        rule(r"(?s).", TokenKind.ERROR),
    )

    builder.state(
        "root",
        mixin("expr_whitespace"),
        rule(SignatureMatcher("{"), _SIGNATURE_GROUPS, "function"),
        rule(SignatureMatcher(";"), _SIGNATURE_GROUPS, "statement"),
        fallback("statement"),
    )

    builder.state(
        "statement",
        rule(r";", TokenKind.PUNCTUATION, POP),
        mixin("expr_whitespace"),
        mixin("statements"),
        rule(r"[{}]", TokenKind.PUNCTUATION),
        rule(r"(?s).", TokenKind.ERROR),
    )

    builder.state(
        "function",
        mixin("whitespace"),
        mixin("statements"),
        rule(r";", TokenKind.PUNCTUATION),
        rule(r"\{", TokenKind.PUNCTUATION, "function"),
        rule(r"\}", TokenKind.PUNCTUATION, POP),
        rule(r"(?s).", TokenKind.ERROR),
    )

    builder.fragment(
        "string_common",
        rule(
            r"\\(?:[\\abfnrtv\"']|x[a-fA-F0-9]{2,4}|u[a-fA-F0-9]{4}|[0-7]{1,3})",
            TokenKind.STRING_ESCAPE,
        ),
        rule(r"\\\n", TokenKind.STRING),
        rule(r"\\", TokenKind.STRING),  # stray backslash
        rule(r"\n", TokenKind.ERROR),
    )

    builder.state(
        "string_double",
        rule(r'"', TokenKind.STRING, POP),
        rule(r'[^\\"\n]+', TokenKind.STRING),
        mixin("string_common"),
    )

    builder.state(
        "string_single",
        rule(r"'", TokenKind.STRING, POP),
        rule(r"[^\\'\n]+", TokenKind.STRING),
        mixin("string_common"),
    )

    builder.state(
        "macro",
        # Popping returns to bol
        rule(r"\n", TokenKind.COMMENT_PREPROC, POP),
        rule(r"[^/\n\\]+", TokenKind.COMMENT_PREPROC),
        rule(r"(?s)\\.", TokenKind.COMMENT_PREPROC),
        mixin("inline_whitespace"),
        rule(r"/", TokenKind.COMMENT_PREPROC),
        rule(r"\\", TokenKind.COMMENT_PREPROC),
    )

    builder.state(
        "if_0",
        # No \b here, to cover #ifdef and #ifndef
        rule(r"(?m)^[ \t]*#if", TokenKind.COMMENT, "if_0"),
        rule(r"(?m)^[ \t]*#[ \t]*el(?:se|if)", TokenKind.COMMENT, POP),
        rule(r"(?ms)^[ \t]*#[ \t]*endif\b.*?(?:(?<!\\)\n|\Z)", TokenKind.COMMENT, POP),
        rule(r"[^\n]*\n|[^\n]+", TokenKind.COMMENT),
    )

    return builder.build()


# Cached singleton, shared read-only
_SOLIDITY_TABLE: StateTable | None = None


def get_state_table() -> StateTable:
    """Get the Solidity state table (cached singleton).

    Thread Safety:
        Returns a cached immutable table. Two threads racing on first use
        may each build one; both are equal and one is kept.
    """
    global _SOLIDITY_TABLE
    if _SOLIDITY_TABLE is None:
        _SOLIDITY_TABLE = _build_solidity_table()
    return _SOLIDITY_TABLE
