"""Drive the engine with your own state table: a tiny INI lexer."""

from solex.lexer import Lexer, StateTableBuilder
from solex.lexer.rules import POP, mixin, rule
from solex.tokens import TokenKind

builder = StateTableBuilder(initial=("root",))
builder.fragment("space", rule(r"[ \t\n]+", TokenKind.TEXT))
builder.state(
    "root",
    mixin("space"),
    rule(r";[^\n]*", TokenKind.COMMENT_SINGLE),
    rule(r"\[[^\]\n]*\]", TokenKind.KEYWORD),
    rule(r"\w+", TokenKind.NAME, "value"),
    rule(r".", TokenKind.ERROR),
)
builder.state(
    "value",
    rule(r"[ \t]*=[ \t]*", TokenKind.OPERATOR),
    rule(r"[^\n]+", TokenKind.STRING),
    rule(r"\n", TokenKind.TEXT, POP),
)
table = builder.build()

source = "[server]\nhost = example.org\n; comment\nport = 8080\n"
for token in Lexer(source, table=table).tokenize():
    print(token)
