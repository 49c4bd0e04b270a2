"""Tests for session behavior: laziness, positions, and source files."""

from itertools import islice

from solex import LexerConfig, lexer_config_context, tokenize
from solex.lexer import Lexer
from solex.tokens import TokenKind


class TestLaziness:
    """Tokens are produced on demand."""

    def test_first_token_without_scanning_everything(self) -> None:
        source = "x;" * 100_000
        lexer = Lexer(source)
        first = next(lexer.tokenize())
        assert first.value == "x"
        assert lexer.position < 10

    def test_abandoned_stream(self) -> None:
        tokens = list(islice(tokenize("uint a;\n" * 1000), 3))
        assert [t.value for t in tokens] == ["uint", " ", "a"]

    def test_initial_stack(self) -> None:
        assert Lexer("").state_stack == ("root", "bol")

    def test_empty_source(self) -> None:
        assert list(tokenize("")) == []


class TestPositions:
    """Line and column tracking."""

    def test_line_and_column(self) -> None:
        tokens = list(tokenize("uint a;\n  b;"))
        b = next(t for t in tokens if t.value == "b")
        assert (b.lineno, b.col) == (2, 3)
        assert b.offset == 10

    def test_location_end(self) -> None:
        token = next(tokenize("/* a\nbc */"))
        loc = token.location
        assert (loc.lineno, loc.col_offset) == (1, 1)
        assert (loc.end_lineno, loc.end_col_offset) == (2, 6)
        assert token.location is loc

    def test_positions_after_multiline_comment(self) -> None:
        tokens = list(tokenize("/*\n\n*/ x"))
        x = tokens[-1]
        assert x.value == "x"
        assert (x.lineno, x.col) == (3, 4)

    def test_positions_match_offsets(self) -> None:
        source = "contract C {\n  function f(uint a) {\n    a = 1;\n  }\n}\n"
        for token in tokenize(source):
            line_start = source.rfind("\n", 0, token.offset) + 1
            assert token.lineno == source.count("\n", 0, token.offset) + 1
            assert token.col == token.offset - line_start + 1


class TestSourceFile:
    """Source file names are attached to tokens."""

    def test_explicit_source_file(self) -> None:
        token = next(tokenize("x", source_file="Token.sol"))
        assert token.source_file == "Token.sol"
        assert str(token.location) == "Token.sol:1:1"

    def test_config_source_file(self) -> None:
        with lexer_config_context(LexerConfig(source_file="A.sol")):
            tokens = list(tokenize("x y"))
        assert {t.source_file for t in tokens} == {"A.sol"}

    def test_explicit_overrides_config(self) -> None:
        with lexer_config_context(LexerConfig(source_file="A.sol")):
            token = next(tokenize("x", source_file="B.sol"))
        assert token.source_file == "B.sol"

    def test_relexed_groups_keep_source_file(self) -> None:
        tokens = list(tokenize("function f(uint a) {}", source_file="F.sol"))
        assert any(t.kind is TokenKind.NAME_FUNCTION for t in tokens)
        assert {t.source_file for t in tokens} == {"F.sol"}
