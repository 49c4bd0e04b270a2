"""Tests for the function signature scanner in isolation."""

import pytest

from solex.lexer.scanners import SignatureMatcher


class TestSignatureMatcher:
    def test_groups(self) -> None:
        source = "function f(uint a) /* c */ {"
        m = SignatureMatcher("{").match(source)
        assert m is not None
        assert m.group() == source
        assert m.group(1) == "function "
        assert m.group(2) == "f"
        assert m.group(3) == "(uint a)"
        assert m.group(4) == " /* c */ "
        assert m.group(5) == "{"

    def test_space_before_paren_belongs_to_parameters(self) -> None:
        m = SignatureMatcher(";").match("function f (uint a);")
        assert m is not None
        assert m.group(2) == "f"
        assert m.group(3) == " (uint a)"

    def test_anchored_at_pos(self) -> None:
        source = "x; function g() {"
        assert SignatureMatcher("{").match(source, 0) is None
        m = SignatureMatcher("{").match(source, 3)
        assert m is not None
        assert m.span() == (3, len(source))
        assert m.group(2) == "g"

    def test_respects_endpos(self) -> None:
        source = "function f() {"
        assert SignatureMatcher("{").match(source, 0, len(source) - 1) is None

    def test_wrong_terminator(self) -> None:
        assert SignatureMatcher("{").match("function f();") is None
        assert SignatureMatcher(";").match("function f() {") is None

    @pytest.mark.parametrize(
        "source",
        [
            "f(x) {",  # no return text
            "a = f(x);",  # operator in header
            "function f() x {",  # text after the parameter list
            "function f {",  # no parameter list
            "function f() // c {",  # line comment swallows the terminator line
        ],
    )
    def test_not_a_signature(self, source: str) -> None:
        terminator = "{" if source.endswith("{") else ";"
        assert SignatureMatcher(terminator).match(source) is None

    def test_last_close_paren_is_used(self) -> None:
        m = SignatureMatcher("{").match("function f(uint a) returns (uint) {")
        assert m is not None
        assert m.group(3) == "(uint a) returns (uint)"

    def test_close_paren_in_comment_is_skipped(self) -> None:
        m = SignatureMatcher("{").match("function f(uint a) /* ) */ // )\n{")
        assert m is not None
        assert m.group(3) == "(uint a)"
        assert m.group(4) == " /* ) */ // )\n"

    def test_invalid_terminator(self) -> None:
        with pytest.raises(ValueError, match="terminator"):
            SignatureMatcher("(")
