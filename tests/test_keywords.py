"""Tests for the keyword sets and identifier classification."""

from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from solex import tokenize
from solex.lexer.classifiers import classify_identifier
from solex.lexer.keywords import BUILTINS, CONSTANTS, KEYWORD_TYPES, KEYWORDS, RESERVED
from solex.tokens import TokenKind

ALL_SETS = {
    "KEYWORDS": KEYWORDS,
    "KEYWORD_TYPES": KEYWORD_TYPES,
    "CONSTANTS": CONSTANTS,
    "RESERVED": RESERVED,
    "BUILTINS": BUILTINS,
}

identifiers = st.from_regex(r"[a-zA-Z_][a-zA-Z0-9_]{0,15}", fullmatch=True)


class TestKeywordSets:
    """The sets are disjoint and hold valid identifiers."""

    @pytest.mark.parametrize("left,right", list(combinations(ALL_SETS, 2)))
    def test_disjoint(self, left: str, right: str) -> None:
        assert not ALL_SETS[left] & ALL_SETS[right]

    @pytest.mark.parametrize("name", list(ALL_SETS))
    def test_members_are_identifiers(self, name: str) -> None:
        for word in ALL_SETS[name]:
            assert word.isidentifier() and word.isascii(), word

    def test_sized_types(self) -> None:
        for word in ("int8", "int256", "uint8", "uint256", "bytes1", "bytes32"):
            assert word in KEYWORD_TYPES
        for word in ("int7", "int264", "uint0", "bytes0", "bytes33"):
            assert word not in KEYWORD_TYPES

    def test_fixed_point_types(self) -> None:
        assert "fixed128x18" in KEYWORD_TYPES
        assert "ufixed8x0" in KEYWORD_TYPES
        assert "ufixed256x80" in KEYWORD_TYPES
        assert "fixed128x81" not in KEYWORD_TYPES
        assert "fixed7x1" not in KEYWORD_TYPES


class TestClassifyIdentifier:
    """Exact membership decides the kind; anything else is a NAME."""

    @pytest.mark.parametrize(
        "word,kind",
        [
            ("contract", TokenKind.KEYWORD),
            ("returns", TokenKind.KEYWORD),
            ("uint", TokenKind.KEYWORD_TYPE),
            ("address", TokenKind.KEYWORD_TYPE),
            ("ether", TokenKind.KEYWORD_CONSTANT),
            ("years", TokenKind.KEYWORD_CONSTANT),
            ("view", TokenKind.KEYWORD_RESERVED),
            ("pure", TokenKind.KEYWORD_RESERVED),
            ("balance", TokenKind.NAME),
            ("Contract", TokenKind.NAME),
            ("uint256x", TokenKind.NAME),
        ],
    )
    def test_known_words(self, word: str, kind: TokenKind) -> None:
        assert classify_identifier(word) is kind

    @given(identifiers)
    @settings(max_examples=200)
    def test_unlisted_words_are_names(self, word: str) -> None:
        if any(word in words for words in ALL_SETS.values()):
            return
        assert classify_identifier(word) is TokenKind.NAME

    @pytest.mark.parametrize("name", ["KEYWORDS", "KEYWORD_TYPES", "CONSTANTS", "RESERVED"])
    def test_lexer_uses_classifier(self, name: str) -> None:
        """Words reach the classifier through the identifier rule."""
        for word in sorted(ALL_SETS[name]):
            if word == "case":
                continue
            tokens = list(tokenize(word))
            assert len(tokens) == 1
            assert tokens[0].kind is classify_identifier(word), word

    def test_case_is_always_keyword(self) -> None:
        """case is reserved, but its own rule reads it as a keyword first."""
        assert classify_identifier("case") is TokenKind.KEYWORD_RESERVED
        assert next(tokenize("case")).kind is TokenKind.KEYWORD
