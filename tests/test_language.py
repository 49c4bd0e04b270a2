"""Tests for language metadata and content sniffing."""

import pytest

from solex.language import PRAGMA_CONFIDENCE, SOLIDITY, analyze_text, guess_language


class TestLanguageInfo:
    def test_registration_data(self) -> None:
        assert SOLIDITY.tag == "solidity"
        assert SOLIDITY.title == "Solidity"
        assert "Ethereum" in SOLIDITY.description
        assert SOLIDITY.mimetypes == ("text/solidity",)

    @pytest.mark.parametrize("filename", ["Token.sol", "contracts/Token.sol", "/abs/a.solidity"])
    def test_matching_filenames(self, filename: str) -> None:
        assert SOLIDITY.matches_filename(filename)

    @pytest.mark.parametrize("filename", ["Token.py", "sol", "Token.sol.bak", "solidity.md"])
    def test_other_filenames(self, filename: str) -> None:
        assert not SOLIDITY.matches_filename(filename)


class TestAnalyzeText:
    @pytest.mark.parametrize(
        "text",
        ["pragma solidity ^0.4.0;", "pragma solidity\t>=0.8;\ncontract C {}", "pragma solidity"],
    )
    def test_pragma_is_recognized(self, text: str) -> None:
        assert analyze_text(text) == PRAGMA_CONFIDENCE

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "contract C {}",
            "// pragma solidity ^0.4.0;",
            "pragma experimental ABIEncoderV2;",
            "  \n\tpragma solidity >=0.8;",
            "pragma solidityX ^0.8.0;",
            "pragma solidity_version;",
        ],
    )
    def test_no_opinion(self, text: str) -> None:
        assert analyze_text(text) is None


class TestGuessLanguage:
    def test_by_filename(self) -> None:
        assert guess_language(filename="A.sol") is SOLIDITY

    def test_by_text(self) -> None:
        assert guess_language(filename="notes.txt", text="pragma solidity ^0.5.0;") is SOLIDITY

    def test_unknown(self) -> None:
        assert guess_language(filename="main.rs", text="fn main() {}") is None
        assert guess_language() is None
