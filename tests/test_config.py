"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior, and how sessions
pick up the active config.
"""

import logging
from threading import Thread

import pytest

from solex import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
    tokenize,
)
from solex.lexer import Lexer


class TestLexerConfigDataclass:
    """Test LexerConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexerConfig()
        assert config.debug is False
        assert config.coalesce is True
        assert config.source_file is None

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = LexerConfig()
        with pytest.raises(AttributeError):
            config.debug = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexerConfig.from_dict({"debug": True, "theme": "dark"})
        assert config == LexerConfig(debug=True)

    def test_from_empty_dict(self) -> None:
        assert LexerConfig.from_dict({}) == LexerConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_lexer_config()

    def test_get_returns_default(self) -> None:
        assert get_lexer_config() == LexerConfig()

    def test_set_and_reset(self) -> None:
        set_lexer_config(LexerConfig(coalesce=False))
        assert get_lexer_config().coalesce is False
        reset_lexer_config()
        assert get_lexer_config().coalesce is True

    def test_context_restores_previous(self) -> None:
        outer = LexerConfig(source_file="outer.sol")
        set_lexer_config(outer)
        with lexer_config_context(LexerConfig(source_file="inner.sol")):
            assert get_lexer_config().source_file == "inner.sol"
        assert get_lexer_config() is outer

    def test_context_restores_after_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with lexer_config_context(LexerConfig(debug=True)):
                raise RuntimeError("boom")
        assert get_lexer_config().debug is False


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_threads_have_independent_config(self) -> None:
        seen: dict[str, bool] = {}

        def worker(name: str, coalesce: bool) -> None:
            set_lexer_config(LexerConfig(coalesce=coalesce))
            tokens = list(tokenize('"ab"'))
            seen[name] = len(tokens) == 1

        threads = [
            Thread(target=worker, args=("merged", True)),
            Thread(target=worker, args=("raw", False)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {"merged": True, "raw": False}
        assert get_lexer_config().coalesce is True


class TestSessionConfig:
    """Sessions read the config once, when created."""

    def test_config_captured_at_creation(self) -> None:
        with lexer_config_context(LexerConfig(coalesce=False)):
            lexer = Lexer('"ab"')
        assert len(list(lexer.tokenize())) == 3

    def test_debug_logs_transitions(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="solex"):
            with lexer_config_context(LexerConfig(debug=True)):
                list(tokenize('"a"'))
        messages = [r.getMessage() for r in caplog.records if r.name == "solex.lexer.core"]
        assert any(m.startswith("push string_double") for m in messages)
        assert any(m.startswith("pop string_double") for m in messages)

    def test_no_transition_logs_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="solex"):
            list(tokenize('"a"'))
        assert not [r for r in caplog.records if r.name == "solex.lexer.core"]
