"""ContextVar-based lexer configuration for solex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read once when a Lexer session is created.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from solex.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(coalesce=False)):
        tokens = list(tokenize(source))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        debug: Log every state transition at DEBUG level
        coalesce: Merge adjacent tokens of the same kind (on by default)
        source_file: Default source file name attached to tokens and errors

    """

    debug: bool = False
    coalesce: bool = True
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexerConfig.from_dict({"coalesce": False, "theme": "x"})
            >>> config.coalesce
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to the module-level default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> from solex import tokenize
        >>> with lexer_config_context(LexerConfig(debug=True)):
        ...     tokens = list(tokenize("uint x;"))
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
]
