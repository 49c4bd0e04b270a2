"""solex LexAccumulator: opt-in profiling for tokenization.

This module provides accumulated metrics during lexing:
- Total wall time
- Source length
- Engine steps (rule applications, including zero-width fallbacks)
- Tokens emitted

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from solex import tokenize
    from solex.profiling import profiled_lex

    with profiled_lex() as metrics:
        tokens = list(tokenize("contract C { uint x; }"))

    print(metrics.summary())
    # {"total_ms": 0.3, "source_length": 22, "steps": 19, "tokens": 14, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources lexed.
        steps: Number of rule applications.
        tokens: Number of tokens emitted.
        lex_calls: Number of top-level sessions started.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    steps: int = 0
    tokens: int = 0
    lex_calls: int = 0

    def record_session(self, source_length: int) -> None:
        """Record the start of a top-level lexing session."""
        self.lex_calls += 1
        self.source_length += source_length

    def record_step(self) -> None:
        self.steps += 1

    def record_token(self) -> None:
        self.tokens += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of lexing metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "steps": self.steps,
            "tokens": self.tokens,
            "lex_calls": self.lex_calls,
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Context manager for profiled lexing.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block. Sessions
    capture the accumulator when they are created, so consume the token
    stream inside the block.

    Yields:
        LexAccumulator that will be populated during lexing.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
