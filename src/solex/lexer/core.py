"""State-stack lexer engine.

Drives a StateTable over a source string: at each step the rules of the
state on top of the stack are tried in order, anchored at the cursor; the
first match emits its tokens, applies its stack transition and advances
the cursor.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All session state is instance-local; the state table is shared read-only.

"""

from __future__ import annotations

import copy
from collections.abc import Iterator

from solex.config import get_lexer_config
from solex.errors import LexerStateError
from solex.lexer.rules import (
    EmitFixed,
    EmitRecursiveGroups,
    EmitViaClassifier,
    Pop,
    Push,
    StateTable,
)
from solex.lexer.states import get_state_table
from solex.profiling import get_lex_accumulator
from solex.tokens import Token, TokenKind
from solex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Rule-ordered, stateful lexer producing a lazy token stream.

    Usage:
            >>> lexer = Lexer("uint x = 0x1f;")
            >>> [(t.kind.name, t.value) for t in lexer.tokenize()][:3]
            [('KEYWORD_TYPE', 'uint'), ('TEXT', ' '), ('NAME', 'x')]

    Guarantees:
        - The concatenated token values equal the source exactly.
        - Tokens are contiguous and in source order.
        - Bad source text yields ERROR tokens, never an exception.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_pos",
        "_end",
        "_table",
        "_stack",
        "_source_file",
        "_debug",
        "_coalesce",
        "_accumulator",
        # Line tracking: line number and start offset of the line
        # containing _line_offset
        "_lineno",
        "_line_start",
        "_line_offset",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        table: StateTable | None = None,
    ) -> None:
        """Initialize a session over source.

        Args:
            source: Solidity source text
            source_file: Optional source file path for tokens and errors
            table: State table to drive (defaults to the Solidity table)
        """
        config = get_lexer_config()
        self._source = source
        self._pos = 0
        self._end = len(source)
        self._table = table if table is not None else get_state_table()
        self._stack: list[str] = list(self._table.initial)
        self._source_file = source_file if source_file is not None else config.source_file
        self._debug = config.debug
        self._coalesce = config.coalesce
        self._accumulator = get_lex_accumulator()

        self._lineno = 1
        self._line_start = 0
        self._line_offset = 0

    @property
    def state_stack(self) -> tuple[str, ...]:
        """Active states, bottom first."""
        return tuple(self._stack)

    @property
    def position(self) -> int:
        """Cursor offset."""
        return self._pos

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time

        Raises:
            LexerStateError: Only if the state table is malformed

        Complexity: O(n) steps where n = len(source)
        """
        if self._accumulator is not None:
            self._accumulator.record_session(self._end - self._pos)
        tokens = self._run()
        if self._coalesce:
            tokens = _coalesce(tokens)
        yield from tokens

    # =========================================================================
    # Engine
    # =========================================================================

    def _run(self) -> Iterator[Token]:
        source = self._source
        end = self._end
        stack = self._stack
        table = self._table
        acc = self._accumulator
        stall_limit = len(table) + 1
        stalled = 0

        while self._pos < end:
            state = stack[-1]
            pos = self._pos
            for r in table.rules(state):
                m = r.matcher.match(source, pos, end)
                if m is not None:
                    break
            else:
                raise self._error(f"no rule matches {source[pos]!r}", state)

            if acc is not None:
                acc.record_step()

            stop = m.end()
            if stop == pos:
                stalled += 1
                if stalled > stall_limit:
                    raise self._error("rules keep matching without consuming input", state)
            else:
                stalled = 0

            action = r.action
            if isinstance(action, EmitFixed):
                token = self._make_token(action.kind, pos, stop)
                if token is not None:
                    yield token
            elif isinstance(action, EmitViaClassifier):
                token = self._make_token(action.classify(source[pos:stop]), pos, stop)
                if token is not None:
                    yield token
            elif isinstance(action, EmitRecursiveGroups):
                for index, kind in enumerate(action.groups, start=1):
                    g_start, g_stop = m.start(index), m.end(index)
                    if g_start < 0 or g_start == g_stop:
                        continue
                    if kind is None:
                        yield from self._spawn(g_start, g_stop, state)._run()
                    else:
                        token = self._make_token(kind, g_start, g_stop)
                        if token is not None:
                            yield token

            self._pos = stop
            transition = r.transition
            if isinstance(transition, Push):
                stack.append(transition.state)
                if self._debug:
                    logger.debug("push %s at %d -> %s", transition.state, stop, stack)
            elif isinstance(transition, Pop):
                # The bottom state is never removed
                if len(stack) > 1:
                    stack.pop()
                if self._debug:
                    logger.debug("pop %s at %d -> %s", state, stop, stack)

    def _spawn(self, start: int, stop: int, state: str) -> Lexer:
        """Create a sub-session over source[start:stop] starting in state.

        Shares the source buffer (no slicing) and produces absolute offsets.
        """
        lineno, col = self._locate(start)
        sub = copy.copy(self)
        sub._pos = start
        sub._end = stop
        sub._stack = [state]
        sub._lineno = lineno
        sub._line_start = start - col + 1
        sub._line_offset = start
        return sub

    # =========================================================================
    # Token and position helpers
    # =========================================================================

    def _make_token(self, kind: TokenKind, start: int, stop: int) -> Token | None:
        """Create a token for source[start:stop]; None for empty spans."""
        if start >= stop:
            return None
        lineno, col = self._locate(start)
        if self._accumulator is not None:
            self._accumulator.record_token()
        return Token(
            kind=kind,
            value=self._source[start:stop],
            offset=start,
            lineno=lineno,
            col=col,
            source_file=self._source_file,
        )

    def _locate(self, offset: int) -> tuple[int, int]:
        """Line and column of offset.

        Offsets are requested in increasing order, so tracking is O(n) in
        total over a session.
        """
        if offset > self._line_offset:
            source = self._source
            newlines = source.count("\n", self._line_offset, offset)
            if newlines:
                self._lineno += newlines
                self._line_start = source.rfind("\n", self._line_offset, offset) + 1
            self._line_offset = offset
        return self._lineno, offset - self._line_start + 1

    def _error(self, message: str, state: str) -> LexerStateError:
        lineno, col = self._locate(self._pos)
        return LexerStateError(
            message,
            state=state,
            offset=self._pos,
            lineno=lineno,
            col_offset=col,
            source_file=self._source_file,
        )


def _coalesce(tokens: Iterator[Token]) -> Iterator[Token]:
    """Merge adjacent tokens of the same kind.

    Only contiguous tokens merge. Holds at most one pending run, so
    laziness is preserved.
    """
    first: Token | None = None
    parts: list[str] = []
    end = 0
    for token in tokens:
        if first is not None and token.kind is first.kind and token.offset == end:
            parts.append(token.value)
            end = token.end_offset
            continue
        if first is not None:
            yield _merge(first, parts)
        first = token
        parts = [token.value]
        end = token.end_offset
    if first is not None:
        yield _merge(first, parts)


def _merge(first: Token, parts: list[str]) -> Token:
    if len(parts) == 1:
        return first
    return Token(
        kind=first.kind,
        value="".join(parts),
        offset=first.offset,
        lineno=first.lineno,
        col=first.col,
        source_file=first.source_file,
    )
