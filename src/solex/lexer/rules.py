"""Rule table primitives: rules, actions, transitions, and the table builder.

A state is an ordered list of rules. A rule is a pattern anchored at the
cursor, an action deciding which tokens to emit, and an optional stack
transition. States may splice in other states' rules (mixins); the
builder flattens every mixin once, so a built StateTable holds one plain
tuple of rules per state.

Thread Safety:
StateTable is immutable after creation. Safe to share.
Use StateTableBuilder for mutable construction.

Example:
    >>> builder = StateTableBuilder(initial=("root",))
    >>> _ = builder.fragment("space", rule(r"[ \\t]+", TokenKind.TEXT))
    >>> _ = builder.state("root", mixin("space"), rule(r"\\w+", TokenKind.NAME))
    >>> table = builder.build()
    >>> len(table.rules("root"))
    2
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from solex.errors import RuleTableError
from solex.tokens import TokenKind
from solex.utils.logger import get_logger

logger = get_logger(__name__)


class MatchLike(Protocol):
    """The subset of re.Match the engine reads."""

    def start(self, group: int = 0) -> int: ...

    def end(self, group: int = 0) -> int: ...

    def group(self, group: int = 0) -> str | None: ...


class Matcher(Protocol):
    """Anything that can match anchored at a position.

    Compiled re.Pattern objects satisfy this protocol directly; hand-written
    scanners (see solex.lexer.scanners) implement the same signature.
    """

    def match(self, string: str, pos: int = 0, endpos: int = ...) -> MatchLike | None: ...


# =========================================================================
# Actions
# =========================================================================


@dataclass(frozen=True, slots=True)
class EmitFixed:
    """Emit the whole match as one token of a fixed kind."""

    kind: TokenKind


@dataclass(frozen=True, slots=True)
class EmitViaClassifier:
    """Emit the whole match with a kind computed from its text."""

    classify: Callable[[str], TokenKind]


@dataclass(frozen=True, slots=True)
class EmitRecursiveGroups:
    """Emit each capture group separately.

    A group whose entry is a TokenKind is emitted as one token of that
    kind. A group whose entry is None is re-lexed through the same table,
    starting in the state that matched. Empty groups emit nothing.
    """

    groups: tuple[TokenKind | None, ...]


Action = EmitFixed | EmitViaClassifier | EmitRecursiveGroups | None


# =========================================================================
# Transitions
# =========================================================================


@dataclass(frozen=True, slots=True)
class Push:
    """Push a named state after the action runs."""

    state: str


@dataclass(frozen=True, slots=True)
class Pop:
    """Pop the active state (the bottom state is never removed)."""


POP = Pop()

Transition = Push | Pop | None


# =========================================================================
# Declarations (input to the builder)
# =========================================================================


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """A declared, not yet compiled rule."""

    pattern: str | Matcher
    action: Action
    transition: Transition


@dataclass(frozen=True, slots=True)
class Mixin:
    """Splice another state's rules at this position."""

    state: str


def rule(
    pattern: str | Matcher,
    action: TokenKind | Callable[[str], TokenKind] | tuple[TokenKind | None, ...] | None = None,
    transition: str | Pop | None = None,
) -> RuleSpec:
    """Declare a rule.

    Args:
        pattern: Regex source (compiled with the table flags) or a Matcher
        action: A TokenKind for a fixed kind, a callable classifier, a tuple
            of per-group kinds (None = re-lex that group), or None to emit
            nothing
        transition: A state name to push, POP, or None

    Returns:
        RuleSpec for StateTableBuilder.state()
    """
    if isinstance(action, TokenKind):
        act: Action = EmitFixed(action)
    elif isinstance(action, tuple):
        act = EmitRecursiveGroups(action)
    elif action is None:
        act = None
    elif callable(action):
        act = EmitViaClassifier(action)
    else:
        msg = f"unsupported rule action: {action!r}"
        raise TypeError(msg)

    if isinstance(transition, str):
        trans: Transition = Push(transition)
    else:
        trans = transition
    return RuleSpec(pattern, act, trans)


def fallback(transition: str | Pop) -> RuleSpec:
    """Declare an empty-match rule that only transitions."""
    return rule("", None, transition)


def mixin(state: str) -> Mixin:
    """Declare a mixin of another state's rules."""
    return Mixin(state)


# =========================================================================
# Built table
# =========================================================================


@dataclass(frozen=True, slots=True)
class Rule:
    """A compiled rule, ready for the engine."""

    matcher: Matcher
    action: Action
    transition: Transition
    source: str

    def __repr__(self) -> str:
        return f"Rule({self.source!r})"


class StateTable:
    """Immutable, flattened table of states.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_states", "_initial")

    def __init__(self, states: dict[str, tuple[Rule, ...]], initial: tuple[str, ...]) -> None:
        """Initialize table with pre-built rule lists.

        Use StateTableBuilder to create instances.
        """
        self._states = states
        self._initial = initial

    def rules(self, state: str) -> tuple[Rule, ...]:
        """Get the flattened rules of a state.

        Raises:
            KeyError: If the state is not enterable
        """
        return self._states[state]

    @property
    def initial(self) -> tuple[str, ...]:
        """States pushed when a session starts, bottom first."""
        return self._initial

    @property
    def names(self) -> frozenset[str]:
        """Names of all enterable states."""
        return frozenset(self._states)

    def __contains__(self, state: str) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)


class StateTableBuilder:
    """Mutable builder for StateTable.

    Declare states and fragments, then call build() to flatten mixins,
    compile patterns and validate every transition. Fragments hold rules
    that may only be mixed in; they cannot be pushed.

    Example:
        >>> builder = StateTableBuilder(initial=("root",))
        >>> _ = builder.state("root", rule(r".", TokenKind.TEXT))
        >>> table = builder.build()
    """

    __slots__ = ("_declared", "_fragments", "_initial", "_flags")

    def __init__(self, initial: tuple[str, ...] = ("root",), flags: int = re.ASCII) -> None:
        """Initialize empty builder.

        Args:
            initial: States pushed at session start, bottom first
            flags: re flags used for every string pattern
        """
        self._declared: dict[str, tuple[RuleSpec | Mixin, ...]] = {}
        self._fragments: set[str] = set()
        self._initial = initial
        self._flags = flags

    def state(self, name: str, *items: RuleSpec | Mixin) -> StateTableBuilder:
        """Declare an enterable state.

        Raises:
            RuleTableError: If the name is already declared
        """
        if name in self._declared:
            raise RuleTableError("declared twice", state=name)
        self._declared[name] = items
        return self

    def fragment(self, name: str, *items: RuleSpec | Mixin) -> StateTableBuilder:
        """Declare a mixin-only rule list."""
        self.state(name, *items)
        self._fragments.add(name)
        return self

    def build(self) -> StateTable:
        """Build the immutable table.

        Raises:
            RuleTableError: On any structural defect in the declarations
        """
        if not self._initial:
            raise RuleTableError("no initial state")

        compiled: dict[tuple[str, int], Rule] = {}
        flattened: dict[str, tuple[Rule, ...]] = {}
        for name in self._declared:
            if name in self._fragments:
                continue
            flattened[name] = tuple(self._flatten(name, (), compiled))

        for name in self._initial:
            if name not in flattened:
                raise RuleTableError(f"initial state '{name}' is not an enterable state")

        for name, rules in flattened.items():
            for r in rules:
                if isinstance(r.transition, Push) and r.transition.state not in flattened:
                    raise RuleTableError(
                        f"rule {r.source!r} pushes unknown state '{r.transition.state}'",
                        state=name,
                    )

        logger.debug(
            "Built state table: %d states, %d rules",
            len(flattened),
            sum(len(rules) for rules in flattened.values()),
        )
        return StateTable(flattened, self._initial)

    def _flatten(
        self,
        name: str,
        visiting: tuple[str, ...],
        compiled: dict[tuple[str, int], Rule],
    ) -> list[Rule]:
        if name in visiting:
            cycle = " -> ".join((*visiting, name))
            raise RuleTableError(f"mixin cycle: {cycle}", state=visiting[0])
        items = self._declared.get(name)
        if items is None:
            raise RuleTableError(f"unknown mixin '{name}'", state=visiting[-1] if visiting else None)

        result: list[Rule] = []
        for index, item in enumerate(items):
            if isinstance(item, Mixin):
                result.extend(self._flatten(item.state, (*visiting, name), compiled))
                continue
            key = (name, index)
            if key not in compiled:
                compiled[key] = self._compile(name, item)
            result.append(compiled[key])
        return result

    def _compile(self, state: str, spec: RuleSpec) -> Rule:
        if isinstance(spec.pattern, str):
            try:
                matcher: Matcher = re.compile(spec.pattern, self._flags)
            except re.error as e:
                raise RuleTableError(f"invalid pattern {spec.pattern!r}: {e}", state=state) from e
            source = spec.pattern
            if matcher.match("") is not None and spec.transition is None:
                raise RuleTableError(
                    f"pattern {source!r} can match empty input but has no transition",
                    state=state,
                )
        else:
            matcher = spec.pattern
            source = type(matcher).__name__
        return Rule(matcher, spec.action, spec.transition, source)
