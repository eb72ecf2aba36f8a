"""Rule primitives and rule-table construction.

A state's rule list is an ordered sequence of Rule and Include entries.
Includes are spliced in place when the table is built, so the scanner only
ever walks flat tuples of rules.

Thread Safety:
All types here are frozen. Built tables are read-only mappings of tuples.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from jbpl.errors import GrammarError
from jbpl.lexer.modes import LexerState
from jbpl.tokens import TokenKind


class Matcher(Protocol):
    """Anything that can recognize input at a cursor.

    Compiled regular expressions satisfy this protocol directly. Lookbehind
    and ``\\b`` see the characters before ``pos``.
    """

    def match(self, text: str, pos: int) -> re.Match[str] | None: ...


# =========================================================================
# Stack transitions
# =========================================================================


@dataclass(frozen=True, slots=True)
class Push:
    """Push one or more states; the last one ends up on top."""

    states: tuple[LexerState, ...]

    def __init__(self, *states: LexerState) -> None:
        object.__setattr__(self, "states", states)


@dataclass(frozen=True, slots=True)
class Pop:
    """Pop the top state. The root state is never popped."""


@dataclass(frozen=True, slots=True)
class Replace:
    """Pop the top state, then push ``state``."""

    state: LexerState


Transition = Push | Pop | Replace


# =========================================================================
# Rules
# =========================================================================


@dataclass(frozen=True, slots=True)
class Rule:
    """One entry of a state's rule list.

    Attributes:
        pattern: Recognizer tried at the cursor
        kind: A single kind for the whole match, or one kind per capture
            group. Groups must cover the match; empty groups emit nothing.
        transition: Stack transition applied after emission, if any

    """

    pattern: Matcher
    kind: TokenKind | tuple[TokenKind, ...]
    transition: Transition | None = None

    @property
    def grouped(self) -> bool:
        return isinstance(self.kind, tuple)


@dataclass(frozen=True, slots=True)
class Include:
    """Splice another state's rules in at this position."""

    state: LexerState


def rule(
    pattern: str | Matcher,
    kind: TokenKind | tuple[TokenKind, ...],
    transition: Transition | None = None,
) -> Rule:
    """Build a Rule, compiling string patterns with ASCII semantics."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.ASCII)
    return Rule(pattern, kind, transition)


# =========================================================================
# Table construction
# =========================================================================

RuleTable = Mapping[LexerState, tuple[Rule, ...]]


def build_rule_table(
    grammar: Mapping[LexerState, Sequence[Rule | Include]],
) -> RuleTable:
    """Flatten a grammar into a read-only table of rule tuples.

    Args:
        grammar: Rule lists per state, possibly containing Includes.

    Returns:
        Read-only mapping from each state to its flat rule tuple.

    Raises:
        GrammarError: If an Include or a transition names a state that has
            no rule list, or if Includes form a cycle.
    """
    flat: dict[LexerState, tuple[Rule, ...]] = {}

    def flatten(state: LexerState, visiting: tuple[LexerState, ...]) -> tuple[Rule, ...]:
        if state in flat:
            return flat[state]
        if state in visiting:
            chain = " -> ".join(s.value for s in (*visiting, state))
            raise GrammarError(state, f"include cycle: {chain}")
        entries = grammar.get(state)
        if entries is None:
            raise GrammarError(visiting[-1], f"includes unknown state '{state.value}'")
        rules: list[Rule] = []
        for entry in entries:
            if isinstance(entry, Include):
                rules.extend(flatten(entry.state, (*visiting, state)))
            else:
                rules.append(entry)
        flat[state] = tuple(rules)
        return flat[state]

    for state in grammar:
        flatten(state, ())

    for state, rules in flat.items():
        for r in rules:
            for target in _targets(r.transition):
                if target not in flat:
                    raise GrammarError(state, f"transition to unknown state '{target.value}'")

    return MappingProxyType(flat)


def _targets(transition: Transition | None) -> tuple[LexerState, ...]:
    if isinstance(transition, Push):
        return transition.states
    if isinstance(transition, Replace):
        return (transition.state,)
    return ()
