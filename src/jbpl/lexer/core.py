"""Table-driven state-machine lexer.

At each step the rules of the state on top of the stack are tried in order;
the first non-empty match emits its tokens, applies its stack transition and
moves the cursor past the match. When nothing matches, one character is
emitted as an Error token and the cursor advances by one. Every step
consumes input, so a scan takes at most len(source) steps and the emitted
values always concatenate back to the source.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; the rule tables are read-only.

"""

from __future__ import annotations

import re
from collections.abc import Iterator

from jbpl.config import LexConfig, get_lex_config
from jbpl.lexer.grammar import RULES
from jbpl.lexer.modes import LexerState
from jbpl.lexer.rules import Pop, Push, Replace, Rule, RuleTable, Transition
from jbpl.profiling import get_lex_accumulator
from jbpl.tokens import Token, TokenKind
from jbpl.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """State-machine lexer for JBPL source.

    Usage:
            >>> lexer = Lexer('field <Foo> bar')
            >>> for token in lexer.lex():
            ...     print(token)
        Token(KEYWORD, 'field', 0:5)
        Token(TEXT, ' ', 5:6)
        Token(NAME_CLASS, '<Foo>', 6:11)
        Token(TEXT, ' ', 11:12)
        Token(NAME_VARIABLE_INSTANCE, 'bar', 12:15)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_stack",
        "_rules",
        "_config",
        "_max_depth",
        "_fallbacks",
    )

    def __init__(
        self,
        source: str,
        *,
        config: LexConfig | None = None,
        rules: RuleTable = RULES,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: JBPL source text
            config: Configuration to use instead of the active context config
            rules: Flattened rule table (defaults to the JBPL grammar)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._stack: list[LexerState] = [LexerState.ROOT]
        self._rules = rules
        self._config = config if config is not None else get_lex_config()
        self._max_depth = 0
        self._fallbacks = 0

    @property
    def stack(self) -> tuple[LexerState, ...]:
        """Current state stack, bottom first."""
        return tuple(self._stack)

    @property
    def depth(self) -> int:
        """Number of states open above the root."""
        return len(self._stack) - 1

    @property
    def pos(self) -> int:
        """Current cursor offset."""
        return self._pos

    def tokenize(self) -> Iterator[Token]:
        """Scan the source, yielding one token per rule emission.

        Yields:
            Non-empty tokens in source order, with contiguous spans.
        """
        source = self._source
        source_len = self._source_len
        rules = self._rules
        trace = self._config.trace
        emitted = 0

        while self._pos < source_len:
            pos = self._pos
            state = self._stack[-1]
            for r in rules[state]:
                m = r.pattern.match(source, pos)
                # Empty matches never fire; every step must consume input
                if m is None or m.end() == pos:
                    continue
                if trace:
                    logger.debug("%s: %r %s", state.value, m.group(), r.kind)
                for token in self._emit(r, m):
                    emitted += 1
                    yield token
                self._pos = m.end()
                if r.transition is not None:
                    self._apply(r.transition, trace)
                break
            else:
                if trace:
                    logger.debug("%s: no rule matches %r", state.value, source[pos])
                self._fallbacks += 1
                emitted += 1
                self._pos = pos + 1
                yield Token(TokenKind.ERROR, source[pos], pos, pos + 1)

        if len(self._stack) > 1:
            logger.debug(
                "end of input with open states: %s",
                " > ".join(s.value for s in self._stack[1:]),
            )

        acc = get_lex_accumulator()
        if acc is not None:
            acc.record_lex(source_len, emitted, self._fallbacks, self._max_depth)

    def lex(self) -> Iterator[Token]:
        """Scan the source, merging adjacent same-kind tokens when configured.

        Yields:
            Tokens in source order; coalesced unless ``config.coalesce`` is off.
            Error tokens stay one character each so every unrecognized
            character remains its own unit.
        """
        if not self._config.coalesce:
            yield from self.tokenize()
            return

        kind: TokenKind | None = None
        start = end = 0
        parts: list[str] = []
        for token in self.tokenize():
            if token.kind is kind and kind is not TokenKind.ERROR:
                parts.append(token.value)
                end = token.end
                continue
            if kind is not None:
                yield Token(kind, "".join(parts), start, end)
            kind, start, end = token.kind, token.start, token.end
            parts = [token.value]
        if kind is not None:
            yield Token(kind, "".join(parts), start, end)

    def _emit(self, r: Rule, m: re.Match[str]) -> Iterator[Token]:
        """Yield the tokens for one rule match, skipping empty groups."""
        if not r.grouped:
            yield Token(r.kind, m.group(), m.start(), m.end())  # type: ignore[arg-type]
            return
        for index, kind in enumerate(r.kind, start=1):  # type: ignore[arg-type]
            start, end = m.span(index)
            if start < end:
                yield Token(kind, m.group(index), start, end)

    def _apply(self, transition: Transition, trace: bool) -> None:
        """Apply a stack transition. The root state is never popped."""
        stack = self._stack
        if isinstance(transition, Push):
            stack.extend(transition.states)
        elif isinstance(transition, Pop):
            if len(stack) > 1:
                stack.pop()
        elif isinstance(transition, Replace):
            if len(stack) > 1:
                stack.pop()
            stack.append(transition.state)
        depth = len(stack) - 1
        if depth > self._max_depth:
            self._max_depth = depth
        if trace:
            logger.debug("stack: %s", " > ".join(s.value for s in stack))
