"""jbpl LexAccumulator: opt-in profiling for lexing.

This module provides accumulated metrics during lexing:
- Total elapsed time
- Source length and tokens emitted
- Fallback (Error) tokens and deepest state stack seen

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from jbpl import lex
    from jbpl.profiling import profiled_lex

    with profiled_lex() as metrics:
        tokens = lex("iload 0")

    print(metrics.summary())
    # {"total_ms": 0.2, "source_length": 7, "token_count": 3, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during lexing.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources scanned.
        token_count: Raw tokens emitted (before coalescing).
        fallback_count: Unclassified single-character tokens emitted.
        max_depth: Deepest state stack reached across all scans.
        lex_calls: Number of completed scans recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    fallback_count: int = 0
    max_depth: int = 0
    lex_calls: int = 0

    def record_lex(
        self, source_length: int, token_count: int, fallback_count: int, max_depth: int
    ) -> None:
        """Record one completed scan.

        Args:
            source_length: Length of the source string scanned.
            token_count: Raw tokens emitted by the scan.
            fallback_count: Error tokens among them.
            max_depth: Deepest stack depth the scan reached.

        """
        self.lex_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.fallback_count += fallback_count
        self.max_depth = max(self.max_depth, max_depth)

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of lex metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "fallback_count": self.fallback_count,
            "max_depth": self.max_depth,
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
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator that will be populated as scans complete.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
