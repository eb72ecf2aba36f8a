"""cProfile wrapper for jbpl lexing.

Run with:
    python -m cProfile -o profile.prof benchmarks/profile_lex.py
    python -m snakeviz profile.prof

Or for direct profiling:
    python benchmarks/profile_lex.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys
from pathlib import Path


def get_corpus() -> list[str]:
    """Load the test fixtures and a generated large patch."""
    fixtures = Path(__file__).parent.parent / "tests" / "fixtures"
    corpus = [p.read_text() for p in sorted(fixtures.glob("*.jbpl"))]
    if not corpus:
        raise FileNotFoundError(f"No .jbpl fixtures in {fixtures}")
    corpus.append("\n".join(corpus) * 200)
    return corpus


def lex_corpus(iterations: int = 10) -> None:
    """Lex the corpus multiple times."""
    from jbpl import lex

    docs = get_corpus()
    for _ in range(iterations):
        for doc in docs:
            lex(doc)


def main() -> None:
    """Run profiling and print results."""
    from jbpl.profiling import profiled_lex

    print("jbpl Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    iterations = 10
    print(f"\nLexing corpus {iterations}x...")

    profiler = cProfile.Profile()
    profiler.enable()
    with profiled_lex() as metrics:
        lex_corpus(iterations)
    profiler.disable()

    print(metrics.summary())

    stream = io.StringIO()
    stats = pstats.Stats(profiler, stream=stream).sort_stats("cumulative")
    stats.print_stats(25)
    print(stream.getvalue())


if __name__ == "__main__":
    main()
