"""cProfile wrapper for Lexemas analysis.

Run with:
    python -m cProfile -o profile.prof benchmarks/profile_analyze.py
    python -m snakeviz profile.prof

Or for direct profiling:
    python benchmarks/profile_analyze.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys


def build_corpus(size: int = 200) -> list[str]:
    """Generate sources exercising every lexical category."""
    sources = []
    for i in range(size):
        sources.append(
            f"// programa {i}\n"
            f"si (contador{i} <= {i}) {{\r\n"
            f'    total = total + {i}.5 * "texto {i}";\n'
            f"    /* bloque\n       {i} */\n"
            f"}} sino {{ retornar {i}f; @ }}\n"
        )
    return sources


def analyze_corpus(iterations: int = 10) -> None:
    """Analyze the corpus multiple times with one shared Lexer."""
    from lexemas import Lexer, LexerConfigBuilder
    from lexemas.profiling import profiled_analyze

    config = (
        LexerConfigBuilder()
        .reserved("si", "sino", "retornar")
        .operators("=", "+", "*", "<=")
        .punctuation(";")
        .grouping("(", ")", "{", "}")
        .comments("//", "/*", "*/")
        .build()
    )
    lexer = Lexer(config)
    sources = build_corpus()

    with profiled_analyze() as metrics:
        for _ in range(iterations):
            for source in sources:
                lexer.analyze(source)

    print(metrics.summary())


def main() -> None:
    """Run profiling and print results."""
    print("Lexemas Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    iterations = 10
    print(f"\nAnalyzing generated corpus {iterations}x...")

    profiler = cProfile.Profile()
    profiler.enable()

    analyze_corpus(iterations)

    profiler.disable()

    print("\n" + "=" * 60)
    print("TOP 30 FUNCTIONS BY CUMULATIVE TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.CUMULATIVE)
    ps.print_stats(30)
    print(s.getvalue())

    print("\n" + "=" * 60)
    print("TOP 30 FUNCTIONS BY TOTAL (SELF) TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.TIME)
    ps.print_stats(30)
    print(s.getvalue())


if __name__ == "__main__":
    main()
