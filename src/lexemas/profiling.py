"""Lexemas AnalysisAccumulator — opt-in profiling for lexical analysis.

This module provides accumulated metrics during analysis:
- Total elapsed time
- Source length
- Token and error counts

Zero overhead when disabled (get_analysis_accumulator() returns None).

Example:
    from lexemas import analyze
    from lexemas.profiling import profiled_analyze

    # Normal analysis (no overhead)
    result = analyze("x = 1;", config)

    # Profiled analysis (opt-in)
    with profiled_analyze() as metrics:
        result = analyze("x = 1;", config)

    print(metrics.summary())
    # {"total_ms": 0.4, "source_length": 6, "token_count": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class AnalysisAccumulator:
    """Accumulated metrics during lexical analysis.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of the analyzed texts.
        token_count: Tokens produced.
        error_count: Lexical errors recorded.
        analyze_calls: Number of analyze() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    error_count: int = 0
    analyze_calls: int = 0

    def record_analysis(self, source_length: int, token_count: int, error_count: int) -> None:
        """Record one analyze() call.

        Args:
            source_length: Length of the analyzed text.
            token_count: Number of tokens in the result.
            error_count: Number of errors in the result.

        """
        self.analyze_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.error_count += error_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of analysis metrics.

        Returns:
            Dict with total_ms, source_length, token_count, error_count,
            analyze_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "error_count": self.error_count,
            "analyze_calls": self.analyze_calls,
        }


_accumulator: ContextVar[AnalysisAccumulator | None] = ContextVar(
    "analysis_accumulator",
    default=None,
)


def get_analysis_accumulator() -> AnalysisAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_analyze() -> Iterator[AnalysisAccumulator]:
    """Context manager for profiled analysis.

    Creates an AnalysisAccumulator and makes it available via
    get_analysis_accumulator() for the duration of the with block. The
    accumulator is bound to the current context: analyses run in other
    threads are not recorded.

    Yields:
        AnalysisAccumulator populated by analyze() calls.

    """
    acc = AnalysisAccumulator()
    token: Token[AnalysisAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
