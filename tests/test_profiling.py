"""Tests for lexemas.profiling — analysis profiling API."""

from lexemas import analyze
from lexemas.profiling import (
    AnalysisAccumulator,
    get_analysis_accumulator,
    profiled_analyze,
)


class TestGetAnalysisAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_analysis_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_analyze():
            pass
        assert get_analysis_accumulator() is None


class TestProfiledAnalyze:
    def test_yields_accumulator(self) -> None:
        with profiled_analyze() as acc:
            assert isinstance(acc, AnalysisAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_analyze() as acc:
            assert get_analysis_accumulator() is acc

    def test_records_analyze_call(self, config) -> None:
        with profiled_analyze() as acc:
            analyze("x = 1; @", config)
        assert acc.analyze_calls == 1
        assert acc.source_length == len("x = 1; @")
        assert acc.token_count == 4
        assert acc.error_count == 1

    def test_records_multiple_calls(self, lexer) -> None:
        with profiled_analyze() as acc:
            lexer.analyze("a")
            lexer.analyze("b c")
            lexer.analyze("")
        assert acc.analyze_calls == 3
        assert acc.token_count == 3

    def test_nested_contexts_are_independent(self, lexer) -> None:
        with profiled_analyze() as outer:
            lexer.analyze("a")
            with profiled_analyze() as inner:
                lexer.analyze("b")
            lexer.analyze("c")
        assert outer.analyze_calls == 2
        assert inner.analyze_calls == 1

    def test_not_recorded_after_exit(self, lexer) -> None:
        with profiled_analyze() as acc:
            pass
        lexer.analyze("x")
        assert acc.analyze_calls == 0

    def test_total_duration_non_negative(self, lexer) -> None:
        with profiled_analyze() as acc:
            lexer.analyze("x = 1;" * 100)
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = AnalysisAccumulator().summary()
        assert summary["analyze_calls"] == 0
        assert summary["source_length"] == 0
        assert summary["token_count"] == 0
        assert summary["error_count"] == 0

    def test_summary_after_analysis(self, lexer) -> None:
        with profiled_analyze() as acc:
            lexer.analyze('"abc')
        summary = acc.summary()
        assert summary["analyze_calls"] == 1
        assert summary["error_count"] == 1
        assert "total_ms" in summary
