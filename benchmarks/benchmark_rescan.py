"""Benchmark rescan policies on a large buffer.

Compares a full rescan against a clean scroll extension with and without
checkpoint resume.

Run with:
    pytest benchmarks/benchmark_rescan.py -v --benchmark-only
"""

try:
    import pytest

    from tinta import HighlightConfig, Highlighter, Language

    @pytest.mark.benchmark(group="rescan")
    def test_benchmark_full_rescan(benchmark, large_buffer):
        """Benchmark a dirty rescan of the whole buffer (baseline)."""
        highlighter = Highlighter(Language.C, large_buffer)

        def full_rescan():
            highlighter.mark_dirty()
            highlighter.rescan(large_buffer, len(large_buffer))

        benchmark(full_rescan)

    @pytest.mark.benchmark(group="rescan")
    @pytest.mark.parametrize("resume", [False, True], ids=["from-top", "resume"])
    def test_benchmark_scroll_extension(benchmark, large_buffer, resume):
        """Benchmark scrolling one screen past an already scanned region."""
        config = HighlightConfig(resume_scans=resume)
        bottom = len(large_buffer) - 40

        def scroll():
            highlighter = Highlighter(Language.C, large_buffer, config=config)
            highlighter.rescan(large_buffer, bottom)
            return highlighter

        def extend(highlighter):
            highlighter.rescan(large_buffer, len(large_buffer))

        benchmark.pedantic(extend, setup=lambda: ((scroll(),), {}), rounds=20)

except ImportError:
    pass  # pytest not available
