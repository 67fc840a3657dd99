"""Tinta ScanAccumulator: opt-in profiling for rescans.

This module provides accumulated metrics while highlighting:
- rescan calls, and how many of them were skipped as no-ops
- lines and characters actually classified

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from tinta.profiling import profiled_scan

    with profiled_scan() as metrics:
        highlighter.rescan(rows, 40)
        highlighter.rescan(rows, 40)  # skipped, nothing changed

    print(metrics.summary())
    # {"total_ms": 0.4, "rescan_calls": 2, "skipped_calls": 1, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during highlighting.

    Attributes:
        start_time: Profiling start timestamp.
        rescan_calls: Number of rescan() calls recorded.
        skipped_calls: Calls that found nothing to do.
        lines_scanned: Lines classified across all calls.
        chars_scanned: Characters classified across all calls.

    """

    start_time: float = field(default_factory=perf_counter)
    rescan_calls: int = 0
    skipped_calls: int = 0
    lines_scanned: int = 0
    chars_scanned: int = 0

    def record_skip(self) -> None:
        """Record a rescan call that was a no-op."""
        self.rescan_calls += 1
        self.skipped_calls += 1

    def record_scan(self, lines: int, chars: int) -> None:
        """Record a rescan call that classified text.

        Args:
            lines: Number of lines classified.
            chars: Number of characters classified.

        """
        self.rescan_calls += 1
        self.lines_scanned += lines
        self.chars_scanned += chars

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "rescan_calls": self.rescan_calls,
            "skipped_calls": self.skipped_calls,
            "lines_scanned": self.lines_scanned,
            "chars_scanned": self.chars_scanned,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled highlighting.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during rescan calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
