"""Benchmark driver comparing the split iterator variants.

Each operation constructs one iterator over a test case and drains it, which
is the full cost a caller pays to enumerate every segment. Variants must emit
identical ranges on every test case before any of them is timed.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from collections.abc import Sequence
from dataclasses import replace
from typing import Any

import numpy as np

from .benchmark_config import BenchmarkConfig
from .matchers import as_separator
from .runtime.tracing import trace_timing
from .split import splitter_class
from .splitters import RangeSplitter, SplitCursor
from .types import BenchmarkReport, BenchmarkResult, Separator, SplitRange, Trace

logger = logging.getLogger(__name__)

__all__ = [
    "drain",
    "measure_allocations",
    "measure_timings",
    "run_benchmark",
    "verify_equivalence",
]


def drain(splitter: RangeSplitter) -> int:
    """Advance ``splitter`` to exhaustion and return the number of segments."""
    count = 0
    for _ in splitter:
        count += 1
    return count


def _supports(variant: str, separator: Separator) -> bool:
    return not (variant == "simple" and separator.is_sequence)


def _first_mismatch(a: list[SplitRange], b: list[SplitRange]) -> int:
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    return min(len(a), len(b))


def _describe(ranges: list[SplitRange], idx: int) -> str:
    if idx >= len(ranges):
        return "<end>"
    start, end = ranges[idx]
    return f"[{start}, {end})"


def verify_equivalence(
    sequence: Sequence[Any], separator: Any, variants: Sequence[str]
) -> list[SplitRange]:
    """Check that all ``variants`` emit the same ranges for one input.

    Variants that cannot handle the separator (``simple`` with a subsequence)
    are skipped.

    Returns:
        The agreed list of ranges

    Raises:
        RuntimeError: if any two variants disagree
    """
    sep = as_separator(separator, sequence)
    reference: list[SplitRange] | None = None
    reference_name = ""
    for variant in variants:
        if not _supports(variant, sep):
            continue
        ranges = list(splitter_class(variant)(sequence, sep))
        if reference is None:
            reference, reference_name = ranges, variant
            continue
        if ranges != reference:
            idx = _first_mismatch(reference, ranges)
            raise RuntimeError(
                f"Variants '{reference_name}' and '{variant}' disagree at "
                f"segment {idx}: {_describe(reference, idx)} vs "
                f"{_describe(ranges, idx)}"
            )
    return reference or []


def measure_timings(
    cls: type[SplitCursor],
    sequence: Sequence[Any],
    separator: Separator,
    *,
    number: int,
    repeat: int,
) -> np.ndarray:
    """Per-operation nanoseconds, one sample per repeat."""
    samples = np.empty(repeat, dtype=np.float64)
    for i in range(repeat):
        t0 = time.perf_counter_ns()
        for _ in range(number):
            for _ in cls(sequence, separator):
                pass
        samples[i] = (time.perf_counter_ns() - t0) / number
    return samples


def measure_allocations(
    cls: type[SplitCursor], sequence: Sequence[Any], separator: Separator
) -> int:
    """Peak bytes traced by ``tracemalloc`` while draining once."""
    started = not tracemalloc.is_tracing()
    if started:
        tracemalloc.start()
    try:
        baseline, _ = tracemalloc.get_traced_memory()
        tracemalloc.reset_peak()
        drain(cls(sequence, separator))
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if started:
            tracemalloc.stop()
    return max(0, peak - baseline)


def run_benchmark(
    config: BenchmarkConfig | None = None, **overrides: Any
) -> BenchmarkReport:
    cfg = config or BenchmarkConfig()
    if overrides:
        cfg = replace(cfg, **overrides)
    for variant in cfg.variants:
        splitter_class(variant)

    trace = Trace()
    results: list[BenchmarkResult] = []

    for case_index, sequence in enumerate(cfg.test_cases):
        separator = as_separator(cfg.separator, sequence)
        variants = [v for v in cfg.variants if _supports(v, separator)]
        for skipped in sorted(set(cfg.variants) - set(variants)):
            message = (
                f"Skipping '{skipped}' on case {case_index}: "
                "needs an element separator"
            )
            logger.warning(message)
            trace.warnings.append(message)

        segments = None
        if cfg.verify_equivalence:
            with trace_timing(trace, "verify", f"case{case_index}") as details:
                segments = len(verify_equivalence(sequence, separator, variants))
                details["segments"] = segments

        for variant in variants:
            cls = splitter_class(variant)
            if segments is None:
                segments = drain(cls(sequence, separator))
            logger.info(
                "Benchmarking %s on case %d (%d elements)",
                variant,
                case_index,
                len(sequence),
            )
            if cfg.warmup:
                with trace_timing(trace, "warmup", variant, case=case_index):
                    measure_timings(
                        cls, sequence, separator, number=cfg.number, repeat=cfg.warmup
                    )
            with trace_timing(trace, "measure", variant, case=case_index):
                samples = measure_timings(
                    cls, sequence, separator, number=cfg.number, repeat=cfg.repeat
                )
            allocated = None
            if cfg.measure_memory:
                with trace_timing(trace, "memory", variant, case=case_index) as details:
                    allocated = measure_allocations(cls, sequence, separator)
                    details["bytes"] = allocated

            result = BenchmarkResult(
                variant=variant,
                case_index=case_index,
                case_length=len(sequence),
                segments=segments,
                number=cfg.number,
                repeat=cfg.repeat,
                mean_ns=float(np.mean(samples)),
                std_ns=float(np.std(samples)),
                median_ns=float(np.median(samples)),
                min_ns=float(np.min(samples)),
                allocated_bytes=allocated,
            )
            logger.debug("Result: %s", result)
            results.append(result)

    return BenchmarkReport(
        results=results, trace=trace if cfg.return_trace else None
    )
