from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import BENCHMARK_TEST_CASES, DEFAULT_BENCHMARK, DEFAULT_SEPARATOR


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for comparing the split iterator variants.

    Keep this frozen+hashable; use ``dataclasses.replace`` for overrides.
    """

    separator: Any = DEFAULT_SEPARATOR
    test_cases: tuple[Any, ...] = BENCHMARK_TEST_CASES
    variants: tuple[str, ...] = ("simple", "merged", "merged_perf")

    # Drains per timed sample, timed samples, untimed warmup samples
    number: int = DEFAULT_BENCHMARK["number"]
    repeat: int = DEFAULT_BENCHMARK["repeat"]
    warmup: int = DEFAULT_BENCHMARK["warmup"]

    # Behavior toggles
    measure_memory: bool = True
    verify_equivalence: bool = True
    return_trace: bool = False

    def __post_init__(self) -> None:
        if not self.test_cases:
            raise ValueError("BenchmarkConfig needs at least one test case")
        if not self.variants:
            raise ValueError("BenchmarkConfig needs at least one variant")
        if len(set(self.variants)) != len(self.variants):
            raise ValueError(f"Duplicate variants in {self.variants}")
        if self.number < 1:
            raise ValueError(f"number must be >= 1, got {self.number}")
        if self.repeat < 1:
            raise ValueError(f"repeat must be >= 1, got {self.repeat}")
        if self.warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {self.warmup}")
