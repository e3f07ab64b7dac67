from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

SeparatorKind = Literal["element", "sequence"]


@dataclass(frozen=True)
class SplitRange:
    """Half-open index range into the *original* sequence."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def resolve(self, sequence: Sequence[Any]) -> Any:
        """Borrow the segment from ``sequence``.

        bytes-like inputs come back as a ``memoryview`` and numpy arrays as a
        view, so neither copies. Other sequences are sliced normally.
        """
        if isinstance(sequence, bytes | bytearray):
            return memoryview(sequence)[self.start : self.end]
        return sequence[self.as_slice()]


@dataclass(frozen=True)
class Separator:
    """Tagged separator: a single element or a contiguous subsequence."""

    kind: SeparatorKind
    value: Any

    @classmethod
    def element(cls, value: Any) -> Separator:
        return cls(kind="element", value=value)

    @classmethod
    def sequence(cls, value: Any) -> Separator:
        if isinstance(value, list):
            value = tuple(value)
        return cls(kind="sequence", value=value)

    @property
    def is_sequence(self) -> bool:
        return self.kind == "sequence"

    @property
    def length(self) -> int:
        if self.kind == "element":
            return 1
        return len(self.value)


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["verify", "warmup", "measure", "memory"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured timing output of a benchmark run."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BenchmarkResult:
    """Per-operation cost of draining one variant over one test case."""

    variant: str
    case_index: int
    case_length: int
    segments: int
    number: int
    repeat: int
    mean_ns: float
    std_ns: float
    median_ns: float
    min_ns: float
    # Peak traced bytes for one drain; None when memory was not measured
    allocated_bytes: int | None = None


@dataclass
class BenchmarkReport:
    results: list[BenchmarkResult] = field(default_factory=list)
    trace: Trace | None = None

    def for_case(self, case_index: int) -> list[BenchmarkResult]:
        return [r for r in self.results if r.case_index == case_index]

    def get(self, variant: str, case_index: int) -> BenchmarkResult:
        for result in self.results:
            if result.variant == variant and result.case_index == case_index:
                return result
        raise KeyError(f"No result for variant '{variant}' on case {case_index}")

    def ratio(self, variant: str, baseline: str, case_index: int) -> float:
        """Mean time of ``variant`` relative to ``baseline`` (below 1.0 is faster)."""
        base = self.get(baseline, case_index).mean_ns
        if base == 0:
            return float("inf")
        return self.get(variant, case_index).mean_ns / base
