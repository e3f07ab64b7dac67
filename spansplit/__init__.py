"""spansplit - allocation-free range splitting of sequences."""

from .benchmark import run_benchmark
from .benchmark_config import BenchmarkConfig
from .split import VARIANTS, collect_ranges, iter_segments, split_ranges
from .splitters import MergedPerfSplit, MergedSplit, SequenceSplit, SimpleSplit
from .types import Separator, SplitRange

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "VARIANTS",
    "BenchmarkConfig",
    "MergedPerfSplit",
    "MergedSplit",
    "Separator",
    "SequenceSplit",
    "SimpleSplit",
    "SplitRange",
    "collect_ranges",
    "iter_segments",
    "run_benchmark",
    "split_ranges",
]
