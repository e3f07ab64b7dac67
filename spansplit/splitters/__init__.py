from .base import RangeSplitter, SplitCursor
from .merged import MergedSplit
from .merged_perf import MergedPerfSplit
from .sequence import SequenceSplit
from .simple import SimpleSplit

__all__ = [
    "MergedPerfSplit",
    "MergedSplit",
    "RangeSplitter",
    "SequenceSplit",
    "SimpleSplit",
    "SplitCursor",
]
