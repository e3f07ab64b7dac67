from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Literal

from .constants import DEFAULT_VARIANT
from .splitters import (
    MergedPerfSplit,
    MergedSplit,
    SequenceSplit,
    RangeSplitter,
    SimpleSplit,
    SplitCursor,
)
from .types import SplitRange

Variant = Literal["simple", "merged", "merged_perf", "sequence"]

VARIANTS: dict[str, type[SplitCursor]] = {
    SimpleSplit.name: SimpleSplit,
    MergedSplit.name: MergedSplit,
    MergedPerfSplit.name: MergedPerfSplit,
    SequenceSplit.name: SequenceSplit,
}


def splitter_class(variant: str) -> type[SplitCursor]:
    try:
        return VARIANTS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown split variant '{variant}'. "
            f"Choose from: {', '.join(sorted(VARIANTS))}"
        ) from None


def split_ranges(
    sequence: Sequence[Any],
    separator: Any,
    *,
    variant: Variant | str = DEFAULT_VARIANT,
) -> RangeSplitter:
    """Create a range-splitting iterator over ``sequence``.

    Args:
        sequence: Borrowed input; must stay unmodified while iterating
        separator: A single element, a subsequence, or a ``Separator``
        variant: Iterator implementation, see ``VARIANTS``

    Returns:
        An iterator that yields ``SplitRange`` objects and also exposes the
        ``advance()``/``current`` protocol.

    Examples:
        >>> [tuple(r) for r in split_ranges("a,,b", ",")]
        [(0, 1), (2, 2), (3, 4)]
    """
    return splitter_class(variant)(sequence, separator)


def collect_ranges(
    sequence: Sequence[Any],
    separator: Any,
    *,
    variant: Variant | str = DEFAULT_VARIANT,
) -> list[SplitRange]:
    return list(split_ranges(sequence, separator, variant=variant))


def iter_segments(
    sequence: Sequence[Any],
    separator: Any,
    *,
    variant: Variant | str = DEFAULT_VARIANT,
) -> Iterator[Any]:
    """Yield each segment borrowed from ``sequence`` (views where possible)."""
    for split_range in split_ranges(sequence, separator, variant=variant):
        yield split_range.resolve(sequence)
