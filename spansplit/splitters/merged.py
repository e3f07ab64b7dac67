from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..constants import NOT_FOUND
from ..types import SplitRange
from .base import SplitCursor

__all__ = ["MergedSplit"]


class MergedSplit(SplitCursor):
    """Split on a single element or a subsequence.

    The stored segment length includes the trailing separator, so moving past
    a segment and its separator is a single addition. ``current`` subtracts
    the separator back out.
    """

    name = "merged"

    def __init__(self, sequence: Sequence[Any], separator: Any) -> None:
        super().__init__(sequence, separator)
        self._offset = 0
        self._segment_length = 0

    def advance(self) -> bool:
        if self._exhausted:
            return False
        self._check_borrow()
        start = self._offset + self._segment_length
        if start > self._length:
            return self._finish()
        self._offset = start
        idx = self._find(start)
        self._segment_length = (
            idx if idx != NOT_FOUND else self._length - start
        ) + self._separator_length
        self._has_current = True
        return True

    @property
    def current(self) -> SplitRange:
        self._require_current()
        return SplitRange(
            self._offset,
            self._offset + self._segment_length - self._separator_length,
        )
