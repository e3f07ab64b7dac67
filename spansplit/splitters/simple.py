from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..constants import NOT_FOUND
from ..types import Separator, SplitRange
from .base import SplitCursor

__all__ = ["SimpleSplit"]


class SimpleSplit(SplitCursor):
    """Split on a single-element separator.

    The cursor starts one position before the input so that every advance
    skips exactly one separator element.
    """

    name = "simple"

    def __init__(self, sequence: Sequence[Any], separator: Any) -> None:
        super().__init__(sequence, separator)
        self._offset = -1

    def _coerce_separator(
        self, separator: Separator, sequence: Sequence[Any]
    ) -> Separator:
        if separator.is_sequence:
            raise ValueError(
                "SimpleSplit requires a single-element separator, "
                f"got a subsequence of length {separator.length}"
            )
        return separator

    def advance(self) -> bool:
        if self._exhausted:
            return False
        self._check_borrow()
        start = self._offset + self._segment_length + 1
        if start > self._length:
            return self._finish()
        self._offset = start
        idx = self._find(start)
        self._segment_length = idx if idx != NOT_FOUND else self._length - start
        self._has_current = True
        return True

    @property
    def current(self) -> SplitRange:
        self._require_current()
        return SplitRange(self._offset, self._offset + self._segment_length)
