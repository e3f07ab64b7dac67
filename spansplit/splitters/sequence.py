from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..constants import NOT_FOUND
from ..types import Separator, SplitRange
from .base import SplitCursor

__all__ = ["SequenceSplit"]


class SequenceSplit(SplitCursor):
    """Split on a subsequence separator only.

    An element separator is promoted to a one-element subsequence, so the
    subsequence search is always used.
    """

    name = "sequence"

    def __init__(self, sequence: Sequence[Any], separator: Any) -> None:
        super().__init__(sequence, separator)
        self._offset = 0
        self._segment_length = 0

    def _coerce_separator(
        self, separator: Separator, sequence: Sequence[Any]
    ) -> Separator:
        if separator.is_sequence:
            return separator
        value = separator.value
        if isinstance(sequence, bytes | bytearray) and isinstance(value, int):
            return Separator.sequence(bytes([value]))
        if isinstance(sequence, str | bytes | bytearray):
            return Separator.sequence(value)
        return Separator.sequence((value,))

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
