from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Protocol

from ..matchers import Matcher, as_separator, bind_matcher, validate_separator
from ..types import Separator, SplitRange

__all__ = ["RangeSplitter", "SplitCursor"]


class RangeSplitter(Protocol):
    def advance(self) -> bool:
        """Move to the next segment; False once the input is exhausted."""
        ...

    @property
    def current(self) -> SplitRange: ...

    @property
    def exhausted(self) -> bool: ...

    def __iter__(self) -> Iterator[SplitRange]: ...

    def __next__(self) -> SplitRange: ...


class SplitCursor:
    """Offset/length cursor shared by every range-splitting iterator.

    The iterator borrows ``sequence``: it must not be mutated while the
    iterator is alive. A change in length is detected on ``advance`` and
    raises ``RuntimeError``; same-length mutation cannot be detected.
    """

    name = "cursor"

    def __init__(self, sequence: Sequence[Any], separator: Any) -> None:
        separator = as_separator(separator, sequence)
        validate_separator(separator, sequence)
        separator = self._coerce_separator(separator, sequence)
        self._sequence = sequence
        self._length = len(sequence)
        self._separator = separator
        self._separator_length = separator.length
        self._find: Matcher = bind_matcher(sequence, separator)
        self._offset = 0
        self._segment_length = 0
        self._exhausted = False
        self._has_current = False

    def _coerce_separator(
        self, separator: Separator, sequence: Sequence[Any]
    ) -> Separator:
        _ = sequence
        return separator

    def _check_borrow(self) -> None:
        if len(self._sequence) != self._length:
            raise RuntimeError(
                f"Sequence length changed from {self._length} to "
                f"{len(self._sequence)} while {type(self).__name__} was iterating"
            )

    def _finish(self) -> bool:
        self._exhausted = True
        self._has_current = False
        return False

    def _require_current(self) -> None:
        if not self._has_current:
            raise RuntimeError("No current range. Call advance() first.")

    @property
    def separator(self) -> Separator:
        return self._separator

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def advance(self) -> bool:
        raise NotImplementedError

    @property
    def current(self) -> SplitRange:
        raise NotImplementedError

    def __iter__(self) -> SplitCursor:
        return self

    def __next__(self) -> SplitRange:
        if not self.advance():
            raise StopIteration
        return self.current

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(offset={self._offset}, "
            f"segment_length={self._segment_length}, exhausted={self._exhausted})"
        )
