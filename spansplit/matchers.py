"""Separator search over a borrowed sequence.

Every finder takes the full sequence plus a start offset and returns the
position of the first separator occurrence *relative to that offset*, or
``NOT_FOUND``. Nothing here slices the input into a copy: ``str`` and
bytes-like inputs use their native ``find``, numpy arrays are compared once
and then looked up by binary search over the hit positions, and any other
sequence goes through ``index`` with bounds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from functools import partial
from typing import Any

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .constants import NOT_FOUND
from .types import Separator

logger = logging.getLogger(__name__)

__all__ = [
    "Matcher",
    "as_separator",
    "bind_matcher",
    "find_element",
    "find_subsequence",
    "validate_separator",
]

Matcher = Callable[[int], int]

_NATIVE_TYPES = (str, bytes, bytearray)


def as_separator(value: Any, sequence: Sequence[Any]) -> Separator:
    """Coerce a raw separator value into a tagged ``Separator``.

    For strings and bytes-like sequences a single character, a single byte or
    an ``int`` is an element and anything longer is a subsequence. For any
    other sequence a list, tuple or numpy array is a subsequence and every
    other value is an element.
    """
    if isinstance(value, Separator):
        return value
    if isinstance(sequence, _NATIVE_TYPES):
        if isinstance(value, int):
            return Separator.element(value)
        if isinstance(value, _NATIVE_TYPES) and len(value) == 1:
            return Separator.element(value)
        return Separator.sequence(value)
    if isinstance(value, list | tuple | np.ndarray):
        return Separator.sequence(value)
    return Separator.element(value)


def validate_separator(
    separator: Separator, sequence: Sequence[Any] | None = None
) -> None:
    # An empty subsequence matches everywhere and would never advance
    if separator.is_sequence and separator.length == 0:
        raise ValueError("Separator subsequence must not be empty")
    if (
        not separator.is_sequence
        and isinstance(sequence, _NATIVE_TYPES)
        and isinstance(separator.value, _NATIVE_TYPES)
        and len(separator.value) != 1
    ):
        raise ValueError(
            "Element separator must be a single character or byte, "
            f"got {separator.value!r}; use Separator.sequence() instead"
        )


def _find_native(sequence: str | bytes | bytearray, value: Any, start: int) -> int:
    idx = sequence.find(value, start)
    return idx - start if idx != NOT_FOUND else NOT_FOUND


def _array_element_hits(sequence: np.ndarray, value: Any) -> np.ndarray:
    return np.flatnonzero(sequence == value)


def _array_sequence_hits(sequence: np.ndarray, value: np.ndarray) -> np.ndarray:
    width = len(value)
    if len(sequence) < width:
        return np.empty(0, dtype=np.intp)
    windows = sliding_window_view(sequence, width)
    # Compared against the uncast value so no dtype coercion can create matches
    return np.flatnonzero((windows == value).all(axis=1))


def _find_hit(hits: np.ndarray, start: int) -> int:
    i = int(np.searchsorted(hits, start))
    return int(hits[i]) - start if i < hits.size else NOT_FOUND


def _find_indexable_element(sequence: Sequence[Any], value: Any, start: int) -> int:
    try:
        return sequence.index(value, start) - start
    except ValueError:
        return NOT_FOUND


def _find_indexable_sequence(
    sequence: Sequence[Any], value: Sequence[Any], start: int
) -> int:
    width = len(value)
    stop = len(sequence) - width + 1
    first = value[0]
    i = start
    while i < stop:
        try:
            i = sequence.index(first, i, stop)
        except ValueError:
            return NOT_FOUND
        if all(sequence[i + k] == value[k] for k in range(1, width)):
            return i - start
        i += 1
    return NOT_FOUND


def _normalize_subsequence(sequence: Sequence[Any], value: Any) -> Any:
    if isinstance(sequence, str) and not isinstance(value, str):
        return "".join(value)
    if isinstance(sequence, bytes | bytearray) and not isinstance(
        value, bytes | bytearray
    ):
        return bytes(value)
    if isinstance(sequence, np.ndarray):
        return np.asarray(value)
    return value


def find_element(sequence: Sequence[Any], value: Any, start: int = 0) -> int:
    """Position of the first element equal to ``value`` at or after ``start``."""
    if isinstance(sequence, _NATIVE_TYPES):
        return _find_native(sequence, value, start)
    if isinstance(sequence, np.ndarray):
        return _find_hit(_array_element_hits(sequence, value), start)
    return _find_indexable_element(sequence, value, start)


def find_subsequence(sequence: Sequence[Any], value: Any, start: int = 0) -> int:
    """Position of the leftmost occurrence of ``value`` at or after ``start``."""
    value = _normalize_subsequence(sequence, value)
    if isinstance(sequence, _NATIVE_TYPES):
        return _find_native(sequence, value, start)
    if isinstance(sequence, np.ndarray):
        return _find_hit(_array_sequence_hits(sequence, value), start)
    return _find_indexable_sequence(sequence, value, start)


def bind_matcher(sequence: Sequence[Any], separator: Separator) -> Matcher:
    """Resolve the search strategy once and bind it to ``sequence``.

    The returned callable takes a start offset and behaves like
    ``find_element``/``find_subsequence`` without re-dispatching per call.
    For numpy arrays every occurrence is located up front, so each call is a
    binary search over the hit positions.
    """
    validate_separator(separator, sequence)
    if separator.is_sequence:
        value = _normalize_subsequence(sequence, separator.value)
    else:
        value = separator.value

    if isinstance(sequence, np.ndarray):
        if separator.is_sequence:
            hits = _array_sequence_hits(sequence, value)
        else:
            hits = _array_element_hits(sequence, value)
        logger.debug(
            "Bound %s matcher with %d array hits", separator.kind, hits.size
        )
        return partial(_find_hit, hits)

    if isinstance(sequence, _NATIVE_TYPES):
        finder: Callable[[Any, Any, int], int] = _find_native
    elif separator.is_sequence:
        finder = _find_indexable_sequence
    else:
        finder = _find_indexable_element
    logger.debug(
        "Bound %s matcher %s for %s",
        separator.kind,
        finder.__name__,
        type(sequence).__name__,
    )
    return partial(finder, sequence, value)
