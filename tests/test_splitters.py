"""Tests for the range-splitting iterators."""

import numpy as np
import pytest

from spansplit import (
    MergedPerfSplit,
    MergedSplit,
    SequenceSplit,
    SimpleSplit,
    SplitRange,
    collect_ranges,
    iter_segments,
    split_ranges,
)
from spansplit.types import Separator

ALL_VARIANTS = ["simple", "merged", "merged_perf", "sequence"]
SUBSEQUENCE_VARIANTS = ["merged", "merged_perf", "sequence"]
SPLITTER_CLASSES = [SimpleSplit, MergedSplit, MergedPerfSplit, SequenceSplit]


def ranges(sequence, separator, variant):
    return [tuple(r) for r in collect_ranges(sequence, separator, variant=variant)]


@pytest.mark.parametrize("variant", ALL_VARIANTS)
class TestElementSeparator:
    """Boundary behavior shared by every variant."""

    def test_empty_input_yields_one_empty_range(self, variant):
        assert ranges("", ",", variant) == [(0, 0)]

    def test_no_occurrence_yields_whole_input(self, variant):
        assert ranges("abc", "z", variant) == [(0, 3)]

    def test_adjacent_separators(self, variant):
        assert ranges("a,,b", ",", variant) == [(0, 1), (2, 2), (3, 4)]

    def test_trailing_separator(self, variant):
        assert ranges("a,b,", ",", variant) == [(0, 1), (2, 3), (4, 4)]

    def test_leading_separator(self, variant):
        assert ranges(",a", ",", variant) == [(0, 0), (1, 2)]

    def test_only_separators(self, variant):
        assert ranges(",,", ",", variant) == [(0, 0), (1, 1), (2, 2)]

    def test_list_input(self, variant):
        assert ranges([1, 0, 2, 0, 3], 0, variant) == [(0, 1), (2, 3), (4, 5)]

    def test_numpy_input(self, variant):
        arr = np.array([1, 0, 2, 0, 3], dtype=np.int32)
        assert ranges(arr, 0, variant) == [(0, 1), (2, 3), (4, 5)]

    def test_bytes_input_with_int_separator(self, variant):
        assert ranges(b"ab,c", ord(","), variant) == [(0, 2), (3, 4)]


@pytest.mark.parametrize("variant", SUBSEQUENCE_VARIANTS)
class TestSubsequenceSeparator:
    def test_double_colon(self, variant):
        assert ranges("a::b::c", "::", variant) == [(0, 1), (3, 4), (6, 7)]

    def test_trailing_subsequence(self, variant):
        assert ranges("a::", "::", variant) == [(0, 1), (3, 3)]

    def test_overlapping_candidates_consumed_once(self, variant):
        assert ranges("aaa", "aa", variant) == [(0, 0), (2, 3)]

    def test_partial_separator_at_end_is_content(self, variant):
        assert ranges("a::b:", "::", variant) == [(0, 1), (3, 5)]

    def test_list_subsequence(self, variant):
        data = [1, 9, 9, 2, 9, 3]
        assert ranges(data, [9, 9], variant) == [(0, 1), (3, 6)]

    def test_numpy_subsequence(self, variant):
        arr = np.array([1, 9, 9, 2, 9, 9], dtype=np.uint8)
        assert ranges(arr, np.array([9, 9]), variant) == [(0, 1), (3, 4), (6, 6)]

    def test_bytes_crlf(self, variant):
        assert ranges(b"a\r\nbc\r\n", b"\r\n", variant) == [(0, 1), (3, 5), (7, 7)]

    def test_empty_subsequence_rejected(self, variant):
        with pytest.raises(ValueError, match="must not be empty"):
            split_ranges("abc", "", variant=variant)


def test_simple_rejects_subsequence():
    with pytest.raises(ValueError, match="single-element separator"):
        SimpleSplit("a::b", "::")
    with pytest.raises(ValueError):
        SimpleSplit("a,b", Separator.sequence(","))


def test_sequence_split_promotes_element_separator():
    splitter = SequenceSplit([1, 0, 2], 0)
    assert splitter.separator.is_sequence
    assert [tuple(r) for r in splitter] == [(0, 1), (2, 3)]
    assert ranges(b"a,b", ord(","), "sequence") == [(0, 1), (2, 3)]


def test_unknown_variant():
    with pytest.raises(ValueError, match="Unknown split variant 'reverse'"):
        split_ranges("a,b", ",", variant="reverse")


@pytest.mark.parametrize("cls", SPLITTER_CLASSES)
class TestIterationProtocol:
    """advance()/current contract and the Python iterator protocol."""

    def test_advance_and_current(self, cls):
        splitter = cls("a,b", ",")
        assert splitter.advance() is True
        assert splitter.current == SplitRange(0, 1)
        assert splitter.advance() is True
        assert splitter.current == SplitRange(2, 3)
        assert splitter.advance() is False
        assert splitter.exhausted

    def test_current_before_advance_raises(self, cls):
        splitter = cls("a,b", ",")
        with pytest.raises(RuntimeError, match="Call advance\\(\\) first"):
            _ = splitter.current

    def test_exhausted_stays_exhausted(self, cls):
        splitter = cls("a,b", ",")
        assert len(list(splitter)) == 2
        assert splitter.advance() is False
        assert splitter.advance() is False
        assert list(splitter) == []
        with pytest.raises(RuntimeError):
            _ = splitter.current

    def test_length_change_detected(self, cls):
        data = bytearray(b"a,b")
        splitter = cls(data, ord(","))
        assert splitter.advance()
        data.extend(b",c")
        with pytest.raises(RuntimeError, match="length changed"):
            splitter.advance()

    def test_independent_iterators_over_same_input(self, cls):
        text = "x,y,z"
        first = cls(text, ",")
        second = cls(text, ",")
        assert next(first) == SplitRange(0, 1)
        assert list(second) == [SplitRange(0, 1), SplitRange(2, 3), SplitRange(4, 5)]
        assert list(first) == [SplitRange(2, 3), SplitRange(4, 5)]

    def test_repr(self, cls):
        assert cls.__name__ in repr(cls("a", ","))


def test_iter_segments_str():
    assert list(iter_segments("a,,bc", ",")) == ["a", "", "bc"]


def test_iter_segments_bytes_are_views():
    segments = list(iter_segments(b"ab::cd", b"::"))
    assert all(isinstance(s, memoryview) for s in segments)
    assert [bytes(s) for s in segments] == [b"ab", b"cd"]


def test_iter_segments_numpy_are_views():
    arr = np.array([1, 0, 2, 3])
    segments = list(iter_segments(arr, 0, variant="simple"))
    assert [s.tolist() for s in segments] == [[1], [2, 3]]
    assert all(s.base is arr for s in segments)


@pytest.mark.parametrize("variant", SUBSEQUENCE_VARIANTS)
def test_numpy_float_separator_does_not_match_int_array(variant):
    arr = np.array([1, 2, 1, 2])
    assert ranges(arr, [1.5, 2.5], variant) == [(0, 4)]
    assert ranges(arr, [1.0, 2.0], variant) == [(0, 0), (2, 2), (4, 4)]


@pytest.mark.parametrize("variant", ALL_VARIANTS)
def test_multi_char_element_separator_rejected(variant):
    with pytest.raises(ValueError, match="single character or byte"):
        split_ranges("a::b", Separator.element("::"), variant=variant)


@pytest.mark.parametrize("variant", ALL_VARIANTS)
def test_long_array_of_separators(variant):
    arr = np.zeros(5000, dtype=np.int32)
    result = collect_ranges(arr, 0, variant=variant)
    assert len(result) == 5001
    assert result[-1] == SplitRange(5000, 5000)
