"""Tests for end-of-session statistics."""

import pytest

from metrics import (
    SessionResult,
    compute_accuracy,
    compute_correct_chars,
    compute_result,
    compute_word_count,
    compute_wpm,
    format_result,
)


class TestWordCount:

    def test_complete_counts_last_word(self):
        assert compute_word_count("cat dog", "cat dig") == 2

    def test_partial_ignores_unfinished_word(self):
        assert compute_word_count("one two three", "one tw") == 1

    def test_nothing_typed(self):
        assert compute_word_count("a" * 10 + " " + "b" * 9, "") == 0

    def test_counts_reference_spaces_not_typed_ones(self):
        assert compute_word_count("one two three", "onextwo") == 1


class TestWpm:

    def test_one_minute(self):
        assert compute_wpm(40, 60.0) == pytest.approx(40.0)

    def test_thirty_seconds(self):
        assert compute_wpm(10, 30.0) == pytest.approx(20.0)

    @pytest.mark.parametrize("elapsed", [0.0, -1.0])
    def test_no_elapsed_time_reports_zero(self, elapsed):
        assert compute_wpm(10, elapsed) == 0.0


class TestAccuracy:

    def test_example(self):
        assert compute_accuracy("cat dog", "cat dig") == pytest.approx(6 / 7)

    def test_perfect(self):
        assert compute_accuracy("cat", "cat") == 1.0

    def test_empty_typed_reports_zero(self):
        assert compute_accuracy("cat", "") == 0.0

    @pytest.mark.parametrize("typed", ["x", "ca", "xyz", "c t", "dog dog"])
    def test_bounded(self, typed):
        assert 0.0 <= compute_accuracy("cat dog", typed) <= 1.0

    def test_correct_chars_ignores_overflow(self):
        assert compute_correct_chars("ab", "abc") == 2


def test_compute_result():
    result = compute_result("cat dog", "cat dig", 30.0)
    assert result.word_count == 2
    assert result.wpm == pytest.approx(4.0)
    assert result.accuracy == pytest.approx(6 / 7)
    assert result.elapsed_s == 30.0
    assert (result.typed_len, result.correct_chars) == (7, 6)


def test_format_result():
    result = SessionResult(
        word_count=2, wpm=4.0, accuracy=6 / 7, elapsed_s=30.0, typed_len=7, correct_chars=6
    )
    assert format_result(result) == "Words / min:\t4.0\nAccuracy:\t85.7 %"
