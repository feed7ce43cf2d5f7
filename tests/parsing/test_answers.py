"""
Unit Tests for Answer Splitting

Tests escape-aware splitting of answer payloads on ", ".
"""

import pytest

from krs_toolkit.parsing.answers import DELIMITER, split_answers


class TestSplitAnswers:
    """Tests for split_answers."""

    # ─────────────────────────────────────────────────────────────────────────
    # Plain Splitting
    # ─────────────────────────────────────────────────────────────────────────

    def test_split_when_no_delimiter_then_single_answer(self):
        """Text without a delimiter is one answer."""
        assert split_answers("Paris") == ["Paris"]

    def test_split_when_delimited_then_answers_in_order(self):
        """Each ", " separates two answers."""
        assert split_answers("A, B, C") == ["A", "B", "C"]

    def test_split_when_empty_then_single_empty_answer(self):
        """Empty payload still yields one (empty) answer."""
        assert split_answers("") == [""]

    def test_split_when_comma_without_space_then_not_split(self):
        """Only comma followed by space is a delimiter."""
        assert split_answers("1,000, 2,000") == ["1,000", "2,000"]

    def test_split_when_duplicates_then_kept(self):
        """Duplicates are not removed."""
        assert split_answers("x, x") == ["x", "x"]

    def test_split_when_leading_delimiter_then_empty_first_answer(self):
        """A delimiter at the start produces an empty first answer."""
        assert split_answers(", A") == ["", "A"]

    def test_split_when_trailing_delimiter_then_kept_in_last_answer(self):
        """A delimiter at the end is never split off."""
        assert split_answers("A, ") == ["A, "]

    def test_split_when_extra_spaces_then_preserved(self):
        """Whitespace around answers is not trimmed."""
        assert split_answers("a,  b") == ["a", " b"]

    # ─────────────────────────────────────────────────────────────────────────
    # Escaping
    # ─────────────────────────────────────────────────────────────────────────

    def test_split_when_escaped_delimiter_then_literal(self):
        """A backslash before ", " keeps it in the answer."""
        assert split_answers("A\\, B") == ["A, B"]

    def test_split_when_escaped_then_unescaped_then_splits_second(self):
        """Only the escaped occurrence is literal."""
        assert split_answers("1\\, 2, 3") == ["1, 2", "3"]

    def test_split_when_double_backslash_then_one_literal_backslash(self):
        """Two backslashes toggle escaping on and off, keeping the second."""
        assert split_answers("a\\\\b") == ["a\\b"]

    def test_split_when_double_backslash_before_delimiter_then_splits(self):
        """An escaped backslash does not escape the following delimiter."""
        assert split_answers("a\\\\, b") == ["a\\", "b"]

    def test_split_when_trailing_backslash_then_dropped(self):
        """A lone trailing backslash only switches escaping on."""
        assert split_answers("a\\") == ["a"]

    def test_split_when_stray_backslash_then_escapes_next_delimiter(self):
        """Escaping stays on until the next delimiter consumes it."""
        assert split_answers("a\\b, c, d") == ["ab, c", "d"]

    # ─────────────────────────────────────────────────────────────────────────
    # Graphemes
    # ─────────────────────────────────────────────────────────────────────────

    def test_split_when_combining_mark_after_space_then_not_a_delimiter(self):
        """A space carrying a combining mark is not part of ", "."""
        assert split_answers("a, \u0301b") == ["a, \u0301b"]

    def test_split_when_accented_answers_then_kept_whole(self):
        """Decomposed accents survive splitting."""
        assert split_answers("cafe\u0301, the\u0301") == ["cafe\u0301", "the\u0301"]

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("answers", [
        ["Paris"],
        ["A", "B", "C"],
        ["1,000", "two words", "x"],
        ["", "empty first"],
    ])
    def test_split_when_rejoined_then_same_answers(self, answers):
        """Joining plain answers on ", " and splitting gives them back."""
        assert split_answers(DELIMITER.join(answers)) == answers

    @pytest.mark.parametrize("text", ["", "a", "a\\", "\\\\\\", ", , ", "x\\, y, z"])
    def test_split_when_any_text_then_never_empty(self, text):
        """Splitting always returns at least one answer."""
        assert len(split_answers(text)) >= 1
