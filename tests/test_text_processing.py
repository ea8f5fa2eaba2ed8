"""Tests for the text_processing module."""
import pytest
from speedread.models import Word
from speedread.text_processing import (
    EmptyInputError,
    ends_with_punctuation,
    ends_with_sentence,
    find_max_word_len,
    split_words,
    tokenize,
)


class TestSplitWords:
    """Tests for split_words function."""

    def test_basic_split(self):
        """Test splitting on single spaces."""
        assert split_words("one two three") == ["one", "two", "three"]

    def test_mixed_whitespace(self):
        """Test splitting on tabs, newlines and runs of spaces."""
        assert split_words("  one\ttwo\n\nthree   ") == ["one", "two", "three"]

    def test_non_breaking_space(self):
        """Test that non-breaking spaces separate words."""
        assert split_words("one two") == ["one", "two"]

    def test_punctuation_attached(self):
        """Test that punctuation stays attached to its word."""
        assert split_words('"Hi," she said.') == ['"Hi,"', "she", "said."]


class TestTokenize:
    """Tests for tokenize function."""

    def test_tokenize_example_sentence(self):
        """Test tokenizing a two-sentence example."""
        words = tokenize("Hello world. Testing one two.")
        assert [w.text for w in words] == ["Hello", "world.", "Testing", "one", "two."]
        assert all(isinstance(w, Word) for w in words)

    def test_case_preserved(self):
        """Test that case is preserved during tokenizing."""
        assert tokenize("MiXeD case")[0].text == "MiXeD"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n", None])
    def test_empty_input_raises(self, text):
        """Test that empty input is reported to the caller."""
        with pytest.raises(EmptyInputError):
            tokenize(text)

    def test_empty_input_error_is_value_error(self):
        """Test that EmptyInputError is a ValueError."""
        assert issubclass(EmptyInputError, ValueError)


class TestPunctuation:
    """Tests for punctuation helpers."""

    @pytest.mark.parametrize("word", ["end.", "wow!", "what?"])
    def test_ends_with_sentence(self, word):
        """Test sentence endings."""
        assert ends_with_sentence(word)
        assert ends_with_punctuation(word)

    @pytest.mark.parametrize("word", ["list,", "then;", "note:"])
    def test_general_punctuation(self, word):
        """Test punctuation that does not end a sentence."""
        assert not ends_with_sentence(word)
        assert ends_with_punctuation(word)

    @pytest.mark.parametrize("word", ["plain", ""])
    def test_no_punctuation(self, word):
        """Test words without trailing punctuation."""
        assert not ends_with_sentence(word)
        assert not ends_with_punctuation(word)

    def test_accepts_word_objects(self):
        """Test that Word instances are accepted."""
        assert ends_with_sentence(Word("done."))


class TestFindMaxWordLen:
    """Tests for find_max_word_len function."""

    def test_longest_word(self):
        """Test finding the longest word."""
        assert find_max_word_len([Word("a"), Word("abcd"), Word("ab")]) == 4

    def test_empty_sequence_floor(self):
        """Test that the minimum is 1."""
        assert find_max_word_len([]) == 1
