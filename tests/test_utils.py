# tests/test_utils.py
"""Tests for string property analysis."""

import hashlib

import pytest

from app.utils import (
    analyze_string,
    count_words,
    get_character_frequency,
    is_palindrome,
)


class TestPalindrome:
    """Palindrome detection ignores case and whitespace, not punctuation."""

    @pytest.mark.parametrize("text", ["racecar", "RaceCar", "A man a plan a canal Panama", "", "a", "nurses\trun"])
    def test_palindromes(self, text):
        assert is_palindrome(text) is True

    @pytest.mark.parametrize("text", ["hello", "A man, a plan, a canal: Panama", "ab"])
    def test_not_palindromes(self, text):
        assert is_palindrome(text) is False

    @pytest.mark.parametrize("text", ["racecar", "hello world", "Was it a car", "ab c!"])
    def test_reversal_keeps_flag(self, text):
        assert analyze_string(text).is_palindrome == analyze_string(text[::-1]).is_palindrome


class TestWordCount:
    """Word count over whitespace runs."""

    def test_empty_and_blank(self):
        assert count_words("") == 0
        assert count_words("   \t\n ") == 0

    def test_repeated_and_surrounding_whitespace(self):
        assert count_words("  hello   big\tworld \n") == 3


class TestAnalyzeString:
    """Full property computation."""

    def test_racecar(self):
        props = analyze_string("racecar")

        assert props.length == 7
        assert props.is_palindrome is True
        assert props.unique_characters == 4
        assert props.word_count == 1
        assert props.character_frequency_map == {"r": 2, "a": 2, "c": 2, "e": 1}

    def test_hash_matches_independent_digest(self):
        text = "héllo wörld"
        props = analyze_string(text)

        assert props.sha256_hash == hashlib.sha256(text.encode("utf-8")).hexdigest()
        assert props.length == len(text)

    def test_empty_string(self):
        props = analyze_string("")

        assert props.length == 0
        assert props.is_palindrome is True
        assert props.unique_characters == 0
        assert props.word_count == 0
        assert props.character_frequency_map == {}

    def test_idempotent(self):
        assert analyze_string("Hello, World") == analyze_string("Hello, World")

    def test_frequency_map_keeps_first_occurrence_order(self):
        assert list(get_character_frequency("banana")) == ["b", "a", "n"]

    def test_case_sensitive_characters(self):
        props = analyze_string("Aa")

        assert props.unique_characters == 2
        assert props.is_palindrome is True
