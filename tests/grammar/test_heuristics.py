"""
Tests for Word-Class Heuristics
===============================
"""

import pytest

from grammar.heuristics import is_likely_noun, is_verb_form, is_exception_ing, is_an_a_exception
from grammar.lexicon import LexiconTables


class TestIsLikelyNoun:
    """Tests for is_likely_noun()."""

    @pytest.mark.parametrize("word", ["car", "house", "process", "color"])
    def test_table_nouns(self, word):
        assert is_likely_noun(word) is True

    def test_naive_plural(self):
        assert is_likely_noun("cars") is True
        assert is_likely_noun("friends") is True

    def test_capitalized_word_is_proper_noun(self):
        assert is_likely_noun("Paris") is True

    def test_non_nouns(self):
        assert is_likely_noun("quickly") is False
        assert is_likely_noun("going") is False

    def test_internal_marks_are_stripped(self):
        assert is_likely_noun("car's") is True

    @pytest.mark.parametrize("word", ["", "'", ":", "’"])
    def test_empty_after_stripping(self, word):
        assert is_likely_noun(word) is False

    def test_explicit_lexicon(self):
        tables = LexiconTables.defaults().merged(nouns=["gizmo"])
        assert is_likely_noun("gizmo", tables) is True
        assert is_likely_noun("gizmo") is False


class TestIsVerbForm:

    @pytest.mark.parametrize("word", ["running", "jumped", "goes", "runs", "Walking"])
    def test_suffix_matches(self, word):
        assert is_verb_form(word) is True

    @pytest.mark.parametrize("word", ["go", "work", "happy", ""])
    def test_no_suffix(self, word):
        assert is_verb_form(word) is False

    def test_coarse_by_design(self):
        # Suffix matching accepts plenty of non-verbs
        assert is_verb_form("bus") is True


class TestExceptionLists:

    def test_ing_nouns(self):
        assert is_exception_ing("booking") is True
        assert is_exception_ing("Meeting") is True
        assert is_exception_ing("running") is False
        assert is_exception_ing("") is False

    def test_silent_h_words(self):
        assert is_an_a_exception("hour") is True
        assert is_an_a_exception("Honest") is True
        assert is_an_a_exception("house") is False
        assert is_an_a_exception("") is False
