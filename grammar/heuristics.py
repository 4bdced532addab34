"""
Word-Class Heuristics
=====================
Cheap word-class guesses built on the lexical tables.

These are closed-list and suffix checks, not a tagger. is_verb_form()
in particular accepts plenty of non-verbs ("bus", "red"); rules pair it
with is_exception_ing() and the noun table to keep false positives down.
Every predicate takes an optional LexiconTables so a scan can pin the
snapshot it started with.
"""

import re
from typing import Optional

from .lexicon import LexiconTables, get_lexicon

__version__ = "1.0.0"

_INTERNAL_MARKS = re.compile(r"['’:]")


def is_likely_noun(word: str, lexicon: Optional[LexiconTables] = None) -> bool:
    """
    Guess whether word is a noun.

    True when the word (or the word minus one trailing "s") is in the
    noun table, or when the original word is capitalized.
    """
    if not word:
        return False
    lexicon = lexicon or get_lexicon()

    stripped = _INTERNAL_MARKS.sub('', word)
    if not stripped:
        return False

    lowered = stripped.lower()
    singular = lowered[:-1] if lowered.endswith('s') else lowered

    if lowered in lexicon.nouns or (singular and singular in lexicon.nouns):
        return True
    return word[0].isupper()


def is_verb_form(word: str, lexicon: Optional[LexiconTables] = None) -> bool:
    """True if word ends in one of the verb suffixes (ing, ed, es, s)."""
    if not word:
        return False
    lexicon = lexicon or get_lexicon()
    lowered = word.lower()
    return any(lowered.endswith(suffix) for suffix in lexicon.verb_suffixes)


def is_exception_ing(word: str, lexicon: Optional[LexiconTables] = None) -> bool:
    """True for -ing words that are ordinarily nouns (booking, meeting)."""
    if not word:
        return False
    lexicon = lexicon or get_lexicon()
    return word.lower() in lexicon.ing_exceptions


def is_an_a_exception(word: str, lexicon: Optional[LexiconTables] = None) -> bool:
    """True for words that take "an" despite their first letter (hour, honest)."""
    if not word:
        return False
    lexicon = lexicon or get_lexicon()
    return word.lower() in lexicon.an_exceptions
