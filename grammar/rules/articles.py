"""
Indefinite Article Rule
=======================
Picks "a" or "an" from the first letter of the following word, with the
silent-h exception list ("an hour", "an honest").
"""

from typing import List

from ..base import GrammarRule
from ..heuristics import is_an_a_exception
from ..lexicon import get_lexicon

__version__ = "1.0.0"

VOWELS = frozenset('aeiou')


class ArticleRule(GrammarRule):
    """a/an agreement with the next word."""

    RULE_ID = "A_AN"
    CATEGORY = "Articles"
    MESSAGE = "Use 'an' before vowel sounds and 'a' before consonant sounds"
    # "a.m.", "a-ha" and "a'" are not articles
    PATTERN = r"(?<![-'’.])\b(?:an|a)\b(?![-'’.])"
    HAS_CONTEXT_CHECK = True

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        lexicon = lexicon or get_lexicon()
        next_word = self.context(text, index, len(matched_text)).next_word

        # Nothing to agree with, or a number/symbol/compound we cannot sound out
        if not next_word or not next_word[0].isalpha() or '-' in next_word:
            return []

        takes_an = next_word[0] in VOWELS or is_an_a_exception(next_word, lexicon)
        article = matched_text.lower()

        if article == 'an' and not takes_an:
            return [_match_case('a', matched_text)]
        if article == 'a' and takes_an:
            return [_match_case('an', matched_text)]
        return []


def _match_case(replacement: str, original: str) -> str:
    """Carry the capitalization of the original article over."""
    if original[:1].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement
