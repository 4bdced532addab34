"""
Confusable Word Rules v1.0.0
============================
there/their/they're, its/it's, your/you're and to/too/two.

Each rule reads the next (and sometimes second or previous) word and
either accepts the match (empty suggestion list) or proposes the likely
intended spelling. Words glued to a hyphen or apostrophe ("up-to-date",
"there's") are not matched at all.
"""

import re
from typing import List

from ..base import GrammarRule
from ..heuristics import is_likely_noun, is_verb_form, is_exception_ing
from ..lexicon import LexiconTables, get_lexicon

__version__ = "1.0.0"

# Not preceded by a hyphen/apostrophe, not followed by one
_WORD_START = r"(?<![-'’])\b"
_WORD_END = r"\b(?![-'’])"

_LEADING_PUNCT = re.compile(r'^[,.!?]')
_LEADING_DIGIT = re.compile(r'^\d')


def canonical(word: str) -> str:
    """Lowercase with typographic apostrophes folded to ASCII."""
    return word.lower().replace('’', "'")


class ThereTheirRule(GrammarRule):
    """Disambiguates there / their / they're."""

    RULE_ID = "THERE_THEIR"
    CATEGORY = "Confusable Words"
    MESSAGE = "Check usage of 'there', 'their', or 'they're'"
    PATTERN = _WORD_START + r"(?:there|their|they['’]re)" + _WORD_END
    HAS_CONTEXT_CHECK = True

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        lexicon = lexicon or get_lexicon()
        word = canonical(matched_text)
        ctx = self.context(text, index, len(matched_text))
        next_word = ctx.next_word

        if word == 'their':
            # "their car", "their booking"
            if is_likely_noun(next_word, lexicon) or is_exception_ing(next_word, lexicon):
                return []
            # "their is" -> "there is"
            if next_word in lexicon.copulas:
                return ['there']
            # "their going" -> "they're going"
            if is_verb_form(next_word, lexicon) or next_word in lexicon.their_verb_cues:
                return ["they're"]
            return ['there', "they're"]

        if word == 'there':
            if next_word in lexicon.copulas:
                return []
            # "there car" -> "their car"
            if is_likely_noun(next_word, lexicon):
                return ['their']
            return ['their', "they're"]

        if word == "they're":
            return self._theyre_suggestions(ctx, lexicon)

        return []

    def _theyre_suggestions(self, ctx, lexicon: LexiconTables) -> List[str]:
        next_word = ctx.next_word

        # An -ing word followed by a noun is a modifier: "they're booking process"
        if is_exception_ing(next_word, lexicon) or (
                is_verb_form(next_word, lexicon) and next_word.endswith('ing')):
            if ctx.second_word and is_likely_noun(ctx.second_word, lexicon):
                return ['their']
            if not ctx.second_word or _LEADING_PUNCT.match(ctx.after):
                return []

        # "they're going", "they're happy"
        if (is_verb_form(next_word, lexicon) and not is_exception_ing(next_word, lexicon)) \
                or next_word in lexicon.theyre_correct_next:
            return []
        if is_likely_noun(next_word, lexicon):
            return ['their']
        return ['there', 'their']


class ItsRule(GrammarRule):
    """Possessive its vs contraction it's."""

    RULE_ID = "ITS_ITS"
    CATEGORY = "Confusable Words"
    MESSAGE = "Check usage of 'its' (possessive) vs 'it's' (it is)"
    PATTERN = _WORD_START + r"(?:it['’]s|its)" + _WORD_END
    HAS_CONTEXT_CHECK = True

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        lexicon = lexicon or get_lexicon()
        word = canonical(matched_text)
        next_word = self.context(text, index, len(matched_text)).next_word

        if word == 'its':
            if is_likely_noun(next_word, lexicon):
                return []
            return ["it's"]

        if word == "it's":
            if is_verb_form(next_word, lexicon) or next_word in lexicon.its_correct_next:
                return []
            return ['its']

        return []


class YourRule(GrammarRule):
    """Possessive your vs contraction you're."""

    RULE_ID = "YOUR_YOURE"
    CATEGORY = "Confusable Words"
    MESSAGE = "Check usage of 'your' (possessive) vs 'you're' (you are)"
    PATTERN = _WORD_START + r"(?:your|you['’]re)" + _WORD_END
    HAS_CONTEXT_CHECK = True

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        lexicon = lexicon or get_lexicon()
        word = canonical(matched_text)
        next_word = self.context(text, index, len(matched_text)).next_word

        if word == 'your':
            if is_likely_noun(next_word, lexicon):
                return []
            return ["you're"]

        if word == "you're":
            if is_verb_form(next_word, lexicon) or next_word in lexicon.youre_correct_next:
                return []
            return ['your']

        return []


class ToTooTwoRule(GrammarRule):
    """Disambiguates to / too / two."""

    RULE_ID = "TO_TOO_TWO"
    CATEGORY = "Confusable Words"
    MESSAGE = "Check usage of 'to', 'too', or 'two'"
    PATTERN = _WORD_START + r"(?:to|too|two)" + _WORD_END
    HAS_CONTEXT_CHECK = True

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        lexicon = lexicon or get_lexicon()
        word = canonical(matched_text)
        ctx = self.context(text, index, len(matched_text))
        next_word = ctx.next_word

        if word == 'to':
            # Infinitive: "to go", "to work"
            if is_verb_form(next_word, lexicon) or next_word in lexicon.correct_to:
                return []
            # "to much" -> "too much"
            if _LEADING_DIGIT.match(next_word) or next_word in ('much', 'many'):
                return ['too']
            # Preposition: "to the store", "to Paris"
            if next_word in lexicon.to_prepositional_objects \
                    or is_likely_noun(_raw_next(ctx), lexicon):
                return []
            return ['too', 'two']

        if word == 'too':
            if next_word in lexicon.correct_too:
                return []
            # "me too." reads as "also"
            if not ctx.after or _LEADING_PUNCT.match(ctx.after):
                return []
            # "too go" -> "to go"
            if is_verb_form(next_word, lexicon):
                return ['to']
            return ['to', 'two']

        if word == 'two':
            if is_likely_noun(next_word, lexicon) or next_word in lexicon.large_numbers:
                return []
            if ctx.prev_word == 'to' or _LEADING_DIGIT.match(next_word):
                return []
            return ['to', 'too']

        return []


def _raw_next(ctx) -> str:
    """Next word with original casing, trailing punctuation stripped."""
    if not ctx.words_after:
        return ""
    return re.sub(r'[.,!?;:]+$', '', ctx.words_after[0])
