"""
Mechanics Rules
===============
Spacing, capitalization, punctuation and apostrophe rules. These need
no context: the match alone decides the suggestion.
"""

from typing import List

from ..base import GrammarRule, PhraseMapRule

__version__ = "1.0.0"


class DoubleSpaceRule(GrammarRule):
    """Two or more consecutive spaces."""

    RULE_ID = "DOUBLE_SPACE"
    CATEGORY = "Spacing"
    MESSAGE = "Multiple consecutive spaces detected"
    PATTERN = r' {2,}'
    FLAGS = 0

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        return [' ']


class SentenceCapitalizationRule(GrammarRule):
    """
    Lowercase letter starting a sentence after a period.

    The flagged span is the period, the whitespace and the letter; the
    suggestion is only the capitalized letter.
    """

    RULE_ID = "SENTENCE_CAPITAL"
    CATEGORY = "Capitalization"
    MESSAGE = "Sentence should start with capital letter after period"
    PATTERN = r'\.\s+([a-z])'
    FLAGS = 0

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        return [match.group(1).upper()]


class MultiplePeriodsRule(GrammarRule):
    """Runs of periods that should be an ellipsis."""

    RULE_ID = "MULTIPLE_PERIODS"
    CATEGORY = "Punctuation"
    MESSAGE = "Use ellipsis (...) instead of multiple periods"
    PATTERN = r'\.{3,}'
    FLAGS = 0

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        return ['...']


class MissingApostropheRule(PhraseMapRule):
    """dont -> don't and the rest of the contraction table."""

    RULE_ID = "MISSING_APOSTROPHE"
    CATEGORY = "Contractions"
    MESSAGE = "Missing apostrophe in contraction"
    TABLE = "contractions"
