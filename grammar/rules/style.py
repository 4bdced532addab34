"""
Style Rules
===========
Phrase-table rules for compound modifiers and wordy phrases. Both build
their pattern from the lexicon keys, so phrases added through
update_lexicon() are matched on the next check.
"""

from ..base import PhraseMapRule

__version__ = "1.0.0"


class HyphenationRule(PhraseMapRule):
    """'state of the art' -> 'state-of-the-art'."""

    RULE_ID = "HYPHENATION"
    CATEGORY = "Style"
    MESSAGE = "Compound modifier should be hyphenated"
    TABLE = "hyphens"


class ConcisenessRule(PhraseMapRule):
    """'due to the fact that' -> 'because'. An empty replacement means delete."""

    RULE_ID = "CONCISENESS"
    CATEGORY = "Style"
    MESSAGE = "Wordy phrase; consider a more concise alternative"
    TABLE = "concise"
