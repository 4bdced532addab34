"""
Grammar Engine Base Classes
===========================
The error record produced by a check and the contract every rule
implements.

A rule is a regex plus a suggestion function. Returning an empty list
from get_suggestions() means "this match is correct usage", which is how
most matches end.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Dict, Any, Optional, Pattern, Tuple

from .context import Context, get_context, DEFAULT_WINDOW
from .lexicon import LexiconTables, get_lexicon

__version__ = "1.0.0"


@dataclass(frozen=True)
class GrammarError:
    """
    A flagged span of text with its proposed replacements.

    end_index is exclusive. Created once per check call and owned by the
    caller afterwards. suggestions is stored as a tuple so errors hash.
    """
    id: str
    start_index: int
    end_index: int
    text: str
    suggestions: Tuple[str, ...] = ()
    message: str = ""
    rule_id: str = ""

    def __post_init__(self):
        suggestions = self.suggestions
        if isinstance(suggestions, str):
            suggestions = (suggestions,)
        object.__setattr__(self, 'suggestions', tuple(suggestions))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON wire shape."""
        return {
            'id': self.id,
            'startIndex': self.start_index,
            'endIndex': self.end_index,
            'text': self.text,
            'suggestions': list(self.suggestions),
            'message': self.message,
            'ruleId': self.rule_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GrammarError':
        return cls(
            id=str(data.get('id', '')),
            start_index=int(data.get('startIndex', data.get('start_index', 0))),
            end_index=int(data.get('endIndex', data.get('end_index', 0))),
            text=data.get('text', ''),
            suggestions=tuple(data.get('suggestions', ())),
            message=data.get('message', ''),
            rule_id=data.get('ruleId', data.get('rule_id', '')),
        )


class GrammarRule(ABC):
    """
    Abstract base class for matching rules.

    Subclasses set RULE_ID, CATEGORY, MESSAGE and PATTERN and implement
    get_suggestions(). Rules whose pattern depends on lexicon contents
    override build_pattern().
    """

    RULE_ID: str = "RULE"
    CATEGORY: str = "Grammar"
    MESSAGE: str = ""
    PATTERN: str = ""
    FLAGS: int = re.IGNORECASE
    HAS_CONTEXT_CHECK: bool = False

    def __init__(self, context_window: int = DEFAULT_WINDOW):
        self.context_window = context_window
        self._compiled: Optional[Pattern] = None

    @property
    def message(self) -> str:
        return self.MESSAGE

    def build_pattern(self, lexicon: LexiconTables) -> Pattern:
        """Compile the rule's pattern (cached for static patterns)."""
        if self._compiled is None:
            self._compiled = re.compile(self.PATTERN, self.FLAGS)
        return self._compiled

    def context(self, text: str, index: int, length: int) -> Context:
        return get_context(text, index, length, self.context_window)

    @abstractmethod
    def get_suggestions(
        self,
        matched_text: str,
        match: 're.Match',
        text: str,
        index: int,
        lexicon: Optional[LexiconTables] = None
    ) -> List[str]:
        """
        Propose replacements for one match.

        Args:
            matched_text: The exact matched substring
            match: The raw regex match
            text: Full text being scanned
            index: Match start offset
            lexicon: Table snapshot for this scan

        Returns:
            Ordered suggestions; empty when the match is correct usage
        """

    def context_check(
        self,
        match: 're.Match',
        text: str,
        index: int,
        lexicon: Optional[LexiconTables] = None
    ) -> bool:
        """Confirm a match is worth reporting. Defaults to asking get_suggestions()."""
        return bool(self.get_suggestions(match.group(0), match, text, index, lexicon))

    def describe(self) -> Dict[str, Any]:
        """Rule metadata for listings."""
        return {
            'rule_id': self.RULE_ID,
            'category': self.CATEGORY,
            'message': self.message,
        }


class PhraseMapRule(GrammarRule):
    """
    Rule whose pattern is the alternation of a lexicon mapping's keys.

    The suggestion is the mapped value, or the matched text unchanged when
    the phrase is somehow missing from the table.
    """

    TABLE: str = ""

    def __init__(self, context_window: int = DEFAULT_WINDOW):
        super().__init__(context_window)
        # (phrase key, compiled pattern), swapped as one object
        self._cached = None

    def _phrases(self, lexicon: LexiconTables):
        return getattr(lexicon, self.TABLE)

    def build_pattern(self, lexicon: LexiconTables) -> Pattern:
        phrases = self._phrases(lexicon)
        key = tuple(sorted(phrases))
        cached = self._cached
        if cached is not None and cached[0] == key:
            return cached[1]

        # Longest phrases first so "in the case of" beats a shorter prefix
        ordered = sorted(phrases, key=len, reverse=True)
        alternation = '|'.join(
            r'\s+'.join(re.escape(part) for part in phrase.split())
            for phrase in ordered
        ) or r'(?!)'
        compiled = re.compile(r'\b(?:' + alternation + r')\b', self.FLAGS)
        self._cached = (key, compiled)
        return compiled

    def get_suggestions(self, matched_text, match, text, index, lexicon=None) -> List[str]:
        lexicon = lexicon or get_lexicon()
        phrase = ' '.join(matched_text.lower().split())
        return [self._phrases(lexicon).get(phrase, matched_text)]
