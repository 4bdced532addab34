"""
Context Extractor v1.0.0
========================
Surrounding-word context for a regex match.

Rules call get_context() to look at the words around a confusable word:

    ctx = get_context("Their going home.", 0, 5)
    ctx.next_word    # 'going'
    ctx.second_word  # 'home'

Sentence boundaries come from a plain scan for . ! ? in each direction.
There is no abbreviation or quotation awareness, so "Dr. Smith" splits
into two sentences. No shipped rule reads Context.sentence.
"""

import re
from dataclasses import dataclass, field
from typing import List, Dict, Any

__version__ = "1.0.0"

DEFAULT_WINDOW = 50
SENTENCE_ENDERS = frozenset('.!?')

_TRAILING_PUNCT = re.compile(r'[.,!?;:]+$')
_WHITESPACE = re.compile(r'\s+')


@dataclass
class Context:
    """Normalized neighborhood of a match."""
    before: str = ""
    after: str = ""
    sentence: str = ""
    next_word: str = ""
    second_word: str = ""
    prev_word: str = ""
    words_before: List[str] = field(default_factory=list)
    words_after: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'before': self.before,
            'after': self.after,
            'sentence': self.sentence,
            'nextWord': self.next_word,
            'secondWord': self.second_word,
            'prevWord': self.prev_word,
        }


def normalize_word(word: str) -> str:
    """Lowercase and strip trailing punctuation."""
    if not word:
        return ""
    return _TRAILING_PUNCT.sub('', word.lower())


def split_words(text: str) -> List[str]:
    """Split on whitespace runs, dropping empty tokens."""
    return [w for w in _WHITESPACE.split(text) if w]


def get_sentence(text: str, index: int) -> str:
    """
    Extract the sentence containing the character at index.

    The sentence starts after the nearest ender strictly before index
    (or at 0) and runs through the nearest ender at or after index
    (or to the end of text).
    """
    start = 0
    end = len(text)

    for i in range(min(index, len(text)) - 1, -1, -1):
        if text[i] in SENTENCE_ENDERS:
            start = i + 1
            break

    for i in range(max(index, 0), len(text)):
        if text[i] in SENTENCE_ENDERS:
            end = i + 1
            break

    return text[start:end].strip()


def get_context(text: str, index: int, length: int, window: int = DEFAULT_WINDOW) -> Context:
    """
    Build the Context for a match of the given length starting at index.

    Args:
        text: Full text being scanned
        index: Match start offset
        length: Match length in characters
        window: Characters of raw context on each side

    Returns:
        Context with before/after snippets and normalized neighbor words
    """
    match_end = index + length
    before = text[max(0, index - window):index].strip()
    after = text[match_end:min(len(text), match_end + window)].strip()

    words_before = split_words(before)
    words_after = split_words(after)

    return Context(
        before=before,
        after=after,
        sentence=get_sentence(text, index),
        next_word=normalize_word(words_after[0]) if words_after else "",
        second_word=normalize_word(words_after[1]) if len(words_after) > 1 else "",
        prev_word=normalize_word(words_before[-1]) if words_before else "",
        words_before=words_before,
        words_after=words_after,
    )
