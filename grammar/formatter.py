"""
Error Application Helpers
=========================
Plain-text consumers of the error list.

Spans are applied back-to-front so the offsets of earlier errors stay
valid while later text is rewritten.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Sequence

from .base import GrammarError
from .engine import check_grammar

__version__ = "1.0.0"

# Rules whose suggestion replaces only the last character of the span
TAIL_REPLACEMENT_RULES = frozenset({"SENTENCE_CAPITAL"})


@dataclass
class CheckResult:
    """Errors found in a text plus the text with first suggestions applied."""
    errors: List[GrammarError] = field(default_factory=list)
    corrected: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'errors': [e.to_dict() for e in self.errors],
            'corrected': self.corrected,
        }


def apply_suggestions(text: str, errors: Sequence[GrammarError]) -> str:
    """
    Replace each error span with its first suggestion.

    Errors must not overlap (check_grammar output never does). Spans whose
    text no longer matches are left untouched.
    """
    if not text:
        return text or ""

    result = text
    for error in sorted(errors, key=lambda e: e.start_index, reverse=True):
        if not error.suggestions:
            continue
        if result[error.start_index:error.end_index] != error.text:
            continue
        start = error.start_index
        if error.rule_id in TAIL_REPLACEMENT_RULES:
            start = error.end_index - 1
        result = result[:start] + error.suggestions[0] + result[error.end_index:]
    return result


def check_and_apply(text) -> CheckResult:
    """Check text and return the errors with the auto-corrected text."""
    errors = check_grammar(text)
    corrected = apply_suggestions(text, errors) if isinstance(text, str) else ""
    return CheckResult(errors=errors, corrected=corrected)
