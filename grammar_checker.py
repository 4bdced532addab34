#!/usr/bin/env python3
"""
Grammar Rules Checker v1.0.0
============================
Runs the rule engine over document paragraphs and reports each finding
as a review issue.
"""

from typing import List, Optional

from base_checker import BaseChecker, ReviewIssue
from grammar.base import GrammarError
from grammar.engine import GrammarEngine, get_default_engine

__version__ = "1.0.0"


class GrammarRulesChecker(BaseChecker):
    """Confusable words, articles, mechanics and style phrases."""

    CHECKER_NAME = "Grammar"
    CHECKER_VERSION = "1.0.0"

    # Confusables and articles change meaning; the rest is advisory
    SEVERITY_BY_CATEGORY = {
        'Confusable Words': 'Medium',
        'Articles': 'Medium',
        'Contractions': 'Medium',
        'Capitalization': 'Medium',
        'Spacing': 'Low',
        'Punctuation': 'Low',
        'Style': 'Low',
    }

    def __init__(
        self,
        enabled: bool = True,
        engine: Optional[GrammarEngine] = None,
        context_chars: int = 30,
        skip_non_prose: bool = True
    ):
        super().__init__(enabled, skip_non_prose)
        self._engine = engine
        self.context_chars = context_chars

    @property
    def engine(self) -> GrammarEngine:
        return self._engine or get_default_engine()

    def check_paragraph(self, idx: int, text: str, **kwargs) -> List[ReviewIssue]:
        engine = self.engine
        categories = {rule.RULE_ID: rule.CATEGORY for rule in engine.rules}
        return [
            self._to_issue(error, idx, text, categories.get(error.rule_id, ''))
            for error in engine.check(text)
        ]

    def _to_issue(self, error: GrammarError, idx: int, text: str, category: str) -> ReviewIssue:
        if len(error.suggestions) == 1:
            replacement = error.suggestions[0]
            suggestion = f'Replace with: "{replacement}"' if replacement else 'Remove this phrase'
        else:
            replacement = ""
            suggestion = 'Consider: ' + ' or '.join(f'"{s}"' for s in error.suggestions)

        return self.make_issue(
            severity=self.SEVERITY_BY_CATEGORY.get(category, 'Low'),
            message=f'{error.message}: "{error.text}"',
            paragraph_index=idx,
            flagged_text=error.text,
            start_offset=error.start_index,
            end_offset=error.end_index,
            paragraph_text=text,
            context_chars=self.context_chars,
            rule_id=error.rule_id,
            suggestion=suggestion,
            replacement_text=replacement,
        )
