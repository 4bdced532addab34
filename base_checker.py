#!/usr/bin/env python3
"""
Base Checker Contract v3.0.0
============================
Interface shared by paragraph-level document checkers.

A checker is fed (paragraph_index, text) tuples, skips paragraphs that
are not prose, and reports review issues as plain dicts. Issues carry
the character offsets of the flagged text inside its paragraph so a
front end can highlight it without searching again.
"""

import re
from typing import List, Dict, Any, Tuple, Optional
from dataclasses import dataclass

__version__ = "3.0.0"

SEVERITIES = ('High', 'Medium', 'Low', 'Info')


@dataclass
class ReviewIssue:
    """One finding inside one paragraph."""
    category: str
    severity: str
    message: str
    paragraph_index: int = 0
    rule_id: str = ""
    flagged_text: str = ""
    start_offset: int = -1   # -1 = position unknown
    end_offset: int = -1     # exclusive
    context: str = ""
    suggestion: str = ""
    replacement_text: str = ""

    @property
    def has_position(self) -> bool:
        return 0 <= self.start_offset < self.end_offset

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'category': self.category,
            'severity': self.severity,
            'message': self.message,
            'paragraph_index': self.paragraph_index,
            'rule_id': self.rule_id,
            'context': self.context,
            'suggestion': self.suggestion,
            'original_text': self.flagged_text,
            'replacement_text': self.replacement_text,
            'flagged_text': self.flagged_text or self.context,
        }
        if self.has_position:
            data['source'] = {
                'paragraph_index': self.paragraph_index,
                'start_offset': self.start_offset,
                'end_offset': self.end_offset,
                'original_text': self.flagged_text,
            }
        return data


class BaseChecker:
    """
    Template for paragraph checkers.

    Subclasses set CHECKER_NAME / CHECKER_VERSION and implement
    check_paragraph(). check() handles enablement and non-prose
    filtering; safe_check() additionally turns failures into entries in
    get_errors() instead of exceptions.
    """

    CHECKER_NAME = "Base"
    CHECKER_VERSION = "1.0.0"

    # Paragraphs matching any of these are not prose
    NON_PROSE_PATTERNS = (
        r'^\s*(Copyright|\(c\)|©)\s*\d{4}',
        r'^\s*All rights reserved\.?\s*$',
        r'^\s*Page\s+\d+(\s+(of|/)\s+\d+)?\s*$',
        r'^\s*(https?://|www\.)\S+\s*$',
        r'^\s*[\d\s.,:%$()+\-/]+$',        # numbers, table cells
        r'^\s*(```|~~~)',                   # fenced code
    )

    def __init__(self, enabled: bool = True, skip_non_prose: bool = True):
        self.enabled = enabled
        self.skip_non_prose = skip_non_prose
        self._errors: List[str] = []
        self._non_prose = [re.compile(p, re.IGNORECASE) for p in self.NON_PROSE_PATTERNS]

    def is_prose(self, text: str) -> bool:
        if not text or not text.strip():
            return False
        return not any(p.search(text) for p in self._non_prose)

    def check(self, paragraphs: List[Tuple[int, str]], **kwargs) -> List[Dict[str, Any]]:
        """
        Check every prose paragraph.

        Args:
            paragraphs: (index, text) tuples in document order

        Returns:
            Issue dicts in paragraph order
        """
        if not self.enabled or not paragraphs:
            return []

        issues: List[Dict[str, Any]] = []
        for idx, text in paragraphs:
            if self.skip_non_prose and not self.is_prose(text):
                continue
            issues.extend(issue.to_dict() for issue in self.check_paragraph(idx, text, **kwargs))
        return issues

    def check_paragraph(self, idx: int, text: str, **kwargs) -> List[ReviewIssue]:
        raise NotImplementedError(f"{type(self).__name__} must implement check_paragraph()")

    def safe_check(self, *args, **kwargs) -> List[Dict[str, Any]]:
        """check() that records failures instead of raising."""
        try:
            return self.check(*args, **kwargs)
        except Exception as e:
            self._errors.append(f"{self.CHECKER_NAME} error: {e}")
            return []

    def make_issue(
        self,
        severity: str,
        message: str,
        paragraph_index: int,
        flagged_text: str = "",
        start_offset: int = -1,
        end_offset: int = -1,
        paragraph_text: Optional[str] = None,
        context_chars: int = 30,
        **kwargs
    ) -> ReviewIssue:
        """
        Build a ReviewIssue for this checker.

        When paragraph_text and offsets are given, context is cut from the
        paragraph around the flagged span. Extra keyword arguments
        (rule_id, suggestion, replacement_text, context) are passed
        through.
        """
        if severity not in SEVERITIES:
            severity = 'Info'

        if paragraph_text is not None and 0 <= start_offset < end_offset and 'context' not in kwargs:
            ctx_start = max(0, start_offset - context_chars)
            ctx_end = min(len(paragraph_text), end_offset + context_chars)
            kwargs['context'] = paragraph_text[ctx_start:ctx_end]

        return ReviewIssue(
            category=self.CHECKER_NAME,
            severity=severity,
            message=message,
            paragraph_index=paragraph_index,
            flagged_text=flagged_text,
            start_offset=start_offset,
            end_offset=end_offset,
            **kwargs
        )

    def clear_errors(self):
        self._errors = []

    def get_errors(self) -> List[str]:
        return list(self._errors)
