"""
Scan & Merge Engine v1.0.0
==========================
Runs every rule over the full text, turns accepted matches into
GrammarError records, then sorts them and drops overlaps.

Overlap policy is greedy leftmost-first: after sorting by start offset
an error is kept only if it starts at or after the end of the last kept
error. A later-starting overlap is discarded outright, never merged.

Usage:
    from grammar.engine import check_grammar

    for error in check_grammar("Their going to the store."):
        print(error.text, error.suggestions)   # Their ["they're"]
"""

import time
import threading
from typing import List, Optional, Sequence

from config_logging import get_logger
from . import config as grammar_config
from .base import GrammarError, GrammarRule
from .lexicon import LexiconTables, get_lexicon
from .rules import build_default_rules

__version__ = "1.0.0"

logger = get_logger('grammar.engine')


class GrammarEngine:
    """
    Applies an ordered rule set to text.

    Stateless between calls: error ids restart at error-0 on every
    check() and the lexicon snapshot is taken per call.
    """

    def __init__(
        self,
        rules: Optional[Sequence[GrammarRule]] = None,
        lexicon: Optional[LexiconTables] = None
    ):
        """
        Args:
            rules: Rules to run in order; the stock set when omitted
            lexicon: Fixed tables; the current global tables when omitted
        """
        self.rules: List[GrammarRule] = list(rules) if rules is not None else build_default_rules()
        self._lexicon = lexicon

    def check(self, text) -> List[GrammarError]:
        """
        Check text and return non-overlapping errors ordered by position.

        Non-string or empty input returns an empty list.
        """
        if not isinstance(text, str) or not text:
            return []

        start_time = time.time()
        lexicon = self._lexicon or get_lexicon()

        errors: List[GrammarError] = []
        for rule in self.rules:
            self._scan_rule(rule, text, lexicon, errors)

        # list.sort is stable, so ties keep discovery (rule) order
        errors.sort(key=lambda e: e.start_index)
        accepted = resolve_overlaps(errors)

        logger.debug(
            "Grammar check completed",
            rule_count=len(self.rules),
            raw_matches=len(errors),
            accepted=len(accepted),
            text_length=len(text),
            duration_ms=round((time.time() - start_time) * 1000, 2),
        )
        return accepted

    def _scan_rule(
        self,
        rule: GrammarRule,
        text: str,
        lexicon: LexiconTables,
        errors: List[GrammarError]
    ):
        """Collect every accepted match of one rule into errors."""
        pattern = rule.build_pattern(lexicon)
        position = 0

        while position <= len(text):
            match = pattern.search(text, position)
            if match is None:
                break

            start, end = match.span()
            # Zero-length matches must still advance the cursor
            position = end if end > start else end + 1
            if end == start:
                continue

            try:
                if rule.HAS_CONTEXT_CHECK and not rule.context_check(match, text, start, lexicon):
                    continue
                suggestions = rule.get_suggestions(match.group(0), match, text, start, lexicon)
            except Exception as e:
                # One bad match must not abort the whole check
                logger.exception(f"Rule {rule.RULE_ID} failed at offset {start}: {e}",
                                 rule_id=rule.RULE_ID, offset=start)
                continue

            if isinstance(suggestions, str):
                suggestions = [suggestions]
            if not suggestions:
                continue

            errors.append(GrammarError(
                id=f"error-{len(errors)}",
                start_index=start,
                end_index=end,
                text=match.group(0),
                suggestions=tuple(suggestions),
                message=rule.message,
                rule_id=rule.RULE_ID,
            ))

    def describe_rules(self) -> List[dict]:
        return [rule.describe() for rule in self.rules]


def resolve_overlaps(errors: Sequence[GrammarError]) -> List[GrammarError]:
    """
    Greedy leftmost-first selection over errors sorted by start_index.
    """
    accepted = []
    last_end = -1
    for error in errors:
        if error.start_index >= last_end:
            accepted.append(error)
            last_end = error.end_index
    return accepted


# =============================================================================
# DEFAULT ENGINE
# =============================================================================

_default_engine: Optional[GrammarEngine] = None
_default_key = None
_engine_lock = threading.Lock()


def get_default_engine() -> GrammarEngine:
    """
    The engine behind check_grammar(), rebuilt when the configured
    context window or disabled rules change.
    """
    global _default_engine, _default_key
    engine_config = grammar_config.get_config().engine
    key = (engine_config.context_window, tuple(sorted(engine_config.disabled_rules)))

    with _engine_lock:
        if _default_engine is None or key != _default_key:
            _default_engine = GrammarEngine(
                rules=build_default_rules(engine_config.context_window,
                                          engine_config.disabled_rules)
            )
            _default_key = key
        return _default_engine


def check_grammar(text) -> List[GrammarError]:
    """Check text with the stock rules and the current lexicon."""
    return get_default_engine().check(text)
