"""
Rule-Based Grammar & Style Engine
=================================
Version: 1.2.0

Flags common confusable-word and style mistakes in English text:
- there / their / they're, its / it's, your / you're, to / too / two
- a / an agreement
- repeated spaces, lowercase sentence starts, runs of periods
- contractions missing an apostrophe
- compound modifiers that want hyphens, and wordy phrases

Pure string-in, errors-out: no document model, no I/O in the core.

Usage:
    from grammar import check_grammar

    errors = check_grammar("I like there car.")
    errors[0].suggestions  # ['their']
"""

from .base import GrammarError, GrammarRule, PhraseMapRule
from .context import Context, get_context, get_sentence
from .heuristics import is_likely_noun, is_verb_form, is_exception_ing, is_an_a_exception
from .lexicon import (
    LexiconTables,
    get_lexicon,
    update_lexicon,
    load_lexicon_file,
    reset_lexicon,
)
from .engine import GrammarEngine, check_grammar, get_default_engine, resolve_overlaps
from .formatter import CheckResult, apply_suggestions, check_and_apply

__version__ = "1.2.0"

__all__ = [
    'GrammarError',
    'GrammarRule',
    'PhraseMapRule',
    'Context',
    'get_context',
    'get_sentence',
    'is_likely_noun',
    'is_verb_form',
    'is_exception_ing',
    'is_an_a_exception',
    'LexiconTables',
    'get_lexicon',
    'update_lexicon',
    'load_lexicon_file',
    'reset_lexicon',
    'GrammarEngine',
    'check_grammar',
    'get_default_engine',
    'resolve_overlaps',
    'CheckResult',
    'apply_suggestions',
    'check_and_apply',
    'get_status',
]


def get_status() -> dict:
    """Engine version, active rules and table sizes."""
    from . import config
    engine = get_default_engine()
    lexicon = get_lexicon()
    return {
        'version': __version__,
        'rules': [rule.RULE_ID for rule in engine.rules],
        'disabled_rules': list(config.get_config().engine.disabled_rules),
        'context_window': config.get_config().engine.context_window,
        'lexicon': {name: len(getattr(lexicon, name)) for name in lexicon.table_names()},
    }
