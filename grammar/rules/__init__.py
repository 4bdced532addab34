"""
Grammar Rule Set
================
The stock rules in scan order. Order matters only for ties: when two
rules flag the same start offset, the one listed first survives the
overlap pass.
"""

from typing import List, Optional, Iterable

from ..base import GrammarRule
from ..context import DEFAULT_WINDOW
from .confusables import ThereTheirRule, ItsRule, YourRule, ToTooTwoRule
from .articles import ArticleRule
from .mechanics import (
    DoubleSpaceRule,
    SentenceCapitalizationRule,
    MultiplePeriodsRule,
    MissingApostropheRule,
)
from .style import HyphenationRule, ConcisenessRule

__version__ = "1.0.0"

RULE_CLASSES = (
    ThereTheirRule,
    ItsRule,
    YourRule,
    ToTooTwoRule,
    ArticleRule,
    DoubleSpaceRule,
    SentenceCapitalizationRule,
    MultiplePeriodsRule,
    MissingApostropheRule,
    HyphenationRule,
    ConcisenessRule,
)


def build_default_rules(
    context_window: int = DEFAULT_WINDOW,
    disabled: Optional[Iterable[str]] = None
) -> List[GrammarRule]:
    """
    Instantiate the stock rule set.

    Args:
        context_window: Characters of context each rule looks at
        disabled: Rule ids to leave out
    """
    disabled = frozenset(disabled or ())
    return [cls(context_window) for cls in RULE_CLASSES if cls.RULE_ID not in disabled]


def get_rule_ids() -> List[str]:
    return [cls.RULE_ID for cls in RULE_CLASSES]


__all__ = [
    'RULE_CLASSES',
    'build_default_rules',
    'get_rule_ids',
    'ThereTheirRule',
    'ItsRule',
    'YourRule',
    'ToTooTwoRule',
    'ArticleRule',
    'DoubleSpaceRule',
    'SentenceCapitalizationRule',
    'MultiplePeriodsRule',
    'MissingApostropheRule',
    'HyphenationRule',
    'ConcisenessRule',
]
