"""Shared fixtures for the grammar tests."""

import pytest

from grammar import config as grammar_config
from grammar.engine import GrammarEngine
from grammar.lexicon import reset_lexicon


@pytest.fixture(autouse=True)
def clean_state():
    """Every test starts from default configuration and stock tables."""
    grammar_config.reset_config()
    reset_lexicon()
    yield
    grammar_config.reset_config()
    reset_lexicon()


@pytest.fixture
def run_rule():
    """Run a single rule through the engine and return its errors."""
    def _run(rule, text):
        return GrammarEngine(rules=[rule]).check(text)
    return _run
