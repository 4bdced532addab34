"""
Grammar Tests Package
=====================
Test suite for the rule engine, lexicon, configuration and CLI.

Run all tests: python3 -m pytest tests/grammar/ -v
Run specific: python3 -m pytest tests/grammar/test_engine.py -v
"""

__version__ = "1.0.0"
