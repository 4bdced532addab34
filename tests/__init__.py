"""
Grammar Checker Test Suite
==========================
Run with: python -m pytest tests/ -v
"""
