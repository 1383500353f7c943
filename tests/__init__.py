"""
Test suite for geez-numerals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
