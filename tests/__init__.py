"""
Test suite for numerals

Contains:
- tests/unit/          : Unit tests for individual modules
"""
