"""
Test suite for maclaurin

Contains:
- tests/unit/          : Unit tests for individual modules
"""
