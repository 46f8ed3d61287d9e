"""
Test suite for core_numeric

Contains:
- tests/unit/          : Unit tests for capabilities, conversion helpers and reductions
"""
