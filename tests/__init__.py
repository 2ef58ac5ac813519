"""
Test suite for uint128-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
