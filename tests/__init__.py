"""
Test suite for digit-sum

Contains:
- tests/unit/          : Unit tests for arithmetic, contracts and the harness
"""
