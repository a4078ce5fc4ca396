"""
Test suite for stark-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
