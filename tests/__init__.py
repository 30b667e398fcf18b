"""
Test suite for number_interpolation

Contains:
- tests/unit/          : Unit tests for individual modules
"""
