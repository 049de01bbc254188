"""
Test suite for numsym

Contains:
- tests/unit/          : Unit tests for individual modules
"""
