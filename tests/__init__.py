"""
Test suite for decimatrix

Contains:
- tests/unit/          : Unit tests for individual modules
"""
