"""
Test suite for physdes

Contains:
- tests/unit/          : Unit tests for individual modules
"""
