"""
Test suite for num2english

Contains:
- tests/unit/          : Unit tests for individual modules
"""
