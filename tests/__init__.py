"""
Test suite for lazy-product

Contains:
- tests/unit/          : Unit tests for individual modules
"""
