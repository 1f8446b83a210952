"""
Test suite for simplicial_chains

Contains:
- tests/unit/          : Unit tests for individual modules
"""
