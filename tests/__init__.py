"""
Test suite for geomath-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
