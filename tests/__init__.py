"""
Test suite for ratalg

Contains:
- tests/unit/          : Unit tests for domain models, operation families and the engine
"""
