"""
Test suite for bufnum

Contains:
- tests/unit/          : Unit tests for engines, encodings, value type and contracts
"""
