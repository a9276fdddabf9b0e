"""
Core engines, value type, and collaborator contracts.

This package is independent of any external system: every operation is a
deterministic, synchronous function of its inputs.
"""
