"""
Test suite for ndvector

Contains:
- tests/unit/          : Unit tests per layer (construction, mutation,
                         binary operations, derived metrics, tolerance, errors)
"""
