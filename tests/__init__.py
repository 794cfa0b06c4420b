"""
Test suite for share-recover

Contains:
- tests/unit/          : Unit tests for arithmetic, interpolation, models, contracts and CLI
"""
