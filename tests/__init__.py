"""
Test suite for valuekit

Contains:
- tests/unit/          : Unit tests for domain models, transforms and contracts
"""
