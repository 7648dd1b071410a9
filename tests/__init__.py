"""
Test suite for the energy compliance engine

Contains:
- tests/unit/          : Unit tests for calculators, rules, contracts and adapters
"""
