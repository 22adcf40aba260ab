"""
Test suite for helper-foundry

Contains:
- tests/unit/          : Unit tests for individual modules
"""
