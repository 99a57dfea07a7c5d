"""
Test suite for constant-term reconstruction

Contains:
- tests/unit/          : Unit tests for individual modules
"""
