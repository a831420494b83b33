"""
Test suite for decmath

Contains:
- tests/unit/          : Unit tests for kernels, dispatch functions and helpers
"""
