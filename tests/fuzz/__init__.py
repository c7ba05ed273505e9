"""Fuzz testing infrastructure for cursorlex.

This package contains:
- test_source_oracle: State machine comparing both Source backends with a
  list-backed reference cursor
- test_primitives_fuzz: High-volume atomicity checks for every primitive

Python 3.13+.
"""
