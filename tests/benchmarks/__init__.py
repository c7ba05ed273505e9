"""Performance benchmarks for cursorlex.

Benchmarks use pytest-benchmark to track the throughput of the primitives
over both Source backends.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
