"""pytest-benchmark configuration for cursorlex benchmarks.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add cursorlex metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "cursorlex"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def token_line() -> str:
    """One line of mixed tokens, repeated to build larger inputs."""
    return 'word "quoted text" -42 3.25 (a b c) ! '
