"""
Pytest configuration and fixtures for the grunge test suite.

Shared fixtures, marker registration and helpers used across the suite.
"""
import os
import sys

import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in (
        "unit: fast, isolated tests",
        "integration: tests combining several components",
        "importtest: import smoke tests",
        "slow: tests that sample many points",
    ):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Mark import tests for easy selection."""
    for item in items:
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def sample_points():
    """A spread of coordinates covering negative, fractional and lattice values."""
    points = [(i * 0.37 - 3.0, j * 0.53 - 2.0) for i in range(20) for j in range(10)]
    points += [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (-1.0, -1.0), (123.456, -987.654)]
    return points


@pytest.fixture(scope="session")
def seeds():
    """Seeds including the edges of the unsigned 32-bit range."""
    return [0, 1, 5, 42, 1000, 2**31, 2**32 - 1]


@pytest.fixture
def failing_pink():
    """A PinkNoise whose octave count is rejected at evaluation time."""
    from grunge.modules import PinkNoise

    noise = PinkNoise(0)
    noise.octaves = 1
    return noise


@pytest.fixture
def failing_billow():
    """A BillowNoise with too many octaves."""
    from grunge.modules import BillowNoise

    noise = BillowNoise(0)
    noise.octaves = 31
    return noise
