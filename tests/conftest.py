"""Pytest configuration for repository-relative imports."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")


class FixedSource:
    """Uniform source that replays a fixed sequence of draws, cycling."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_source():
    return FixedSource
