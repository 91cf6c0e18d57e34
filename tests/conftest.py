"""
Shared pytest fixtures for the floor recorder test suite.

Provides:
- Simulated hosts with and without curses already disabled
- A registered RunController bound to a simulated host
- An in-memory blob store for batcher tests
"""

import os
import sys

import pytest

# Ensure project root is in path
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from floor_recorder.config import RecorderConfig
from floor_recorder.handlers.run_controller import RunController
from floor_recorder.simulation.host import SimulatedHost


class MemoryStorage:
    """Collects every blob written to it."""

    def __init__(self):
        self.blobs = []

    def save_data(self, data: str) -> None:
        self.blobs.append(data)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def host():
    """Simulated host whose runs already have curses disabled."""
    return SimulatedHost(rng_seed=1234, curses_prevented=True)


@pytest.fixture
def cursed_host():
    """Simulated host on a fresh profile (curses still enabled)."""
    return SimulatedHost(rng_seed=1234)


@pytest.fixture
def controller(host):
    controller = RunController(host, RecorderConfig(seeds_per_write=100, verbose=True))
    controller.register()
    return controller
