import contextlib
import sys
import time
from pathlib import Path

import pytest


def pytest_configure(config):
    # Ensure repository root is importable as a package root (so 'mdeditor' works)
    with contextlib.suppress(Exception):
        root = Path(__file__).resolve().parents[1]
        sys.path.insert(0, str(root))


@pytest.fixture
def wait_for():
    """Polls a predicate until it holds or the timeout elapses; returns the last result."""

    def _wait(predicate, timeout: float = 3.0, interval: float = 0.02) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(interval)
        return bool(predicate())

    return _wait
