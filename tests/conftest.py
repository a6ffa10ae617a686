import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def full_grid():
    """Provide every position of a fully planted 5x5 grid."""
    return [(x, y) for x in range(5) for y in range(5)]
