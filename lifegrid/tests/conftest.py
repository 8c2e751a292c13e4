"""
Pytest fixtures for lifegrid tests.
"""

import pytest

from ..engine_core import Universe, ToroidalUniverse
from ..api.service import APIService


BLOCK = "....\n.##.\n.##.\n...."
BLINKER = ".....\n..#..\n..#..\n..#..\n....."
GLIDER = "#.#...\n.##...\n.#....\n......\n......\n......"


@pytest.fixture
def block_text() -> str:
    """A 2x2 block padded to 4x4: a still life."""
    return BLOCK


@pytest.fixture
def blinker_text() -> str:
    """A vertical blinker in a 5x5 universe: a period-2 oscillator."""
    return BLINKER


@pytest.fixture
def glider_text() -> str:
    """A glider heading down and right in a 6x6 universe."""
    return GLIDER


@pytest.fixture
def block_universe(block_text: str) -> Universe:
    return Universe.parse(block_text)


@pytest.fixture
def toroidal_block_universe(block_text: str) -> ToroidalUniverse:
    return ToroidalUniverse.parse(block_text)


@pytest.fixture
def alternating_bools():
    """A deterministic boolean source: True, False, True, ..."""
    state = {"next": True}

    def next_bool() -> bool:
        value = state["next"]
        state["next"] = not value
        return value

    return next_bool


@pytest.fixture
def service() -> APIService:
    """Create a fresh API service with a small cell limit."""
    return APIService(max_cells=10_000)
