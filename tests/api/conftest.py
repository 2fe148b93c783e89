# tests/api/conftest.py
import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"
os.environ["ENVIRONMENT"] = "test"

TEST_API_KEY = "dev_key"


@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": TEST_API_KEY}


def _point(p):
    point = {"x": p[0], "y": p[1]}
    if len(p) > 2:
        point["z"] = p[2]
    return point


def wall(start, end, thickness=0.0, wall_id=""):
    """Build a request wall from (x, y) or (x, y, z) tuples."""
    return {
        "start": _point(start),
        "end": _point(end),
        "thickness": thickness,
        "wall_id": wall_id,
    }


@pytest.fixture
def corner_request():
    """Two walls meeting at an L, thickness 2 and 4."""
    return {
        "walls": [
            wall((0, 0), (10, 0), 2.0, "A"),
            wall((10, 0), (10, 10), 4.0, "B"),
        ]
    }


@pytest.fixture
def room_request():
    """Four zero-thickness walls forming a closed room (millimeters)."""
    return {
        "walls": [
            wall((0, 0), (10, 0), wall_id="south"),
            wall((10, 0), (10, 10), wall_id="east"),
            wall((10, 10), (0, 10), wall_id="north"),
            wall((0, 10), (0, 0), wall_id="west"),
        ],
        "gap_mm": 1.0,
        "units": "millimeters",
    }
