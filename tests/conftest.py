"""
Shared test fixtures — API test client and sample element rows.
"""

import pytest
from fastapi.testclient import TestClient

from takeoff.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def footing_row():
    """100 x 100 x 40 cm footing, 5 + 5 bars of 3/8."""
    return {
        "floor": "Térreo", "label": "S1", "count": "1",
        "width_cm": "100", "length_cm": "100", "height_cm": "40",
        "horizontal_stirrups": "5", "vertical_stirrups": "5", "diameter": "3/8",
    }


@pytest.fixture
def beam_row():
    """3 m beam, 14 x 30 cm, 4 bars of 3/8."""
    return {
        "floor": "Térreo", "label": "V1", "count": "1", "length_m": "3",
        "width_cm": "14", "height_cm": "30", "bar_quantity": "4", "diameter": "3/8",
    }


@pytest.fixture
def unit_square():
    return [{"x": "0", "y": "0"}, {"x": "1", "y": "0"},
            {"x": "1", "y": "1"}, {"x": "0", "y": "1"}]
