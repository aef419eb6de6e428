import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.series import Observation


@pytest.fixture
def scenario_obs():
    return [
        Observation(0, 10.0),
        Observation(30, 12.0),
        Observation(45, 8.0),
        Observation(61, 9.0),
    ]


@pytest.fixture
def gap_obs():
    return [Observation(0, 10.0), Observation(300, 15.0)]


@pytest.fixture
def swaps():
    return [
        {"timestamp": "0", "price": "10", "poolBalA": "100", "poolBalB": "50", "inBalA": 1, "outBalA": 0},
        {"timestamp": 30, "price": 12.0, "poolBalA": 200, "poolBalB": 60, "inBalA": 0, "outBalA": 2},
        {"timestamp": 45, "price": 8.0, "poolBalA": 300, "poolBalB": 70, "inBalA": 3, "outBalA": 0},
        {"timestamp": 61, "price": 9.0, "poolBalA": 400, "poolBalB": 80, "inBalA": 0, "outBalA": 4},
    ]
