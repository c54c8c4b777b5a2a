"""
Shared fixtures: a small airline network on the equator.

Airports A(0,0), B(0,1) and C(0,2) sit one degree of longitude apart
(111.19492664 km). D(0.5,1) is a slightly longer detour between A and C.
"""

import logging
import os
from pathlib import Path
from unittest.mock import MagicMock

import pandas as pd
import pytest

from src.airline_router.adapters.repositories.network_repo import AirlineNetwork
from src.airline_router.ports.network_data_provider import NetworkDataProvider

# Weather code 17 = wind (1.05) + lightning (1.20)
STORM_CODE = 17


@pytest.fixture
def airports_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "code": ["A", "B", "C", "D"],
            "airfield_name": ["AF_A", "AF_B", "AF_C", "AF_D"],
            "latitude": [0.0, 0.0, 0.0, 0.5],
            "longitude": [0.0, 1.0, 2.0, 1.0],
            "parking_cost": [10.0, 20.0, 30.0, 40.0],
        }
    )


@pytest.fixture
def directions_df() -> pd.DataFrame:
    """A -> B -> C and A -> D -> C, no direct A -> C."""
    return pd.DataFrame(
        {
            "from_code": ["A", "B", "A", "D"],
            "to_code": ["B", "C", "D", "C"],
        }
    )


@pytest.fixture
def weather_df() -> pd.DataFrame:
    """Storm over B's airfield at t=100 only."""
    return pd.DataFrame(
        {
            "airfield_name": ["AF_B"],
            "timestamp": [100],
            "weather_code": [STORM_CODE],
        }
    )


@pytest.fixture
def network(airports_df, weather_df, directions_df) -> AirlineNetwork:
    return AirlineNetwork.from_frames(airports_df, weather_df, directions_df)


@pytest.fixture
def mock_provider(airports_df, weather_df, directions_df) -> MagicMock:
    """NetworkDataProvider mock serving the shared frames."""
    provider = MagicMock(spec=NetworkDataProvider)
    provider.name = "mock tables"
    provider.get_airports_df.return_value = airports_df
    provider.get_weather_df.return_value = weather_df
    provider.get_directions_df.return_value = directions_df
    return provider


@pytest.fixture
def network_files(tmp_path: Path) -> dict:
    """The shared network written as input files, plus a missions file."""
    airports = tmp_path / "airports.csv"
    airports.write_text(
        "code,airfield,lat,lon,parking\n"
        "A,AF_A,0,0,10\n"
        "B,AF_B,0,1,20\n"
        "C,AF_C,0,2,30\n"
        "D,AF_D,0.5,1,40\n"
        "E,AF_E,10,10,0\n"
    )
    directions = tmp_path / "directions.csv"
    directions.write_text(
        "from,to\n"
        "A,B\n"
        "B,C\n"
        "A,D\n"
        "D,C\n"
        "A,ZZZ\n"
    )
    weather = tmp_path / "weather.csv"
    weather.write_text(
        "airfield,timestamp,code\n"
        f"AF_B,100,{STORM_CODE}\n"
        "AF_C,200,0\n"
    )
    missions = tmp_path / "missions.in"
    missions.write_text(
        "from to timestamp\n"
        "A C 99\n"
        "A C 100\n"
        "A E 99\n"
        "A XYZ 99\n"
        "B B 99\n"
    )
    return {
        "airports": airports,
        "directions": directions,
        "weather": weather,
        "missions": missions,
        "output": tmp_path / "out" / "output.out",
    }


@pytest.fixture
def restore_root_logger():
    """Remove handlers added to the root logger during a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every AIRLINE_ROUTER_* variable."""
    for name in list(os.environ):
        if name.startswith("AIRLINE_ROUTER_"):
            monkeypatch.delenv(name)
