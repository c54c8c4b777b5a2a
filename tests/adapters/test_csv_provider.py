"""
Tests for CsvNetworkDataProvider and read_table.

Tests cover:
- Header skipping and positional column naming
- Whitespace-separated missions
- Codes that pandas would otherwise read as NaN
- Missing, empty and malformed files
"""

import pandas as pd
import pytest

from src.airline_router.adapters.data_providers.csv_provider import (
    AIRPORT_COLUMNS,
    CsvNetworkDataProvider,
    read_table,
)
from src.airline_router.exceptions import MalformedRecordError
from src.airline_router.schemas.airport import AirportSchema
from src.airline_router.schemas.flight import FlightDirectionSchema


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def provider(network_files) -> CsvNetworkDataProvider:
    return CsvNetworkDataProvider(
        airports_path=network_files["airports"],
        directions_path=network_files["directions"],
        weather_path=network_files["weather"],
        missions_path=network_files["missions"],
    )


# =============================================================================
# PROVIDER
# =============================================================================


class TestCsvNetworkDataProvider:
    def test_airports(self, provider):
        df = provider.get_airports_df()

        assert list(df.columns) == AIRPORT_COLUMNS
        assert df["code"].tolist() == ["A", "B", "C", "D", "E"]
        assert df["latitude"].dtype == "float64"
        assert df.loc[df["code"] == "D", "latitude"].iloc[0] == 0.5

    def test_directions_keep_unknown_codes(self, provider):
        df = provider.get_directions_df()

        # Unknown endpoints are the graph builder's concern
        assert len(df) == 5
        assert ("A", "ZZZ") in list(zip(df["from_code"], df["to_code"]))

    def test_weather(self, provider):
        df = provider.get_weather_df()

        assert df["weather_code"].tolist() == [17, 0]
        assert df["timestamp"].dtype == "int64"

    def test_missions_whitespace_separated(self, provider):
        df = provider.get_route_requests_df()

        assert df["from_code"].tolist() == ["A", "A", "A", "A", "B"]
        assert df["to_code"].tolist() == ["C", "C", "E", "XYZ", "B"]
        assert df["timestamp"].tolist() == [99, 100, 99, 99, 99]

    def test_missions_not_configured(self, network_files):
        provider = CsvNetworkDataProvider(
            network_files["airports"], network_files["directions"], network_files["weather"]
        )

        with pytest.raises(NotImplementedError):
            provider.get_route_requests_df()

    def test_name(self, provider):
        assert provider.name == "CSV files"


# =============================================================================
# READ TABLE
# =============================================================================


class TestReadTable:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_table(tmp_path / "nope.csv", ["from_code", "to_code"], FlightDirectionSchema)

    def test_na_like_codes_stay_strings(self, tmp_path):
        path = tmp_path / "directions.csv"
        path.write_text("from,to\nNA,NAN\nNULL,A\n")

        df = read_table(path, ["from_code", "to_code"], FlightDirectionSchema)

        assert df["from_code"].tolist() == ["NA", "NULL"]
        assert df["to_code"].tolist() == ["NAN", "A"]

    def test_header_only_file_is_empty(self, tmp_path):
        path = tmp_path / "directions.csv"
        path.write_text("from,to\n")

        df = read_table(path, ["from_code", "to_code"], FlightDirectionSchema)

        assert df.empty

    def test_empty_file_is_empty(self, tmp_path):
        path = tmp_path / "directions.csv"
        path.write_text("")

        df = read_table(path, ["from_code", "to_code"], FlightDirectionSchema)

        assert isinstance(df, pd.DataFrame)
        assert df.empty

    def test_bad_latitude_is_malformed(self, tmp_path):
        path = tmp_path / "airports.csv"
        path.write_text("code,airfield,lat,lon,parking\nA,AF_A,123,0,0\n")

        with pytest.raises(MalformedRecordError, match="airports.csv"):
            read_table(path, AIRPORT_COLUMNS, AirportSchema)

    def test_non_numeric_field_is_malformed(self, tmp_path):
        path = tmp_path / "airports.csv"
        path.write_text("code,airfield,lat,lon,parking\nA,AF_A,north,0,0\n")

        with pytest.raises(MalformedRecordError):
            read_table(path, AIRPORT_COLUMNS, AirportSchema)
