"""
CSV Data Provider - tabular files to DataFrame adapter.

Reads the airports, flight directions, weather and missions files and
validates each against its Pandera schema at the boundary.

File layouts (first line is a header and is skipped; columns are
positional, extra columns are ignored):
- airports:   code,airfield_name,latitude,longitude,parking_cost
- directions: from_code,to_code
- weather:    airfield_name,timestamp,weather_code
- missions:   from_code to_code timestamp   (whitespace separated)
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Type, Union

import pandas as pd
import pandera as pa
from pandera.errors import SchemaError, SchemaErrors

from src.airline_router.exceptions import MalformedRecordError
from src.airline_router.ports.network_data_provider import NetworkDataProvider
from src.airline_router.schemas.airport import AirportDataFrame, AirportSchema
from src.airline_router.schemas.flight import (
    FlightDirectionDataFrame,
    FlightDirectionSchema,
)
from src.airline_router.schemas.route import RouteRequestDataFrame, RouteRequestSchema
from src.airline_router.schemas.weather import (
    WeatherDataFrame,
    WeatherObservationSchema,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

AIRPORT_COLUMNS = ["code", "airfield_name", "latitude", "longitude", "parking_cost"]
DIRECTION_COLUMNS = ["from_code", "to_code"]
WEATHER_COLUMNS = ["airfield_name", "timestamp", "weather_code"]
MISSION_COLUMNS = ["from_code", "to_code", "timestamp"]

# Codes such as "NA" or "NAN" must stay strings, not become NaN
_STRING_COLUMNS = {"code", "airfield_name", "from_code", "to_code"}


def read_table(
    path: PathLike,
    columns: List[str],
    schema: Type[pa.DataFrameModel],
    sep: str = ",",
) -> pd.DataFrame:
    """
    Read one headed, positional table and validate it.

    Args:
        path: File to read.
        columns: Names assigned to the leading columns, in order.
        schema: Pandera model the frame must satisfy.
        sep: Field separator (regex allowed, e.g. r"\\s+").

    Returns:
        Validated (and coerced) DataFrame with exactly `columns`.

    Raises:
        FileNotFoundError: If path does not exist.
        MalformedRecordError: If the file cannot be parsed or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    dtypes: Dict[str, type] = {c: str for c in columns if c in _STRING_COLUMNS}

    try:
        df = pd.read_csv(
            path,
            sep=sep,
            header=0,
            names=columns,
            usecols=list(range(len(columns))),
            dtype=dtypes,
            keep_default_na=False,
            na_values=[""],
            skipinitialspace=True,
            engine="python" if len(sep) > 1 else "c",
        )
    except pd.errors.EmptyDataError:
        df = pd.DataFrame(columns=columns)
    except (pd.errors.ParserError, ValueError) as e:
        raise MalformedRecordError(str(path), str(e)) from e

    try:
        return schema.validate(df)
    except (SchemaError, SchemaErrors) as e:
        raise MalformedRecordError(str(path), str(e)) from e


class CsvNetworkDataProvider(NetworkDataProvider):
    """
    Data provider for the airline network stored as text tables.

    Attributes:
        _airports_path: Airports CSV.
        _directions_path: Flight directions CSV.
        _weather_path: Weather observations CSV.
        _missions_path: Missions file (optional).
    """

    def __init__(
        self,
        airports_path: PathLike,
        directions_path: PathLike,
        weather_path: PathLike,
        missions_path: Optional[PathLike] = None,
    ) -> None:
        self._airports_path = Path(airports_path)
        self._directions_path = Path(directions_path)
        self._weather_path = Path(weather_path)
        self._missions_path = Path(missions_path) if missions_path else None

    @property
    def name(self) -> str:
        return "CSV files"

    def get_airports_df(self) -> AirportDataFrame:
        df = read_table(self._airports_path, AIRPORT_COLUMNS, AirportSchema)
        logger.debug("Read %d airport rows from %s", len(df), self._airports_path)
        return df

    def get_directions_df(self) -> FlightDirectionDataFrame:
        df = read_table(self._directions_path, DIRECTION_COLUMNS, FlightDirectionSchema)
        logger.debug("Read %d direction rows from %s", len(df), self._directions_path)
        return df

    def get_weather_df(self) -> WeatherDataFrame:
        df = read_table(self._weather_path, WEATHER_COLUMNS, WeatherObservationSchema)
        logger.debug("Read %d weather rows from %s", len(df), self._weather_path)
        return df

    def get_route_requests_df(self) -> RouteRequestDataFrame:
        """
        Read the missions file.

        Raises:
            NotImplementedError: If no missions path was configured.
        """
        if self._missions_path is None:
            return super().get_route_requests_df()
        df = read_table(
            self._missions_path, MISSION_COLUMNS, RouteRequestSchema, sep=r"\s+"
        )
        logger.debug("Read %d missions from %s", len(df), self._missions_path)
        return df
