"""
Network Data Provider port interface.

Defines the abstract contract for data sources that provide the airline
network tables. Implementations handle the specifics of different backends
(CSV files, databases, in-memory fixtures).
"""

from abc import ABC, abstractmethod

from src.airline_router.schemas.airport import AirportDataFrame
from src.airline_router.schemas.flight import FlightDirectionDataFrame
from src.airline_router.schemas.route import RouteRequestDataFrame
from src.airline_router.schemas.weather import WeatherDataFrame


class NetworkDataProvider(ABC):
    """
    Abstract interface for airline network data providers.

    Providers return validated DataFrames directly. Schema validation
    happens at the boundary (in the provider), not per-row.

    Implementations:
    - CsvNetworkDataProvider: tabular text files read with pandas
    """

    @abstractmethod
    def get_airports_df(self) -> AirportDataFrame:
        """
        Return all airports as a DataFrame validated against AirportSchema.

        Raises:
            MalformedRecordError: If the source cannot be parsed or validated.
        """
        ...

    @abstractmethod
    def get_weather_df(self) -> WeatherDataFrame:
        """
        Return all weather observations validated against WeatherObservationSchema.

        Raises:
            MalformedRecordError: If the source cannot be parsed or validated.
        """
        ...

    @abstractmethod
    def get_directions_df(self) -> FlightDirectionDataFrame:
        """
        Return permitted direct flights validated against FlightDirectionSchema.

        Raises:
            MalformedRecordError: If the source cannot be parsed or validated.
        """
        ...

    def get_route_requests_df(self) -> RouteRequestDataFrame:
        """
        Return the batch of route requests (missions), in request order.

        Default implementation raises NotImplementedError; providers that
        only describe the network need not supply requests.
        """
        raise NotImplementedError(f"{self.name} does not provide route requests")

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "CSV files").
        """
        ...
