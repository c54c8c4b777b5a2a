"""
Data provider adapters for the airline network tables.
"""

from src.airline_router.adapters.data_providers.csv_provider import (
    CsvNetworkDataProvider,
    read_table,
)

__all__ = [
    "CsvNetworkDataProvider",
    "read_table",
]
