"""
Configuration module for the Airline Router.

Loads environment variables (optionally from a .env file) and provides
centralized settings for input files, output and search behavior.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

ENV_PREFIX = "AIRLINE_ROUTER_"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_FLUSH_INTERVAL = 1000

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


@dataclass(frozen=True)
class Settings:
    """
    Airline Router settings.

    Attributes:
        airports_file: Airports CSV.
        directions_file: Flight directions CSV.
        weather_file: Weather observations CSV.
        missions_file: Missions (route requests) file.
        output_file: File the mission results are written to.
        log_level: Root logger level name.
        log_file: Optional log file in addition to stdout.
        search_timeout: Optional per-search deadline in seconds.
        flush_interval: Output lines between explicit flushes.
    """

    airports_file: Optional[Path] = None
    directions_file: Optional[Path] = None
    weather_file: Optional[Path] = None
    missions_file: Optional[Path] = None
    output_file: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None
    search_timeout: Optional[float] = None
    flush_interval: int = DEFAULT_FLUSH_INTERVAL

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}"
            )
        if self.search_timeout is not None and self.search_timeout <= 0:
            raise ValueError(f"search_timeout must be > 0, got {self.search_timeout}")
        if self.flush_interval < 1:
            raise ValueError(f"flush_interval must be >= 1, got {self.flush_interval}")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        dotenv: bool = True,
    ) -> "Settings":
        """
        Build settings from AIRLINE_ROUTER_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.
            dotenv: Load a .env file into os.environ first.

        Raises:
            ValueError: If a numeric variable cannot be parsed or is out of range.
        """
        if dotenv:
            load_dotenv()
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value and value.strip() else None

        timeout = get("SEARCH_TIMEOUT")
        flush_interval = get("FLUSH_INTERVAL")

        try:
            search_timeout = float(timeout) if timeout is not None else None
            flush = int(flush_interval) if flush_interval is not None else DEFAULT_FLUSH_INTERVAL
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting: {e}") from e

        return cls(
            airports_file=_optional_path(get("AIRPORTS_FILE")),
            directions_file=_optional_path(get("DIRECTIONS_FILE")),
            weather_file=_optional_path(get("WEATHER_FILE")),
            missions_file=_optional_path(get("MISSIONS_FILE")),
            output_file=_optional_path(get("OUTPUT_FILE")),
            log_level=(get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            log_file=_optional_path(get("LOG_FILE")),
            search_timeout=search_timeout,
            flush_interval=flush,
        )

    @property
    def has_network_files(self) -> bool:
        """True when airports, directions and weather files are all set."""
        return all((self.airports_file, self.directions_file, self.weather_file))
