"""Application configuration and logging setup."""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Union

DEFAULT_YEAR = 2025
DEFAULT_PRELOAD_YEARS = tuple(range(2024, 2031))

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class AppConfig:
    """Runtime configuration.

    Attributes:
        default_year: Ramadan year shown when none is requested.
        preload_years: Years loaded from the store at start-up.
        ramadan_start_dates: Overrides for the built-in start-date table.
        log_level: Name of the root log level.
    """

    default_year: int = DEFAULT_YEAR
    preload_years: tuple[int, ...] = DEFAULT_PRELOAD_YEARS
    ramadan_start_dates: dict[int, date] = field(default_factory=dict)
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Build a config from parsed JSON.

        ``ramadan_start_dates`` maps year strings to ISO dates, e.g.
        ``{"2031": "2031-12-16"}``.
        """
        start_dates = {
            int(year): date.fromisoformat(value)
            for year, value in data.get("ramadan_start_dates", {}).items()
        }
        return cls(
            default_year=int(data.get("default_year", DEFAULT_YEAR)),
            preload_years=tuple(int(y) for y in data.get("preload_years", DEFAULT_PRELOAD_YEARS)),
            ramadan_start_dates=start_dates,
            log_level=str(data.get("log_level", "WARNING")).upper(),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "AppConfig":
        with open(path) as f:
            return cls.from_dict(json.load(f))


def configure_logging(level: Union[str, int] = "WARNING") -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
