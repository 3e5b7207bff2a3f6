"""
Configuration management for the ARGO Ocean Data Explorer
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """Settings for the explorer UI and the synthetic data generator"""
    map_provider: str = "folium"
    map_tiles: str = "OpenStreetMap"
    random_seed: Optional[int] = None
    query_max_age_days: int = 90
    latency_min_seconds: float = 1.5
    latency_max_seconds: float = 2.5
    default_lat: float = 10.0
    default_lon: float = 75.0
    log_level: str = "INFO"

    @property
    def default_location(self) -> Tuple[float, float]:
        return (self.default_lat, self.default_lon)


def _parse(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


class ConfigManager:
    """Loads configuration from environment variables"""

    @staticmethod
    def load_from_env() -> AppConfig:
        config = AppConfig(
            map_provider=os.getenv("MAP_PROVIDER", "folium").lower(),
            map_tiles=os.getenv("MAP_TILES", "OpenStreetMap"),
            random_seed=_parse("RANDOM_SEED", None, int),
            query_max_age_days=_parse("QUERY_MAX_AGE_DAYS", 90, int),
            latency_min_seconds=_parse("LATENCY_MIN_SECONDS", 1.5, float),
            latency_max_seconds=_parse("LATENCY_MAX_SECONDS", 2.5, float),
            default_lat=_parse("DEFAULT_LAT", 10.0, float),
            default_lon=_parse("DEFAULT_LON", 75.0, float),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )

        if config.query_max_age_days < 0:
            raise ValueError("QUERY_MAX_AGE_DAYS must be non-negative")
        if config.latency_min_seconds < 0 or config.latency_max_seconds < config.latency_min_seconds:
            raise ValueError("LATENCY_MIN_SECONDS/LATENCY_MAX_SECONDS must satisfy 0 <= min <= max")
        if config.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid value for LOG_LEVEL: {config.log_level!r} (expected one of {LOG_LEVELS})")

        return config
