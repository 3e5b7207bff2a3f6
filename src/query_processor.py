"""
Query Processor Module
Maps free-text ocean queries to a region and builds synthetic query results
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import numpy as np

from app_config import AppConfig
from ocean_regions import get_region
from profile_generator import (
    QUERY_MAX_AGE_DAYS,
    FloatProfile,
    generate_profiles,
    generate_reference_dataset,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_REGION = 'indian_ocean'
DEFAULT_SCALE = 1.0

# First match wins, so the order of this list matters
REGION_RULES: List[Tuple[Tuple[str, ...], str, float]] = [
    (('arabian sea', 'arabian'), 'arabian_sea', 0.7),
    (('bay of bengal', 'bengal'), 'bay_of_bengal', 0.8),
    (('equator', 'equatorial'), 'equatorial_indian', 0.9),
    (('southern ocean', 'southern', 'antarctic'), 'southern_ocean', 0.6),
    (('indian ocean', 'indian'), 'indian_ocean', 1.0),
]

BASE_COUNT_MIN = 8
BASE_COUNT_MAX = 19

FLOAT_PARAMETERS = ('temperature', 'salinity', 'pressure')

NO_DATA_MESSAGE = (
    "🔍 I couldn't find any ARGO data matching your criteria. "
    "Try adjusting your query or selecting a different ocean region."
)


@dataclass(frozen=True)
class FloatLocation:
    id: str
    lat: float
    lon: float
    parameters: Tuple[str, ...]
    ocean: str


@dataclass(frozen=True)
class QuerySummary:
    avg_temperature: float
    avg_salinity: float
    count: int
    ocean: str


@dataclass(frozen=True)
class QueryResult:
    """Profiles, map locations and summary statistics for one query."""
    profiles: Tuple[FloatProfile, ...]
    float_locations: Tuple[FloatLocation, ...]
    summary: QuerySummary

    def to_dict(self) -> Dict:
        return {
            'profiles': [p.to_dict() for p in self.profiles],
            'floatLocations': [
                {
                    'id': f.id,
                    'lat': f.lat,
                    'lon': f.lon,
                    'parameters': list(f.parameters),
                    'ocean': f.ocean,
                }
                for f in self.float_locations
            ],
            'summary': {
                'avgTemperature': self.summary.avg_temperature,
                'avgSalinity': self.summary.avg_salinity,
                'count': self.summary.count,
                'ocean': self.summary.ocean,
            },
        }


def classify_query(query: str) -> Tuple[str, float]:
    """Resolve a query to (region key, profile count scale) by keyword matching."""
    query_lower = (query or '').lower()
    for keywords, region_key, scale in REGION_RULES:
        if any(keyword in query_lower for keyword in keywords):
            return region_key, scale
    return DEFAULT_REGION, DEFAULT_SCALE


def draw_profile_count(scale: float, rng: np.random.Generator) -> int:
    base = int(rng.integers(BASE_COUNT_MIN, BASE_COUNT_MAX + 1))
    return int(math.floor(base * scale))


def run_query(query: str, rng: Optional[np.random.Generator] = None,
              now: Optional[datetime] = None,
              max_age_days: float = QUERY_MAX_AGE_DAYS) -> QueryResult:
    """Generate synthetic profiles and summary statistics for a free-text query."""
    if rng is None:
        rng = np.random.default_rng()

    region_key, scale = classify_query(query)
    region = get_region(region_key)
    count = draw_profile_count(scale, rng)

    profiles = generate_profiles(region_key, count, rng=rng,
                                 max_age_days=max_age_days, now=now)

    float_locations = tuple(
        FloatLocation(
            id=p.float_id,
            lat=p.lat,
            lon=p.lon,
            parameters=FLOAT_PARAMETERS,
            ocean=region_key
        )
        for p in profiles
    )

    # Summary comes from the region climatology, not from the generated curves
    summary = QuerySummary(
        avg_temperature=region.characteristics.avg_temp + float(rng.uniform(-1, 1)),
        avg_salinity=region.characteristics.avg_salinity + float(rng.uniform(-0.25, 0.25)),
        count=count,
        ocean=region_key
    )

    return QueryResult(profiles=tuple(profiles), float_locations=float_locations, summary=summary)


def format_narrative(result: QueryResult) -> str:
    """Generate the chat response for a query result."""
    if not result.profiles:
        return NO_DATA_MESSAGE

    summary = result.summary
    region = get_region(summary.ocean)
    traits = region.characteristics

    response_parts = [
        f"🌊 Found {len(result.profiles)} ARGO profiles in the {region.name}!",
        "",
        "📊 **Data Summary:**",
        f"• Average Temperature: {summary.avg_temperature:.1f}°C",
        f"• Average Salinity: {summary.avg_salinity:.2f} PSU",
        f"• Ocean Depth: ~{traits.depth}m",
        "",
        "🔍 **Ocean Characteristics:**",
        traits.description,
        f"• Main Currents: {traits.currents}",
        f"• Key Features: {traits.features}",
        "",
        "📈 The data is now visualized on the map and charts below. Each float provides "
        "detailed temperature and salinity profiles from surface to 2000m depth.",
    ]
    return '\n'.join(response_parts)


class QueryProcessor:
    """Runs chat queries against the synthetic profile generator."""

    def __init__(self, config: Optional[AppConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        self.config = config or AppConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)

    def process_query(self, user_query: str) -> Tuple[QueryResult, str]:
        """Process a user query and return the results with a chat response."""
        result = run_query(user_query, rng=self.rng,
                           max_age_days=self.config.query_max_age_days)
        logger.info(f"Query {(user_query or '')[:100]!r} resolved to {result.summary.ocean}, "
                    f"generated {result.summary.count} profiles")

        return result, format_narrative(result)

    def load_reference_data(self) -> List[FloatProfile]:
        return generate_reference_dataset(rng=self.rng)

    def suggest_queries(self) -> List[Tuple[str, str]]:
        """Quick queries shown next to the chat, as (label, query) pairs."""
        return [
            ("🌡️ Arabian Sea Temperature", "Show temperature profiles in Arabian Sea"),
            ("💧 Bay of Bengal Salinity", "Salinity data in Bay of Bengal"),
            ("🐟 Indian Ocean BGC", "BGC data in Indian Ocean"),
            ("❄️ Southern Ocean", "Southern Ocean conditions"),
            ("🌐 Equatorial Data", "Equatorial Indian Ocean data"),
        ]
