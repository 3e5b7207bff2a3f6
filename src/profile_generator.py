"""
Synthetic ARGO Profile Generator
Builds region-specific temperature and salinity depth profiles for simulated floats
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

import numpy as np

from ocean_regions import OceanRegion, get_region, region_keys

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MAX_DEPTH = 2000
DEPTH_STEP = 25
DEPTHS = np.arange(0, MAX_DEPTH + DEPTH_STEP, DEPTH_STEP)  # 81 levels

PARAMETERS = ('temperature', 'salinity')
QC_GOOD = 1

QUERY_MAX_AGE_DAYS = 90
REFERENCE_MAX_AGE_DAYS = 365

FLOAT_ID_BASE = 5900000
FLOAT_ID_SPAN = 10000


class InvalidCountError(ValueError):
    """Raised when a profile count is negative or not an integer."""


@dataclass(frozen=True)
class DepthSample:
    depth: int
    value: float
    qc: int = QC_GOOD


@dataclass(frozen=True)
class FloatProfile:
    """One synthetic float observation with its temperature and salinity curves."""
    float_id: str
    date: datetime
    lat: float
    lon: float
    temperature: Tuple[DepthSample, ...]
    salinity: Tuple[DepthSample, ...]
    ocean: str

    def to_dict(self) -> dict:
        return {
            'floatId': self.float_id,
            'date': self.date.isoformat(),
            'location': {'lat': self.lat, 'lon': self.lon},
            'profiles': {
                'temp': [_sample_to_dict(s) for s in self.temperature],
                'sal': [_sample_to_dict(s) for s in self.salinity],
            },
            'ocean': self.ocean,
        }


def _sample_to_dict(sample: DepthSample) -> dict:
    return {'depth': sample.depth, 'value': sample.value, 'qc': sample.qc}


def _temperature_curve(region: OceanRegion, rng: np.random.Generator) -> np.ndarray:
    base_temp = region.characteristics.avg_temp
    depth = DEPTHS.astype(float)
    n = len(depth)

    if region.key == 'southern_ocean':
        # Cold water column, gradual cooling
        values = base_temp - (depth / 200) * 1.5 + rng.uniform(-0.5, 0.5, n)
        return np.maximum(values, -1)
    elif region.key == 'arabian_sea':
        # Warm surface with a steep thermocline
        values = base_temp - (depth / 150) * 2.2 + rng.uniform(-0.75, 0.75, n)
        return np.maximum(values, 3)
    elif region.key == 'bay_of_bengal':
        values = base_temp - (depth / 120) * 2.1 + rng.uniform(-0.6, 0.6, n)
        return np.maximum(values, 4)
    elif region.key == 'equatorial_indian':
        # Thermocline oscillation from the equatorial undercurrent
        values = (base_temp - (depth / 110) * 2.3 + np.sin(depth / 300) * 0.8
                  + rng.uniform(-0.5, 0.5, n))
        return np.maximum(values, 5)
    else:
        values = base_temp - (depth / 100) * 2 + rng.uniform(-1, 1, n)
        return np.maximum(values, 2)


def _salinity_curve(region: OceanRegion, rng: np.random.Generator) -> np.ndarray:
    base_sal = region.characteristics.avg_salinity
    depth = DEPTHS.astype(float)
    n = len(depth)

    if region.key == 'bay_of_bengal':
        # River discharge freshens the surface layer
        return base_sal - 1 + np.sin(depth / 400) * 0.8 + rng.uniform(-0.15, 0.15, n)
    elif region.key == 'arabian_sea':
        # Evaporation keeps the water column salty
        return base_sal + np.sin(depth / 300) * 0.6 + rng.uniform(-0.1, 0.1, n)
    elif region.key == 'southern_ocean':
        return base_sal + np.sin(depth / 600) * 0.3 + rng.uniform(-0.075, 0.075, n)
    else:
        return base_sal + np.sin(depth / 500) * 0.5 + rng.uniform(-0.1, 0.1, n)


def synthesize_depth_profile(parameter: str, region: OceanRegion,
                             rng: Optional[np.random.Generator] = None) -> Tuple[DepthSample, ...]:
    """Create a surface-to-2000m profile of temperature or salinity for a region.

    Returns 81 samples at 25m spacing, values rounded to 2 decimals.
    """
    if rng is None:
        rng = np.random.default_rng()

    if parameter == 'temperature':
        values = _temperature_curve(region, rng)
    elif parameter == 'salinity':
        values = _salinity_curve(region, rng)
    else:
        raise ValueError(f"Unsupported parameter: {parameter!r} (expected one of {PARAMETERS})")

    values = np.round(values, 2)
    return tuple(
        DepthSample(depth=int(depth), value=float(value), qc=QC_GOOD)
        for depth, value in zip(DEPTHS, values)
    )


def _validate_count(count) -> int:
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise InvalidCountError(f"Profile count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidCountError(f"Profile count must be non-negative, got {count}")
    return int(count)


def generate_profiles(region_key: str, count: int,
                      rng: Optional[np.random.Generator] = None,
                      max_age_days: float = QUERY_MAX_AGE_DAYS,
                      now: Optional[datetime] = None) -> List[FloatProfile]:
    """Generate `count` synthetic float profiles inside a region's bounding box."""
    region = get_region(region_key)
    count = _validate_count(count)
    if max_age_days < 0:
        raise ValueError(f"max_age_days must be non-negative, got {max_age_days}")

    if rng is None:
        rng = np.random.default_rng()
    if now is None:
        now = datetime.now()

    lat_range = region.north - region.south
    lon_range = region.east - region.west

    profiles = []
    for _ in range(count):
        float_id = f"WMO{FLOAT_ID_BASE + int(np.floor(rng.uniform(0, FLOAT_ID_SPAN)))}"
        lat = region.south + float(rng.uniform(0, 1)) * lat_range
        lon = region.west + float(rng.uniform(0, 1)) * lon_range
        date = now - timedelta(days=float(rng.uniform(0, max_age_days)))

        profiles.append(FloatProfile(
            float_id=float_id,
            date=date,
            lat=lat,
            lon=lon,
            temperature=synthesize_depth_profile('temperature', region, rng),
            salinity=synthesize_depth_profile('salinity', region, rng),
            ocean=region.key
        ))

    return profiles


def generate_reference_dataset(rng: Optional[np.random.Generator] = None,
                               now: Optional[datetime] = None) -> List[FloatProfile]:
    """Create the sample dataset covering every region over the past year."""
    if rng is None:
        rng = np.random.default_rng()
    if now is None:
        now = datetime.now()

    profiles = []
    for key in region_keys():
        count = 20 if key == 'indian_ocean' else 15
        profiles.extend(generate_profiles(
            key, count, rng=rng, max_age_days=REFERENCE_MAX_AGE_DAYS, now=now
        ))

    logger.info(f"Generated reference dataset with {len(profiles)} profiles "
                f"across {len(region_keys())} regions")
    return profiles
