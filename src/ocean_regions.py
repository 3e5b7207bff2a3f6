"""
Ocean Region Catalog
Static reference data for the ocean regions supported by the explorer
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple


class UnknownRegionError(KeyError):
    """Raised when a region key is not part of the catalog."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"Unknown ocean region: {self.key!r}"


@dataclass(frozen=True)
class RegionCharacteristics:
    avg_temp: float       # °C
    avg_salinity: float   # PSU
    depth: int            # meters
    description: str
    currents: str
    features: str


@dataclass(frozen=True)
class OceanRegion:
    """A named ocean region with its bounding box and typical conditions."""
    key: str
    name: str
    bounds: Tuple[Tuple[float, float], Tuple[float, float]]  # (south, west), (north, east)
    center: Tuple[float, float]
    color: str
    characteristics: RegionCharacteristics

    @property
    def south(self) -> float:
        return self.bounds[0][0]

    @property
    def west(self) -> float:
        return self.bounds[0][1]

    @property
    def north(self) -> float:
        return self.bounds[1][0]

    @property
    def east(self) -> float:
        return self.bounds[1][1]

    def contains(self, lat: float, lon: float) -> bool:
        """Check whether a point lies inside the bounding box (edges included)."""
        return self.south <= lat <= self.north and self.west <= lon <= self.east


_REGIONS = [
    OceanRegion(
        key='arabian_sea',
        name='Arabian Sea',
        bounds=((8, 50), (27, 80)),
        center=(17.5, 65),
        color='#3b82f6',
        characteristics=RegionCharacteristics(
            avg_temp=28.5,
            avg_salinity=36.2,
            depth=4652,
            description='Warm, highly saline waters with strong monsoon influence',
            currents='Southwest and Northeast Monsoon currents',
            features='High evaporation rates, seasonal upwelling'
        )
    ),
    OceanRegion(
        key='bay_of_bengal',
        name='Bay of Bengal',
        bounds=((5, 80), (22, 100)),
        center=(13.5, 90),
        color='#10b981',
        characteristics=RegionCharacteristics(
            avg_temp=29.1,
            avg_salinity=33.8,
            depth=4694,
            description='Warm waters with lower salinity due to river discharge',
            currents='East India Coastal Current',
            features='Large freshwater input, cyclone formation area'
        )
    ),
    OceanRegion(
        key='indian_ocean',
        name='Indian Ocean',
        bounds=((-40, 20), (30, 120)),
        center=(-5, 70),
        color='#8b5cf6',
        characteristics=RegionCharacteristics(
            avg_temp=26.8,
            avg_salinity=35.1,
            depth=3741,
            description='Third largest ocean with diverse temperature zones',
            currents='South Equatorial Current, Agulhas Current',
            features='Monsoon-driven circulation, warm pool region'
        )
    ),
    OceanRegion(
        key='equatorial_indian',
        name='Equatorial Indian Ocean',
        bounds=((-10, 40), (10, 100)),
        center=(0, 70),
        color='#f59e0b',
        characteristics=RegionCharacteristics(
            avg_temp=28.2,
            avg_salinity=34.9,
            depth=3800,
            description='Warm equatorial waters with complex current systems',
            currents='Equatorial Counter Current, Equatorial Undercurrent',
            features='Indian Ocean Dipole, thermocline variations'
        )
    ),
    # Longitudes stop at 0-180; the circumpolar band is not covered
    OceanRegion(
        key='southern_ocean',
        name='Southern Ocean',
        bounds=((-70, 0), (-40, 180)),
        center=(-55, 90),
        color='#06b6d4',
        characteristics=RegionCharacteristics(
            avg_temp=4.2,
            avg_salinity=34.7,
            depth=3270,
            description='Cold, nutrient-rich waters surrounding Antarctica',
            currents='Antarctic Circumpolar Current',
            features='Sea ice formation, deep water formation, high nutrients'
        )
    ),
]

OCEAN_REGIONS: Mapping[str, OceanRegion] = MappingProxyType(
    {region.key: region for region in _REGIONS}
)


def get_region(key: str) -> OceanRegion:
    """Look up a region by key. There is no default region."""
    try:
        return OCEAN_REGIONS[key]
    except (KeyError, TypeError):
        raise UnknownRegionError(key) from None


def region_keys() -> List[str]:
    return list(OCEAN_REGIONS)
