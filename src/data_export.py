"""
Data Export Module
Serializes query results to JSON and flat CSV for download
"""

import json
import logging
from typing import Dict, Iterable, Tuple

import pandas as pd

from profile_generator import FloatProfile
from query_processor import QueryResult

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CSV_COLUMNS = ['float_id', 'date', 'lat', 'lon', 'depth', 'temperature', 'salinity', 'ocean']

EXPORT_FORMATS: Dict[str, Tuple[str, str]] = {
    'json': ('argo_data.json', 'application/json'),
    'csv': ('argo_data.csv', 'text/csv'),
}


def profiles_to_dataframe(profiles: Iterable[FloatProfile]) -> pd.DataFrame:
    """Flatten profiles into one row per depth sample per float."""
    rows = []
    for profile in profiles:
        date = profile.date.strftime('%Y-%m-%d')
        lat = round(profile.lat, 4)
        lon = round(profile.lon, 4)
        for temp_point, sal_point in zip(profile.temperature, profile.salinity):
            rows.append({
                'float_id': profile.float_id,
                'date': date,
                'lat': lat,
                'lon': lon,
                'depth': temp_point.depth,
                'temperature': temp_point.value,
                'salinity': sal_point.value,
                'ocean': profile.ocean
            })

    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def to_csv(result: QueryResult) -> str:
    df = profiles_to_dataframe(result.profiles)
    logger.info(f"Exporting {len(df)} rows to CSV")
    return df.to_csv(index=False)


def to_json(result: QueryResult) -> str:
    logger.info(f"Exporting {len(result.profiles)} profiles to JSON")
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def export_result(result: QueryResult, fmt: str) -> Tuple[str, str, str]:
    """Return (content, file name, MIME type) for a supported export format."""
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt!r}")
    filename, mime = EXPORT_FORMATS[fmt]
    content = to_json(result) if fmt == 'json' else to_csv(result)
    return content, filename, mime
