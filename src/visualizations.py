"""
Visualization Module
Depth-profile charts and float location maps for query results
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

import folium
import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from ocean_regions import OCEAN_REGIONS, OceanRegion, get_region

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TRACE_COLORS = ['#3b82f6', '#10b981', '#f59e0b', '#ef4444', '#8b5cf6']
DEFAULT_LOCATION = (10.0, 75.0)


def create_profile_plot(df: pd.DataFrame, max_floats: int = 5):
    """Create vertical profile plots for temperature and salinity."""
    if df.empty:
        return None

    fig = make_subplots(
        rows=1, cols=2,
        subplot_titles=('🌡️ Temperature vs Depth', '🧂 Salinity vs Depth'),
        horizontal_spacing=0.15
    )

    # One trace pair per float; profiles sharing a float id are drawn separately
    groups = df.groupby(['float_id', 'date', 'lat', 'lon'], sort=False)
    for idx, ((float_id, _, _, _), float_df) in enumerate(groups):
        if idx >= max_floats:
            break
        color = TRACE_COLORS[idx % len(TRACE_COLORS)]
        float_df = float_df.sort_values('depth')
        label = f"Float {float_id[-4:]}"

        fig.add_trace(
            go.Scatter(
                x=float_df['temperature'],
                y=-float_df['depth'],  # Negative for depth
                mode='lines',
                name=label,
                legendgroup=label,
                line=dict(width=3, color=color),
                hovertemplate='Temp: %{x}°C<br>Depth: %{y}m<extra></extra>'
            ),
            row=1, col=1
        )
        fig.add_trace(
            go.Scatter(
                x=float_df['salinity'],
                y=-float_df['depth'],
                mode='lines',
                name=label,
                legendgroup=label,
                showlegend=False,
                line=dict(width=3, color=color),
                hovertemplate='Salinity: %{x} PSU<br>Depth: %{y}m<extra></extra>'
            ),
            row=1, col=2
        )

    fig.update_xaxes(title_text="Temperature (°C)", row=1, col=1)
    fig.update_xaxes(title_text="Salinity (PSU)", row=1, col=2)
    fig.update_yaxes(title_text="Depth (m)", row=1, col=1)
    fig.update_yaxes(title_text="Depth (m)", row=1, col=2)

    fig.update_layout(height=600, title_text="Vertical Profiles")

    return fig


def padded_bounds(points: Iterable[Tuple[float, float]], pad: float = 0.1):
    """Bounding box [[south, west], [north, east]] grown by `pad` of its span on each side."""
    points = list(points)
    lats = [p[0] for p in points]
    lons = [p[1] for p in points]
    lat_pad = (max(lats) - min(lats)) * pad
    lon_pad = (max(lons) - min(lons)) * pad
    return [
        [min(lats) - lat_pad, min(lons) - lon_pad],
        [max(lats) + lat_pad, max(lons) + lon_pad],
    ]


class MapProvider(ABC):
    """Renders float locations for one map backend"""

    @abstractmethod
    def render(self, float_locations: Iterable, ocean_key: Optional[str] = None,
               user_location: Optional[Tuple[float, float]] = None):
        """Build a map showing regions, floats and the user's position"""
        pass


class FoliumMapProvider(MapProvider):

    def __init__(self, tiles: str = 'OpenStreetMap', zoom_start: int = 4):
        self.tiles = tiles
        self.zoom_start = zoom_start

    def render(self, float_locations: Iterable, ocean_key: Optional[str] = None,
               user_location: Optional[Tuple[float, float]] = None) -> folium.Map:
        center = user_location or DEFAULT_LOCATION

        m = folium.Map(
            location=list(center),
            zoom_start=self.zoom_start,
            tiles=self.tiles
        )

        for region in OCEAN_REGIONS.values():
            self._add_region(m, region, highlighted=(region.key == ocean_key))

        points = []
        for loc in float_locations:
            color = get_region(loc.ocean).color
            folium.CircleMarker(
                location=[loc.lat, loc.lon],
                radius=7,
                color=color,
                weight=2,
                fill=True,
                fill_color=color,
                fill_opacity=0.8,
                popup=folium.Popup(
                    f"<b>Float {loc.id}</b><br>"
                    f"Lat: {loc.lat:.4f}, Lon: {loc.lon:.4f}<br>"
                    f"Parameters: {', '.join(loc.parameters)}",
                    max_width=250
                ),
                tooltip=loc.id
            ).add_to(m)
            points.append((loc.lat, loc.lon))

        if user_location is not None:
            folium.Marker(
                location=list(user_location),
                popup=f"Your Location: {user_location[0]:.4f}°N, {user_location[1]:.4f}°E",
                tooltip="Your Location",
                icon=folium.Icon(color='red', icon='user', prefix='fa')
            ).add_to(m)

        # Zoom to the floats (and the user) once there are results
        if points:
            if user_location is not None:
                points.append(tuple(user_location))
            m.fit_bounds(padded_bounds(points))

        return m

    @staticmethod
    def _add_region(m: folium.Map, region: OceanRegion, highlighted: bool = False):
        traits = region.characteristics
        popup_html = (
            f"<h4>{region.name}</h4>"
            f"<p><b>Description:</b> {traits.description}</p>"
            f"<div>Avg Temperature: {traits.avg_temp}°C</div>"
            f"<div>Avg Salinity: {traits.avg_salinity} PSU</div>"
            f"<div>Avg Depth: {traits.depth}m</div>"
            f"<div>Currents: {traits.currents}</div>"
            f"<div>Features: {traits.features}</div>"
        )
        folium.Rectangle(
            bounds=[list(region.bounds[0]), list(region.bounds[1])],
            color=region.color,
            weight=5 if highlighted else 3,
            fill=True,
            fill_opacity=0.25 if highlighted else 0.1,
            dash_array='5, 5',
            tooltip=region.name,
            popup=folium.Popup(popup_html, max_width=300)
        ).add_to(m)


def get_map_provider(name: str, **kwargs) -> MapProvider:
    """Create the map provider selected in configuration"""
    if name == 'folium':
        return FoliumMapProvider(**kwargs)
    raise ValueError(f"Unsupported map provider: {name}")
