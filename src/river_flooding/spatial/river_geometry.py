"""River extent polygons for map rendering.

The channel widens with depth above the riverbed along a convex curve:

    width_factor = min(1, depth / 15)
    width_m      = normal_width + (max_flood_width - normal_width) * width_factor ** 1.5

and each bank sits ``width_m / 2`` from the centerline. Two strategies build
the polygon from the centerline:

``"buffer"`` (default)
    Metric buffer of the centerline LineString in its local UTM zone
    (GeoPandas reprojection + Shapely buffer). Robust to sharp bends.
``"offset"``
    Perpendicular offset of every vertex using the forward segment direction
    (previous segment for the final vertex), with a flat 111 km/degree
    conversion. Left bank forward, right bank reversed.

Both return a closed ring of ``[lon, lat]`` pairs (first == last).

Dependencies: geopandas, shapely
"""
from __future__ import annotations

import math
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

import geopandas as gpd
from shapely.geometry import LineString

from river_flooding.domain.models import FloodZone
from river_flooding.domain.registry import GODAVARI_RIVER_PATH, RIVER_PROPERTIES

__all__ = [
    "STRATEGIES", "ZONE_COUNT", "river_depth", "width_factor", "river_width_m",
    "get_river_polygon", "river_feature", "flood_zone_color", "get_flood_zones",
]

STRATEGIES = ("buffer", "offset")
ZONE_COUNT = 5
BUFFER_RESOLUTION = 16     # segments per quarter circle on bends and caps
METERS_PER_DEGREE = 111000.0

Ring = List[List[float]]


def river_depth(wse: float) -> float:
    return max(0.0, wse - RIVER_PROPERTIES["riverbed_elevation"])


def width_factor(wse: float) -> float:
    return min(1.0, river_depth(wse) / RIVER_PROPERTIES["saturation_depth_m"])


def river_width_m(wse: float) -> float:
    normal = RIVER_PROPERTIES["normal_width_m"]
    flood = RIVER_PROPERTIES["max_flood_width_m"]
    return normal + (flood - normal) * width_factor(wse) ** 1.5


@lru_cache(maxsize=256)
def _buffered_ring(path: Tuple[Tuple[float, float], ...], half_width_m: float) -> Tuple[Tuple[float, float], ...]:
    line = gpd.GeoSeries([LineString(path)], crs="EPSG:4326")
    utm = line.estimate_utm_crs()
    buffered = line.to_crs(utm).buffer(half_width_m, resolution=BUFFER_RESOLUTION).to_crs("EPSG:4326")
    return tuple((x, y) for x, y in buffered.iloc[0].exterior.coords)


def _offset_ring(path: Sequence[Tuple[float, float]], half_width_m: float) -> Ring:
    half_deg = half_width_m / METERS_PER_DEGREE
    left: Ring = []
    right: Ring = []
    for i, (lon, lat) in enumerate(path):
        if i < len(path) - 1:
            nxt_lon, nxt_lat = path[i + 1]
            dx, dy = nxt_lon - lon, nxt_lat - lat
        else:
            prev_lon, prev_lat = path[i - 1]
            dx, dy = lon - prev_lon, lat - prev_lat
        length = math.hypot(dx, dy)
        # unit normal (segment direction rotated 90 degrees)
        perp_lon, perp_lat = -dy / length, dx / length
        left.append([lon + perp_lon * half_deg, lat + perp_lat * half_deg])
        right.append([lon - perp_lon * half_deg, lat - perp_lat * half_deg])
    return left + right[::-1] + [list(left[0])]


def get_river_polygon(
    wse: float,
    strategy: str = "buffer",
    path: Optional[Sequence[Tuple[float, float]]] = None,
) -> Ring:
    """Closed ring of ``[lon, lat]`` pairs outlining the river at ``wse``."""
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown river geometry strategy: {strategy!r}")
    path = tuple(tuple(p) for p in (path if path is not None else GODAVARI_RIVER_PATH))
    # joined centerline segments repeat their shared vertex
    path = tuple(p for i, p in enumerate(path) if i == 0 or p != path[i - 1])
    if len(path) < 2:
        raise ValueError("River centerline needs at least two vertices")
    half_width = river_width_m(wse) / 2
    if strategy == "offset":
        return _offset_ring(path, half_width)
    return [list(pt) for pt in _buffered_ring(path, half_width)]


def river_feature(wse: float, strategy: str = "buffer") -> Dict:
    """GeoJSON Feature of the river extent, with width metadata."""
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [get_river_polygon(wse, strategy)]},
        "properties": {
            "wse": wse,
            "depth_m": round(river_depth(wse), 2),
            "width_m": round(river_width_m(wse), 1),
            "strategy": strategy,
        },
    }


def flood_zone_color(factor: float) -> str:
    if factor < 0.25:
        return "#10b981"  # emerald
    if factor < 0.5:
        return "#3b82f6"  # blue
    if factor < 0.75:
        return "#f59e0b"  # amber
    return "#ef4444"      # red


def get_flood_zones(wse: float, strategy: str = "buffer") -> List[FloodZone]:
    """Concentric bands between the riverbed and the current WSE, shallowest first."""
    riverbed = RIVER_PROPERTIES["riverbed_elevation"]
    depth = river_depth(wse)
    zones = []
    for i in range(ZONE_COUNT):
        factor = (i + 1) / ZONE_COUNT
        level = riverbed + depth * factor
        zones.append(FloodZone(
            level=level,
            polygon=get_river_polygon(level, strategy),
            color=flood_zone_color(factor),
            opacity=0.3 + factor * 0.4,
        ))
    return zones
