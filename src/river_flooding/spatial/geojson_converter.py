"""GeoJSON conversion for map layers.

Turns core outputs (flood impacts, bridge statuses, flood zones) into GeoJSON
FeatureCollections consumed by the map front end, and reads a hand-traced
centerline back from a GeoJSON file.

Coordinates are always ``[lon, lat]`` (WGS84), the GeoJSON/Mapbox convention.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

from shapely.geometry import LineString, MultiLineString, shape

from river_flooding.domain.models import BridgeStatus, FloodImpact, FloodZone

__all__ = [
    "feature_collection", "impacts_to_geojson", "bridges_to_geojson",
    "zones_to_geojson", "load_centerline",
]


def feature_collection(features: List[Dict]) -> Dict:
    return {"type": "FeatureCollection", "features": features}


def _point(coords: Tuple[float, float]) -> Dict:
    return {"type": "Point", "coordinates": [coords[0], coords[1]]}


def impacts_to_geojson(impacts: Sequence[FloodImpact]) -> Dict:
    """One Point feature per assessed site, flood state in ``properties``."""
    features = []
    for impact in impacts:
        site = impact.site
        props = {
            "id": site.id,
            "name": site.name,
            "kind": site.kind,
            "elevation_msl": site.elevation_msl,
            "is_flooded": impact.is_flooded,
            "submergence_depth": impact.submergence_depth,
            "risk_level": impact.risk_level.value,
        }
        if site.kind == "landmark":
            props["category"] = site.category.value
        features.append({"type": "Feature", "geometry": _point(site.coordinates), "properties": props})
    return feature_collection(features)


def bridges_to_geojson(statuses: Sequence[BridgeStatus]) -> Dict:
    features = [
        {
            "type": "Feature",
            "geometry": _point(s.bridge.coordinates),
            "properties": {
                "id": s.bridge.id,
                "name": s.bridge.name,
                "elevation_msl": s.bridge.elevation_msl,
                "status": s.status.value,
                "freeboard_m": s.freeboard_m,
            },
        }
        for s in statuses
    ]
    return feature_collection(features)


def zones_to_geojson(zones: Sequence[FloodZone]) -> Dict:
    features = []
    for idx, zone in enumerate(zones):
        features.append({
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [zone.polygon]},
            "properties": {
                "zone": idx,
                "level": round(zone.level, 2),
                "color": zone.color,
                "opacity": round(zone.opacity, 3),
            },
        })
    return feature_collection(features)


def load_centerline(source: Union[str, Path, Dict]) -> List[Tuple[float, float]]:
    """Concatenate every LineString in a GeoJSON FeatureCollection into one path.

    ``source`` may be a file path or an already-parsed FeatureCollection.
    Features of other geometry types are skipped.
    """
    if isinstance(source, dict):
        data = source
    else:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)
    coords: List[Tuple[float, float]] = []
    for feature in data.get("features", []):
        geom = feature.get("geometry")
        if not geom:
            continue
        shp = shape(geom)
        if isinstance(shp, LineString):
            lines = [shp]
        elif isinstance(shp, MultiLineString):
            lines = list(shp.geoms)
        else:
            continue
        for line in lines:
            coords.extend((x, y) for x, y, *_ in line.coords)
    return coords
