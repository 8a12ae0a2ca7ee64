"""Map-layer endpoints.

Each endpoint takes the driving discharge (cusecs) as a query parameter,
derives the water surface elevation and returns GeoJSON ready for the map:

- ``GET /impact``  landmark points with flood state plus aggregate statistics
- ``GET /bridges`` bridge points with OPEN / DANGER / CLOSED status
- ``GET /river``   river extent polygon and the five flood-zone bands
"""
from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Query

from river_flooding.domain.hydrology import calculate_wse
from river_flooding.domain.impact import assess_bridges, assess_flood_impact, calculate_flood_stats
from river_flooding.spatial.geojson_converter import (
    bridges_to_geojson,
    impacts_to_geojson,
    zones_to_geojson,
)
from river_flooding.spatial.river_geometry import get_flood_zones, river_feature

router = APIRouter()


@router.get("/impact")
def impact(cusecs: float = Query(0.0, ge=0, description="Dam discharge in cusecs")):
    wse = calculate_wse(cusecs)
    return {
        "wse": wse,
        "stats": calculate_flood_stats(wse).model_dump(),
        "landmarks": impacts_to_geojson(assess_flood_impact(wse)),
    }


@router.get("/bridges")
def bridges(cusecs: float = Query(0.0, ge=0)):
    wse = calculate_wse(cusecs)
    return {"wse": wse, "bridges": bridges_to_geojson(assess_bridges(wse))}


@router.get("/river")
def river(
    cusecs: float = Query(0.0, ge=0),
    strategy: Literal["buffer", "offset"] = Query("buffer"),
    zones: bool = Query(False, description="Include concentric flood-zone bands"),
):
    wse = calculate_wse(cusecs)
    body = {"wse": wse, "river": river_feature(wse, strategy)}
    if zones:
        body["zones"] = zones_to_geojson(get_flood_zones(wse, strategy))
    return body
