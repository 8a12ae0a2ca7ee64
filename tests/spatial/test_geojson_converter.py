import json
import pytest

shapely = pytest.importorskip("shapely")

from river_flooding.domain.impact import assess_bridges, assess_flood_impact
from river_flooding.domain.registry import BRIDGES, get_landmark
from river_flooding.spatial.geojson_converter import (
    bridges_to_geojson,
    impacts_to_geojson,
    load_centerline,
    zones_to_geojson,
)
from river_flooding.domain.models import FloodZone


def test_impacts_to_geojson_points_and_properties():
    impacts = assess_flood_impact(592.8, [get_landmark("godavari-bridge"), BRIDGES[0]])
    fc = impacts_to_geojson(impacts)
    assert fc["type"] == "FeatureCollection"
    first, second = fc["features"]
    assert first["geometry"] == {"type": "Point", "coordinates": [73.8050, 19.9965]}
    assert first["properties"]["risk_level"] == "severe"
    assert first["properties"]["category"] == "infrastructure"
    assert second["properties"]["kind"] == "structure"
    assert "category" not in second["properties"]
    # Must be JSON serialisable as-is
    json.dumps(fc)


def test_bridges_to_geojson():
    fc = bridges_to_geojson(assess_bridges(593.0))
    statuses = {f["properties"]["id"]: f["properties"]["status"] for f in fc["features"]}
    assert statuses["victoria"] == "CLOSED"
    assert statuses["holkar"] == "OPEN"


def test_zones_to_geojson():
    ring = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]
    zones = [FloodZone(level=587.123, polygon=ring, color="#10b981", opacity=0.38)]
    fc = zones_to_geojson(zones)
    feature = fc["features"][0]
    assert feature["geometry"]["coordinates"] == [ring]
    assert feature["properties"]["level"] == 587.12
    assert feature["properties"]["zone"] == 0


def test_load_centerline_concatenates_linestrings(tmp_path):
    data = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[73.70, 20.0], [73.71, 20.0]]}},
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [73.8, 20.0]}},
            {"type": "Feature", "geometry": None},
            {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[73.72, 19.99], [73.73, 19.98]]}},
        ],
    }
    path = tmp_path / "trace.geojson"
    path.write_text(json.dumps(data), encoding="utf-8")
    coords = load_centerline(path)
    assert coords == [(73.70, 20.0), (73.71, 20.0), (73.72, 19.99), (73.73, 19.98)]
    assert load_centerline(data) == coords
