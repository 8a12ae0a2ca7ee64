import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from river_flooding.api.v1.routes import api_router


@pytest.fixture(scope="module")
def client():
    app = FastAPI()
    app.include_router(api_router, prefix="/api/v1")
    with TestClient(app) as c:
        yield c


def test_simulate_happy_path(client: TestClient):
    resp = client.post("/api/v1/simulate", json={"discharge_cusecs": 35000, "rainfall_mm_per_hr": 4.2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["wse"] == 592.8
    assert body["stats"]["flooded_count"] == 5
    assert len(body["impacts"]) == 10
    bridge = next(i for i in body["impacts"] if i["site"]["id"] == "godavari-bridge")
    assert bridge["risk_level"] == "severe"
    assert bridge["submergence_depth"] == 4.8
    assert set(body["loss"]["by_category"]) >= {"agriculture", "commercial"}
    assert body["recommendation"]["classification"] in {"safe", "caution", "emergency"}


def test_simulate_saturates_large_discharge(client: TestClient):
    resp = client.post("/api/v1/simulate", json={"discharge_cusecs": 250000})
    assert resp.status_code == 200
    assert resp.json()["wse"] == 598.0


def test_simulate_rejects_negative_discharge(client: TestClient):
    resp = client.post("/api/v1/simulate", json={"discharge_cusecs": -1})
    assert resp.status_code == 422


def test_simulate_unknown_dam_404(client: TestClient):
    resp = client.post("/api/v1/simulate", json={"discharge_cusecs": 0, "dam_id": "atlantis"})
    assert resp.status_code == 404


def test_recommend_endpoint(client: TestClient):
    resp = client.post("/api/v1/recommend", json={"rainfall_mm_per_hr": 0, "storage_pct": 50})
    assert resp.status_code == 200
    body = resp.json()
    assert body["cusecs"] == 0
    assert body["classification"] == "safe"

    resp = client.post("/api/v1/recommend", json={"rainfall_mm_per_hr": 0, "dam_id": "waki"})
    assert resp.json()["classification"] == "emergency"


def test_impact_endpoint(client: TestClient):
    resp = client.get("/api/v1/impact", params={"cusecs": 0})
    assert resp.status_code == 200
    body = resp.json()
    assert body["wse"] == 590.0
    assert body["stats"]["flooded_count"] == 2
    assert len(body["landmarks"]["features"]) == 10


def test_bridges_endpoint(client: TestClient):
    body = client.get("/api/v1/bridges", params={"cusecs": 35000}).json()
    statuses = {f["properties"]["id"]: f["properties"]["status"] for f in body["bridges"]["features"]}
    assert statuses["victoria"] == "CLOSED"


def test_river_endpoint_with_zones(client: TestClient):
    resp = client.get("/api/v1/river", params={"cusecs": 60000, "strategy": "offset", "zones": True})
    assert resp.status_code == 200
    body = resp.json()
    ring = body["river"]["geometry"]["coordinates"][0]
    assert ring[0] == ring[-1]
    assert len(body["zones"]["features"]) == 5


def test_river_endpoint_rejects_unknown_strategy(client: TestClient):
    resp = client.get("/api/v1/river", params={"strategy": "spline"})
    assert resp.status_code == 422


def test_sitrep_and_dams(client: TestClient):
    resp = client.get("/api/v1/report/sitrep", params={"cusecs": 35000})
    assert resp.status_code == 200
    assert "SITREP" in resp.text

    dams = client.get("/api/v1/dams").json()
    assert len(dams) == 6
    waki = next(d for d in dams if d["id"] == "waki")
    assert waki["storage_risk"] == "warning"
    assert next(d for d in dams if d["primary"])["id"] == "gangapur"
