"""Reporting endpoints: situation report text and dam registry status."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from river_flooding.domain.registry import DAM_REGISTRY, PRIMARY_DAM_ID
from river_flooding.services.flood_risk import SimulationState, evaluate
from river_flooding.services.situation_report import generate_situation_report

router = APIRouter()


@router.get("/report/sitrep", response_class=PlainTextResponse)
def sitrep(
    cusecs: float = Query(0.0, ge=0),
    rainfall: float = Query(0.0, ge=0, description="Catchment rainfall in mm/hr"),
    dam_id: str = Query(PRIMARY_DAM_ID),
):
    state = SimulationState(discharge_cusecs=cusecs, rainfall_mm_hr=rainfall, dam_id=dam_id)
    try:
        snapshot = evaluate(state)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown dam: {dam_id}")
    return generate_situation_report(snapshot)


@router.get("/dams")
def dams():
    return [
        {**d.model_dump(), "storage_risk": d.storage_risk.value, "primary": d.id == PRIMARY_DAM_ID}
        for d in DAM_REGISTRY
    ]
