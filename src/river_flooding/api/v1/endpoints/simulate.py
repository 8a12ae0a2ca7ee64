"""FastAPI endpoints for evaluating a simulation state and recommending releases.

``POST /simulate`` accepts a dam discharge (cusecs), catchment rainfall
(mm/hr) and dam id, and returns the full flood-risk snapshot: water surface
elevation, per-site impacts, statistics, loss estimate, bridge statuses and
the optimizer's recommendation.

``POST /recommend`` runs only the discharge optimizer.

Notes
-----
- Discharge above 100,000 cusecs is accepted and silently saturated by the
  hydro-elevation model; negative values are rejected by validation.
- An unknown ``dam_id`` returns 404.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from river_flooding.domain.models import DischargeRecommendation
from river_flooding.domain.optimizer import recommend_discharge
from river_flooding.domain.registry import PRIMARY_DAM_ID, get_dam
from river_flooding.services.flood_risk import FloodRiskSnapshot, SimulationState, evaluate

router = APIRouter()


class SimRequest(BaseModel):
    """Request body schema for the simulation endpoint.

    Attributes
    ----------
    discharge_cusecs:
        Official dam outflow in cubic feet per second (>= 0).
    rainfall_mm_per_hr:
        Catchment rainfall intensity in millimetres per hour (>= 0).
    dam_id:
        Registry id of the dam whose storage drives the optimizer.
    """
    discharge_cusecs: float = Field(..., ge=0, examples=[35000])
    rainfall_mm_per_hr: float = Field(0.0, ge=0, examples=[4.2])
    dam_id: str = Field(PRIMARY_DAM_ID, examples=["gangapur"])


class RecommendRequest(BaseModel):
    rainfall_mm_per_hr: float = Field(..., ge=0, examples=[12.5])
    # Overrides the registry storage when provided
    storage_pct: Optional[float] = Field(None, ge=0, le=100, examples=[88.0])
    dam_id: str = Field(PRIMARY_DAM_ID, examples=["gangapur"])


@router.post("/simulate", response_model=FloodRiskSnapshot)
def simulate(req: SimRequest):
    """Evaluate the flood-risk snapshot for the requested state."""
    state = SimulationState(
        discharge_cusecs=req.discharge_cusecs,
        rainfall_mm_hr=req.rainfall_mm_per_hr,
        dam_id=req.dam_id,
    )
    try:
        return evaluate(state)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown dam: {req.dam_id}")


@router.post("/recommend", response_model=DischargeRecommendation)
def recommend(req: RecommendRequest):
    storage = req.storage_pct
    if storage is None:
        try:
            storage = get_dam(req.dam_id).storage_pct
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Unknown dam: {req.dam_id}")
    return recommend_discharge(req.rainfall_mm_per_hr, storage)
