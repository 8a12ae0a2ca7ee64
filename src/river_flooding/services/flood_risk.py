"""Flood-risk snapshot over an explicit simulation state.

The caller (dashboard, API, CLI, simulation driver) owns a
:class:`SimulationState`; every change produces a new state and a fresh
:class:`FloodRiskSnapshot`. Nothing here holds or mutates shared state.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from river_flooding.domain.economics import estimate_loss
from river_flooding.domain.hydrology import calculate_wse, clamp_discharge, predicted_inflow
from river_flooding.domain.impact import (
    assess_bridges,
    assess_flood_impact,
    calculate_flood_stats,
    critical_landmarks,
)
from river_flooding.domain.models import (
    BridgeStatus,
    DamRegistryEntry,
    DischargeRecommendation,
    FloodImpact,
    FloodStatistics,
    LossEstimate,
)
from river_flooding.domain.optimizer import recommend_discharge
from river_flooding.domain.registry import PRIMARY_DAM_ID, get_dam


class SimulationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    discharge_cusecs: float = Field(0.0, ge=0)
    rainfall_mm_hr: float = Field(0.0, ge=0)
    dam_id: str = PRIMARY_DAM_ID
    is_simulating: bool = False


class FloodRiskSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: SimulationState
    wse: float
    predicted_inflow: float
    impacts: List[FloodImpact]
    critical: List[FloodImpact]
    stats: FloodStatistics
    loss: LossEstimate
    bridges: List[BridgeStatus]
    dam: DamRegistryEntry
    recommendation: DischargeRecommendation


def with_discharge(state: SimulationState, cusecs: float) -> SimulationState:
    return state.model_copy(update={"discharge_cusecs": clamp_discharge(cusecs)})


def set_simulated_rainfall(state: SimulationState, rain_mm_hr: float) -> SimulationState:
    """Enter simulation mode with the given catchment rainfall."""
    return state.model_copy(update={"rainfall_mm_hr": max(0.0, rain_mm_hr), "is_simulating": True})


def reset_simulation(state: Optional[SimulationState] = None) -> SimulationState:
    dam_id = state.dam_id if state is not None else PRIMARY_DAM_ID
    return SimulationState(dam_id=dam_id)


def evaluate(state: SimulationState) -> FloodRiskSnapshot:
    """Recompute every derivation for ``state``.

    Raises ``KeyError`` for an unknown ``dam_id``.
    """
    dam = get_dam(state.dam_id)
    wse = calculate_wse(state.discharge_cusecs)
    impacts = assess_flood_impact(wse)
    return FloodRiskSnapshot(
        state=state,
        wse=wse,
        predicted_inflow=predicted_inflow(state.rainfall_mm_hr),
        impacts=impacts,
        critical=critical_landmarks(impacts),
        stats=calculate_flood_stats(wse),
        loss=estimate_loss(wse),
        bridges=assess_bridges(wse),
        dam=dam,
        recommendation=recommend_discharge(state.rainfall_mm_hr, dam.storage_pct),
    )
