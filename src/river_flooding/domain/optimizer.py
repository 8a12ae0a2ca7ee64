"""Advisory dam-release recommendation.

Each call is a stateless computation from catchment rainfall and dam storage:

1. Demand = predicted inflow from rainfall plus a storage-pressure allowance
   that steps up as the reservoir crosses 85 / 90 / 95 % of capacity.
2. Safe ceiling = the discharge at which the lowest site that is dry at zero
   release would just begin to flood (inverse of the stage/discharge relation).
3. Policy: no release when there is no demand and storage is comfortable;
   release the demand when it fits under the ceiling; otherwise still release
   the demand (the dam must pass its inflow) and escalate the classification.

The recommendation carries an impact preview comparing flooded-site count and
estimated loss at the recommended WSE against the zero-discharge baseline.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .economics import estimate_loss
from .hydrology import (
    MAX_DISCHARGE_CUSECS,
    calculate_wse,
    clamp_discharge,
    discharge_for_wse,
    predicted_inflow,
)
from .impact import calculate_flood_stats
from .models import Classification, DischargeRecommendation, ImpactPreview, Landmark, Site
from .registry import BRIDGES, NASHIK_TOPOGRAPHY

logger = logging.getLogger(__name__)

__all__ = [
    "STORAGE_PRESSURE_STEPS", "COMFORTABLE_STORAGE_PCT", "EMERGENCY_STORAGE_PCT",
    "CEILING_OVERRUN_FACTOR", "storage_pressure", "inflow_demand", "safe_ceiling",
    "impact_preview", "recommend_discharge",
]

# (storage %, extra cusecs), cumulative as each threshold is crossed
STORAGE_PRESSURE_STEPS = (
    (85.0, 5_000.0),
    (90.0, 10_000.0),
    (95.0, 20_000.0),
)
COMFORTABLE_STORAGE_PCT = 80.0
EMERGENCY_STORAGE_PCT = 90.0
CEILING_OVERRUN_FACTOR = 3.0


def storage_pressure(storage_pct: float) -> float:
    """Extra release allowance (cusecs) demanded by reservoir fill level."""
    return sum(extra for threshold, extra in STORAGE_PRESSURE_STEPS if storage_pct >= threshold)


def inflow_demand(rain_mm_hr: float, storage_pct: float) -> float:
    return predicted_inflow(rain_mm_hr) + storage_pressure(storage_pct)


def safe_ceiling(sites: Optional[Sequence[Site]] = None) -> Tuple[float, Optional[Site]]:
    """Largest discharge that keeps every currently-dry site dry.

    Returns the ceiling and the limiting site. Sites already under water at
    zero discharge are ignored; with no dry site left the ceiling is the cap.
    """
    if sites is None:
        sites = tuple(NASHIK_TOPOGRAPHY) + tuple(BRIDGES)
    baseline = calculate_wse(0)
    dry = [s for s in sites if s.elevation_msl > baseline]
    if not dry:
        return MAX_DISCHARGE_CUSECS, None
    lowest = min(dry, key=lambda s: s.elevation_msl)
    return discharge_for_wse(lowest.elevation_msl), lowest


def impact_preview(cusecs: float, landmarks: Optional[Sequence[Landmark]] = None) -> ImpactPreview:
    baseline_wse = calculate_wse(0)
    recommended_wse = calculate_wse(cusecs)
    base_stats = calculate_flood_stats(baseline_wse, landmarks)
    rec_stats = calculate_flood_stats(recommended_wse, landmarks)
    base_loss = estimate_loss(baseline_wse, landmarks).total
    rec_loss = estimate_loss(recommended_wse, landmarks).total
    return ImpactPreview(
        baseline_wse=baseline_wse,
        recommended_wse=recommended_wse,
        baseline_flooded=base_stats.flooded_count,
        recommended_flooded=rec_stats.flooded_count,
        newly_flooded=rec_stats.flooded_count - base_stats.flooded_count,
        incremental_loss=round(rec_loss - base_loss, 2),
    )


def recommend_discharge(
    rain_mm_hr: float,
    storage_pct: float,
    landmarks: Optional[Sequence[Landmark]] = None,
    structures: Optional[Sequence[Site]] = None,
) -> DischargeRecommendation:
    """Recommend a release for the given rainfall (mm/hr) and storage (%)."""
    rain = max(0.0, float(rain_mm_hr))
    demand = inflow_demand(rain, storage_pct)
    tracked = tuple(landmarks if landmarks is not None else NASHIK_TOPOGRAPHY)
    tracked += tuple(structures if structures is not None else BRIDGES)
    ceiling, limiting = safe_ceiling(tracked)

    if demand <= 0 and storage_pct < COMFORTABLE_STORAGE_PCT:
        cusecs = 0.0
        classification = Classification.SAFE
        reasoning = (f"No catchment inflow and dam at {storage_pct:.1f}% storage. "
                     f"Holding gates closed.")
    elif demand <= ceiling:
        cusecs = demand
        classification = Classification.SAFE
        reasoning = (f"Catchment rain at {rain:.1f} mm/hr, dam at {storage_pct:.1f}%. "
                     f"Releasing {demand:,.0f} cusecs stays under the "
                     f"{ceiling:,.0f} cusecs safe ceiling.")
    else:
        cusecs = demand
        if storage_pct >= EMERGENCY_STORAGE_PCT or demand > CEILING_OVERRUN_FACTOR * ceiling:
            classification = Classification.EMERGENCY
        else:
            classification = Classification.CAUTION
        site_name = limiting.name if limiting is not None else "downstream sites"
        reasoning = (f"Catchment rain at {rain:.1f} mm/hr, dam at {storage_pct:.1f}%. "
                     f"Inflow of {demand:,.0f} cusecs exceeds the {ceiling:,.0f} cusecs "
                     f"safe ceiling set by {site_name}; release must track inflow "
                     f"to avoid overtopping.")

    cusecs = clamp_discharge(cusecs)
    logger.debug("recommendation rain=%.2f storage=%.2f demand=%.1f ceiling=%.1f -> %s",
                 rain, storage_pct, demand, ceiling, classification.value)
    return DischargeRecommendation(
        cusecs=cusecs,
        classification=classification,
        reasoning=reasoning,
        demand_cusecs=round(demand, 1),
        safe_ceiling_cusecs=ceiling,
        limiting_site=limiting.name if limiting is not None else None,
        preview=impact_preview(cusecs, landmarks),
    )
