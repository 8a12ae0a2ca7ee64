"""Hydro-elevation formulas for the Godavari gauge at Nashik.

Contains pure computational utilities (no I/O) converting dam discharge to a
water surface elevation (WSE) and back.

The stage/discharge relation is linear: every 10,000 cusecs released raises
the gauge by 0.8 m above the 590 m MSL base level. Discharge saturates at
100,000 cusecs.
"""

__all__ = [
    "BASE_LEVEL", "CUSECS_TO_RISE", "RISE_FACTOR", "MAX_DISCHARGE_CUSECS",
    "INFLOW_PER_MM_HR", "RUNOFF_COEFFICIENT",
    "clamp_discharge", "calculate_wse", "discharge_for_wse", "predicted_inflow",
]

BASE_LEVEL = 590.0           # m MSL at zero discharge
CUSECS_TO_RISE = 10000.0
RISE_FACTOR = 0.8            # metres per CUSECS_TO_RISE
MAX_DISCHARGE_CUSECS = 100000.0

INFLOW_PER_MM_HR = 1200.0    # cusecs generated per mm/hr over the catchment
RUNOFF_COEFFICIENT = 0.6


def clamp_discharge(cusecs: float) -> float:
    """Clamp a discharge value into [0, MAX_DISCHARGE_CUSECS]."""
    return min(max(float(cusecs), 0.0), MAX_DISCHARGE_CUSECS)


def calculate_wse(cusecs: float) -> float:
    """Water surface elevation (m MSL, 1 decimal) for a dam discharge.

    WSE = BASE_LEVEL + (cusecs / CUSECS_TO_RISE) * RISE_FACTOR
    """
    rise = (clamp_discharge(cusecs) / CUSECS_TO_RISE) * RISE_FACTOR
    return round(BASE_LEVEL + rise, 1)


def discharge_for_wse(target_wse: float) -> float:
    """Inverse of :func:`calculate_wse`: discharge that lifts the gauge to ``target_wse``.

    Targets at or below the base level map to 0; targets above the saturated
    level map to the discharge cap.
    """
    cusecs = (float(target_wse) - BASE_LEVEL) / RISE_FACTOR * CUSECS_TO_RISE
    return round(clamp_discharge(cusecs), 1)


def predicted_inflow(rain_mm_hr: float) -> float:
    """Reservoir inflow (cusecs) expected from catchment rainfall intensity."""
    return max(0.0, float(rain_mm_hr)) * INFLOW_PER_MM_HR * RUNOFF_COEFFICIENT
