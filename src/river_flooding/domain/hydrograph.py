"""Predictive inflow/outflow hydrograph around the current hour."""
from typing import Dict, List, Optional, Sequence

__all__ = [
    "HOURS_BACK", "TOTAL_POINTS", "INFLOW_FACTOR", "RIVER_CAPACITY",
    "build_hydrograph", "find_peak", "find_intersection", "find_recession",
]

HOURS_BACK = 6
TOTAL_POINTS = 24
INFLOW_FACTOR = 1500          # cusecs per mm/hr
RIVER_CAPACITY = 18000        # cusecs the channel carries before spilling
PAST_DECAY = 0.82
TAIL_DECAY = 0.85


def build_hydrograph(current_rainfall: float, forecast: Sequence[float], discharge: float) -> List[Dict]:
    """Hourly series from T-6 to T+17.

    Past hours decay geometrically back from the current rainfall, forecast
    hours use ``forecast`` (mm/hr) directly and the remainder tails off from
    the last forecast value.
    """
    if forecast:
        tail = forecast[-1]
    else:
        tail = max(current_rainfall * 0.7, 0.0)
    outflow = max(0, round(discharge))

    series = []
    for idx in range(TOTAL_POINTS):
        offset = idx - HOURS_BACK
        if offset < 0:
            rain = max(current_rainfall * PAST_DECAY ** abs(offset), 0.0)
        elif offset < len(forecast):
            rain = max(forecast[offset], 0.0)
        else:
            rain = max(tail * TAIL_DECAY ** (offset - len(forecast) + 1), 0.0)
        inflow = round(rain * INFLOW_FACTOR)
        if offset == 0:
            label = "NOW"
        elif offset < 0:
            label = f"T{offset}"
        else:
            label = f"T+{offset}"
        series.append({
            "time": label,
            "offset": offset,
            "rain_mm_hr": round(rain, 3),
            "inflow": inflow,
            "outflow": outflow,
            "danger": inflow > outflow,
            "over_capacity": inflow > RIVER_CAPACITY,
        })
    return series


def find_peak(series: Sequence[Dict]) -> Optional[Dict]:
    peak = None
    for point in series:
        if peak is None or point["inflow"] > peak["inflow"]:
            peak = point
    return peak


def find_intersection(series: Sequence[Dict]) -> Optional[Dict]:
    """First point where inflow exceeds outflow."""
    return next((p for p in series if p["inflow"] > p["outflow"]), None)


def find_recession(series: Sequence[Dict], peak_offset: int) -> Optional[Dict]:
    """First point after the peak where outflow catches up with inflow."""
    return next((p for p in series if p["offset"] > peak_offset and p["inflow"] <= p["outflow"]), None)
