"""Pure hydrological core (no I/O)."""
from .hydrology import calculate_wse, discharge_for_wse, predicted_inflow
from .impact import assess_flood_impact, calculate_flood_stats, assess_bridges
from .economics import estimate_loss
from .optimizer import recommend_discharge

__all__ = [
    "calculate_wse", "discharge_for_wse", "predicted_inflow",
    "assess_flood_impact", "calculate_flood_stats", "assess_bridges",
    "estimate_loss", "recommend_discharge",
]
