"""Depth-weighted economic loss estimate.

This is a relative risk-ranking signal, not a calibrated financial model:

    loss = category_weight * submergence_depth * risk_factor

summed over every landmark whose elevation lies strictly below the water
surface. Weights are INR per metre of depth and live in ``ECONOMIC_WEIGHTS``
so they can be tuned without touching the formula.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from .impact import submergence_depth
from .models import Landmark, LandmarkCategory, LossEstimate
from .registry import NASHIK_TOPOGRAPHY

__all__ = ["ECONOMIC_WEIGHTS", "DEFAULT_WEIGHT_KEY", "category_weight", "landmark_loss", "estimate_loss"]

DEFAULT_WEIGHT_KEY = "default"

ECONOMIC_WEIGHTS: Dict[str, float] = {
    LandmarkCategory.COMMERCIAL.value: 550_000,
    LandmarkCategory.RESIDENTIAL.value: 220_000,
    LandmarkCategory.INFRASTRUCTURE.value: 800_000,
    LandmarkCategory.SACRED_SITE.value: 350_000,
    LandmarkCategory.CULTURAL.value: 300_000,
    DEFAULT_WEIGHT_KEY: 250_000,
}


def category_weight(category: str, weights: Mapping[str, float] = ECONOMIC_WEIGHTS) -> float:
    key = category.value if isinstance(category, LandmarkCategory) else category
    return weights.get(key, weights[DEFAULT_WEIGHT_KEY])


def landmark_loss(wse: float, landmark: Landmark, weights: Mapping[str, float] = ECONOMIC_WEIGHTS) -> float:
    if wse <= landmark.elevation_msl:
        return 0.0
    depth = submergence_depth(wse, landmark.elevation_msl)
    return category_weight(landmark.category, weights) * depth * landmark.risk_factor


def estimate_loss(
    wse: float,
    landmarks: Optional[Sequence[Landmark]] = None,
    weights: Mapping[str, float] = ECONOMIC_WEIGHTS,
) -> LossEstimate:
    """Total and per-category loss; every category is reported, zero or not."""
    if landmarks is None:
        landmarks = NASHIK_TOPOGRAPHY
    by_category: Dict[str, float] = {c.value: 0.0 for c in LandmarkCategory}
    total = 0.0
    for landmark in landmarks:
        loss = landmark_loss(wse, landmark, weights)
        by_category[landmark.category.value] += loss
        total += loss
    return LossEstimate(total=total, by_category=by_category)
