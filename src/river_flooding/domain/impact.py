"""Flood impact assessment over tracked sites.

Given a water surface elevation (WSE), every site in the registry is checked
for submergence and placed in a depth-based risk tier:

============  =======================
depth (m)     risk level
============  =======================
> 5           critical
> 2           severe
> 0.5         alert
> 0           warning
0             safe
============  =======================

Thresholds use strict ``>`` so a depth sitting exactly on a boundary falls in
the lower tier. Depth is rounded to centimetres before classification, so
float noise cannot push a site across a tier boundary. Flooding itself is
decided on the unrounded elevations: a site a few millimetres under water
reports ``is_flooded`` with a depth of 0.0 and sits in the ``warning`` tier.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .models import (
    BridgeState,
    BridgeStatus,
    FloodImpact,
    FloodStatistics,
    RiskLevel,
    Site,
    Structure,
)
from .registry import BRIDGES, NASHIK_TOPOGRAPHY

__all__ = [
    "RISK_THRESHOLDS", "BRIDGE_DANGER_FREEBOARD_M",
    "submergence_depth", "classify_depth", "assess_site", "assess_flood_impact",
    "calculate_flood_stats", "critical_landmarks", "bridge_status", "assess_bridges",
]

# Evaluated top-down, first match wins.
RISK_THRESHOLDS = (
    (5.0, RiskLevel.CRITICAL),
    (2.0, RiskLevel.SEVERE),
    (0.5, RiskLevel.ALERT),
    (0.0, RiskLevel.WARNING),
)

BRIDGE_DANGER_FREEBOARD_M = 0.5


def submergence_depth(wse: float, elevation_msl: float) -> float:
    """Depth of water over a site, floored at zero and rounded to 2 decimals."""
    return round(max(0.0, wse - elevation_msl), 2)


def classify_depth(depth: float) -> RiskLevel:
    for threshold, level in RISK_THRESHOLDS:
        if depth > threshold:
            return level
    return RiskLevel.SAFE


def assess_site(wse: float, site: Site) -> FloodImpact:
    depth = submergence_depth(wse, site.elevation_msl)
    flooded = wse > site.elevation_msl
    level = classify_depth(depth)
    if flooded and level == RiskLevel.SAFE:
        level = RiskLevel.WARNING
    return FloodImpact(
        site=site,
        is_flooded=flooded,
        submergence_depth=depth,
        risk_level=level,
    )


def assess_flood_impact(wse: float, sites: Optional[Sequence[Site]] = None) -> List[FloodImpact]:
    """One :class:`FloodImpact` per site, in registry order."""
    if sites is None:
        sites = NASHIK_TOPOGRAPHY
    return [assess_site(wse, site) for site in sites]


def calculate_flood_stats(wse: float, sites: Optional[Sequence[Site]] = None) -> FloodStatistics:
    """Aggregate counts and depths across all assessed sites.

    Empty registries and dry conditions produce zeros rather than errors.
    """
    impacts = assess_flood_impact(wse, sites)
    flooded = [i for i in impacts if i.is_flooded]
    critical = [i for i in flooded if i.risk_level in (RiskLevel.CRITICAL, RiskLevel.SEVERE)]
    total = len(impacts)
    pct = round(len(flooded) / total * 100) if total else 0
    return FloodStatistics(
        total_landmarks=total,
        flooded_count=len(flooded),
        critical_count=len(critical),
        inundation_percentage=pct,
        max_submergence_depth=max((i.submergence_depth for i in flooded), default=0.0),
        affected_areas=[i.site.name for i in flooded],
        critical_assets=[i.site.name for i in critical],
    )


def critical_landmarks(impacts: Sequence[FloodImpact]) -> List[FloodImpact]:
    """Flooded impacts beyond the shallow ``warning`` tier."""
    return [i for i in impacts if i.is_flooded and i.risk_level != RiskLevel.WARNING]


def bridge_status(wse: float, bridge: Structure) -> BridgeStatus:
    freeboard = round(bridge.elevation_msl - wse, 2)
    if wse > bridge.elevation_msl:
        state = BridgeState.CLOSED
    elif freeboard <= BRIDGE_DANGER_FREEBOARD_M:
        state = BridgeState.DANGER
    else:
        state = BridgeState.OPEN
    return BridgeStatus(bridge=bridge, status=state, freeboard_m=freeboard)


def assess_bridges(wse: float, bridges: Optional[Sequence[Structure]] = None) -> List[BridgeStatus]:
    if bridges is None:
        bridges = BRIDGES
    return [bridge_status(wse, b) for b in bridges]
