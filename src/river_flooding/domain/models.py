"""Typed records shared by the hydrological core.

Registry entries (landmarks, structures, dams) are static; impact records,
statistics and recommendations are derived and recomputed whenever the water
surface elevation changes. All models are frozen so a derivation can never be
mutated in place.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class LandmarkCategory(str, Enum):
    COMMERCIAL = "commercial"
    RESIDENTIAL = "residential"
    INFRASTRUCTURE = "infrastructure"
    SACRED_SITE = "sacred-site"
    CULTURAL = "cultural"
    AGRICULTURE = "agriculture"


class RiskLevel(str, Enum):
    """Depth-based risk tiers, ordered from dry to deepest."""
    SAFE = "safe"
    WARNING = "warning"
    ALERT = "alert"
    SEVERE = "severe"
    CRITICAL = "critical"


class Classification(str, Enum):
    SAFE = "safe"
    CAUTION = "caution"
    EMERGENCY = "emergency"


class StorageRisk(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


class BridgeState(str, Enum):
    OPEN = "OPEN"
    DANGER = "DANGER"
    CLOSED = "CLOSED"


Coordinates = Tuple[float, float]  # (lon, lat)


class Site(BaseModel):
    """Anything with a fixed elevation that can go under water."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coordinates: Coordinates
    elevation_msl: float
    risk_factor: float = Field(1.0, ge=0.0, le=1.0)


class Landmark(Site):
    kind: Literal["landmark"] = "landmark"
    category: LandmarkCategory


class Structure(Site):
    kind: Literal["structure"] = "structure"
    structure_type: Literal["bridge", "shelter"]


TrackedSite = Union[Landmark, Structure]


class FloodImpact(BaseModel):
    model_config = ConfigDict(frozen=True)

    site: TrackedSite = Field(..., discriminator="kind")
    is_flooded: bool
    submergence_depth: float
    risk_level: RiskLevel


class FloodStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_landmarks: int
    flooded_count: int
    critical_count: int
    inundation_percentage: int
    max_submergence_depth: float
    affected_areas: List[str]
    critical_assets: List[str]


class LossEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: float
    by_category: Dict[str, float]


class DamRegistryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    storage_pct: float
    discharge_cusecs: float = 0.0

    @property
    def storage_risk(self) -> StorageRisk:
        if self.storage_pct >= 95:
            return StorageRisk.CRITICAL
        if self.storage_pct >= 90:
            return StorageRisk.WARNING
        return StorageRisk.NORMAL


class BridgeStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    bridge: Structure
    status: BridgeState
    freeboard_m: float


class ImpactPreview(BaseModel):
    model_config = ConfigDict(frozen=True)

    baseline_wse: float
    recommended_wse: float
    baseline_flooded: int
    recommended_flooded: int
    newly_flooded: int
    incremental_loss: float


class DischargeRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    cusecs: float
    classification: Classification
    reasoning: str
    demand_cusecs: float
    safe_ceiling_cusecs: float
    limiting_site: Optional[str] = None
    preview: ImpactPreview


class FloodZone(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: float
    polygon: List[List[float]]
    color: str
    opacity: float


__all__ = [
    "LandmarkCategory", "RiskLevel", "Classification", "StorageRisk", "BridgeState",
    "Coordinates", "Site", "Landmark", "Structure", "TrackedSite", "FloodImpact",
    "FloodStatistics", "LossEstimate", "DamRegistryEntry", "BridgeStatus",
    "ImpactPreview", "DischargeRecommendation", "FloodZone",
]
