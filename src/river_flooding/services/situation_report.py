"""Plain-text situation report (SITREP) for district disaster management."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

import pytz

from river_flooding.domain.models import BridgeState, StorageRisk, Structure
from river_flooding.domain.registry import SAFE_SHELTERS
from river_flooding.services.flood_risk import FloodRiskSnapshot

IST = pytz.timezone("Asia/Kolkata")

UPSTREAM_CRITICAL_WSE = 596.0
METERING_WSE = 594.0

ADVISORY_EVACUATE = ("Immediate evacuation of low-lying zones. Enforce bridge closures "
                     "and pre-position NDRF boats.")
ADVISORY_METERING = ("Maintain traffic metering at Holkar; alert Ram Kund vendors; "
                     "keep pumps on standby.")
ADVISORY_MONITOR = ("Maintain monitoring posture; keep upstream gates under watch; "
                    "ready public address systems.")


def is_upstream_critical(snapshot: FloodRiskSnapshot) -> bool:
    return snapshot.wse >= UPSTREAM_CRITICAL_WSE or snapshot.dam.storage_risk == StorageRisk.CRITICAL


def advisory(snapshot: FloodRiskSnapshot) -> str:
    if is_upstream_critical(snapshot):
        return ADVISORY_EVACUATE
    if snapshot.wse >= METERING_WSE:
        return ADVISORY_METERING
    return ADVISORY_MONITOR


def active_shelters(wse: float, shelters: Sequence[Structure] = SAFE_SHELTERS) -> List[str]:
    """Shelters standing clear of the water, highest ground first."""
    dry = [s for s in shelters if s.elevation_msl > wse]
    return [s.name for s in sorted(dry, key=lambda s: s.elevation_msl, reverse=True)]


def incident_id(timestamp: datetime) -> str:
    return f"GS-{timestamp:%Y}-NSK-{int(timestamp.timestamp() * 1000)}"


def generate_situation_report(snapshot: FloodRiskSnapshot, timestamp: Optional[datetime] = None) -> str:
    """Render the SITREP for a snapshot. ``timestamp`` defaults to now (IST)."""
    ts = timestamp.astimezone(IST) if timestamp else datetime.now(IST)
    closed = [b.bridge.name for b in snapshot.bridges if b.status == BridgeState.CLOSED]
    submerged = snapshot.stats.affected_areas
    rec = snapshot.recommendation
    shelters = active_shelters(snapshot.wse) if submerged else []

    lines: List[str] = [
        "GOVERNMENT OF MAHARASHTRA | NASHIK DISTRICT DISASTER MANAGEMENT AUTHORITY",
        "OFFICIAL SITUATION REPORT (SITREP)",
        f"Incident ID: {incident_id(ts)}",
        f"Timestamp (IST): {ts.strftime('%Y-%m-%d %H:%M:%S %Z')}",
        "",
        "I. HYDROLOGICAL SUMMARY",
        f"- Rainfall: {snapshot.state.rainfall_mm_hr:.1f} mm/hr",
        f"- Water Surface Elevation: {snapshot.wse:.2f} m MSL",
        f"- Discharge (Official): {round(snapshot.state.discharge_cusecs):,} cusecs",
        f"- {snapshot.dam.name} storage: {snapshot.dam.storage_pct:.2f}% ({snapshot.dam.storage_risk.value})",
        f"- Upstream Critical: {'YES' if is_upstream_critical(snapshot) else 'NO'}",
        "",
        "II. INFRASTRUCTURE IMPACT",
        f"- Closed Bridges ({len(closed)}): {', '.join(closed) or 'None'}",
        f"- Submerged Landmarks ({len(submerged)}): {', '.join(submerged) or 'None'}",
        f"- Inundation: {snapshot.stats.inundation_percentage}% of tracked landmarks, "
        f"max depth {snapshot.stats.max_submergence_depth:.2f} m",
        f"- Estimated Loss: INR {snapshot.loss.total:,.0f}",
        "",
        "III. RELEASE ADVISORY",
        f"- Recommended discharge: {round(rec.cusecs):,} cusecs ({rec.classification.value.upper()})",
        f"- {rec.reasoning}",
        f"- Shelter Activation: {', '.join(shelters) or 'Standby'}",
        "",
        "IV. STRATEGIC ADVISORY",
        f"- {advisory(snapshot)}",
    ]
    return "\n".join(lines)
