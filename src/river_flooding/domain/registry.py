"""Static registries for the Godavari reach through Nashik.

Elevations are metres above mean sea level (MSL). Coordinates are
``(lon, lat)`` in WGS84. Everything here is loaded once at import and never
mutated.
"""
from typing import Dict, Tuple

from .models import DamRegistryEntry, Landmark, LandmarkCategory, Structure

__all__ = [
    "NASHIK_TOPOGRAPHY", "HYDRO_CONSTRAINTS", "BRIDGES", "SAFE_SHELTERS",
    "DAM_REGISTRY", "PRIMARY_DAM_ID", "GODAVARI_RIVER_PATH", "RIVER_PROPERTIES",
    "get_landmark", "get_dam",
]

# ----------------------------- Topography ---------------------------------- #

NASHIK_TOPOGRAPHY: Tuple[Landmark, ...] = (
    Landmark(id="ram-kund", name="Ram Kund", coordinates=(73.8297, 19.9982),
             elevation_msl=592.5, category=LandmarkCategory.SACRED_SITE, risk_factor=0.95),
    Landmark(id="kalaram-temple", name="Kalarama Temple", coordinates=(73.8276, 19.9988),
             elevation_msl=598.2, category=LandmarkCategory.SACRED_SITE, risk_factor=0.75),
    Landmark(id="tapovan", name="Tapovan Area", coordinates=(73.8190, 20.0010),
             elevation_msl=590.1, category=LandmarkCategory.RESIDENTIAL, risk_factor=0.98),
    Landmark(id="nashik-city-center", name="Nashik City Center", coordinates=(73.7900, 19.9975),
             elevation_msl=602.3, category=LandmarkCategory.COMMERCIAL, risk_factor=0.45),
    Landmark(id="godavari-bridge", name="Godavari Bridge", coordinates=(73.8050, 19.9965),
             elevation_msl=588.0, category=LandmarkCategory.INFRASTRUCTURE, risk_factor=1.0),
    Landmark(id="sundarnarayan-temple", name="Sundarnarayan Temple", coordinates=(73.8320, 20.0005),
             elevation_msl=605.8, category=LandmarkCategory.SACRED_SITE, risk_factor=0.15),
    Landmark(id="gangapur-settlement", name="Gangapur Settlement", coordinates=(73.8140, 19.9950),
             elevation_msl=587.5, category=LandmarkCategory.RESIDENTIAL, risk_factor=1.0),
    Landmark(id="nashik-ghats", name="Nashik Ghats (Stepped Banks)", coordinates=(73.8250, 19.9990),
             elevation_msl=591.0, category=LandmarkCategory.CULTURAL, risk_factor=0.9),
    Landmark(id="trimbak-road", name="Trimbak Road Elevation", coordinates=(73.7750, 19.9850),
             elevation_msl=610.5, category=LandmarkCategory.INFRASTRUCTURE, risk_factor=0.0),
    Landmark(id="panchvati-area", name="Panchvati (Five Trees)", coordinates=(73.8160, 20.0025),
             elevation_msl=595.3, category=LandmarkCategory.RESIDENTIAL, risk_factor=0.8),
)

HYDRO_CONSTRAINTS: Dict[str, float] = {
    "riverbed_elevation": 585.0,
    "spillway_level": 615.0,
    "minimum_viable_level": 590.0,
    "warning_level": 608.0,
    "danger_level": 612.0,
}

# ------------------------------ Logistics ---------------------------------- #

BRIDGES: Tuple[Structure, ...] = (
    Structure(id="holkar", name="Holkar Bridge", elevation_msl=594.5,
              coordinates=(73.8048, 20.0038), structure_type="bridge"),
    Structure(id="victoria", name="Victoria Bridge", elevation_msl=592.0,
              coordinates=(73.7998, 20.0053), structure_type="bridge"),
    Structure(id="amrutdham", name="Amrutdham Bridge", elevation_msl=598.0,
              coordinates=(73.7870, 20.0062), structure_type="bridge"),
    Structure(id="nashik-road", name="Nashik Road Overpass", elevation_msl=601.5,
              coordinates=(73.8100, 20.0010), structure_type="bridge"),
    Structure(id="dwarka", name="Dwarka Flyover", elevation_msl=600.0,
              coordinates=(73.7900, 20.0100), structure_type="bridge"),
)

SAFE_SHELTERS: Tuple[Structure, ...] = (
    Structure(id="mhasrul", name="Mhasrul Shelter", elevation_msl=612.0,
              coordinates=(73.7900, 20.0150), structure_type="shelter"),
    Structure(id="amrutdham-high-ground", name="Amrutdham High Ground", elevation_msl=608.0,
              coordinates=(73.7870, 20.0090), structure_type="shelter"),
    Structure(id="pathardi", name="Pathardi Command Post", elevation_msl=615.0,
              coordinates=(73.8300, 19.9930), structure_type="shelter"),
)

# -------------------------------- Dams ------------------------------------- #

# Maharashtra WRD Pravah bulletin, 15 Feb 2026.
DAM_REGISTRY: Tuple[DamRegistryEntry, ...] = (
    DamRegistryEntry(id="gangapur", name="Gangapur Dam", storage_pct=67.60),
    DamRegistryEntry(id="darna", name="Darna Dam", storage_pct=79.17),
    DamRegistryEntry(id="mukane", name="Mukane Dam", storage_pct=77.29),
    DamRegistryEntry(id="bhavali", name="Bhavali Dam", storage_pct=64.43),
    DamRegistryEntry(id="ozarkhed", name="Ozarkhed Dam", storage_pct=67.34),
    DamRegistryEntry(id="waki", name="Waki Dam", storage_pct=92.86),
)

PRIMARY_DAM_ID = "gangapur"

# -------------------------------- River ------------------------------------ #

# Centerline from Gangapur Dam (upstream, west) to downstream of the city.
GODAVARI_RIVER_PATH: Tuple[Tuple[float, float], ...] = (
    (73.72, 20.01),
    (73.74, 20.005),
    (73.76, 20.000),
    (73.775, 19.996),
    (73.785, 19.994),
    (73.7895, 19.9975),  # Ram Kund / Panchvati
    (73.805, 19.9965),   # ghats and bridges
    (73.82, 19.995),
    (73.85, 19.993),
    (73.88, 19.991),
    (73.92, 19.989),
)

RIVER_PROPERTIES: Dict[str, float] = {
    "normal_width_m": 80.0,
    "max_flood_width_m": 1200.0,
    "riverbed_elevation": HYDRO_CONSTRAINTS["riverbed_elevation"],
    "saturation_depth_m": 15.0,
}


def get_landmark(landmark_id: str) -> Landmark:
    for landmark in NASHIK_TOPOGRAPHY:
        if landmark.id == landmark_id:
            return landmark
    raise KeyError(landmark_id)


def get_dam(dam_id: str) -> DamRegistryEntry:
    for dam in DAM_REGISTRY:
        if dam.id == dam_id:
            return dam
    raise KeyError(dam_id)
