import pytest
from river_flooding.domain.models import Classification, Landmark, LandmarkCategory
from river_flooding.domain.optimizer import (
    inflow_demand,
    recommend_discharge,
    safe_ceiling,
    storage_pressure,
)


def test_storage_pressure_steps():
    assert storage_pressure(50) == 0
    assert storage_pressure(84.9) == 0
    assert storage_pressure(85) == 5_000
    assert storage_pressure(90) == 15_000
    assert storage_pressure(97) == 35_000


def test_inflow_demand_combines_rain_and_storage():
    assert inflow_demand(10, 86) == pytest.approx(10 * 1200 * 0.6 + 5_000)


def test_safe_ceiling_limited_by_lowest_dry_site():
    ceiling, site = safe_ceiling()
    # Tapovan (590.1 m) is the lowest site still dry at 590.0 m
    assert site.id == "tapovan"
    assert ceiling == pytest.approx(1250.0)


def test_safe_ceiling_with_no_dry_sites_is_cap():
    sunk = Landmark(id="sunk", name="Sunk", coordinates=(73.8, 20.0), elevation_msl=586.0,
                    category=LandmarkCategory.RESIDENTIAL, risk_factor=1.0)
    assert safe_ceiling([sunk]) == (100000.0, None)
    assert safe_ceiling([]) == (100000.0, None)


def test_no_demand_low_storage_holds_gates():
    rec = recommend_discharge(0.0, 50.0)
    assert rec.cusecs == 0
    assert rec.classification == Classification.SAFE
    assert rec.preview.newly_flooded == 0
    assert rec.preview.incremental_loss == 0


def test_no_rain_but_high_storage_not_auto_zero():
    rec = recommend_discharge(0.0, 82.0)
    # Storage >= 80 skips the no-release shortcut, demand is still zero
    assert rec.cusecs == 0
    assert rec.classification == Classification.SAFE


def test_demand_within_ceiling_is_safe():
    rec = recommend_discharge(1.0, 50.0)
    assert rec.cusecs == pytest.approx(720.0)
    assert rec.classification == Classification.SAFE
    assert rec.preview.newly_flooded == 0


def test_demand_above_ceiling_is_caution():
    rec = recommend_discharge(3.0, 50.0)
    assert rec.cusecs == pytest.approx(2160.0)
    assert rec.classification == Classification.CAUTION
    assert rec.limiting_site == "Tapovan Area"
    # WSE 590.0 -> 590.2 floods Tapovan
    assert rec.preview.recommended_wse == 590.2
    assert rec.preview.newly_flooded == 1
    assert rec.preview.incremental_loss == pytest.approx(
        800_000 * 0.2 + 220_000 * 0.2 + 220_000 * 0.1 * 0.98)


def test_demand_over_three_times_ceiling_is_emergency():
    rec = recommend_discharge(10.0, 50.0)
    assert rec.cusecs == pytest.approx(7200.0)
    assert rec.classification == Classification.EMERGENCY


def test_high_storage_is_emergency():
    rec = recommend_discharge(0.0, 92.0)
    assert rec.cusecs == pytest.approx(15_000)
    assert rec.classification == Classification.EMERGENCY
    assert "overtopping" in rec.reasoning


def test_recommendation_clamped_to_cap():
    rec = recommend_discharge(200.0, 96.0)
    assert rec.cusecs == 100000.0
    assert rec.demand_cusecs > 100000.0
    assert rec.preview.recommended_wse == 598.0


def test_negative_rain_treated_as_dry():
    assert recommend_discharge(-4.0, 50.0) == recommend_discharge(0.0, 50.0)
