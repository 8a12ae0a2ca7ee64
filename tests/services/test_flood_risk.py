import pytest

from river_flooding.domain.models import BridgeState, Classification
from river_flooding.services.flood_risk import (
    SimulationState,
    evaluate,
    reset_simulation,
    set_simulated_rainfall,
    with_discharge,
)


def test_evaluate_snapshot_at_35000_cusecs():
    snap = evaluate(SimulationState(discharge_cusecs=35000))
    assert snap.wse == 592.8
    assert snap.stats.flooded_count == 5
    assert len(snap.impacts) == 10
    assert {i.site.name for i in snap.critical} == {
        "Tapovan Area", "Godavari Bridge", "Gangapur Settlement", "Nashik Ghats (Stepped Banks)",
    }
    bridges = {b.bridge.id: b.status for b in snap.bridges}
    assert bridges["victoria"] == BridgeState.CLOSED
    assert snap.dam.id == "gangapur"
    assert snap.loss.total > 0


def test_evaluate_uses_dam_storage_for_recommendation():
    snap = evaluate(SimulationState(discharge_cusecs=0, rainfall_mm_hr=0, dam_id="waki"))
    # Waki at 92.86 % storage forces a release
    assert snap.dam.storage_risk.value == "warning"
    assert snap.recommendation.classification == Classification.EMERGENCY
    assert snap.recommendation.cusecs == pytest.approx(15_000)


def test_state_transitions_return_new_states():
    state = SimulationState()
    louder = with_discharge(state, 150000)
    assert louder.discharge_cusecs == 100000
    assert state.discharge_cusecs == 0

    sim = set_simulated_rainfall(louder, -2.0)
    assert sim.rainfall_mm_hr == 0.0
    assert sim.is_simulating is True
    assert louder.is_simulating is False

    reset = reset_simulation(sim)
    assert reset == SimulationState()


def test_state_is_frozen():
    state = SimulationState()
    with pytest.raises(Exception):
        state.discharge_cusecs = 10


def test_unknown_dam_raises_key_error():
    with pytest.raises(KeyError):
        evaluate(SimulationState(dam_id="nowhere"))


def test_evaluate_is_pure():
    state = SimulationState(discharge_cusecs=42000, rainfall_mm_hr=6.5)
    assert evaluate(state) == evaluate(state)
