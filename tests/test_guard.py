import pytest

import config
from config import CFG
from models import BASELINE, OPTIMAL, InvalidInput
from solver.guard import route


def test_small_room_runs_the_dp():
    decision = route(6, 4, OPTIMAL, max_dimension=125)
    assert decision.strategy == OPTIMAL
    assert not decision.fell_back


def test_oversized_room_falls_back_to_baseline():
    decision = route(1000, 1000, OPTIMAL, max_dimension=125)
    assert decision.strategy == BASELINE
    assert decision.requested == OPTIMAL
    assert decision.fell_back
    assert "1000x1000" in decision.fallback_reason


def test_each_dimension_is_bounded_on_its_own():
    assert route(126, 1, OPTIMAL, max_dimension=125).strategy == BASELINE
    assert route(1, 126, OPTIMAL, max_dimension=125).strategy == BASELINE
    assert route(125, 125, OPTIMAL, max_dimension=125).strategy == OPTIMAL


def test_baseline_request_never_flags_a_fallback():
    decision = route(5000, 5000, BASELINE, max_dimension=10)
    assert decision.strategy == BASELINE
    assert decision.fallback_reason is None


def test_default_cap_comes_from_config(monkeypatch):
    monkeypatch.setattr(CFG, "MAX_DP_DIMENSION", 5, raising=False)
    assert route(6, 4, OPTIMAL).strategy == BASELINE
    assert route(5, 4, OPTIMAL).strategy == OPTIMAL


def test_unknown_strategy_rejected():
    with pytest.raises(InvalidInput):
        route(2, 2, "greedy")


def test_cap_is_derived_from_the_operation_budget():
    assert config._derived_max_dimension(4_000_000) == 125
    assert config._derived_max_dimension(16) == 2
    assert config._derived_max_dimension(0) == 1
