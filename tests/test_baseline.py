import pytest

from models import InvalidInput, TileCatalog
from solver.baseline import grid_count, solve_baseline
from tests.data import catalog, coverage_grid, sample_catalog


def test_sample_room_picks_cheapest_single_type():
    cov = solve_baseline(6, 4, sample_catalog())
    assert cov.total_cost == 18
    assert cov.counts == {"B": 6}


def test_grid_count_rounds_each_side_up():
    cat = sample_catalog().by_id()
    assert grid_count(6, 4, cat["A"]) == 24
    assert grid_count(6, 4, cat["B"]) == 6
    assert grid_count(6, 4, cat["C"]) == 4


def test_overhang_tiles_are_counted_in_full():
    cov = solve_baseline(5, 5, catalog(("E", 4, 1)))
    assert cov.counts == {"E": 4}
    assert cov.total_cost == 4
    assert sorted((p.x, p.y) for p in cov.placements) == [(0, 0), (0, 4), (4, 0), (4, 4)]


def test_cost_tie_prefers_fewer_tiles():
    cov = solve_baseline(4, 4, catalog(("X", 2, 1), ("Y", 4, 4)))
    assert cov.total_cost == 4
    assert cov.counts == {"Y": 1}


def test_full_tie_prefers_smallest_id():
    cov = solve_baseline(3, 2, catalog(("b", 1, 1), ("a", 1, 1)))
    assert cov.counts == {"a": 6}


def test_zero_area_room_costs_nothing():
    cov = solve_baseline(0, 7, sample_catalog())
    assert cov.total_cost == 0
    assert cov.counts == {}


def test_placements_cover_the_room():
    cov = solve_baseline(7, 3, catalog(("B", 2, 3)))
    grid = coverage_grid(cov.placements, 7, 3)
    assert all(cell >= 1 for row in grid for cell in row)
    assert len(cov.placements) == cov.counts["B"] == 8


def test_placements_can_be_skipped():
    cov = solve_baseline(6, 4, sample_catalog(), with_placements=False)
    assert cov.placements == []
    assert cov.total_cost == 18


def test_negative_dimension_rejected():
    with pytest.raises(InvalidInput):
        solve_baseline(-1, 4, sample_catalog())


def test_empty_catalog_rejected():
    with pytest.raises(InvalidInput):
        TileCatalog.of([])
    with pytest.raises(InvalidInput):
        solve_baseline(2, 2, None)
