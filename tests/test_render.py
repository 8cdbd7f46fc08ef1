from models import BASELINE, OPTIMAL, Placed, SolveResult, TileCatalog, TileType
from render import ascii_grid, render_result
from solver.assembler import assemble
from solver.orchestrator import solve
from tests.data import catalog, sample_catalog


def _row_of_units(*ids):
    """A feasible 1xN result with one unit tile of each id, left to right."""
    tiles = [TileType(tid, 1, 1) for tid in ids]
    cat = TileCatalog.of(tiles)
    return SolveResult(
        length=1,
        width=len(ids),
        requested_strategy=OPTIMAL,
        strategy=OPTIMAL,
        feasible=True,
        total_cost=len(ids),
        usage=assemble({t.id: 1 for t in tiles}, cat, len(ids)),
        placements=[Placed(0, y, t) for y, t in enumerate(tiles)],
    )


def test_ascii_grid_marks_tile_corners():
    result = solve(2, 4, catalog(("B", 2, 3)), OPTIMAL)
    text = ascii_grid(result)
    lines = text.splitlines()
    assert lines[0] == "Grid visualization (2x4):"
    assert lines[1:3] == ["B b B b", "b b b b"]
    assert lines[-1] == "Legend: B = B (2x2) x2"


def test_ascii_grid_clips_overhang():
    result = solve(3, 3, catalog(("B", 2, 3)), BASELINE)
    lines = ascii_grid(result).splitlines()
    assert lines[1:4] == ["B b B", "b b b", "B b B"]


def test_ascii_grid_skips_large_rooms():
    result = solve(6, 4, sample_catalog(), OPTIMAL)
    assert ascii_grid(result, max_dim=5) == "Visualization skipped for large dimensions (>5)"


def test_ascii_grid_empty_for_infeasible_or_zero_area():
    assert ascii_grid(solve(3, 3, catalog(("B", 2, 3)), OPTIMAL)) == ""
    assert ascii_grid(solve(0, 3, catalog(("B", 2, 3)), OPTIMAL)) == ""


def test_ascii_grid_falls_back_to_letter_pool_on_clashing_initials():
    lines = ascii_grid(_row_of_units("tile1", "tile2")).splitlines()
    assert lines[1] == "A B"
    assert lines[-1] == "Legend: A = tile1 (1x1) x1; B = tile2 (1x1) x1"


def test_ascii_grid_labels_stay_distinct_past_26_ids():
    ids = [f"t{i:02d}" for i in range(28)]
    lines = ascii_grid(_row_of_units(*ids)).splitlines()
    cells = lines[1].split()
    assert len(cells) == 28
    assert len(set(cells)) == 28
    assert cells[0] == "A" and cells[25] == "Z"
    assert cells[26:] == ["AA", "AB"]
    assert "AB = t27 (1x1) x1" in lines[-1]


def test_render_result_svg_and_legend():
    result = solve(6, 4, sample_catalog(), OPTIMAL)
    svg, legend = render_result(result.placements, 6, 4, scale=10)
    assert svg.startswith("<svg")
    assert 'width="62"' in svg and 'height="42"' in svg
    assert svg.count("<rect") == len(result.placements) + 1
    assert ">B</text>" in svg
    assert legend.count("<li>") == 1


def test_render_result_escapes_tile_ids():
    tile = TileType("<script>alert(1)</script>", 1, 1)
    svg, legend = render_result([Placed(0, 0, tile)], 1, 1, scale=10)
    for markup in (svg, legend):
        assert "<script>" not in markup
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in markup
