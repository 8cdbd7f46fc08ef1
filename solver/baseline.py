# solver/baseline.py
"""
Single-tile-type covering.

Every tile type is tried on its own as a ceil(L/s) x ceil(W/s) grid.  Tiles
that spill past the room are counted in full; there is no overhang
correction.
"""
from typing import List, Tuple

from models import Covering, InvalidInput, Placed, TileCatalog, TileType


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def grid_count(length: int, width: int, tile: TileType) -> int:
    return _ceil_div(length, tile.size) * _ceil_div(width, tile.size)


def _grid_placements(length: int, width: int, tile: TileType) -> List[Placed]:
    s = tile.size
    return [
        Placed(x, y, tile)
        for x in range(0, length, s)
        for y in range(0, width, s)
    ]


def rank_tile(length: int, width: int, tile: TileType) -> Tuple[int, int, str]:
    count = grid_count(length, width, tile)
    return (count * tile.cost, count, tile.id)


def solve_baseline(length: int, width: int, catalog: TileCatalog, *, with_placements: bool = True) -> Covering:
    """
    Cheapest single-type covering.

    Ties on cost go to the type needing fewer tiles, then to the smallest id.
    Only the chosen id appears in ``counts``.
    """
    if length < 0 or width < 0:
        raise InvalidInput(f"dimensions must be non-negative (got {length}x{width})")
    if catalog is None or len(catalog) == 0:
        raise InvalidInput("at least one tile must be provided")
    if length == 0 or width == 0:
        return Covering(total_cost=0, counts={})

    best = min(catalog, key=lambda t: rank_tile(length, width, t))
    cost, count, _ = rank_tile(length, width, best)
    placements = _grid_placements(length, width, best) if with_placements else []
    return Covering(total_cost=cost, counts={best.id: count}, placements=placements)
