# solver/guillotine.py
"""
Guillotine DP for mixed square tiles.

dp[l][w] is the cheapest exact covering of an l x w rectangle.  Each cell
takes the best of:

  * placing a tile of side s <= min(l, w) in the top-left corner, then
    covering the right strip (l-s) x w and the bottom-left strip s x (w-s);
  * a horizontal cut at 1 <= x < l;
  * a vertical cut at 1 <= y < w.

Zero-area cells cost 0.  A cell with no finite option is infeasible and is
stored as ``None``.  Filling is O(L * W * (tiles + L + W)) time and
O(L * W) space; all tables belong to a single call.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from models import Covering, Infeasible, InvalidInput, Placed, TileCatalog

PLACE = "place"
CUT_H = "cut_h"
CUT_V = "cut_v"


@dataclass(frozen=True)
class Decision:
    kind: str
    offset: int                    # tile side for PLACE, cut position otherwise
    tile_id: Optional[str] = None

    def parts(self, x: int, y: int, l: int, w: int) -> Tuple[Tuple[int, int, int, int], ...]:
        """Sub-rectangles (x, y, l, w) left to cover after this decision."""
        k = self.offset
        if self.kind == PLACE:
            return ((x + k, y, l - k, w), (x, y + k, k, w - k))
        if self.kind == CUT_H:
            return ((x, y, k, w), (x + k, y, l - k, w))
        return ((x, y, l, k), (x, y + k, l, w - k))


@dataclass
class DPTable:
    length: int
    width: int
    cost: List[List[Optional[int]]]
    tiles: List[List[int]]
    trace: List[List[Optional[Decision]]]

    def at(self, l: int, w: int) -> Optional[int]:
        return self.cost[l][w]


def _better(c: int, n: int, best_c: Optional[int], best_n: int) -> bool:
    if best_c is None or c < best_c:
        return True
    return c == best_c and n < best_n


def fill_table(length: int, width: int, catalog: TileCatalog) -> DPTable:
    """
    Fill cost / tile-count / decision tables bottom-up (l, then w).

    Ties on cost go to fewer tiles.  Placements are scanned in ascending id
    order ahead of cuts, so a full tie keeps the smallest newly placed id.
    Cuts are symmetric, so only offsets up to half the side are scanned.
    """
    L, W = length, width
    tiles = sorted(catalog, key=lambda t: t.id)

    cost: List[List[Optional[int]]] = [[0] * (W + 1) for _ in range(L + 1)]
    count: List[List[int]] = [[0] * (W + 1) for _ in range(L + 1)]
    trace: List[List[Optional[Decision]]] = [[None] * (W + 1) for _ in range(L + 1)]

    for l in range(1, L + 1):
        row = cost[l]
        nrow = count[l]
        for w in range(1, W + 1):
            best_c: Optional[int] = None
            best_n = 0
            best_d: Optional[Decision] = None
            side = min(l, w)

            for t in tiles:
                s = t.size
                if s > side:
                    continue
                right = cost[l - s][w]
                below = cost[s][w - s]
                if right is None or below is None:
                    continue
                c = t.cost + right + below
                n = 1 + count[l - s][w] + count[s][w - s]
                if _better(c, n, best_c, best_n):
                    best_c, best_n = c, n
                    best_d = Decision(PLACE, s, t.id)

            for x in range(1, l // 2 + 1):
                a = cost[x][w]
                b = cost[l - x][w]
                if a is None or b is None:
                    continue
                c = a + b
                n = count[x][w] + count[l - x][w]
                if _better(c, n, best_c, best_n):
                    best_c, best_n = c, n
                    best_d = Decision(CUT_H, x)

            for y in range(1, w // 2 + 1):
                a = row[y]
                b = row[w - y]
                if a is None or b is None:
                    continue
                c = a + b
                n = nrow[y] + nrow[w - y]
                if _better(c, n, best_c, best_n):
                    best_c, best_n = c, n
                    best_d = Decision(CUT_V, y)

            row[w] = best_c
            nrow[w] = best_n
            trace[l][w] = best_d

    return DPTable(L, W, cost, count, trace)


def reconstruct(table: DPTable, catalog: TileCatalog) -> Tuple[Dict[str, int], List[Placed]]:
    """Walk the decision trace from (L, W) with an explicit stack."""
    by_id = catalog.by_id()
    counts: Dict[str, int] = {}
    placed: List[Placed] = []
    stack = [(0, 0, table.length, table.width)]
    while stack:
        x, y, l, w = stack.pop()
        if l == 0 or w == 0:
            continue
        d = table.trace[l][w]
        if d is None:
            raise Infeasible(l, w, f"no decision recorded for reachable cell {l}x{w}")
        if d.kind == PLACE:
            counts[d.tile_id] = counts.get(d.tile_id, 0) + 1
            placed.append(Placed(x, y, by_id[d.tile_id]))
        stack.extend(reversed(d.parts(x, y, l, w)))
    return counts, placed


def solve_guillotine(length: int, width: int, catalog: TileCatalog) -> Covering:
    if length < 0 or width < 0:
        raise InvalidInput(f"dimensions must be non-negative (got {length}x{width})")
    if catalog is None or len(catalog) == 0:
        raise InvalidInput("at least one tile must be provided")
    if length == 0 or width == 0:
        return Covering(total_cost=0, counts={})

    table = fill_table(length, width, catalog)
    total = table.at(length, width)
    if total is None:
        raise Infeasible(length, width)

    counts, placed = reconstruct(table, catalog)
    return Covering(total_cost=total, counts=counts, placements=placed)
