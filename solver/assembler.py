# solver/assembler.py
from typing import List, Mapping

from models import AssemblyError, TileCatalog, TileUsage


def assemble(counts: Mapping[str, int], catalog: TileCatalog, total_cost: int) -> List[TileUsage]:
    """
    Expand raw solver counts to one entry per catalog id, ascending by id.

    Raises AssemblyError when the counts mention an unknown id or when the
    per-tile costs do not add up to ``total_cost``.
    """
    by_id = catalog.by_id()
    unknown = sorted(set(counts) - set(by_id))
    if unknown:
        raise AssemblyError(f"counts reference unknown tile ids: {', '.join(unknown)}")

    usage: List[TileUsage] = []
    for tile_id in sorted(by_id):
        tile = by_id[tile_id]
        n = int(counts.get(tile_id, 0))
        if n < 0:
            raise AssemblyError(f"negative count for tile {tile_id!r}")
        usage.append(TileUsage(tile_id, tile.size, n, n * tile.cost))

    summed = sum(u.cost for u in usage)
    if summed != total_cost:
        raise AssemblyError(f"per-tile costs sum to {summed}, solver reported {total_cost}")
    return usage


def zero_usage(catalog: TileCatalog) -> List[TileUsage]:
    return assemble({}, catalog, 0)

