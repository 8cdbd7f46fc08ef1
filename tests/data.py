from models import TileCatalog, TileType

SAMPLE_TILES = (
    TileType("A", 1, 2),
    TileType("B", 2, 3),
    TileType("C", 3, 6),
)


def sample_catalog() -> TileCatalog:
    return TileCatalog.of(SAMPLE_TILES)


def catalog(*rows) -> TileCatalog:
    """catalog(("A", 1, 2), ("B", 2, 3)) -> TileCatalog"""
    return TileCatalog.of(TileType(i, s, c) for i, s, c in rows)


def coverage_grid(placements, length, width):
    """Count how many placed tiles cover each room cell (overhang clipped)."""
    grid = [[0] * width for _ in range(length)]
    for p in placements:
        for x in range(p.x, min(p.x + p.size, length)):
            for y in range(p.y, min(p.y + p.size, width)):
                grid[x][y] += 1
    return grid
