from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

BASELINE = "baseline"
OPTIMAL = "optimal"
STRATEGIES = (BASELINE, OPTIMAL)


class TilingError(Exception):
    """Base class for every error raised by the tiling core."""


class InvalidInput(TilingError, ValueError):
    pass


class Infeasible(TilingError):
    """No finite-cost guillotine covering exists for the room and tile sizes."""

    def __init__(self, length: int, width: int, message: Optional[str] = None):
        self.length = length
        self.width = width
        super().__init__(
            message or f"no guillotine covering of {length}x{width} exists with the given tile sizes"
        )


class AssemblyError(TilingError):
    pass


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class TileType:
    id: str
    size: int
    cost: int


@dataclass(frozen=True)
class TileCatalog:
    tiles: Tuple[TileType, ...]

    def __post_init__(self):
        problems: List[str] = []
        if not self.tiles:
            problems.append("at least one tile must be provided")
        seen = set()
        for t in self.tiles:
            if not isinstance(t.id, str) or not t.id.strip():
                problems.append("tile id is required")
            elif t.id in seen:
                problems.append(f"duplicate tile id {t.id!r}")
            else:
                seen.add(t.id)
            if not _is_int(t.size) or t.size < 1:
                problems.append(f"tile {t.id!r}: size must be a positive integer")
            if not _is_int(t.cost) or t.cost < 1:
                problems.append(f"tile {t.id!r}: cost must be a positive integer")
        if problems:
            raise InvalidInput("; ".join(problems))

    @classmethod
    def of(cls, tiles: Iterable[TileType]) -> "TileCatalog":
        return cls(tuple(tiles))

    def __iter__(self):
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def by_id(self) -> Dict[str, TileType]:
        return {t.id: t for t in self.tiles}


@dataclass(frozen=True)
class Placed:
    x: int
    y: int
    tile: TileType

    @property
    def size(self) -> int:
        return self.tile.size


@dataclass
class Covering:
    """Raw output of one solver: per-id counts (zero ids may be omitted)."""

    total_cost: int
    counts: Dict[str, int]
    placements: List[Placed] = field(default_factory=list)

    @property
    def tile_count(self) -> int:
        return sum(self.counts.values())

    def rank(self) -> Tuple[int, int]:
        return (self.total_cost, self.tile_count)


@dataclass(frozen=True)
class TileUsage:
    id: str
    size: int
    count: int
    cost: int

    def as_dict(self) -> Dict[str, object]:
        return {"id": self.id, "size": self.size, "count": self.count, "cost": self.cost}


@dataclass
class SolveResult:
    length: int
    width: int
    requested_strategy: str
    strategy: str
    feasible: bool
    total_cost: Optional[int]
    usage: List[TileUsage]
    fallback: Optional[str] = None
    explanation: str = ""
    placements: List[Placed] = field(default_factory=list)

    @property
    def counts(self) -> Dict[str, int]:
        return {u.id: u.count for u in self.usage}
