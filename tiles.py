# tiles.py: request boundary, payload -> (L, W, TileCatalog, strategy)
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from config import CFG
from models import BASELINE, OPTIMAL, InvalidInput, TileCatalog, TileType

MODE_ALIASES = {
    "simple": BASELINE,
    "baseline": BASELINE,
    "advanced": OPTIMAL,
    "optimal": OPTIMAL,
}

SAMPLE_REQUEST: Dict[str, Any] = {
    "L": 6,
    "W": 4,
    "tiles": [
        {"id": "A", "size": 1, "cost": 2},
        {"id": "B", "size": 2, "cost": 3},
        {"id": "C", "size": 3, "cost": 6},
    ],
    "mode": "advanced",
}


@dataclass(frozen=True)
class SolveRequest:
    length: int
    width: int
    catalog: TileCatalog
    strategy: str


def _first(val: Any) -> Any:
    if isinstance(val, (list, tuple)):
        return val[0] if val else None
    return val


def _as_listish(val: Any) -> List[Any]:
    if val is None:
        return []
    if isinstance(val, (list, tuple)):
        return list(val)
    return [val]


def _to_int(x: Any) -> Optional[int]:
    """Strict integer coercion: 3, "3" and 3.0 pass; 3.5, True and "" do not."""
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, int):
        return x
    if isinstance(x, float):
        return int(x) if x.is_integer() else None
    try:
        s = str(x).strip()
        return int(s) if s else None
    except ValueError:
        return None


def _getlist(container: Dict[str, Any], *keys: str) -> List[Any]:
    for key in keys:
        if key in container:
            return _as_listish(container[key])
    return []


def normalize_mode(raw: Any) -> str:
    """Map a public mode name (or alias) to a strategy.  Blank means the configured default."""
    text = str(_first(raw) or "").strip().lower() or str(CFG.DEFAULT_MODE).lower()
    try:
        strategy = MODE_ALIASES[text]
    except KeyError:
        raise InvalidInput(f"unknown mode {text!r}; expected simple or advanced") from None
    return strategy


def _raw_tiles(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    # Shape 1: JSON {"tiles": [{"id", "size", "cost"}, ...]}
    if isinstance(payload.get("tiles"), list):
        return [t if isinstance(t, dict) else {"id": None} for t in payload["tiles"]]

    # Shape 2: parallel form arrays
    ids = _getlist(payload, "id[]", "id")
    sizes = _getlist(payload, "size[]", "size")
    costs = _getlist(payload, "cost[]", "cost")
    rows = []
    for i in range(max(len(ids), len(sizes), len(costs))):
        tid = ids[i] if i < len(ids) else None
        size = sizes[i] if i < len(sizes) else None
        cost = costs[i] if i < len(costs) else None
        # fully blank form rows are ignored
        if all(str(v or "").strip() == "" for v in (tid, size, cost)):
            continue
        rows.append({"id": tid, "size": size, "cost": cost})
    return rows


def parse_tiles(payload: Dict[str, Any]) -> TileCatalog:
    rows = _raw_tiles(payload)
    if not rows:
        raise InvalidInput("at least one tile must be provided")

    problems: List[str] = []
    tiles: List[TileType] = []
    for i, row in enumerate(rows, start=1):
        tid = row.get("id")
        tid = str(tid).strip() if tid is not None else ""
        size = _to_int(row.get("size"))
        cost = _to_int(row.get("cost"))
        label = tid or f"#{i}"
        if not tid:
            problems.append(f"tile {label}: id is required")
        if size is None or size < 1:
            problems.append(f"tile {label}: size must be a positive integer")
        if cost is None or cost < 1:
            problems.append(f"tile {label}: cost must be a positive integer")
        tiles.append(TileType(tid, size, cost))
    if problems:
        raise InvalidInput("; ".join(problems))
    return TileCatalog.of(tiles)


def parse_solve_request(payload: Any) -> SolveRequest:
    """
    Validate an inbound request (JSON object or merged form mapping).

    Room sides must be positive integers here; the core itself also accepts
    zero-area rooms.
    """
    if not isinstance(payload, dict) or not payload:
        raise InvalidInput("nothing parsed from request")

    problems: List[str] = []
    dims: Dict[str, int] = {}
    for key in ("L", "W"):
        raw = _first(payload.get(key, payload.get(key.lower())))
        v = _to_int(raw)
        if raw is None or str(raw).strip() == "":
            problems.append(f"{'Length' if key == 'L' else 'Width'} {key} is required")
        elif v is None or v < 1:
            problems.append(f"{'Length' if key == 'L' else 'Width'} {key} must be a positive integer")
        else:
            dims[key] = v

    catalog: Optional[TileCatalog] = None
    try:
        catalog = parse_tiles(payload)
    except InvalidInput as e:
        problems.append(str(e))

    try:
        strategy = normalize_mode(payload.get("mode"))
    except InvalidInput as e:
        problems.append(str(e))

    if problems:
        raise InvalidInput("; ".join(problems))
    return SolveRequest(dims["L"], dims["W"], catalog, strategy)
