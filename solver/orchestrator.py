# Orchestrator: guard -> solver -> assembler
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Union

from config import CFG
from models import (
    BASELINE, OPTIMAL, STRATEGIES,
    Covering, Infeasible, InvalidInput, SolveResult, TileCatalog, TileType,
)
from solve_log import SolveTimer, emit
from solver.assembler import assemble, zero_usage
from solver.baseline import solve_baseline
from solver.guard import route
from solver.guillotine import solve_guillotine

OVERHANG_CHEAPER = "single-type covering with overhang is cheaper than any exact guillotine covering"


# ---------- helpers ----------

def _coerce_catalog(tiles: Union[TileCatalog, Iterable[Any]]) -> TileCatalog:
    if isinstance(tiles, TileCatalog):
        return tiles
    if tiles is None:
        raise InvalidInput("at least one tile must be provided")
    out = []
    for t in tiles:
        if isinstance(t, TileType):
            out.append(t)
        elif isinstance(t, dict):
            out.append(TileType(t.get("id"), t.get("size"), t.get("cost")))
        else:
            raise InvalidInput(f"unsupported tile description: {t!r}")
    return TileCatalog.of(out)


def _check_dimensions(length: Any, width: Any) -> None:
    for name, v in (("length", length), ("width", width)):
        if not isinstance(v, int) or isinstance(v, bool):
            raise InvalidInput(f"{name} must be an integer (got {v!r})")
        if v < 0:
            raise InvalidInput(f"{name} must be non-negative (got {v})")


def _describe_baseline(length: int, width: int, cov: Covering, catalog: TileCatalog) -> str:
    (tile_id, n), = cov.counts.items()
    s = catalog.by_id()[tile_id].size
    return (
        f"Baseline: single tile type {tile_id} (size {s}) with count = "
        f"ceil({length}/{s}) * ceil({width}/{s}) = {n} tiles. Total cost: {cov.total_cost}"
    )


def _describe_guillotine(length: int, width: int, cov: Covering) -> str:
    used = ", ".join(f"{k}x{v}" for k, v in sorted(cov.counts.items()))
    return (
        f"Optimal: guillotine DP over {length}x{width} with mixed tiles ({used}). "
        f"{cov.tile_count} tiles, total cost: {cov.total_cost}"
    )


def _result(length: int, width: int, catalog: TileCatalog, requested: str, strategy: str,
            cov: Covering, explanation: str, fallback: Optional[str] = None) -> SolveResult:
    return SolveResult(
        length=length,
        width=width,
        requested_strategy=requested,
        strategy=strategy,
        feasible=True,
        total_cost=cov.total_cost,
        usage=assemble(cov.counts, catalog, cov.total_cost),
        fallback=fallback,
        explanation=explanation,
        placements=list(cov.placements),
    )


# ---------- entry point ----------

def solve(length: int,
          width: int,
          tiles: Union[TileCatalog, Iterable[Any]],
          strategy: str = OPTIMAL,
          *,
          max_dimension: Optional[int] = None,
          cfg=CFG) -> SolveResult:
    """
    Cover a ``length`` x ``width`` room at minimum cost.

    ``strategy`` is ``"baseline"`` (one tile type, overhang counted) or
    ``"optimal"`` (guillotine DP, compared against the baseline so the
    result is never dearer).  Oversized rooms are routed to the baseline and
    flagged through ``fallback``.  When no exact covering exists the result
    has ``feasible=False`` and ``total_cost=None``.
    """
    catalog = _coerce_catalog(tiles)
    _check_dimensions(length, width)
    if strategy not in STRATEGIES:
        raise InvalidInput(f"unknown strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}")

    timer = SolveTimer(length, width, len(catalog), strategy)

    if length == 0 or width == 0:
        result = SolveResult(
            length=length, width=width,
            requested_strategy=strategy, strategy=strategy,
            feasible=True, total_cost=0,
            usage=zero_usage(catalog),
            explanation="Empty or zero area room: no tiles needed",
        )
        timer.finish(strategy=strategy, feasible=True, total_cost=0)
        return result

    cap = cfg.MAX_DP_DIMENSION if max_dimension is None else max_dimension
    decision = route(length, width, strategy, cap)
    want_placements = max(length, width) <= cfg.VIZ_MAX_DIM

    if decision.strategy == BASELINE:
        cov = solve_baseline(length, width, catalog, with_placements=want_placements)
        text = _describe_baseline(length, width, cov, catalog)
        if decision.fell_back:
            emit("Guard fallback", logging.WARNING, room=f"{length}x{width}", reason=decision.fallback_reason)
            text = f"Fell back to baseline ({decision.fallback_reason}). {text}"
        result = _result(length, width, catalog, strategy, BASELINE, cov, text, decision.fallback_reason)
        timer.finish(strategy=BASELINE, feasible=True, total_cost=cov.total_cost,
                     fallback=decision.fallback_reason)
        return result

    overhang = solve_baseline(length, width, catalog, with_placements=want_placements)
    try:
        exact = solve_guillotine(length, width, catalog)
    except Infeasible as e:
        emit("Infeasible", logging.WARNING, room=f"{length}x{width}", reason=str(e))
        result = SolveResult(
            length=length, width=width,
            requested_strategy=strategy, strategy=OPTIMAL,
            feasible=False, total_cost=None,
            usage=zero_usage(catalog),
            explanation=(
                f"No exact guillotine covering: {e}. "
                f"A single-type covering with overhang would cost {overhang.total_cost}."
            ),
        )
        timer.finish(strategy=OPTIMAL, feasible=False, total_cost=None)
        return result

    if not want_placements:
        exact.placements = []

    # Equal (cost, tile count) keeps the exact covering.
    if overhang.rank() < exact.rank():
        text = f"{_describe_baseline(length, width, overhang, catalog)} ({OVERHANG_CHEAPER}, DP cost {exact.total_cost})"
        result = _result(length, width, catalog, strategy, BASELINE, overhang, text, OVERHANG_CHEAPER)
    else:
        result = _result(length, width, catalog, strategy, OPTIMAL, exact,
                         _describe_guillotine(length, width, exact))

    timer.finish(strategy=result.strategy, feasible=True, total_cost=result.total_cost,
                 fallback=result.fallback)
    return result
