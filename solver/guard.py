# solver/guard.py
from dataclasses import dataclass
from typing import Optional

from config import CFG
from models import BASELINE, OPTIMAL, STRATEGIES, InvalidInput


@dataclass(frozen=True)
class RouteDecision:
    strategy: str                        # solver that will run
    requested: str
    fallback_reason: Optional[str] = None

    @property
    def fell_back(self) -> bool:
        return self.fallback_reason is not None


def max_dp_dimension(cfg=CFG) -> int:
    return int(getattr(cfg, "MAX_DP_DIMENSION", 0) or 0)


def route(length: int, width: int, strategy: str, max_dimension: Optional[int] = None) -> RouteDecision:
    """
    Pick the solver for a request.  Oversized rooms go to the baseline
    whatever was asked for; nothing is computed here.
    """
    if strategy not in STRATEGIES:
        raise InvalidInput(f"unknown strategy {strategy!r}")
    if strategy == BASELINE:
        return RouteDecision(BASELINE, strategy)

    cap = max_dp_dimension() if max_dimension is None else int(max_dimension)
    if length > cap or width > cap:
        return RouteDecision(
            BASELINE,
            strategy,
            fallback_reason=f"{length}x{width} exceeds the DP limit of {cap} per side",
        )
    return RouteDecision(OPTIMAL, strategy)
