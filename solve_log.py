from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Optional

from config import CFG

BASE_DIR = Path(__file__).resolve().parent


def _log_path() -> Path:
    path = Path(CFG.LOG_FILE)
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


def _init_logger() -> logging.Logger:
    logger = logging.getLogger("tiler.solve_log")
    if logger.handlers:
        return logger

    try:
        log_path = _log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, CFG.LOG_LEVEL, logging.INFO))
        logger.propagate = False
    except Exception:
        # An unwritable log directory must not stop the solver.
        logger.handlers.clear()
    return logger


SOLVE_LOGGER = _init_logger()


def _log_enabled() -> bool:
    return bool(SOLVE_LOGGER.handlers)


def fmt_seconds(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    try:
        return f"{float(seconds):.3f}s"
    except Exception:
        return None


def format_event(event: str, **fields: Any) -> str:
    extras = [
        f"{key}={value}"
        for key, value in fields.items()
        if value is not None and value != ""
    ]
    if extras:
        return f"{event} | {' '.join(extras)}"
    return event


def emit(event: str, level: int = logging.INFO, **fields: Any) -> None:
    if not _log_enabled():
        return
    try:
        SOLVE_LOGGER.log(level, "%s", format_event(event, **fields))
    except Exception:
        # Logging failures must never bubble back to callers.
        pass


class SolveTimer:
    """Measures one solve and logs its start / finish lines."""

    def __init__(self, length: int, width: int, tiles: int, strategy: str):
        self.length = length
        self.width = width
        self.started = time.time()
        emit("Solve started", room=f"{length}x{width}", tiles=tiles, requested=strategy)

    @property
    def elapsed(self) -> float:
        return max(0.0, time.time() - self.started)

    def finish(self, *, strategy: str, feasible: bool, total_cost: Optional[int], fallback: Optional[str] = None) -> None:
        emit(
            "Solve finished",
            room=f"{self.length}x{self.width}",
            strategy=strategy,
            feasible=feasible,
            cost=total_cost,
            fallback=fallback,
            duration=fmt_seconds(self.elapsed),
        )
