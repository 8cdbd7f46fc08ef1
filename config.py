# config.py
import os

# ======= DP size guard =======
# The guillotine DP costs roughly L * W * (L + W) cut evaluations.  The
# per-dimension cap is derived from this budget unless set explicitly.
MAX_DP_OPS = int(os.getenv("TL_MAX_DP_OPS", "4000000"))


def _derived_max_dimension(ops_budget: int) -> int:
    n = 1
    while (n + 1) * (n + 1) * 2 * (n + 1) <= ops_budget:
        n += 1
    return n


_raw_max_dim = os.getenv("TL_MAX_DP_DIMENSION", "").strip()
MAX_DP_DIMENSION = int(_raw_max_dim) if _raw_max_dim else _derived_max_dimension(MAX_DP_OPS)

# ======= Request defaults =======
DEFAULT_MODE = os.getenv("TL_DEFAULT_MODE", "advanced")

# ======= Presentation =======
VIZ_MAX_DIM = int(os.getenv("TL_VIZ_MAX_DIM", "50"))
SVG_SCALE   = int(os.getenv("TL_SVG_SCALE", "24"))

# ======= Output names =======
RESULT_JSON = os.getenv("TL_RESULT_JSON", "result.json")
LAYOUT_HTML = os.getenv("TL_LAYOUT_HTML", "layout_view.html")

# ======= Logging =======
LOG_FILE  = os.getenv("TL_LOG_FILE", os.path.join("logs", "solve.log"))
LOG_LEVEL = os.getenv("TL_LOG_LEVEL", "INFO").upper()


class CFG:
    MAX_DP_OPS       = MAX_DP_OPS
    MAX_DP_DIMENSION = MAX_DP_DIMENSION

    DEFAULT_MODE = DEFAULT_MODE

    VIZ_MAX_DIM = VIZ_MAX_DIM
    SVG_SCALE   = SVG_SCALE

    RESULT_JSON = RESULT_JSON
    LAYOUT_HTML = LAYOUT_HTML

    LOG_FILE  = LOG_FILE
    LOG_LEVEL = LOG_LEVEL


__all__ = ["CFG", "MAX_DP_DIMENSION"]
