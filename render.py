import random
import string
from typing import Dict, List, Optional, Tuple

from markupsafe import escape

from config import CFG
from models import Placed, SolveResult


def _color(name: str) -> str:
    rng = random.Random(name)
    r = rng.randint(40, 200)
    g = rng.randint(40, 200)
    b = rng.randint(40, 200)
    return f"rgb({r},{g},{b})"


def _pool_label(i: int) -> str:
    # A..Z, AA..AZ, BA.. like spreadsheet columns
    out = ""
    i += 1
    while i:
        i, r = divmod(i - 1, 26)
        out = string.ascii_uppercase[r] + out
    return out


def _letters(placed: List[Placed]) -> Dict[str, str]:
    ids = sorted({p.tile.id for p in placed})
    initials = [tid[0].upper() for tid in ids]
    if all(c in string.ascii_uppercase for c in initials) and len(set(initials)) == len(ids):
        return dict(zip(ids, initials))
    return {tid: _pool_label(i) for i, tid in enumerate(ids)}


def ascii_grid(result: SolveResult, max_dim: Optional[int] = None) -> str:
    """
    Text preview of the covering: one row per unit of length, one column per
    unit of width.  A tile's corner cell is upper case, the rest lower case;
    overhang past the room is clipped.
    """
    L, W = result.length, result.width
    cap = CFG.VIZ_MAX_DIM if max_dim is None else max_dim
    if not result.feasible or L == 0 or W == 0:
        return ""
    if L > cap or W > cap:
        return f"Visualization skipped for large dimensions (>{cap})"

    letters = _letters(result.placements)
    grid = [["."] * W for _ in range(L)]
    for p in result.placements:
        ch = letters[p.tile.id]
        for x in range(p.x, min(p.x + p.size, L)):
            for y in range(p.y, min(p.y + p.size, W)):
                grid[x][y] = ch.lower()
        if p.x < L and p.y < W:
            grid[p.x][p.y] = ch

    lines = [f"Grid visualization ({L}x{W}):"]
    cell = max(len(ch) for ch in letters.values()) if letters else 1
    lines.extend(" ".join(c.ljust(cell) for c in row).rstrip() for row in grid)
    legend = "; ".join(
        f"{letters[u.id]} = {u.id} ({u.size}x{u.size}) x{u.count}"
        for u in result.usage
        if u.count > 0 and u.id in letters
    )
    if legend:
        lines.append("")
        lines.append(f"Legend: {legend}")
    return "\n".join(lines)


def render_result(placed: List[Placed], L: int, W: int, scale: Optional[int] = None) -> Tuple[str, str]:
    """SVG preview (length runs left to right) plus an HTML legend."""
    palette: Dict[str, str] = {}
    for p in placed:
        palette.setdefault(p.tile.id, _color(p.tile.id))

    scale = scale or CFG.SVG_SCALE
    svg_w = L * scale + 2
    svg_h = W * scale + 2

    rects = []
    for p in placed:
        x = p.x * scale + 1
        y = p.y * scale + 1
        w = min(p.size, L - p.x) * scale
        h = min(p.size, W - p.y) * scale
        rects.append(
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" fill="{palette[p.tile.id]}" stroke="black" stroke-width="1"/>'
            f'<text x="{x+4}" y="{y+14}" font-size="12" fill="black">{escape(p.tile.id)}</text>'
        )
    frame = f'<rect x="1" y="1" width="{svg_w-2}" height="{svg_h-2}" fill="none" stroke="black" stroke-width="2"/>'
    svg = (
        f'<svg class="layout-svg" xmlns="http://www.w3.org/2000/svg" '
        f'width="{svg_w}" height="{svg_h}" '
        f'viewBox="0 0 {svg_w} {svg_h}" preserveAspectRatio="xMinYMin meet">'
        f'{"".join(rects)}{frame}</svg>'
    )

    legend = "".join(
        f"<li><span class='swatch' style='background:{c}'></span>{escape(n)}</li>"
        for n, c in sorted(palette.items())
    )
    return svg, legend
