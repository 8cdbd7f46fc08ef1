# app.py: JSON API + HTML form around the tiling core
from __future__ import annotations
import logging
import os
from typing import Any, Dict, Tuple

from flask import Flask, request, render_template, send_from_directory, jsonify

from config import CFG
from io_files import write_result_json, write_layout_view_html
from models import InvalidInput, SolveResult
from render import ascii_grid, render_result
from solve_log import emit
from solver.orchestrator import solve as solve_core
from tiles import SAMPLE_REQUEST, parse_solve_request

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _resolve_output_paths(configured: str, fallback: str) -> Tuple[str, str, str]:
    name = (configured or "").strip() or fallback
    if os.path.isabs(name):
        full_path = name
    else:
        full_path = os.path.abspath(os.path.join(BASE_DIR, name))
    directory = os.path.dirname(full_path) or BASE_DIR
    filename = os.path.basename(full_path) or fallback
    return full_path, directory, filename


_RESULT_FULL_PATH, RESULT_DIR, RESULT_FILENAME = _resolve_output_paths(
    CFG.RESULT_JSON, "result.json"
)
_LAYOUT_FULL_PATH, LAYOUT_DIR, LAYOUT_FILENAME = _resolve_output_paths(
    CFG.LAYOUT_HTML, "layout_view.html"
)

LAST_RESULT: Dict[str, Any] = {
    "ok": False,
    "error": "",
    "response": None,
    "svg": "",
    "legend": "",
}

app = Flask(__name__, static_folder=None, template_folder="templates")


def _merge_like_mapping() -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        merged.update(payload)

    form_dict = request.form.to_dict(flat=False)
    for k, v in form_dict.items():
        merged.setdefault(k, v if isinstance(v, list) else [v])

    args_dict = request.args.to_dict(flat=False)
    for k, v in args_dict.items():
        merged.setdefault(k, v if isinstance(v, list) else [v])

    return merged


def response_body(result: SolveResult) -> Dict[str, Any]:
    return {
        "solutionMode": "simple" if result.strategy == "baseline" else "advanced",
        "requestedMode": "simple" if result.requested_strategy == "baseline" else "advanced",
        "tilesUsed": [u.as_dict() for u in result.usage],
        "totalCost": result.total_cost,
        "feasible": result.feasible,
        "fallback": result.fallback,
        "explanation": result.explanation,
        "visualization": ascii_grid(result),
    }


def _run(payload: Dict[str, Any]) -> Tuple[SolveResult, Dict[str, Any]]:
    req = parse_solve_request(payload)
    result = solve_core(req.length, req.width, req.catalog, req.strategy)
    body = response_body(result)

    svg, legend = ("", "")
    if result.placements:
        svg, legend = render_result(result.placements, result.length, result.width)
    LAST_RESULT.update({"ok": True, "error": "", "response": body, "svg": svg, "legend": legend})

    try:
        write_result_json(body, BASE_DIR)
        if svg:
            write_layout_view_html(svg, legend, BASE_DIR)
    except OSError as e:
        emit("Output write failed", logging.WARNING, error=f"{type(e).__name__}: {e}")
    return result, body


def _reject(e: Exception) -> str:
    reason = f"Invalid input: {e}"
    emit("Request rejected", logging.WARNING, reason=reason)
    LAST_RESULT.update({"ok": False, "error": reason, "response": None, "svg": "", "legend": ""})
    return reason


@app.route("/")
def index():
    return send_from_directory(BASE_DIR, "tile_form.html")


@app.route("/styles.css")
def styles_css():
    return send_from_directory(BASE_DIR, "styles.css")


@app.route("/api/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/api/sample")
def sample():
    return jsonify(SAMPLE_REQUEST)


@app.route("/api/solve", methods=["POST"])
def api_solve():
    payload = request.get_json(silent=True)
    try:
        _, body = _run(payload if isinstance(payload, dict) else {})
    except InvalidInput as e:
        return jsonify({"error": _reject(e)}), 400
    except Exception as e:
        emit("Solve crashed", logging.ERROR, error=f"{type(e).__name__}: {e}")
        return jsonify({"error": f"Error processing request: {e}"}), 500
    return jsonify(body)


@app.route("/solve", methods=["POST"])
def form_solve():
    try:
        _run(_merge_like_mapping())
    except InvalidInput as e:
        _reject(e)
        return render_template("result.html", **LAST_RESULT), 400
    return render_template("result.html", **LAST_RESULT)


@app.route("/result/latest")
def result_latest():
    return render_template("result.html", **LAST_RESULT)


@app.route("/download/result")
def download_result():
    return send_from_directory(RESULT_DIR, RESULT_FILENAME, as_attachment=True)


@app.route("/download/html")
def download_html():
    return send_from_directory(LAYOUT_DIR, LAYOUT_FILENAME, as_attachment=True)


if __name__ == "__main__":
    app.run(debug=False)
