# attack_sim/routes.py
from flask import Blueprint, current_app, jsonify, render_template, request

from .engine.dice import fresh_rng
from .engine.report import summarize
from .engine.resolver import run_batch
from .payload import PayloadError, decode_body, parse_payload, to_params

attack_sim_bp = Blueprint("attack_sim", __name__, template_folder="templates")

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]

def wants_json() -> bool:
    best = request.accept_mimetypes.best_match(["text/html", "application/json"])
    return best == "application/json"

@attack_sim_bp.route("/attack-sim", methods=ALL_METHODS, provide_automatic_options=False)
def attack_sim_run():
    if request.method != "POST":
        return "Method not allowed. Use POST.", 405, {"Allow": "POST"}

    try:
        req = parse_payload(decode_body(request.get_data()))
    except PayloadError as exc:
        current_app.logger.warning("attack-sim rejected payload: %s", exc.message)
        return exc.message, 400, {"Content-Type": "text/plain; charset=utf-8"}

    params = to_params(req)
    results = run_batch(params, fresh_rng(req.seed))
    current_app.logger.info(
        "attack-sim ran %d trials (hurt difficulty %d)", params.run_number, params.hurt_difficulty
    )

    summary = summarize(results)
    if wants_json():
        return jsonify({"results": results, "summary": summary, "params": params.as_dict()})
    return render_template("attack_sim.html", results=results, summary=summary)
