# attack_sim/sockets.py
from flask_socketio import emit

from .engine.dice import fresh_rng
from .engine.resolver import run_batch_report
from .content.balance import LOG_TAIL
from .payload import PayloadError, parse_payload, to_params

def register_attack_sim_socket_handlers(socketio):
    @socketio.on("attack_sim_run")
    def attack_sim_run(payload):
        try:
            req = parse_payload(payload)
        except PayloadError as exc:
            emit("attack_sim_error", {"field": exc.field, "message": exc.message})
            return

        params = to_params(req)
        report = run_batch_report(params, fresh_rng(req.seed))
        emit("attack_sim_results", {
            "params": params.as_dict(),
            "results": report.results,
            "summary": report.summary(),
            "log": report.batch_log[-LOG_TAIL:],
        })
