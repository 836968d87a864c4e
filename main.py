"""
main.py — Algorithm Step Visualizer Flask App
==============================================
JSON API over the algorithm engine.  Rendering lives in whatever
front-end consumes these routes.

Routes:
  GET  /api/algorithms         – registry metadata (?category=sort|search|graph)
  POST /api/array/random       – random input array
  POST /api/graph/generate     – generate a new random graph
  POST /api/graph/import       – import from adjacency-list text
  POST /api/run                – run an algorithm, store its trace
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  GET  /api/run/<run_id>       – full exported trace
  GET  /api/state              – current session state

State management:
  Finished traces live in an in-process run store (app.extensions["runs"])
  keyed by run id, capped at MAX_STORED_RUNS with the oldest evicted first.
  Each user's Flask session holds only small values:
    • graph           – serialised Graph
    • array           – last generated array
    • run_id          – key into the run store
    • current_step    – playback cursor
    • selected_algo
"""

import logging
import uuid
from collections import OrderedDict
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, request, session

import config
from algorithms import CATEGORIES, algorithms_by_category, get_algorithm, list_algorithms
from engine import (
    InputError,
    Recorder,
    parse_array,
    parse_probability,
    parse_seed,
    random_array,
    validate_array,
    validate_target,
)
from graph import Graph, GraphError, parse_node_id

log = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Deserialise graph from session, or create default."""
    if "graph" not in session:
        session["graph"] = Graph.generate_random(num_nodes=config.DEFAULT_GRAPH_NODES, seed=42).to_dict()
    return Graph.from_dict(session["graph"])


def save_graph(graph: Graph):
    session["graph"] = graph.to_dict()


def get_state():
    return {
        "selected_algo": session.get("selected_algo", current_app.config["DEFAULT_ALGORITHM"]),
        "run_id":        session.get("run_id"),
        "current_step":  session.get("current_step", 0),
        "total_steps":   session.get("total_steps", 0),
        "array":         session.get("array"),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def _payload() -> dict:
    return request.get_json(silent=True) or {}


def _graph_from_payload(data) -> Graph:
    try:
        g = Graph.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise GraphError(f"Malformed graph: {e}") from None
    g.validate()
    return g


# ---------------------------------------------------------------------------
# Run store
# ---------------------------------------------------------------------------
def _runs() -> "OrderedDict[str, Recorder]":
    return current_app.extensions["runs"]


def store_run(rec: Recorder) -> str:
    runs = _runs()
    run_id = uuid.uuid4().hex
    runs[run_id] = rec
    while len(runs) > current_app.config["MAX_STORED_RUNS"]:
        evicted, _ = runs.popitem(last=False)
        log.debug("evicted run %s", evicted)
    return run_id


def get_run(run_id: Optional[str]) -> Optional[Recorder]:
    if not run_id:
        return None
    return _runs().get(run_id)


def _step_response(rec: Recorder, idx: int):
    return jsonify({
        "step":         rec.steps[idx].to_dict(),
        "current_step": idx,
        "total_steps":  len(rec.steps),
    })


# ---------------------------------------------------------------------------
# API: Catalogue
# ---------------------------------------------------------------------------
@api.route("/algorithms", methods=["GET"])
def api_algorithms():
    category = request.args.get("category")
    if category is None:
        algos = list_algorithms()
    elif category in CATEGORIES:
        algos = algorithms_by_category(category)
    else:
        raise InputError(f"Unknown category: {category}")
    return jsonify({"algorithms": [a.to_dict() for a in algos]})


# ---------------------------------------------------------------------------
# API: Input Generation
# ---------------------------------------------------------------------------
@api.route("/array/random", methods=["POST"])
def api_array_random():
    data = _payload()
    array = random_array(data.get("size", config.DEFAULT_ARRAY_SIZE), seed=data.get("seed"))
    set_state(array=array)
    return jsonify({"array": array})


@api.route("/graph/generate", methods=["POST"])
def api_graph_generate():
    data = _payload()
    nodes = data.get("nodes", config.DEFAULT_GRAPH_NODES)
    if not isinstance(nodes, int) or isinstance(nodes, bool) or not 1 <= nodes <= config.MAX_GRAPH_NODES:
        raise InputError(f"Node count must be between 1 and {config.MAX_GRAPH_NODES}.")

    g = Graph.generate_random(
        num_nodes=nodes,
        edge_probability=parse_probability(data.get("prob", 0.4)),
        weight_range=config.EDGE_WEIGHT_RANGE,
        seed=parse_seed(data.get("seed")),
    )
    save_graph(g)
    return jsonify({"graph": g.to_dict(), "node_ids": g.node_ids()})


@api.route("/graph/import", methods=["POST"])
def api_graph_import():
    data = _payload()
    if "graph" in data:
        g = _graph_from_payload(data["graph"])
    else:
        g = Graph.from_adjacency_list(data.get("text", ""))
    save_graph(g)
    return jsonify({"graph": g.to_dict(), "node_ids": g.node_ids()})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@api.route("/run", methods=["POST"])
def api_run():
    data = _payload()
    state = get_state()

    algo_key = data.get("algorithm", state["selected_algo"])
    info = get_algorithm(algo_key)
    if info is None:
        raise InputError(f"Unknown algorithm: {algo_key}")

    rec = Recorder()
    if info.category == "graph":
        graph = _graph_from_payload(data["graph"]) if "graph" in data else get_graph()
        start = parse_node_id(data.get("start_node_id"))
        rec.run(algo_key, graph=graph, start_node_id=start)
    else:
        if "text" in data:
            array = parse_array(data["text"])
        elif "array" in data:
            array = validate_array(data["array"])
        elif state["array"]:
            array = validate_array(state["array"])
        else:
            raise InputError("Provide an input array or generate a random one first.")
        target = None
        if info.needs_target:
            if data.get("target") is None:
                raise InputError("Please enter a target number to search for.")
            target = validate_target(data["target"])
        rec.run(algo_key, array=array, target=target)

    run_id = store_run(rec)
    set_state(selected_algo=algo_key, run_id=run_id, current_step=0, total_steps=len(rec.steps))

    notice = None
    if rec.metrics.input_reordered:
        notice = "Array was sorted for binary search."
    return jsonify({
        "run_id":       run_id,
        "metrics":      rec.metrics.to_dict(),
        "pseudocode":   list(info.pseudocode),
        "notice":       notice,
        "step":         rec.steps[0].to_dict(),
        "current_step": 0,
        "total_steps":  len(rec.steps),
    })


@api.route("/run/<run_id>", methods=["GET"])
def api_run_export(run_id):
    rec = get_run(run_id)
    if rec is None:
        return jsonify({"error": f"Unknown run: {run_id}"}), 404
    return jsonify(rec.export())


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
def _active_run() -> Optional[Recorder]:
    return get_run(get_state()["run_id"])


# Stored runs are read-only here; navigation moves only the session cursor.
def _move_to(rec: Recorder, idx: int):
    set_state(current_step=idx)
    return _step_response(rec, idx)


@api.route("/step/next", methods=["POST"])
def api_step_next():
    rec = _active_run()
    if rec is None:
        return jsonify({"error": "No active run"}), 404
    idx = session.get("current_step", 0) + 1
    if idx >= len(rec.steps):
        return jsonify({"error": "Already at last step"}), 400
    return _move_to(rec, idx)


@api.route("/step/prev", methods=["POST"])
def api_step_prev():
    rec = _active_run()
    if rec is None:
        return jsonify({"error": "No active run"}), 404
    idx = session.get("current_step", 0) - 1
    if idx < 0:
        return jsonify({"error": "Already at first step"}), 400
    return _move_to(rec, idx)


@api.route("/step/goto", methods=["POST"])
def api_step_goto():
    rec = _active_run()
    if rec is None:
        return jsonify({"error": "No active run"}), 404
    idx = _payload().get("index", 0)
    if not isinstance(idx, int) or isinstance(idx, bool) or not 0 <= idx < len(rec.steps):
        return jsonify({"error": "Invalid step index"}), 400
    return _move_to(rec, idx)


# ---------------------------------------------------------------------------
# API: State
# ---------------------------------------------------------------------------
@api.route("/state", methods=["GET"])
def api_state():
    return jsonify(get_state())


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
def handle_bad_input(e: ValueError):
    # InputError, GraphError and unknown algorithm keys are all ValueErrors
    log.warning("rejected request to %s: %s", request.path, e)
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config.DefaultConfig)
    app.config.from_prefixed_env("ALGOVIZ")
    if overrides:
        app.config.update(overrides)

    app.extensions["runs"] = OrderedDict()
    app.register_blueprint(api)
    app.register_error_handler(ValueError, handle_bad_input)
    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    log.info("Algorithm Step Visualizer on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config.get("DEBUG", False))
