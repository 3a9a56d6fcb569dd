# dice_duel/routes.py
import logging

from flask import Blueprint, jsonify, render_template, request

from . import state
from .engine import resolver
from .sockets import parse_player, snapshot_for

logger = logging.getLogger(__name__)

duel_bp = Blueprint("duel", __name__, template_folder="templates")


def _not_found(match_id):
    return jsonify({"error": f"No duel '{match_id}'."}), 404


def _json_object():
    """Request body as a dict; a missing body is {} and a non-object is None."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        logger.warning("rejected non-object JSON body %r", payload)
        return None
    return payload


def _bad_body():
    return jsonify({"error": "Body must be a JSON object."}), 400


@duel_bp.route("/duel")
def duel_page():
    return render_template("duel.html")


@duel_bp.route("/duel/matches", methods=["POST"])
def create_match():
    payload = _json_object()
    if payload is None:
        return _bad_body()
    seed = payload.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"error": "Seed must be an integer."}), 400
    match = state.create_match(seed=seed)
    return jsonify({"match_id": match.match_id, "state": snapshot_for(match)}), 201


@duel_bp.route("/duel/matches/<match_id>")
def get_match(match_id):
    match = state.get_match(match_id)
    if not match:
        return _not_found(match_id)
    return jsonify(snapshot_for(match))


@duel_bp.route("/duel/matches/<match_id>", methods=["DELETE"])
def delete_match(match_id):
    if not state.drop_match(match_id):
        return _not_found(match_id)
    return "", 204


@duel_bp.route("/duel/matches/<match_id>/reset", methods=["POST"])
def reset_match(match_id):
    match = state.get_match(match_id)
    if not match:
        return _not_found(match_id)
    resolver.reset(match)
    return jsonify({"accepted": True, "state": snapshot_for(match)})


@duel_bp.route("/duel/matches/<match_id>/<action>", methods=["POST"])
def match_action(match_id, action):
    match = state.get_match(match_id)
    if not match:
        return _not_found(match_id)
    if action not in resolver.ACTIONS:
        return jsonify({"error": f"Unknown action '{action}'."}), 404

    payload = _json_object()
    if payload is None:
        return _bad_body()
    player = parse_player(payload.get("player"))
    if player is None:
        logger.warning("match %s: bad player in %r", match_id, payload)
        return jsonify({"error": "Player must be 1 or 2."}), 400

    accepted = resolver.perform(match, action, player)
    return jsonify({"accepted": accepted, "state": snapshot_for(match)})
