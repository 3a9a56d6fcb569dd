# dice_duel/sockets.py
import logging

from flask import request
from flask_socketio import emit

from . import state
from .engine import resolver
from .engine.effects import describe_effect, is_debuff

logger = logging.getLogger(__name__)


def snapshot_for(match):
    """
    Returns a UI-friendly, read-only snapshot of the match. Control
    enablement comes straight from the resolver's legality rules.
    """
    def pack(fighter):
        mods = fighter.modifiers
        return {
            "name": fighter.name,
            "hp": fighter.hp,
            "hp_max": fighter.hp_max,
            "effects": [
                {
                    "kind": fx.kind.value,
                    "turns": fx.turns,
                    "label": describe_effect(fx),
                    "debuff": is_debuff(fx),
                }
                for fx in fighter.effects
            ],
            "modifiers": {"attack": mods.attack, "defense": mods.defense},
        }

    pending = match.pending_attack
    return {
        "match_id": match.match_id,
        "p1": pack(match.p1),
        "p2": pack(match.p2),
        "attacker": match.attacker,
        "phase": match.phase.value,
        "pending_attack": pending.total if pending else None,
        "pending_critical": bool(pending and pending.critical),
        "is_over": match.is_over,
        "winner": match.winner,
        "turn": match.turn,
        "banner": resolver.banner(match),
        "controls": {str(pid): resolver.legal_actions(match, pid) for pid in resolver.PLAYERS},
        "log": list(match.log),
    }


def parse_player(value):
    """Accept 1/2 as an int or a digit-only string; anything else is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if not isinstance(value, int):
        return None
    return value if value in resolver.PLAYERS else None


def register_duel_socket_handlers(socketio):
    @socketio.on("duel_new")
    def duel_new(payload=None):
        sid = request.sid
        seed = payload.get("seed") if isinstance(payload, dict) else None
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            emit("duel_system", "Seed must be an integer.")
            return
        match = state.create_match(seed=seed, sid=sid)
        logger.info("client %s started match %s", sid, match.match_id)
        emit("duel_system", "New duel. Player 1 attacks first.")
        emit("duel_snapshot", snapshot_for(match))

    @socketio.on("duel_action")
    def duel_action(payload):
        sid = request.sid
        match = state.get_match_by_sid(sid)
        if not match:
            emit("duel_system", "Not in a duel.")
            return
        if not isinstance(payload, dict):
            logger.warning("client %s sent malformed action %r", sid, payload)
            emit("duel_system", "Action must be an object with 'action' and 'player'.")
            return

        action = str(payload.get("action", "")).strip().lower()
        if action not in resolver.ACTIONS:
            emit("duel_system", f"Unknown action '{action}'. Try again.")
            return
        player = parse_player(payload.get("player"))
        if player is None:
            emit("duel_system", "Player must be 1 or 2.")
            return

        resolver.perform(match, action, player)
        emit("duel_snapshot", snapshot_for(match))
        if match.is_over:
            emit("duel_system", "Duel ended.")

    @socketio.on("duel_reset")
    def duel_reset():
        sid = request.sid
        match = state.get_match_by_sid(sid)
        if not match:
            emit("duel_system", "Not in a duel.")
            return
        resolver.reset(match)
        emit("duel_snapshot", snapshot_for(match))

    @socketio.on("disconnect")
    def duel_disconnect(*args):
        state.drop_match_for(request.sid)
