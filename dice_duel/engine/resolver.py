# dice_duel/engine/resolver.py
import logging
import time
from typing import Dict, Optional, Sequence

from .models import EffectKind, Fighter, MatchState, PendingAttack, Phase
from .dice import rng_for, roll
from .rules import apply_damage, resolve_damage
from .effects import add_effect, end_of_round
from ..content.balance import BUFF_TABLE, DEFAULTS

logger = logging.getLogger(__name__)

ACTIONS = ("buff", "attack", "defend")
PLAYERS = (1, 2)


def new_fighter(name: str) -> Fighter:
    return Fighter(name=name, hp=DEFAULTS["hp"], hp_max=DEFAULTS["hp"])


def new_match(
    match_id: str = "local",
    seed: Optional[int] = None,
    names: Optional[Sequence[str]] = None,
) -> MatchState:
    if seed is None:
        seed = int(time.time() * 1000) & 0xFFFFFFFF
    p1_name, p2_name = names or DEFAULTS["player_names"]
    match = MatchState(
        match_id=match_id,
        p1=new_fighter(p1_name),
        p2=new_fighter(p2_name),
        seed=seed,
        rng=rng_for(seed),
    )
    logger.info("match %s created (seed=%s)", match_id, seed)
    return match


def add_log(match: MatchState, line: str) -> None:
    """Prepend a line; the oldest entries fall off past the log capacity."""
    match.log.insert(0, line)
    del match.log[DEFAULTS["log_capacity"]:]


def rejection_reason(match: MatchState, action: str, player: int) -> Optional[str]:
    """
    Single source of the legality rules. Returns None when `player` may take
    `action` right now, otherwise the message logged on rejection.
    """
    if action not in ACTIONS:
        raise ValueError(f"unknown action '{action}'")
    if player not in PLAYERS:
        return f"Unknown player {player!r}."
    if match.is_over:
        return "The duel is over. Reset to play again."

    if action == "buff":
        if player != match.attacker:
            return "It's not your turn to buff."
        if match.phase != Phase.BUFF:
            return "You can't buff in this phase."
        return None

    if action == "attack":
        if player != match.attacker:
            return "It's not your turn to attack."
        if match.pending_attack is not None:
            return "An attack is already pending."
        if match.phase not in (Phase.BUFF, Phase.ATTACK):
            return "You can't attack in this phase."
        return None

    if match.phase != Phase.DEFENSE:
        return "You're not in the defense phase."
    if match.pending_attack is None:
        return "There is no pending attack."
    if player == match.pending_attack.attacker:
        return "You can't defend your own attack."
    return None


def can_buff(match: MatchState, player: int) -> bool:
    return rejection_reason(match, "buff", player) is None


def can_attack(match: MatchState, player: int) -> bool:
    return rejection_reason(match, "attack", player) is None


def can_defend(match: MatchState, player: int) -> bool:
    return rejection_reason(match, "defend", player) is None


def legal_actions(match: MatchState, player: int) -> Dict[str, bool]:
    return {action: rejection_reason(match, action, player) is None for action in ACTIONS}


def _reject_if_illegal(match: MatchState, action: str, player: int) -> bool:
    reason = rejection_reason(match, action, player)
    if reason is None:
        return False
    add_log(match, reason)
    logger.debug("match %s: %s by player %s rejected: %s", match.match_id, action, player, reason)
    return True


def buff(match: MatchState, player: int) -> bool:
    """
    Roll 1d6 on the buff table. The phase is left alone, so the attacker
    can still attack this turn.
    """
    if _reject_if_illegal(match, "buff", player):
        return False

    face = roll(DEFAULTS["buff_dice"], match.rng).total
    kind_value, target, summary = BUFF_TABLE[face]
    actor = match.fighter(player)
    if kind_value is not None:
        recipient = actor if target == "self" else match.opponent(player)
        recipient.effects = add_effect(recipient.effects, EffectKind(kind_value), DEFAULTS["effect_duration"])

    add_log(match, f"🎲 {actor.name} rolls Buff (1d6={face}) → {summary}")
    logger.debug("match %s: player %s buff face=%s", match.match_id, player, face)
    return True


def attack(match: MatchState, player: int) -> bool:
    if _reject_if_illegal(match, "attack", player):
        return False

    attacker = match.fighter(player)
    dice = roll(DEFAULTS["attack_dice"], match.rng)
    modifier = attacker.modifiers.attack
    total = dice.total + modifier

    match.pending_attack = PendingAttack(
        attacker=player,
        total=total,
        critical=dice.critical,
        rolls=list(dice.rolls),
        modifier=modifier,
    )
    crit_tag = " 🔥 CRITICAL?" if dice.critical else ""
    add_log(match, f"🧨 {attacker.name} attacks: 2d6 ({dice.describe()}) {modifier:+d} = {total}{crit_tag}")
    match.phase = Phase.DEFENSE
    logger.debug("match %s: player %s attack total=%s crit=%s", match.match_id, player, total, dice.critical)
    return True


def defend(match: MatchState, player: int) -> bool:
    """
    Resolve the pending attack against the defender's 2d6 roll, tick both
    ledgers, hand the turn over and check for a winner.
    """
    if _reject_if_illegal(match, "defend", player):
        return False

    pending = match.pending_attack
    attacker_id = pending.attacker
    attacker = match.fighter(attacker_id)
    defender = match.fighter(player)

    dice = roll(DEFAULTS["defense_dice"], match.rng)
    modifier = defender.modifiers.defense
    defense_total = dice.total + modifier
    add_log(match, f"🛡️ {defender.name} defends: 2d6 ({dice.describe()}) {modifier:+d} = {defense_total}")

    damage = resolve_damage(pending.total, defense_total, pending.critical)
    if damage > 0 and pending.critical:
        add_log(match, "💥 CRITICAL! Damage doubled.")
    apply_damage(defender, damage)
    if damage > 0:
        add_log(match, f"🔥 {attacker.name} deals {damage} to {defender.name}")
    else:
        add_log(match, "✅ Successful defense! No damage.")

    end_of_round(attacker)
    end_of_round(defender)

    match.pending_attack = None
    match.phase = Phase.BUFF
    match.attacker = 2 if match.attacker == 1 else 1
    match.turn += 1

    if defender.is_defeated:
        match.is_over = True
        match.winner = attacker_id
        add_log(match, f"🏆 {attacker.name} wins the duel!")
        logger.info("match %s: %s wins after %s rounds", match.match_id, attacker.name, match.turn)
    return True


def reset(match: MatchState, names: Optional[Sequence[str]] = None) -> None:
    """Put the match back to its initial state. The dice stream keeps going."""
    p1_name, p2_name = names or (match.p1.name, match.p2.name)
    match.p1 = new_fighter(p1_name)
    match.p2 = new_fighter(p2_name)
    match.attacker = 1
    match.phase = Phase.BUFF
    match.pending_attack = None
    match.is_over = False
    match.winner = None
    match.turn = 0
    match.log = []
    logger.info("match %s reset", match.match_id)


def perform(match: MatchState, action: str, player: int) -> bool:
    """Dispatch one of the player actions by name."""
    handlers = {"buff": buff, "attack": attack, "defend": defend}
    if action not in handlers:
        raise ValueError(f"unknown action '{action}'")
    return handlers[action](match, player)


def banner(match: MatchState) -> str:
    if match.is_over:
        return "Duel over"
    return f"Turn: {match.fighter(match.attacker).name} · Phase: {match.phase.value}"

