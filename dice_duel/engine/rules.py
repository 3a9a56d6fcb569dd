# dice_duel/engine/rules.py
from .models import Fighter
from ..content.balance import DEFAULTS


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


def resolve_damage(attack_total: int, defense_total: int, critical: bool) -> int:
    # crit doubles what got through the defense, never the raw attack
    damage = max(0, attack_total - defense_total)
    if critical:
        damage *= DEFAULTS["crit_multiplier"]
    return damage


def apply_damage(fighter: Fighter, amount: int) -> int:
    """Subtract `amount` from hp, keeping it in [0, hp_max]. Returns hp lost."""
    before = fighter.hp
    fighter.hp = clamp(fighter.hp - amount, 0, fighter.hp_max)
    return before - fighter.hp
