# dice_duel/engine/effects.py
from __future__ import annotations

from typing import Dict, Iterable, List

from .models import Effect, EffectKind, Fighter, Modifiers
from ..content.balance import EFFECT_MODS

DEBUFF_KINDS = frozenset({EffectKind.DEFENSE_PENALTY})


def effect_mods(kind: EffectKind) -> Dict[str, int]:
    try:
        return EFFECT_MODS[kind.value]
    except (KeyError, AttributeError):
        raise ValueError(f"unknown effect kind: {kind!r}") from None


def aggregate_modifiers(effects: Iterable[Effect]) -> Modifiers:
    """Sum attack/defense contributions of every effect; stacking is uncapped."""
    attack = 0
    defense = 0
    for effect in effects:
        mods = effect_mods(effect.kind)
        attack += mods["attack"]
        defense += mods["defense"]
    return Modifiers(attack=attack, defense=defense)


def add_effect(effects: List[Effect], kind: EffectKind, turns: int) -> List[Effect]:
    """Append a new effect. Same-kind entries are never merged."""
    if turns <= 0:
        raise ValueError("effect duration must be positive")
    effect_mods(kind)
    return [*effects, Effect(kind=kind, turns=turns)]


def tick_durations(effects: Iterable[Effect]) -> List[Effect]:
    """Decrement duration for every effect; drop expired ones."""
    new_list: List[Effect] = []
    for e in effects:
        d = e.turns - 1
        if d > 0:
            new_list.append(Effect(kind=e.kind, turns=d))
    return new_list


def is_debuff(effect: Effect) -> bool:
    return effect.kind in DEBUFF_KINDS


def describe_effect(effect: Effect) -> str:
    return f"{effect.kind.value} ({effect.turns})"


def end_of_round(fighter: Fighter) -> None:
    """End-of-round pipeline: currently only the duration tick."""
    fighter.effects = tick_durations(fighter.effects)
