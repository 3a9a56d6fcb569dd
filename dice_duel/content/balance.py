# dice_duel/content/balance.py
DEFAULTS = {
    "hp": 100,
    "log_capacity": 200,
    "effect_duration": 3,
    "buff_dice": "d6",
    "attack_dice": "2d6",
    "defense_dice": "2d6",
    "crit_multiplier": 2,
    "player_names": ("Player 1", "Player 2"),
}

# per-effect contribution, keyed by EffectKind.value
EFFECT_MODS = {
    "atk+2": {"attack": 2, "defense": 0},
    "def+2": {"attack": 0, "defense": 2},
    "def-2": {"attack": 0, "defense": -2},
}

# 1d6 buff face -> (effect kind value or None, target, summary)
# target: "self" | "enemy" | None
BUFF_TABLE = {
    1: (None, None, "No effect."),
    2: (None, None, "No effect."),
    3: ("atk+2", "self", "+2 ATK for 3 turns."),
    4: ("atk+2", "self", "+2 ATK for 3 turns."),
    5: ("def+2", "self", "+2 DEF for 3 turns."),
    6: ("def-2", "enemy", "Rival -2 DEF for 3 turns."),
}
