# dice_duel/engine/models.py
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..content.balance import DEFAULTS


class EffectKind(Enum):
    ATTACK_BOOST = "atk+2"
    DEFENSE_BOOST = "def+2"
    DEFENSE_PENALTY = "def-2"


class Phase(Enum):
    BUFF = "buff"
    ATTACK = "attack"
    DEFENSE = "defense"


@dataclass(frozen=True)
class Effect:
    kind: EffectKind
    turns: int                             # remaining turns, > 0 while owned


@dataclass(frozen=True)
class Modifiers:
    attack: int = 0
    defense: int = 0


@dataclass
class Fighter:
    name: str
    hp: int = DEFAULTS["hp"]
    hp_max: int = DEFAULTS["hp"]
    effects: List[Effect] = field(default_factory=list)

    @property
    def modifiers(self) -> Modifiers:
        from .effects import aggregate_modifiers
        return aggregate_modifiers(self.effects)

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0


@dataclass
class PendingAttack:
    attacker: int                          # 1 | 2
    total: int                             # 2d6 + attack modifier
    critical: bool                         # from the raw roll only
    rolls: List[int] = field(default_factory=list)
    modifier: int = 0


@dataclass
class MatchState:
    match_id: str
    p1: Fighter
    p2: Fighter
    attacker: int = 1                      # active attacker, 1 | 2
    phase: Phase = Phase.BUFF
    pending_attack: Optional[PendingAttack] = None
    is_over: bool = False
    winner: Optional[int] = None
    turn: int = 0                          # completed rounds
    seed: int = 0                          # for deterministic dice
    log: List[str] = field(default_factory=list)   # most recent first
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def fighter(self, player: int) -> Fighter:
        return self.p1 if player == 1 else self.p2

    def opponent(self, player: int) -> Fighter:
        return self.p2 if player == 1 else self.p1

    @property
    def defender(self) -> int:
        return 2 if self.attacker == 1 else 1
