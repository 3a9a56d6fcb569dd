# dice_duel/engine/dice.py
import random
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class DiceRoll:
    total: int
    rolls: List[int] = field(default_factory=list)
    critical: bool = False   # at least one die on its max face

    def describe(self) -> str:
        return "+".join(str(r) for r in self.rolls)


def rng_for(seed: int) -> random.Random:
    # deterministic per match seed
    return random.Random(f"duel:{seed}")


def roll_die(sides: int, r: Optional[random.Random] = None) -> int:
    if sides <= 0:
        raise ValueError("a die needs at least one side")
    r = r or random
    return r.randint(1, sides)


def roll_dice(count: int, sides: int, r: Optional[random.Random] = None) -> DiceRoll:
    """Roll `count` dice of `sides` faces; critical when any die shows its max face."""
    if count < 1:
        raise ValueError("must roll at least one die")
    rolls = [roll_die(sides, r) for _ in range(count)]
    return DiceRoll(total=sum(rolls), rolls=rolls, critical=any(x == sides for x in rolls))


def parse(dice: str) -> tuple:
    # supports "d6", "2d6", "d20" etc.
    count, sep, sides = dice.lower().partition("d")
    if not sep or not sides.isdigit() or (count and not count.isdigit()):
        raise ValueError("dice must be like 'd20' or '2d6'")
    return int(count or 1), int(sides)


def roll(dice: str, r: Optional[random.Random] = None) -> DiceRoll:
    count, sides = parse(dice)
    return roll_dice(count, sides, r)
