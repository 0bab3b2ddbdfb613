# attack_sim/engine/dice.py
import random
from typing import List, Optional

from ..content.balance import DIE_SIDES

def rng_for(seed: int, batch: int = 0) -> random.Random:
    # deterministic per request seed + batch
    return random.Random(f"{seed}:{batch}")

def fresh_rng(seed: Optional[int] = None) -> random.Random:
    # private generator per batch, never the module-level one
    if seed is None:
        return random.Random()
    return rng_for(seed)

def roll_die(sides: int, r: random.Random) -> int:
    return r.randint(1, sides)

def roll_dice(count: int, sides: int, r: random.Random) -> List[int]:
    return [roll_die(sides, r) for _ in range(count)]

def d6(r: random.Random) -> int:
    return roll_die(DIE_SIDES, r)
