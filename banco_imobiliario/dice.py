"""
Six-sided dice driven by an injected random source.
"""

import random
from typing import Tuple

FACES = 6


def roll_one(rng: random.Random) -> int:
    """Roll a single die, uniform in [1, 6]."""
    return rng.randint(1, FACES)


def roll_two(rng: random.Random) -> Tuple[int, int]:
    """Roll two independent dice. Callers sum them or check for doubles."""
    return roll_one(rng), roll_one(rng)


def is_doubles(die1: int, die2: int) -> bool:
    return die1 == die2
