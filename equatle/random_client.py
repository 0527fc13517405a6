"""
Random source for answer generation.
If EQUATLE_SEED is set we use a seeded random.Random so a day's answer can be
reproduced. Otherwise we use the OS's secure generator.

Everything here only calls rng.randrange(n), so tests can pass any object
with that one method to script the draws.
"""

import random
from secrets import SystemRandom
from typing import Optional, Sequence, TypeVar

from .config import get_settings

T = TypeVar("T")


def make_source(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        seed = get_settings().random_seed
    if seed is None:
        return SystemRandom()
    return random.Random(seed)


def fetch_digit(rng) -> int:
    # randrange(10) gives us a number between 0 and 9
    return rng.randrange(10)


def fetch_choice(rng, options: Sequence[T]) -> T:
    if len(options) == 0:
        raise ValueError("Cannot choose from an empty sequence.")
    return options[rng.randrange(len(options))]
