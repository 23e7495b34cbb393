from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
}

# Element values drawn by the generators in tests and benchmarks.
VALUE_LOW: int = -1000
VALUE_HIGH: int = 1000


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "VALUE_LOW",
    "VALUE_HIGH",
    "seed_everywhere",
]
