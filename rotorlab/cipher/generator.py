"""Random rotor and reflector sources.

Pass an integer seed (or a numpy Generator) for reproducible output.
"""
from __future__ import annotations

from typing import Optional, Union

import numpy as np

from .alphabet import ALPHABET, ALPHABET_SIZE

RngLike = Union[int, np.random.Generator, None]


def build_rng(seed: RngLike = None) -> np.random.Generator:
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def random_rotor(seed: RngLike = None) -> str:
    """Return a random permutation of a-z."""
    rng = build_rng(seed)
    order = rng.permutation(ALPHABET_SIZE)
    return "".join(ALPHABET[i] for i in order)


def random_reflector(seed: RngLike = None) -> str:
    """Return a random set of 13 disjoint letter swaps."""
    rng = build_rng(seed)
    order = rng.permutation(ALPHABET_SIZE)
    wiring = [""] * ALPHABET_SIZE
    for a, b in order.reshape(-1, 2):
        wiring[a], wiring[b] = ALPHABET[b], ALPHABET[a]
    return "".join(wiring)


def random_sources(seed: Optional[int] = None) -> dict:
    """Two rotors and a reflector drawn from one seeded generator."""
    rng = build_rng(seed)
    return {
        "rotor_one": random_rotor(rng),
        "rotor_two": random_rotor(rng),
        "reflector": random_reflector(rng),
    }
