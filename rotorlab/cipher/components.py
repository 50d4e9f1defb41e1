"""Rotor and reflector built on top of :class:`Permutation`.

A rotor is a permutation that can be stepped: every step rotates its
offsets left by one and re-normalizes them, which turns the mapping ``f``
into ``k -> f(k + 1) - 1``. A reflector is a fixed involution without
fixed points, i.e. 13 disjoint letter swaps.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .alphabet import ALPHABET_SIZE, index_to_letter, letter_to_index
from .errors import InvalidPermutation, InvalidReflector
from .permutation import (
    Permutation,
    inverse_table,
    normalize_offsets,
    targets_of,
)


def _all_targets_covered(offsets: np.ndarray) -> bool:
    covered = np.zeros(ALPHABET_SIZE, dtype=bool)
    covered[targets_of(offsets)] = True
    return bool(covered.all())


class Rotor:
    def __init__(self, permutation: Permutation):
        offsets = np.array(permutation.as_array(), dtype=np.int64)
        if not _all_targets_covered(offsets):
            # A bijection always covers every target; kept as a self-check.
            raise InvalidPermutation("rotor leaves some letters unreachable")
        self._initial = permutation
        self._offsets = offsets
        self._inverse = inverse_table(offsets)
        self.steps = 0

    @classmethod
    def from_letters(cls, raw: Sequence[str]) -> "Rotor":
        return cls(Permutation.from_letters(raw))

    @property
    def initial(self) -> Permutation:
        return self._initial

    @property
    def wiring(self) -> Tuple[int, ...]:
        """Current offsets (after any steps)."""
        return tuple(int(o) for o in self._offsets)

    def letters(self) -> str:
        return "".join(index_to_letter(int(t)) for t in targets_of(self._offsets))

    def forward_index(self, index: int) -> int:
        return (index + int(self._offsets[index])) % ALPHABET_SIZE

    def backward_index(self, index: int) -> int:
        return int(self._inverse[index])

    def lookup_forward(self, letter: str) -> str:
        return index_to_letter(self.forward_index(letter_to_index(letter)))

    def lookup_backward(self, letter: str) -> str:
        return index_to_letter(self.backward_index(letter_to_index(letter)))

    def step(self) -> None:
        rotated = np.roll(self._offsets, -1)
        self._offsets = normalize_offsets(targets_of(rotated))
        self._inverse = inverse_table(self._offsets)
        self.steps += 1

    def __repr__(self) -> str:
        return f"<Rotor wiring={self.letters()} steps={self.steps}>"


class Reflector:
    def __init__(self, permutation: Permutation):
        for i in range(ALPHABET_SIZE):
            j = permutation.forward(i)
            if j == i:
                raise InvalidReflector(f"{index_to_letter(i)!r} maps to itself")
            if permutation.forward(j) != i:
                raise InvalidReflector(
                    f"not an involution: {index_to_letter(i)!r} -> {index_to_letter(j)!r} "
                    f"-> {index_to_letter(permutation.forward(j))!r}"
                )
        self._permutation = permutation

    @classmethod
    def from_letters(cls, raw: Sequence[str]) -> "Reflector":
        try:
            permutation = Permutation.from_letters(raw)
        except InvalidPermutation as exc:
            # A repeated target cannot be an involution either.
            raise InvalidReflector(str(exc)) from exc
        return cls(permutation)

    @property
    def permutation(self) -> Permutation:
        return self._permutation

    def letters(self) -> str:
        return self._permutation.letters()

    def apply_index(self, index: int) -> int:
        return self._permutation.forward(index)

    def apply(self, letter: str) -> str:
        return index_to_letter(self.apply_index(letter_to_index(letter)))

    def __repr__(self) -> str:
        return f"<Reflector wiring={self.letters()}>"
