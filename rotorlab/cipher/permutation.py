"""Permutations of the 26-letter alphabet stored as signed offsets.

Position ``i`` (the i-th letter) maps to ``(i + offset[i]) mod 26``. Offsets
are kept in [-25, 25] so that ``index + 'a' + offset`` is always a letter.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .alphabet import ALPHABET, ALPHABET_SIZE, index_to_letter, is_letter, translate_letter
from .errors import InvalidPermutation, MalformedSource

_POSITIONS = np.arange(ALPHABET_SIZE, dtype=np.int64)


def offsets_from_letters(raw: Sequence[str]) -> np.ndarray:
    """Convert 26 target letters into signed offsets (target - position)."""
    letters = list(raw)
    if len(letters) != ALPHABET_SIZE:
        raise MalformedSource(f"expected {ALPHABET_SIZE} letters, got {len(letters)}")
    bad = [ch for ch in letters if not is_letter(ch)]
    if bad:
        raise MalformedSource(f"characters outside a-z: {''.join(sorted(set(bad)))!r}")
    targets = np.array([ord(ch) - ord("a") for ch in letters], dtype=np.int64)
    return targets - _POSITIONS


def targets_of(offsets: np.ndarray) -> np.ndarray:
    return (_POSITIONS + offsets) % ALPHABET_SIZE


def normalize_offsets(targets: np.ndarray) -> np.ndarray:
    """Offsets that reach `targets` from each position, within [-25, 25]."""
    return np.asarray(targets, dtype=np.int64) % ALPHABET_SIZE - _POSITIONS


def inverse_table(offsets: np.ndarray) -> np.ndarray:
    """inverse[t] is the unique position whose target is t."""
    inverse = np.zeros(ALPHABET_SIZE, dtype=np.int64)
    inverse[targets_of(offsets)] = _POSITIONS
    return inverse


class Permutation:
    """A validated bijection over a-z.

    Build with :meth:`from_letters` or :meth:`from_offsets`; both either
    return a fully valid instance or raise.
    """

    __slots__ = ("_offsets",)

    def __init__(self, offsets: Iterable[int]):
        arr = np.array(list(offsets), dtype=np.int64)
        if arr.shape != (ALPHABET_SIZE,):
            raise MalformedSource(f"expected {ALPHABET_SIZE} offsets, got {arr.size}")
        if np.any(np.abs(arr) >= ALPHABET_SIZE):
            raise MalformedSource("offsets must lie within [-25, 25]")
        dupes = _duplicate_targets(arr)
        if dupes:
            raise InvalidPermutation(
                "not a bijection; targets reached more than once: " + "".join(dupes)
            )
        # Same mapping, but with every i + offset[i] inside [0, 25].
        arr = normalize_offsets(targets_of(arr))
        arr.setflags(write=False)
        self._offsets = arr

    @classmethod
    def from_letters(cls, raw: Sequence[str]) -> "Permutation":
        return cls(offsets_from_letters(raw))

    @classmethod
    def from_offsets(cls, offsets: Iterable[int]) -> "Permutation":
        return cls(offsets)

    @property
    def offsets(self) -> Tuple[int, ...]:
        return tuple(int(o) for o in self._offsets)

    def as_array(self) -> np.ndarray:
        return self._offsets

    def forward(self, index: int) -> int:
        return (index + int(self._offsets[index])) % ALPHABET_SIZE

    def targets(self) -> List[int]:
        return [int(t) for t in targets_of(self._offsets)]

    def inverse_table(self) -> List[int]:
        return [int(i) for i in inverse_table(self._offsets)]

    def letters(self) -> str:
        return "".join(translate_letter(i, int(o)) for i, o in enumerate(self._offsets))

    def __len__(self) -> int:
        return ALPHABET_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return bool(np.array_equal(self._offsets, other._offsets))

    def __hash__(self) -> int:
        return hash(self.offsets)

    def __repr__(self) -> str:
        return f"Permutation({self.letters()!r})"


def _duplicate_targets(offsets: np.ndarray) -> List[str]:
    counts = np.bincount(targets_of(offsets), minlength=ALPHABET_SIZE)
    return [index_to_letter(int(t)) for t in np.flatnonzero(counts > 1)]


def format_translation(wiring) -> str:
    """Render a wiring as the alphabet, a row of bars and the translations.

    Accepts a Permutation, or anything with a ``letters()`` method (rotors
    and reflectors).
    """
    translated = wiring.letters()
    return "\n".join(
        [
            " ".join(ALPHABET),
            " ".join("|" for _ in ALPHABET),
            " ".join(translated),
        ]
    )
