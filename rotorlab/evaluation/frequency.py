"""Letter statistics for plaintext/ciphertext comparison.

English text has an index of coincidence near 0.066; uniformly random
letters give 1/26 (about 0.038). A rotor machine should push ciphertext
towards the latter.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List

import numpy as np

from rotorlab.cipher.alphabet import ALPHABET, ALPHABET_SIZE, is_letter

RANDOM_IC = 1.0 / ALPHABET_SIZE


def letter_histogram(text: str) -> np.ndarray:
    """Counts of a..z in `text`; other symbols are ignored."""
    idx = [ord(ch) - ord("a") for ch in text if is_letter(ch)]
    return np.bincount(np.asarray(idx, dtype=np.int64), minlength=ALPHABET_SIZE)


def index_of_coincidence(text: str) -> float:
    counts = letter_histogram(text)
    n = int(counts.sum())
    if n < 2:
        return 0.0
    return float((counts * (counts - 1)).sum() / (n * (n - 1)))


@dataclass
class FrequencyResult:
    total_letters: int
    index_of_coincidence: float
    most_common: List[str]
    counts: Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        return (
            f"letters={self.total_letters}, IC={self.index_of_coincidence:.4f} "
            f"(random={RANDOM_IC:.4f}), top={''.join(self.most_common)}"
        )


def analyze_text(text: str, *, top: int = 5) -> FrequencyResult:
    counts = letter_histogram(text)
    # stable sort keeps alphabetical order among ties
    order = np.argsort(-counts, kind="stable")
    most_common = [ALPHABET[i] for i in order[:top] if counts[i] > 0]
    return FrequencyResult(
        total_letters=int(counts.sum()),
        index_of_coincidence=index_of_coincidence(text),
        most_common=most_common,
        counts={ALPHABET[i]: int(c) for i, c in enumerate(counts)},
    )
