"""Two-rotor machine: the stateful cipher engine.

Signal path for each letter::

    rotor_one -> rotor_two -> reflector -> rotor_two^-1 -> rotor_one^-1

after which rotor_one steps, and rotor_two steps once every 26 letters
(odometer cadence). The path is symmetric around the involutive reflector,
so encryption and decryption are the same procedure from the same start
state.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .alphabet import ALPHABET_SIZE, is_letter
from .components import Reflector, Rotor


@dataclass
class TwoRotorMachine:
    rotor_one: Rotor
    rotor_two: Rotor
    reflector: Reflector
    rotation: int = field(default=0)
    letters_processed: int = field(default=0)

    def __post_init__(self) -> None:
        if self.rotor_one is self.rotor_two:
            raise ValueError("rotor_one and rotor_two must be distinct Rotor instances")
        if not 0 <= self.rotation < ALPHABET_SIZE:
            raise ValueError(f"rotation must be within [0, {ALPHABET_SIZE - 1}]")

    def encode_index(self, index: int) -> int:
        """Run one letter index through the signal path and advance the rotors."""
        index = self.rotor_one.forward_index(index)
        index = self.rotor_two.forward_index(index)
        index = self.reflector.apply_index(index)
        index = self.rotor_two.backward_index(index)
        index = self.rotor_one.backward_index(index)
        self._advance()
        return index

    def translate(self, symbol: str) -> str:
        """Translate one symbol; anything but a-z is returned untouched."""
        if not is_letter(symbol):
            return symbol
        return chr(ord("a") + self.encode_index(ord(symbol) - ord("a")))

    def _advance(self) -> None:
        self.rotor_one.step()
        self.letters_processed += 1
        self.rotation += 1
        if self.rotation == ALPHABET_SIZE:
            self.rotor_two.step()
            self.rotation = 0

    def state(self) -> dict:
        return {
            "rotor_one": self.rotor_one.letters(),
            "rotor_two": self.rotor_two.letters(),
            "reflector": self.reflector.letters(),
            "rotation": self.rotation,
            "letters_processed": self.letters_processed,
        }
