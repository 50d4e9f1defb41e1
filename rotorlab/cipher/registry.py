"""Named built-in wirings and ready-made machine templates.

Sample wirings for experiments and tests; none of them reproduce a
historical machine.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .spec import MachineSpec


@dataclass(frozen=True)
class Wiring:
    wiring_id: str
    kind: str  # ROTOR or REFLECTOR
    letters: str
    description: str


def builtin_wirings() -> Dict[str, Wiring]:
    wirings = [
        Wiring("rotor.identity", "ROTOR", "abcdefghijklmnopqrstuvwxyz", "Every letter maps to itself"),
        Wiring("rotor.shift1", "ROTOR", "bcdefghijklmnopqrstuvwxyza", "Alphabet shifted by one"),
        Wiring("rotor.alpha", "ROTOR", "ekmflgdqvzntowyhxuspaibrcj", "Irregular sample wiring"),
        Wiring("rotor.beta", "ROTOR", "ajdksiruxblhwtmcqgznpyfvoe", "Irregular sample wiring"),
        Wiring("reflector.pairs", "REFLECTOR", "badcfehgjilknmporqtsvuxwzy", "Swaps neighbouring letters (a<->b, c<->d, ...)"),
        Wiring("reflector.mirror", "REFLECTOR", "zyxwvutsrqponmlkjihgfedcba", "Reverses the alphabet (a<->z, b<->y, ...)"),
        Wiring("reflector.swap13", "REFLECTOR", "nopqrstuvwxyzabcdefghijklm", "Swaps each letter with the one 13 places away"),
    ]
    return {w.wiring_id: w for w in wirings}


class WiringRegistry:
    def __init__(self):
        self._wirings: Dict[str, Wiring] = builtin_wirings()

    def get(self, wiring_id: str) -> Wiring:
        if wiring_id not in self._wirings:
            raise KeyError(f"Unknown wiring_id: {wiring_id}")
        return self._wirings[wiring_id]

    def exists(self, wiring_id: str) -> bool:
        return wiring_id in self._wirings

    def register(self, wiring: Wiring) -> None:
        self._wirings[wiring.wiring_id] = wiring

    def list(self) -> List[Wiring]:
        return list(self._wirings.values())

    def list_by_kind(self, kind: str) -> List[Wiring]:
        kind = kind.upper()
        out = [w for w in self._wirings.values() if w.kind == kind]
        out.sort(key=lambda w: w.wiring_id)
        return out


TEMPLATES: Dict[str, Dict[str, str]] = {
    "classroom": {
        "rotor_one": "rotor.alpha",
        "rotor_two": "rotor.beta",
        "reflector": "reflector.mirror",
        "notes": "Two irregular rotors with the mirror reflector",
    },
    "shifted": {
        "rotor_one": "rotor.shift1",
        "rotor_two": "rotor.shift1",
        "reflector": "reflector.mirror",
        "notes": "Shift rotors; stepping leaves them unchanged",
    },
    "paired": {
        "rotor_one": "rotor.beta",
        "rotor_two": "rotor.alpha",
        "reflector": "reflector.pairs",
        "notes": "Irregular rotors with neighbouring-letter swaps",
    },
}


def list_templates() -> List[str]:
    return sorted(TEMPLATES.keys())


def get_template(
    name: str,
    *,
    override_name: Optional[str] = None,
    registry: Optional[WiringRegistry] = None,
) -> MachineSpec:
    if name not in TEMPLATES:
        raise KeyError(f"Unknown template: {name}. Available: {list_templates()}")
    reg = registry or WiringRegistry()
    t = TEMPLATES[name]
    return MachineSpec(
        name=override_name or name,
        rotor_one=reg.get(t["rotor_one"]).letters,
        rotor_two=reg.get(t["rotor_two"]).letters,
        reflector=reg.get(t["reflector"]).letters,
        notes=t["notes"],
    )
