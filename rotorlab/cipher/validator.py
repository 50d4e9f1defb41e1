from __future__ import annotations

from typing import List, Tuple

from .components import Reflector, Rotor
from .errors import WiringError
from .spec import MachineSpec


def validate_spec(spec: MachineSpec) -> Tuple[bool, List[str]]:
    """Check all three wirings and collect every problem instead of raising."""
    errs: List[str] = []

    for label in ("rotor_one", "rotor_two"):
        try:
            Rotor.from_letters(getattr(spec, label))
        except WiringError as exc:
            errs.append(f"{label}: [{exc.kind}] {exc}")

    try:
        Reflector.from_letters(spec.reflector)
    except WiringError as exc:
        errs.append(f"reflector: [{exc.kind}] {exc}")

    return (len(errs) == 0), errs
