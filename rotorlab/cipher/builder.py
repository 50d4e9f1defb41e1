from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence, TypeVar

from .components import Reflector, Rotor
from .errors import WiringError
from .machine import TwoRotorMachine
from .sources import load_source
from .spec import MachineSpec

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _build_part(factory: Callable[[Sequence[str]], T], raw: Sequence[str], label: str) -> T:
    try:
        return factory(raw)
    except WiringError as exc:
        raise exc.with_source(label) from exc


def build_machine_from_sources(
    rotor_one: Sequence[str],
    rotor_two: Sequence[str],
    reflector: Sequence[str],
    *,
    labels: Sequence[str] = ("rotor_one", "rotor_two", "reflector"),
) -> TwoRotorMachine:
    """Validate three raw sources and wire them into a fresh machine.

    Raises the first WiringError encountered, labelled with the component it
    came from. Nothing is returned unless all three are valid.
    """
    machine = TwoRotorMachine(
        rotor_one=_build_part(Rotor.from_letters, rotor_one, labels[0]),
        rotor_two=_build_part(Rotor.from_letters, rotor_two, labels[1]),
        reflector=_build_part(Reflector.from_letters, reflector, labels[2]),
    )
    logger.debug("Built machine %s", machine.state())
    return machine


def build_machine(spec: MachineSpec) -> TwoRotorMachine:
    return build_machine_from_sources(spec.rotor_one, spec.rotor_two, spec.reflector)


def build_machine_from_files(
    rotor_one: str | Path,
    rotor_two: str | Path,
    reflector: str | Path,
) -> TwoRotorMachine:
    """Load the three source files and build a machine from them."""
    paths = [str(p) for p in (rotor_one, rotor_two, reflector)]
    sources = [load_source(p) for p in paths]
    return build_machine_from_sources(*sources, labels=paths)
