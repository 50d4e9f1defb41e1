"""Symbol-by-symbol stream codec driving a :class:`TwoRotorMachine`.

Letters go through the machine; space and newline are copied unchanged and
never advance the rotors. Other symbols follow the symbol policy:

* ``"passthrough"`` (default) copies them unchanged, like space/newline;
* ``"reject"`` raises :class:`UnsupportedSymbol` when one is reached.

The machine carries irreversible rotation state, so a stream can only be
restarted by building a fresh machine.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Literal

from .alphabet import PASSTHROUGH, is_letter
from .errors import UnsupportedSymbol
from .machine import TwoRotorMachine

logger = logging.getLogger(__name__)

SymbolPolicy = Literal["passthrough", "reject"]
SYMBOL_POLICIES = ("passthrough", "reject")


def transform(
    symbols: Iterable[str],
    machine: TwoRotorMachine,
    *,
    policy: SymbolPolicy = "passthrough",
) -> Iterator[str]:
    """Return a lazy iterator with one output symbol per input symbol, in order.

    The policy is checked here, before any symbol is consumed.
    """
    if policy not in SYMBOL_POLICIES:
        raise ValueError(f"Unknown symbol policy: {policy!r}")
    return _transform(symbols, machine, policy)


def _transform(symbols: Iterable[str], machine: TwoRotorMachine, policy: str) -> Iterator[str]:
    for position, symbol in enumerate(symbols):
        if is_letter(symbol):
            yield machine.translate(symbol)
        elif symbol in PASSTHROUGH:
            yield symbol
        elif policy == "reject":
            raise UnsupportedSymbol(symbol, position)
        else:
            logger.debug("Passing through unsupported symbol %r at position %d", symbol, position)
            yield symbol


def translate_text(
    text: str,
    machine: TwoRotorMachine,
    *,
    policy: SymbolPolicy = "passthrough",
) -> str:
    return "".join(transform(text, machine, policy=policy))
