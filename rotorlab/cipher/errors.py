"""Error kinds raised while loading and validating machine wirings.

Every wiring error is raised at construction time. Once a machine exists,
translating a stream never raises (except UnsupportedSymbol under the
"reject" symbol policy).
"""
from __future__ import annotations

from typing import Optional


class WiringError(ValueError):
    """Base class for rejected rotor/reflector sources."""

    kind: str = "wiring_error"

    def __init__(self, message: str, *, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)

    def with_source(self, source: str) -> "WiringError":
        """Return a copy of this error labelled with the offending source."""
        if self.source:
            return self
        raw = str(self)
        return type(self)(raw, source=source)


class MalformedSource(WiringError):
    """Wrong length, or characters outside a-z, or an unreadable file."""

    kind = "malformed_source"


class InvalidPermutation(WiringError):
    """Two positions map to the same target (not a bijection)."""

    kind = "invalid_permutation"


class InvalidReflector(WiringError):
    """Not an involution, or some letter maps to itself."""

    kind = "invalid_reflector"


class UnsupportedSymbol(ValueError):
    """A message symbol outside a-z, space and newline under the reject policy."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Unsupported symbol {symbol!r} at position {position}")
