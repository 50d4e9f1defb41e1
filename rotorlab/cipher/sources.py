"""Reading permutation sources.

A source is any text holding at least 26 non-whitespace characters. Only the
first 26 are used: the i-th one is where the i-th letter of the alphabet is
sent. Whitespace between them (including line breaks) is ignored.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .alphabet import ALPHABET_SIZE, is_letter
from .errors import MalformedSource

logger = logging.getLogger(__name__)


def parse_source(text: str, *, source: str | None = None) -> List[str]:
    """Return the first 26 non-whitespace characters of `text` as letters."""
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) < ALPHABET_SIZE:
        raise MalformedSource(
            f"needs at least {ALPHABET_SIZE} non-whitespace characters, found {len(chars)}",
            source=source,
        )
    head = chars[:ALPHABET_SIZE]
    bad = sorted({ch for ch in head if not is_letter(ch)})
    if bad:
        raise MalformedSource(f"characters outside a-z: {''.join(bad)!r}", source=source)
    if len(chars) > ALPHABET_SIZE:
        logger.debug("%s: ignoring %d trailing characters", source or "<text>", len(chars) - ALPHABET_SIZE)
    return head


def load_source(path: str | Path) -> List[str]:
    """Read and parse a permutation source file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MalformedSource("file not found", source=str(path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedSource(f"could not read file ({exc})", source=str(path)) from exc
    logger.debug("Loaded permutation source %s", path)
    return parse_source(text, source=str(path))


def write_source(path: str | Path, letters: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(letters + "\n", encoding="utf-8")
