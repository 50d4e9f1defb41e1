import sys
from pathlib import Path

import pytest

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.cipher.errors import MalformedSource
from rotorlab.cipher.sources import load_source, parse_source, write_source

SHIFT1 = "bcdefghijklmnopqrstuvwxyza"


def test_parse_skips_whitespace_and_uses_first_26():
    text = "bcdefghijklm\n nopqrstuvwxyza\n\nthis trailing text is ignored 123"
    assert "".join(parse_source(text)) == SHIFT1


def test_parse_too_short():
    with pytest.raises(MalformedSource) as info:
        parse_source("abc def", source="r1.txt")
    assert info.value.kind == "malformed_source"
    assert info.value.source == "r1.txt"
    assert "found 6" in str(info.value)


@pytest.mark.parametrize("text", ["BCDEFGHIJKLMNOPQRSTUVWXYZA", "bcdefghijklm-nopqrstuvwxyz"])
def test_parse_rejects_characters_outside_alphabet(text):
    with pytest.raises(MalformedSource):
        parse_source(text)


def test_parse_does_not_check_bijectivity():
    assert parse_source("a" * 26) == ["a"] * 26


def test_load_missing_file(tmp_path):
    with pytest.raises(MalformedSource) as info:
        load_source(tmp_path / "nope.txt")
    assert "file not found" in str(info.value)


def test_write_then_load(tmp_path):
    path = tmp_path / "wirings" / "rotor.txt"
    write_source(path, SHIFT1)
    assert "".join(load_source(path)) == SHIFT1
