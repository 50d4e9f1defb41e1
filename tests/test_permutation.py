import sys
from pathlib import Path

import pytest

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.cipher.alphabet import ALPHABET, translate_letter
from rotorlab.cipher.components import Reflector, Rotor
from rotorlab.cipher.errors import InvalidPermutation, MalformedSource
from rotorlab.cipher.machine import TwoRotorMachine
from rotorlab.cipher.permutation import Permutation, format_translation

SHIFT1 = "bcdefghijklmnopqrstuvwxyza"
ALPHA = "ekmflgdqvzntowyhxuspaibrcj"


def test_offsets_are_target_minus_position():
    perm = Permutation.from_letters(SHIFT1)
    assert perm.offsets[:3] == (1, 1, 1)
    # z -> a wraps backwards
    assert perm.offsets[25] == -25
    assert all(-25 <= o <= 25 for o in perm.offsets)


def test_forward_and_letters_roundtrip_source():
    perm = Permutation.from_letters(ALPHA)
    assert perm.letters() == ALPHA
    assert [perm.forward(i) for i in range(26)] == perm.targets()
    assert perm.forward(0) == ALPHABET.index("e")


def test_translate_letter_stays_in_range():
    perm = Permutation.from_letters(ALPHA)
    for i, o in enumerate(perm.offsets):
        assert translate_letter(i, o) == ALPHA[i]


def test_inverse_table_inverts_forward():
    perm = Permutation.from_letters(ALPHA)
    inv = perm.inverse_table()
    for i in range(26):
        assert inv[perm.forward(i)] == i


def test_from_offsets_matches_from_letters():
    perm = Permutation.from_letters(ALPHA)
    assert Permutation.from_offsets(perm.offsets) == perm


@pytest.mark.parametrize("raw", ["abc", ALPHABET + "a", "Bcdefghijklmnopqrstuvwxyza", "bcdefghijklmnopqrstuvwxy1a"])
def test_malformed_letters(raw):
    with pytest.raises(MalformedSource):
        Permutation.from_letters(raw)


def test_duplicate_target_is_not_a_permutation():
    with pytest.raises(InvalidPermutation) as info:
        Permutation.from_letters("bcdefghijklmnopqrstuvwxyzb")
    assert info.value.kind == "invalid_permutation"
    assert "b" in str(info.value)


def test_offsets_out_of_range_rejected():
    with pytest.raises(MalformedSource):
        Permutation.from_offsets([26] + [0] * 25)


def test_offsets_are_read_only():
    perm = Permutation.from_letters(SHIFT1)
    with pytest.raises(ValueError):
        perm.as_array()[0] = 5


def test_format_translation():
    text = format_translation(Permutation.from_letters(SHIFT1))
    lines = text.splitlines()
    assert lines[0] == " ".join(ALPHABET)
    assert lines[1] == " ".join("|" * 26)
    assert lines[2] == " ".join(SHIFT1)


PAIRS = "badcfehgjilknmporqtsvuxwzy"


def _wrapped_pairs_offsets():
    # a -> b written as a step of -25 instead of +1
    offsets = list(Permutation.from_letters(PAIRS).offsets)
    offsets[0] = -25
    return offsets


def test_from_offsets_normalizes_wrapped_offsets():
    perm = Permutation.from_offsets(_wrapped_pairs_offsets())
    assert perm.offsets[0] == 1
    assert all(0 <= i + o <= 25 for i, o in enumerate(perm.offsets))
    assert perm.letters() == PAIRS
    assert repr(perm) == f"Permutation({PAIRS!r})"


def test_equality_follows_the_mapping():
    wrapped = Permutation.from_offsets(_wrapped_pairs_offsets())
    plain = Permutation.from_letters(PAIRS)
    assert wrapped.targets() == plain.targets()
    assert wrapped == plain
    assert hash(wrapped) == hash(plain)


def test_wrapped_offsets_build_a_working_machine():
    reflector = Reflector(Permutation.from_offsets(_wrapped_pairs_offsets()))
    assert reflector.apply("a") == "b"
    assert reflector.letters() == PAIRS
    machine = TwoRotorMachine(Rotor.from_letters(SHIFT1), Rotor.from_letters(ALPHA), reflector)
    assert machine.state()["reflector"] == PAIRS
