import importlib.util
import json
import sys
from pathlib import Path

import pytest

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.config import load_settings
from rotorlab.cipher.registry import get_template
from rotorlab.cipher.spec import load_spec

SHIFT1 = "bcdefghijklmnopqrstuvwxyza"
MIRROR = "zyxwvutsrqponmlkjihgfedcba"
ALPHA = "ekmflgdqvzntowyhxuspaibrcj"


def _load_script(name):
    path = _project_root / "scripts" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(f"_script_{name}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    for name in ("ROTORLAB_ROTOR_ONE", "ROTORLAB_ROTOR_TWO", "ROTORLAB_REFLECTOR", "ROTORLAB_SYMBOL_POLICY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ROTORLAB_RUNS_DIR", str(tmp_path / "runs"))
    monkeypatch.setattr("rotorlab.config.load_dotenv", lambda *a, **k: False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture
def wiring_files(tmp_path):
    (tmp_path / "r1.txt").write_text(ALPHA + "\n")
    (tmp_path / "r2.txt").write_text(SHIFT1 + "\n")
    (tmp_path / "refl.txt").write_text(MIRROR + "\n")
    return [str(tmp_path / n) for n in ("r1.txt", "r2.txt", "refl.txt")]


def test_run_machine_encrypts_and_decrypts(tmp_path, wiring_files, capsys):
    run_machine = _load_script("run_machine")
    message = "attack at dawn\nhold the line\n"
    (tmp_path / "plain.txt").write_text(message)
    r1, r2, refl = wiring_files

    args = ["--rotor-one", r1, "--rotor-two", r2, "--reflector", refl]
    assert run_machine.main(args + ["--input", str(tmp_path / "plain.txt"), "--output", str(tmp_path / "cypher.txt")]) == 0
    cypher = (tmp_path / "cypher.txt").read_text()
    assert cypher != message
    assert len(cypher) == len(message)

    assert run_machine.main(args + ["--input", str(tmp_path / "cypher.txt"), "--output", str(tmp_path / "back.txt")]) == 0
    assert (tmp_path / "back.txt").read_text() == message
    assert "Encryption successfully completed." in capsys.readouterr().out


def test_run_machine_rejects_bad_reflector(tmp_path, wiring_files):
    run_machine = _load_script("run_machine")
    (tmp_path / "plain.txt").write_text("abc")
    r1, r2, _ = wiring_files
    code = run_machine.main([
        "--rotor-one", r1, "--rotor-two", r2, "--reflector", r2,
        "--input", str(tmp_path / "plain.txt"), "--output", str(tmp_path / "out.txt"),
    ])
    assert code == 1
    assert not (tmp_path / "out.txt").exists()


def test_run_machine_missing_input(tmp_path):
    run_machine = _load_script("run_machine")
    code = run_machine.main(["--template", "classroom", "--input", str(tmp_path / "nope.txt"),
                             "--output", str(tmp_path / "out.txt")])
    assert code == 1


def test_run_machine_reject_policy(tmp_path):
    run_machine = _load_script("run_machine")
    (tmp_path / "plain.txt").write_text("Hello")
    code = run_machine.main(["--template", "classroom", "--policy", "reject",
                             "--input", str(tmp_path / "plain.txt"), "--output", str(tmp_path / "out.txt")])
    assert code == 1


def test_generate_wirings_writes_usable_spec(tmp_path):
    generate = _load_script("generate_wirings")
    assert generate.main(["--seed", "4", "--out-dir", str(tmp_path / "w"), "--json", str(tmp_path / "m.json")]) == 0
    spec = load_spec(tmp_path / "m.json")
    assert (tmp_path / "w" / "rotor1.txt").read_text().strip() == spec.rotor_one
    assert (tmp_path / "w" / "reflector.txt").read_text().strip() == spec.reflector

    run_machine = _load_script("run_machine")
    (tmp_path / "plain.txt").write_text("generated wirings work")
    assert run_machine.main(["--spec", str(tmp_path / "m.json"), "--input", str(tmp_path / "plain.txt"),
                             "--output", str(tmp_path / "out.txt")]) == 0


def test_check_roundtrip_all_templates(tmp_path, capsys):
    check = _load_script("check_roundtrip")
    assert check.main(["--messages", "5"]) == 0
    out = capsys.readouterr().out
    assert "[PASS] classroom" in out
    assert list((tmp_path / "runs").glob("*_templates/report.json"))


def test_run_machine_rejects_non_utf8_input(tmp_path):
    run_machine = _load_script("run_machine")
    (tmp_path / "plain.bin").write_bytes(b"ab\xff cd\n")
    code = run_machine.main(["--template", "classroom", "--input", str(tmp_path / "plain.bin"),
                             "--output", str(tmp_path / "out.txt")])
    assert code == 1
    assert not (tmp_path / "out.txt").exists()


@pytest.mark.parametrize("content", [None, "{not json", '{"name": "x"}'])
def test_run_machine_bad_spec_file(tmp_path, content):
    run_machine = _load_script("run_machine")
    (tmp_path / "plain.txt").write_text("abc")
    spec_path = tmp_path / "machine.json"
    if content is not None:
        spec_path.write_text(content)
    code = run_machine.main(["--spec", str(spec_path), "--input", str(tmp_path / "plain.txt"),
                             "--output", str(tmp_path / "out.txt")])
    assert code == 1


def test_run_machine_creates_output_directory(tmp_path):
    run_machine = _load_script("run_machine")
    (tmp_path / "plain.txt").write_text("nested output")
    out = tmp_path / "results" / "cypher.txt"
    assert run_machine.main(["--template", "paired", "--input", str(tmp_path / "plain.txt"),
                             "--output", str(out)]) == 0
    assert len(out.read_text()) == len("nested output")


def _write_spec(path, **overrides):
    data = get_template("classroom").model_dump()
    data.update(overrides)
    path.write_text(json.dumps(data))


def test_check_roundtrip_rejects_invalid_wiring(tmp_path):
    check = _load_script("check_roundtrip")
    bad = tmp_path / "bad.json"
    _write_spec(bad, rotor_one="bcdefghijklmnopqrstuvwxyzb")
    assert check.main(["--spec", str(bad), "--no-save"]) == 1


@pytest.mark.parametrize("content", [None, "{not json", '{"name": "x"}'])
def test_check_roundtrip_bad_spec_file(tmp_path, content):
    check = _load_script("check_roundtrip")
    spec_path = tmp_path / "machine.json"
    if content is not None:
        spec_path.write_text(content)
    assert check.main(["--spec", str(spec_path), "--no-save"]) == 1


def test_check_roundtrip_valid_spec(tmp_path, capsys):
    check = _load_script("check_roundtrip")
    good = tmp_path / "good.json"
    _write_spec(good, name="custom")
    assert check.main(["--spec", str(good), "--messages", "5", "--no-save"]) == 0
    assert "[PASS] custom" in capsys.readouterr().out
