"""Encrypt or decrypt a message file with a two-rotor machine.

Usage:
    python scripts/run_machine.py --rotor-one r1.txt --rotor-two r2.txt --reflector refl.txt \
        --input plain.txt --output cypher.txt
    python scripts/run_machine.py --template classroom --input plain.txt --output cypher.txt
    python scripts/run_machine.py --spec machine.json --input cypher.txt --output plain.txt

Decryption is the same run with the ciphertext as input.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pydantic import ValidationError

from rotorlab.config import load_settings
from rotorlab.cipher.builder import build_machine, build_machine_from_files
from rotorlab.cipher.errors import UnsupportedSymbol, WiringError
from rotorlab.cipher.permutation import format_translation
from rotorlab.cipher.registry import get_template, list_templates
from rotorlab.cipher.spec import load_spec
from rotorlab.cipher.stream import SYMBOL_POLICIES, transform
from rotorlab.utils.repro import write_text

logger = logging.getLogger("rotorlab.run_machine")


def _build(args, settings):
    if args.spec:
        spec = load_spec(args.spec)
        return build_machine(spec), spec.symbol_policy
    if args.template:
        return build_machine(get_template(args.template)), None

    paths = [
        args.rotor_one or settings.rotor_one_file,
        args.rotor_two or settings.rotor_two_file,
        args.reflector or settings.reflector_file,
    ]
    if not all(paths):
        raise SystemExit(
            "Need --rotor-one, --rotor-two and --reflector "
            "(or ROTORLAB_ROTOR_ONE/ROTORLAB_ROTOR_TWO/ROTORLAB_REFLECTOR), --spec, or --template"
        )
    return build_machine_from_files(*paths), None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Two-rotor machine: encrypt or decrypt a message file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python scripts/run_machine.py --template classroom --input msg.txt --output out.txt\n"
            "  python scripts/run_machine.py --spec machine.json --input out.txt --output msg.txt\n"
        ),
    )
    parser.add_argument("--rotor-one", type=str, default=None, help="Source file for the 1st rotor")
    parser.add_argument("--rotor-two", type=str, default=None, help="Source file for the 2nd rotor")
    parser.add_argument("--reflector", type=str, default=None, help="Source file for the reflector")
    parser.add_argument("--spec", type=str, default=None, help="JSON machine spec (overrides the source files)")
    parser.add_argument("--template", choices=list_templates(), default=None, help="Built-in machine template")
    parser.add_argument("--input", required=True, help="Message file to translate")
    parser.add_argument("--output", required=True, help="File to write the translated message to")
    parser.add_argument(
        "--policy", choices=SYMBOL_POLICIES, default=None,
        help="Handling of symbols other than a-z, space and newline",
    )
    parser.add_argument("--show", action="store_true", help="Print the rotor and reflector wirings")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)
    settings = load_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        message = Path(args.input).read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Could not open file: %s for input (%s)", args.input, exc)
        return 1
    except UnicodeDecodeError as exc:
        logger.error("Input file %s is not UTF-8 text (%s)", args.input, exc)
        return 1

    try:
        machine, spec_policy = _build(args, settings)
    except WiringError as exc:
        logger.error("Problem with %s: %s", exc.source or "machine wiring", exc)
        return 1
    except ValidationError as exc:
        logger.error("Invalid machine spec %s: %s", args.spec, exc)
        return 1
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("Could not parse machine spec %s: %s", args.spec, exc)
        return 1
    except OSError as exc:
        logger.error("Could not open machine spec %s: %s", args.spec, exc)
        return 1

    if args.show:
        for label, part in (("rotor one", machine.rotor_one), ("rotor two", machine.rotor_two),
                            ("reflector", machine.reflector)):
            print(f"{label}:")
            print(format_translation(part))

    policy = args.policy or spec_policy or settings.symbol_policy
    try:
        translated = "".join(transform(message, machine, policy=policy))
    except UnsupportedSymbol as exc:
        logger.error("%s in %s", exc, args.input)
        return 1

    try:
        write_text(args.output, translated)
    except OSError as exc:
        logger.error("Could not open file: %s for output (%s)", args.output, exc)
        return 1

    logger.info("Translated %d letters", machine.letters_processed)
    print("Encryption successfully completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
