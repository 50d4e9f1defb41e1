"""Roundtrip check for the built-in templates (or one JSON spec).

Usage:
    python scripts/check_roundtrip.py
    python scripts/check_roundtrip.py --spec machine.json --messages 1000
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np
from pydantic import ValidationError

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.config import load_settings
from rotorlab.cipher.builder import build_machine
from rotorlab.cipher.spec import dump_spec, load_spec
from rotorlab.cipher.stream import translate_text
from rotorlab.cipher.validator import validate_spec
from rotorlab.evaluation import analyze_text, run_all_templates, run_roundtrip_tests
from rotorlab.evaluation.roundtrip import random_message
from rotorlab.utils.repro import make_run_dir, set_global_seed, write_json

logger = logging.getLogger("rotorlab.check_roundtrip")


def _cli_progress(name: str, current: int, total: int) -> None:
    print(f"  [{current + 1}/{total}] {name}", file=sys.stderr)


def main(argv=None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Roundtrip verification for rotor machines")
    parser.add_argument("--spec", type=str, default=None, help="JSON machine spec (default: all templates)")
    parser.add_argument("--messages", type=int, default=settings.roundtrip_messages)
    parser.add_argument("--seed", type=int, default=settings.global_seed)
    parser.add_argument("--no-save", action="store_true", help="Do not write a run directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    set_global_seed(args.seed)

    if args.spec:
        try:
            spec = load_spec(args.spec)
        except ValidationError as exc:
            logger.error("Invalid machine spec %s: %s", args.spec, exc)
            return 1
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error("Could not parse machine spec %s: %s", args.spec, exc)
            return 1
        except OSError as exc:
            logger.error("Could not open machine spec %s: %s", args.spec, exc)
            return 1

        ok, errs = validate_spec(spec)
        if not ok:
            for e in errs:
                logger.error("Problem with %s: %s", args.spec, e)
            return 1

        results = [run_roundtrip_tests(spec, num_messages=args.messages, seed=args.seed)]
        sample = random_message(np.random.default_rng(args.seed), 400)
        stats = {
            "plaintext": analyze_text(sample).to_dict(),
            "ciphertext": analyze_text(translate_text(sample, build_machine(spec))).to_dict(),
        }
    else:
        spec = None
        results = run_all_templates(num_messages=args.messages, seed=args.seed,
                                    progress_callback=_cli_progress)
        stats = {}

    for r in results:
        print(r.summary())

    if not args.no_save:
        paths = make_run_dir(Path(settings.project_root) / settings.runs_dir,
                             spec.name if spec else "templates")
        if spec:
            dump_spec(spec, paths.spec_json)
        write_json(paths.report_json, {
            "results": [r.to_dict() for r in results],
            "frequency": stats,
        })
        print(f"Report written to {paths.report_json}")

    return 0 if all(r.is_perfect for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
