"""Write random rotor and reflector source files.

Usage:
    python scripts/generate_wirings.py --out-dir wirings            # fresh random
    python scripts/generate_wirings.py --seed 7 --json machine.json  # reproducible spec
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.cipher.generator import random_sources
from rotorlab.cipher.sources import write_source
from rotorlab.cipher.spec import MachineSpec, dump_spec
from rotorlab.cipher.validator import validate_spec

logger = logging.getLogger("rotorlab.generate_wirings")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate random rotor/reflector sources")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible wirings")
    parser.add_argument("--out-dir", type=str, default=None, help="Directory for rotor1/rotor2/reflector .txt files")
    parser.add_argument("--json", type=str, default=None, help="Also write a JSON machine spec here")
    parser.add_argument("--name", type=str, default="generated", help="Name recorded in the JSON spec")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    sources = random_sources(args.seed)
    spec = MachineSpec(name=args.name, notes=f"seed={args.seed}", **sources)
    ok, errs = validate_spec(spec)
    if not ok:
        for e in errs:
            logger.error(e)
        return 1

    if args.out_dir:
        out = Path(args.out_dir)
        for filename, key in (("rotor1.txt", "rotor_one"), ("rotor2.txt", "rotor_two"),
                              ("reflector.txt", "reflector")):
            write_source(out / filename, sources[key])
        logger.info("Wrote wirings to %s", out)
    if args.json:
        dump_spec(spec, args.json)
        logger.info("Wrote machine spec to %s", args.json)
    if not args.out_dir and not args.json:
        for key, letters in sources.items():
            print(f"{key}: {letters}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
