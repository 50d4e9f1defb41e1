"""Roundtrip verification: D(E(M)) == M for a machine spec.

Each random message is encrypted by a freshly built machine and the
ciphertext decrypted by a second freshly built machine from the same spec.
Messages use only a-z, space and newline.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from rotorlab.cipher.alphabet import ALPHABET
from rotorlab.cipher.builder import build_machine
from rotorlab.cipher.registry import get_template, list_templates
from rotorlab.cipher.spec import MachineSpec
from rotorlab.cipher.stream import translate_text

logger = logging.getLogger(__name__)

MESSAGE_SYMBOLS = ALPHABET + " \n"


@dataclass
class RoundtripFailure:
    """One message that did not survive encrypt-then-decrypt."""
    message_index: int
    plaintext: str
    ciphertext: str
    decrypted: str


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one machine spec."""
    machine_name: str
    total_messages: int
    passed: int
    failed: int
    total_letters: int = 0
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_messages if self.total_messages > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["success_rate"] = self.success_rate
        return d

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.machine_name}: "
            f"{self.passed}/{self.total_messages} messages passed "
            f"({self.total_letters} letters, {self.elapsed_seconds:.2f}s)"
        )


def random_message(rng: np.random.Generator, max_length: int = 120) -> str:
    length = int(rng.integers(1, max_length + 1))
    picks = rng.integers(0, len(MESSAGE_SYMBOLS), size=length)
    return "".join(MESSAGE_SYMBOLS[i] for i in picks)


def run_roundtrip_tests(
    spec: MachineSpec,
    *,
    num_messages: int = 200,
    max_length: int = 120,
    seed: int = 1337,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Encrypt and decrypt `num_messages` random messages with fresh machines.

    Args:
        spec: Machine settings to test; must pass validation.
        num_messages: Number of random messages.
        max_length: Upper bound on message length.
        seed: Seed for the message generator.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    rng = np.random.default_rng(seed)
    passed = 0
    failed = 0
    letters = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_messages):
        message = random_message(rng, max_length)
        ciphertext = translate_text(message, build_machine(spec))
        decrypted = translate_text(ciphertext, build_machine(spec))
        letters += sum(1 for ch in message if ch in ALPHABET)

        if decrypted == message:
            passed += 1
        else:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    message_index=i,
                    plaintext=message,
                    ciphertext=ciphertext,
                    decrypted=decrypted,
                ))

    elapsed = time.perf_counter() - start
    if failed:
        logger.warning("%s: %d/%d roundtrips failed", spec.name, failed, num_messages)

    return RoundtripResult(
        machine_name=spec.name,
        total_messages=num_messages,
        passed=passed,
        failed=failed,
        total_letters=letters,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_all_templates(
    *,
    num_messages: int = 200,
    seed: int = 1337,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every built-in machine template."""
    names = list_templates()
    results: List[RoundtripResult] = []

    for idx, name in enumerate(names):
        if progress_callback:
            progress_callback(name, idx, len(names))
        results.append(run_roundtrip_tests(get_template(name), num_messages=num_messages, seed=seed))

    return sorted(results, key=lambda r: r.machine_name)
