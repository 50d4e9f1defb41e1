"""Evaluation helpers for rotor machines: roundtrip checks and letter statistics."""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_all_templates
from .frequency import FrequencyResult, analyze_text, index_of_coincidence, letter_histogram

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_all_templates",
    "FrequencyResult",
    "analyze_text",
    "index_of_coincidence",
    "letter_histogram",
]
