from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Default permutation sources (file paths)
    rotor_one_file: Optional[str] = Field(default=None, description="Source file for the first rotor")
    rotor_two_file: Optional[str] = Field(default=None, description="Source file for the second rotor")
    reflector_file: Optional[str] = Field(default=None, description="Source file for the reflector")

    # Message handling
    symbol_policy: Literal["passthrough", "reject"] = Field(default="passthrough")

    # Logging
    log_level: str = Field(default="INFO")

    # Reproducibility
    global_seed: int = Field(default=1337)
    roundtrip_messages: int = Field(default=200, ge=1, le=100_000)

    # Paths
    project_root: str = Field(default=os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        rotor_one_file=os.getenv("ROTORLAB_ROTOR_ONE"),
        rotor_two_file=os.getenv("ROTORLAB_ROTOR_TWO"),
        reflector_file=os.getenv("ROTORLAB_REFLECTOR"),
        symbol_policy=os.getenv("ROTORLAB_SYMBOL_POLICY", "passthrough").strip().lower(),
        log_level=os.getenv("ROTORLAB_LOG_LEVEL", "INFO").strip().upper(),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        roundtrip_messages=int(os.getenv("ROTORLAB_ROUNDTRIP_MESSAGES", "200")),
        runs_dir=os.getenv("ROTORLAB_RUNS_DIR", "runs"),
    )
