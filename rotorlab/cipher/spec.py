from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .alphabet import ALPHABET_SIZE, is_letter


SymbolPolicyName = Literal["passthrough", "reject"]


class MachineSpec(BaseModel):
    """Settings document for a two-rotor machine.

    Holds the three 26-letter sources plus how unknown message symbols are
    treated. Only the letter format is checked here; bijectivity and the
    reflector rules are checked by the validator and the builder.
    """

    name: str = Field(..., min_length=1, max_length=80)
    rotor_one: str = Field(..., description="26-letter source for the first rotor")
    rotor_two: str = Field(..., description="26-letter source for the second rotor")
    reflector: str = Field(..., description="26-letter source for the reflector")

    symbol_policy: SymbolPolicyName = Field(default="passthrough")
    version: str = Field(default="0.1")
    notes: str = Field(default="")

    @field_validator("rotor_one", "rotor_two", "reflector", mode="before")
    @classmethod
    def _strip_whitespace(cls, v: object) -> object:
        if isinstance(v, str):
            return "".join(v.split())
        return v

    @field_validator("rotor_one", "rotor_two", "reflector")
    @classmethod
    def _letters(cls, v: str) -> str:
        if len(v) != ALPHABET_SIZE:
            raise ValueError(f"wiring must have exactly {ALPHABET_SIZE} letters, got {len(v)}")
        if not all(is_letter(ch) for ch in v):
            raise ValueError("wiring may only contain lowercase letters a-z")
        return v

    @field_validator("symbol_policy", mode="before")
    @classmethod
    def _lower_policy(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v


def load_spec(path: str | Path) -> MachineSpec:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return MachineSpec.model_validate(data)


def dump_spec(spec: MachineSpec, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(spec.model_dump(), indent=2, sort_keys=True), encoding="utf-8")
