"""Core dataclasses shared across the Showdown to RCT converter."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

STAT_KEYS = ("hp", "atk", "def", "spa", "spd", "spe")


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    GENDERLESS = "GENDERLESS"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Gender"]:
        """Map ``M``/``F``/``Male``/``Female``/``Genderless`` style text to a member."""

        if not value:
            return None
        token = value.strip().upper()
        if not token:
            return None
        if token in ("N", "GENDERLESS"):
            return cls.GENDERLESS
        if token[0] == "M":
            return cls.MALE
        if token[0] == "F":
            return cls.FEMALE
        return None


@dataclass(slots=True)
class StatBlock:
    """Six per-stat integers; ``def`` is a keyword so the field is ``def_``."""

    hp: int = 0
    atk: int = 0
    def_: int = 0
    spa: int = 0
    spd: int = 0
    spe: int = 0

    @classmethod
    def filled(cls, value: int) -> "StatBlock":
        return cls(value, value, value, value, value, value)

    def get(self, key: str) -> int:
        return getattr(self, _attr(key))

    def set(self, key: str, value: int) -> None:
        setattr(self, _attr(key), value)

    def total(self) -> int:
        return sum(self.get(key) for key in STAT_KEYS)

    def to_dict(self) -> Dict[str, int]:
        return {key: self.get(key) for key in STAT_KEYS}


def _attr(key: str) -> str:
    if key not in STAT_KEYS:
        raise KeyError(key)
    return "def_" if key == "def" else key


@dataclass(frozen=True, slots=True)
class ResolvedSpecies:
    """Canonical species id plus the aspect tags picked up from its form suffix."""

    canonical_id: str
    aspects: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Observation made while converting; never fatal."""

    input: str
    reason: str
    severity: str = "warning"

    def to_dict(self) -> Dict[str, str]:
        return {"input": self.input, "reason": self.reason, "severity": self.severity}


@dataclass(slots=True)
class PokemonEntry:
    """A single team member, ready for serialization."""

    species: str
    ability: Optional[str] = None
    level: int = 100
    gender: Gender = Gender.MALE
    nature: Optional[str] = None
    aspects: List[str] = field(default_factory=list)
    held_item: Optional[str] = None
    evs: StatBlock = field(default_factory=StatBlock)
    ivs: StatBlock = field(default_factory=lambda: StatBlock.filled(31))
    moveset: List[str] = field(default_factory=list)
    shiny: bool = False

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"species": self.species}
        if self.aspects:
            payload["aspects"] = list(self.aspects)
        if self.held_item:
            payload["heldItem"] = self.held_item
        payload.update(
            {
                "ability": self.ability,
                "level": self.level,
                "gender": self.gender.value,
                "nature": self.nature,
                "evs": self.evs.to_dict(),
                "ivs": self.ivs.to_dict(),
                "moveset": list(self.moveset),
                "shiny": self.shiny,
            }
        )
        return payload


@dataclass(slots=True)
class TrainerConfig:
    """Trainer metadata supplied by the caller alongside the team text.

    ``ai_margin`` and ``item_quantity`` accept raw form strings; the serializer
    parses them and falls back to defaults when they are not numeric.
    """

    name: str = ""
    ai_margin: Union[str, float, None] = None
    battle_format: Optional[str] = None
    item_type: Optional[str] = None
    item_quantity: Union[str, int, None] = None
    identity: Optional[str] = None


@dataclass(slots=True)
class ConversionSuccess:
    json: str
    filename: str
    path: str
    warnings: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    success = True

    def document(self) -> Dict[str, Any]:
        return json.loads(self.json)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "result": self.json,
            "filename": self.filename,
            "path": self.path,
            "warnings": list(self.warnings),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(slots=True)
class ConversionFailure:
    error: str
    hint: str
    errors: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    success = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.error,
            "hint": self.hint,
            "errors": list(self.errors),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


ConversionResult = Union[ConversionSuccess, ConversionFailure]
