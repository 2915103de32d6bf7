"""Environment driven settings for the converter."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .data import reference
from .models import Gender


@dataclass(frozen=True)
class Settings:
    default_level: int = 100
    default_gender: Gender = Gender.MALE
    battle_format: str = reference.DEFAULT_BATTLE_FORMAT
    ai_margin: float = reference.DEFAULT_MAX_SELECT_MARGIN
    bag_item: str = reference.DEFAULT_BAG_ITEM
    bag_quantity: int = reference.DEFAULT_BAG_QUANTITY
    output_template: str = reference.DEFAULT_OUTPUT_TEMPLATE
    strict_species: bool = False
    species_file: Optional[str] = None


def load_settings(environ: Optional[Mapping[str, str]] = None, *, use_dotenv: bool = True) -> Settings:
    """Read settings from ``environ`` (defaults to ``os.environ``).

    Loads ``.env`` first, then overlays ``.env.local`` so user-specific values win.
    """

    if environ is None:
        if use_dotenv:
            load_dotenv()
            load_dotenv(".env.local", override=True)
        environ = os.environ

    defaults = Settings()
    level = _int(environ.get("RCT_DEFAULT_LEVEL"), defaults.default_level)
    if not 1 <= level <= 100:
        level = defaults.default_level
    return Settings(
        default_level=level,
        default_gender=Gender.parse(environ.get("RCT_DEFAULT_GENDER")) or defaults.default_gender,
        battle_format=environ.get("RCT_BATTLE_FORMAT") or defaults.battle_format,
        ai_margin=_float(environ.get("RCT_AI_MARGIN"), defaults.ai_margin),
        bag_item=environ.get("RCT_BAG_ITEM") or defaults.bag_item,
        bag_quantity=max(1, _int(environ.get("RCT_BAG_QUANTITY"), defaults.bag_quantity)),
        output_template=environ.get("RCT_OUTPUT_TEMPLATE") or defaults.output_template,
        strict_species=_bool(environ.get("RCT_STRICT_SPECIES")),
        species_file=environ.get("RCT_SPECIES_FILE") or None,
    )


def _int(value: Optional[str], default: int) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def _float(value: Optional[str], default: float) -> float:
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return default


def _bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}
