"""Assemble RCT trainer documents and their file names."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, List, Optional, Sequence

from ..data import reference
from ..models import PokemonEntry, TrainerConfig


def generate_filename(trainer_name: Optional[str]) -> str:
    """Return a file stem for ``trainer_name``; applying it twice is a no-op."""

    name = (trainer_name or "").lower()
    name = re.sub(r"[^a-z0-9\s_-]", "", name).strip()
    name = re.sub(r"\s+", "_", name)
    name = re.sub(r"-+", "_", name)
    return name or reference.FALLBACK_FILENAME


def output_path(filename: str, template: str = reference.DEFAULT_OUTPUT_TEMPLATE) -> str:
    if "{filename}" in template:
        return template.format(filename=filename)
    return f"{template.rstrip('/')}/{filename}"


def parse_margin(value: Any, default: float = reference.DEFAULT_MAX_SELECT_MARGIN) -> float:
    try:
        margin = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(margin) or math.isinf(margin):
        return default
    return margin


def parse_quantity(value: Any, default: int = reference.DEFAULT_BAG_QUANTITY) -> int:
    try:
        quantity = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return quantity if quantity >= 1 else default


def build_bag(
    item_type: Optional[str],
    item_quantity: Any,
    *,
    default_item: str = reference.DEFAULT_BAG_ITEM,
    default_quantity: int = reference.DEFAULT_BAG_QUANTITY,
) -> List[Dict[str, Any]]:
    if item_type is None:
        item_type = default_item
    item = item_type.strip()
    if not item:
        return []
    return [{"item": item, "quantity": parse_quantity(item_quantity, default_quantity)}]


def build_document(
    team: Sequence[PokemonEntry],
    config: TrainerConfig,
    *,
    default_margin: float = reference.DEFAULT_MAX_SELECT_MARGIN,
    default_format: str = reference.DEFAULT_BATTLE_FORMAT,
    default_item: str = reference.DEFAULT_BAG_ITEM,
    default_quantity: int = reference.DEFAULT_BAG_QUANTITY,
) -> Dict[str, Any]:
    name = (config.name or "").strip()
    return {
        "name": name,
        "identity": (config.identity or "").strip() or name,
        "ai": {
            "type": reference.AI_TYPE,
            "data": {
                "moveBias": reference.MOVE_BIAS,
                "statMoveBias": reference.STAT_MOVE_BIAS,
                "switchBias": reference.SWITCH_BIAS,
                "itemBias": reference.ITEM_BIAS,
                "maxSelectMargin": parse_margin(config.ai_margin, default_margin),
            },
        },
        "battleFormat": (config.battle_format or "").strip() or default_format,
        "bag": build_bag(
            config.item_type,
            config.item_quantity,
            default_item=default_item,
            default_quantity=default_quantity,
        ),
        "team": [entry.to_dict() for entry in team],
    }


def dump_document(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)
