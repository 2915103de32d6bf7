"""Structural validation for parsed entries and teams."""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple, TypeVar

from ..data.reference import MAX_MOVES, MAX_TEAM_SIZE
from ..errors import EntryValidationError, InputEmptyError, NoParseableEntriesError
from ..parsers.showdown import ParsedEntry

HEADER_PATTERN = re.compile(r"^[^\W\d_][\w\s.'’:%()\-♀♂]*(?:\s*@\s*.*)?$")
LEVEL_LINE = re.compile(r"Level:\s*(-?\d+)", re.IGNORECASE)

T = TypeVar("T")


def ensure_input(text: str) -> None:
    if not text or not text.strip():
        raise InputEmptyError()


def ensure_blocks(blocks: Sequence[str]) -> None:
    if not blocks:
        raise NoParseableEntriesError()


def validate_entry(parsed: ParsedEntry, index: int) -> List[EntryValidationError]:
    """Return every structural problem of one entry (empty when valid)."""

    entry = parsed.entry
    errors: List[EntryValidationError] = []

    def _error(message: str) -> None:
        errors.append(EntryValidationError(message, index=index, species=entry.species))

    if not HEADER_PATTERN.match(parsed.header):
        _error(f"Invalid Pokémon format: '{parsed.header}'")
    if not entry.ability:
        _error("Missing ability. Add a line like 'Ability: Levitate'.")
    if not entry.nature:
        _error("Missing nature. Add a line like 'Timid Nature'.")
    moves = len(entry.moveset)
    if moves == 0:
        _error("No moves. Add between 1 and 4 lines starting with '- '.")
    elif moves > MAX_MOVES:
        _error(f"Too many moves ({moves}). Maximum is {MAX_MOVES}.")
    return errors


def truncate_team(items: Sequence[T], limit: int = MAX_TEAM_SIZE) -> Tuple[List[T], List[str]]:
    """Keep the first ``limit`` items and describe any overflow."""

    kept = list(items[:limit])
    warnings: List[str] = []
    if len(items) > limit:
        warnings.append(
            f"Team has {len(items)} Pokémon; only the first {limit} were kept."
        )
    return kept, warnings


def lint_input(text: str) -> List[str]:
    """Line-level warnings suitable for live feedback while typing."""

    warnings: List[str] = []
    if not text.strip():
        return warnings
    for number, line in enumerate(text.splitlines(), start=1):
        match = LEVEL_LINE.search(line.strip())
        if not match:
            continue
        level = int(match.group(1))
        if level < 1 or level > 100:
            warnings.append(
                f"Line {number}: Invalid level {level}. Must be between 1 and 100."
            )
    return warnings


def describe_ai_margin(value) -> str:
    """Explain how an AI select margin shapes trainer behaviour."""

    try:
        margin = float(value)
    except (TypeError, ValueError):
        return ""
    if margin < 0.1:
        return "Very challenging AI behavior"
    if margin > 0.3:
        return "More random AI behavior"
    return ""
