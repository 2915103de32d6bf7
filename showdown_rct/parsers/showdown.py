"""Parser for Showdown-style team exports."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..errors import EntrySpeciesMissingError
from ..models import Diagnostic, Gender, PokemonEntry, StatBlock
from .species import SpeciesResolution, SpeciesResolver

BLANK_LINES = re.compile(r"\n[ \t\r\f\v]*\n")

STAT_ALIASES = {
    "hp": "hp",
    "atk": "atk",
    "attack": "atk",
    "def": "def",
    "defense": "def",
    "spa": "spa",
    "spatk": "spa",
    "spattack": "spa",
    "spd": "spd",
    "spdef": "spd",
    "spdefense": "spd",
    "spe": "spe",
    "speed": "spe",
}

MAX_EV = 255
MAX_EV_TOTAL = 510
MAX_IV = 31


@dataclass
class ParsedEntry:
    """Intermediate result for one block, before gender resolution."""

    header: str
    entry: PokemonEntry
    resolution: SpeciesResolution
    explicit_gender: Optional[Gender] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def gender_signal(self) -> Optional[Gender]:
        # A "Gender:" line beats the inline (M)/(F) marker.
        return self.explicit_gender or self.resolution.inline_gender


def split_entries(text: str) -> List[str]:
    """Split raw text into blank-line delimited blocks; blank input yields []."""

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return [chunk.strip() for chunk in BLANK_LINES.split(normalized) if chunk.strip()]


def entry_lines(chunk: str) -> List[str]:
    return [line.strip() for line in chunk.splitlines() if line.strip()]


def parse_header(line: str) -> Tuple[str, Optional[str]]:
    if "@" not in line:
        return line.strip(), None
    name_part, item_part = line.split("@", 1)
    return name_part.strip(), item_part.strip() or None


def normalize_item(item: Optional[str]) -> Optional[str]:
    if not item:
        return None
    return re.sub(r"\s+", "_", item.strip().lower()) or None


def normalize_move(line: str) -> str:
    return re.sub(r"\s+", "", line.lstrip("-").strip().lower())


def parse_stat_spread(spread: str, base: StatBlock) -> StatBlock:
    """Overwrite ``base`` fields from text such as ``252 Atk / 4 SpD``."""

    for value, stat in _split_stat_tokens(spread):
        base.set(stat, value)
    return base


def _split_stat_tokens(spread: str) -> Iterable[Tuple[int, str]]:
    for raw in spread.split("/"):
        parts = raw.strip().split(None, 1)
        if len(parts) < 2:
            continue
        try:
            value = int(parts[0])
        except ValueError:
            continue
        stat = _normalize_stat(parts[1])
        if stat:
            yield value, stat


def _normalize_stat(stat: str) -> Optional[str]:
    key = re.sub(r"[\s.]", "", stat.lower())
    return STAT_ALIASES.get(key)


def _value_after_colon(line: str) -> str:
    return line.split(":", 1)[1].strip()


def _has_prefix(line: str, prefix: str) -> bool:
    return line.lower().startswith(prefix)


def parse_entry(
    chunk: str,
    resolver: SpeciesResolver,
    *,
    default_level: int = 100,
    strict: bool = False,
    index: Optional[int] = None,
) -> ParsedEntry:
    """Parse one block into a ParsedEntry.

    Lines that match no known shape are ignored; hand-edited exports often
    carry extra notes (Tera Type, Happiness, comments).
    """

    lines = entry_lines(chunk)
    if not lines:
        raise EntrySpeciesMissingError(index=index)

    header = lines[0]
    species_token, item = parse_header(header)
    resolution = resolver.resolve(species_token, strict=strict, index=index)
    if not resolution.species.canonical_id:
        raise EntrySpeciesMissingError(index=index)

    entry = PokemonEntry(
        species=resolution.species.canonical_id,
        aspects=list(resolution.species.aspects),
        held_item=normalize_item(item),
        level=default_level,
    )
    parsed = ParsedEntry(
        header=header,
        entry=entry,
        resolution=resolution,
        diagnostics=list(resolution.diagnostics),
    )

    for line in lines[1:]:
        if _has_prefix(line, "ability:"):
            entry.ability = _value_after_colon(line).lower().replace(" ", "") or None
        elif _has_prefix(line, "level:"):
            _apply_level(parsed, line)
        elif _has_prefix(line, "evs:"):
            parse_stat_spread(_value_after_colon(line), entry.evs)
        elif _has_prefix(line, "ivs:"):
            parse_stat_spread(_value_after_colon(line), entry.ivs)
        elif _has_prefix(line, "gender:"):
            gender = Gender.parse(_value_after_colon(line))
            if gender in (Gender.MALE, Gender.FEMALE):
                parsed.explicit_gender = gender
        elif line.lower().endswith(" nature"):
            entry.nature = line.split()[0].lower()
        elif line.startswith("-"):
            move = normalize_move(line)
            if move:
                entry.moveset.append(move)
        elif "shiny" in line.lower():
            entry.shiny = True

    parsed.diagnostics.extend(_stat_diagnostics(header, entry))
    return parsed


def _apply_level(parsed: ParsedEntry, line: str) -> None:
    raw = _value_after_colon(line)
    try:
        level = int(raw)
    except ValueError:
        parsed.diagnostics.append(Diagnostic(line, "level is not a number; default kept"))
        return
    if 1 <= level <= 100:
        parsed.entry.level = level
    else:
        parsed.diagnostics.append(
            Diagnostic(line, f"level {level} outside 1-100; default kept")
        )


def _stat_diagnostics(header: str, entry: PokemonEntry) -> List[Diagnostic]:
    found: List[Diagnostic] = []
    evs = entry.evs.to_dict()
    for stat, value in evs.items():
        if value < 0 or value > MAX_EV:
            found.append(Diagnostic(header, f"EV {stat}={value} outside 0-{MAX_EV}"))
    if sum(evs.values()) > MAX_EV_TOTAL:
        found.append(Diagnostic(header, f"EV total {sum(evs.values())} exceeds {MAX_EV_TOTAL}"))
    for stat, value in entry.ivs.to_dict().items():
        if value < 0 or value > MAX_IV:
            found.append(Diagnostic(header, f"IV {stat}={value} outside 0-{MAX_IV}"))
    return found
