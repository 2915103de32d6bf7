"""Text parsers for Showdown team exports."""

from .showdown import ParsedEntry, entry_lines, parse_entry, parse_stat_spread, split_entries
from .species import SpeciesResolution, SpeciesResolver, canonicalize

__all__ = [
    "ParsedEntry",
    "SpeciesResolution",
    "SpeciesResolver",
    "canonicalize",
    "entry_lines",
    "parse_entry",
    "parse_stat_spread",
    "split_entries",
]
