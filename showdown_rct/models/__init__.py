"""Shared dataclasses for the Showdown to RCT converter."""

from .trainer import (
    STAT_KEYS,
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    Diagnostic,
    Gender,
    PokemonEntry,
    ResolvedSpecies,
    StatBlock,
    TrainerConfig,
)

__all__ = [
    "STAT_KEYS",
    "ConversionFailure",
    "ConversionResult",
    "ConversionSuccess",
    "Diagnostic",
    "Gender",
    "PokemonEntry",
    "ResolvedSpecies",
    "StatBlock",
    "TrainerConfig",
]
