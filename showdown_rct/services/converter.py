"""High-level conversion pipeline from Showdown text to an RCT trainer file."""

from __future__ import annotations

from typing import Callable, List, Optional

from ..config import Settings
from ..data import ReferenceData, load_reference_data
from ..errors import (
    ConversionError,
    EntryValidationError,
    NoParseableEntriesError,
    TeamValidationError,
    hint_for,
)
from ..models import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    Diagnostic,
    PokemonEntry,
    TrainerConfig,
)
from ..parsers import SpeciesResolver, parse_entry, split_entries
from . import serializer, validator
from .gender import resolve_gender


class ShowdownConverter:
    """Coordinates tokenizing, parsing, validation and serialization."""

    def __init__(
        self,
        reference: ReferenceData,
        *,
        settings: Optional[Settings] = None,
        strict: Optional[bool] = None,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.reference = reference
        self.settings = settings or Settings()
        self.strict = self.settings.strict_species if strict is None else strict
        self.resolver = SpeciesResolver(reference)
        self._debug_logger = debug_logger

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def convert(self, text: str, trainer_config: Optional[TrainerConfig] = None) -> ConversionResult:
        """Convert ``text``; never raises for bad input, returns a failure instead."""

        config = trainer_config or TrainerConfig()
        diagnostics: List[Diagnostic] = []
        try:
            team, warnings = self._build_team(text or "", diagnostics)
        except ConversionError as exc:
            self._debug(f"Conversion failed: {exc}")
            nested = getattr(exc, "errors", None)
            errors = [str(e) for e in nested] if nested else [str(exc)]
            return ConversionFailure(
                error=str(exc),
                hint=hint_for(exc),
                errors=errors,
                diagnostics=diagnostics,
            )

        document = serializer.build_document(
            team,
            config,
            default_margin=self.settings.ai_margin,
            default_format=self.settings.battle_format,
            default_item=self.settings.bag_item,
            default_quantity=self.settings.bag_quantity,
        )
        filename = f"{serializer.generate_filename(config.name)}.json"
        path = serializer.output_path(filename, self.settings.output_template)
        self._debug(f"Converted {len(team)} Pokémon into {filename}")
        return ConversionSuccess(
            json=serializer.dump_document(document),
            filename=filename,
            path=path,
            warnings=warnings,
            diagnostics=diagnostics,
        )

    def _build_team(self, text: str, diagnostics: List[Diagnostic]):
        validator.ensure_input(text)
        blocks = split_entries(text)
        validator.ensure_blocks(blocks)
        self._debug(f"Split input into {len(blocks)} entries")

        blocks, warnings = validator.truncate_team(blocks)
        for warning in warnings:
            diagnostics.append(Diagnostic("team", warning))
            self._debug(warning)

        team: List[PokemonEntry] = []
        errors: List[EntryValidationError] = []
        for index, block in enumerate(blocks, start=1):
            try:
                parsed = parse_entry(
                    block,
                    self.resolver,
                    default_level=self.settings.default_level,
                    strict=self.strict,
                    index=index,
                )
            except EntryValidationError as exc:
                errors.append(exc)
                continue
            for diagnostic in parsed.diagnostics:
                self._debug(f"{diagnostic.severity}: {diagnostic.input} -> {diagnostic.reason}")
            diagnostics.extend(parsed.diagnostics)
            errors.extend(validator.validate_entry(parsed, index))
            parsed.entry.gender = resolve_gender(
                parsed.entry.species,
                parsed.gender_signal,
                self.reference,
                self.settings.default_gender,
                locked=parsed.resolution.form_gender,
            )
            team.append(parsed.entry)

        if not team:
            raise NoParseableEntriesError(errors=errors)
        if errors:
            raise TeamValidationError(errors)
        return team, warnings


_default_converter: Optional[ShowdownConverter] = None


def default_converter() -> ShowdownConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = ShowdownConverter(load_reference_data())
    return _default_converter


def convert(text: str, trainer_config: Optional[TrainerConfig] = None, *, strict: bool = False) -> ConversionResult:
    """Convert with the bundled reference data."""

    converter = default_converter()
    if strict and not converter.strict:
        converter = ShowdownConverter(converter.reference, settings=converter.settings, strict=True)
    return converter.convert(text, trainer_config)
