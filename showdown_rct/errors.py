"""Error taxonomy raised while converting a Showdown team."""

from __future__ import annotations

from typing import List, Optional, Sequence


class ConversionError(ValueError):
    """Base class for conversion problems that map onto a user-facing hint."""

    hint = "Check your input and try again."


class InputEmptyError(ConversionError):
    """Raised when the team text is blank."""

    hint = "Paste a team exported from Pokémon Showdown (Teambuilder → Export)."

    def __init__(self, message: str = "No Pokémon team data provided. Please paste your team.") -> None:
        super().__init__(message)


class NoParseableEntriesError(ConversionError):
    """Raised when no Pokémon entry could be extracted from the text."""

    hint = "Separate each Pokémon with a blank line and start each entry with its species name."

    def __init__(
        self,
        message: str = "No Pokémon entries could be parsed from the input.",
        *,
        errors: Optional[Sequence[EntryValidationError]] = None,
    ) -> None:
        self.errors: List[EntryValidationError] = list(errors or ())
        super().__init__(message)


class EntryValidationError(ConversionError):
    """A structural problem with one entry, identified by its 1-based index."""

    hint = "Each Pokémon needs an Ability line, a Nature line and between 1 and 4 moves."

    def __init__(self, message: str, *, index: Optional[int] = None, species: Optional[str] = None) -> None:
        self.index = index
        self.species = species
        self.detail = message
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        if self.index is None:
            return message
        label = f"Pokémon #{self.index}"
        if self.species:
            label += f" ({self.species})"
        return f"{label}: {message}"


class EntrySpeciesMissingError(EntryValidationError):
    """Raised when an entry header yields no species."""

    hint = "The first line of each entry must be the species, e.g. 'Garchomp @ Choice Scarf'."

    def __init__(self, message: str = "No valid Pokémon species found", **kwargs) -> None:
        super().__init__(message, **kwargs)


class UnknownSpeciesError(EntryValidationError):
    """Raised in strict mode when the species is not in the reference set."""

    hint = "Use the species name exactly as Showdown exports it, e.g. 'Ninetales-Alola'."

    def __init__(self, species: str, **kwargs) -> None:
        super().__init__(f"Invalid Pokémon species: {species}", species=species, **kwargs)


class TeamValidationError(ConversionError):
    """Aggregates every entry error found in a team."""

    def __init__(self, errors: Sequence[EntryValidationError]) -> None:
        self.errors: List[EntryValidationError] = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))

    @property
    def hint(self) -> str:  # type: ignore[override]
        hints: List[str] = []
        for error in self.errors:
            if error.hint not in hints:
                hints.append(error.hint)
        return " ".join(hints) or ConversionError.hint


def hint_for(exc: BaseException) -> str:
    """Return the static hint associated with ``exc``."""

    if isinstance(exc, ConversionError):
        return exc.hint
    return ConversionError.hint
