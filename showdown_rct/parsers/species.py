"""Resolve Showdown species tokens into canonical ids plus form aspects."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import List, Optional

from ..data.forms import SuffixRule
from ..data.reference import ReferenceData
from ..errors import UnknownSpeciesError
from ..models import Diagnostic, Gender, ResolvedSpecies

COSMETIC_SUFFIX = re.compile(
    r"-(?:mega(?:-[xy])?|gmax|primal|tera(?:[\s-]*[a-z]+)?)\s*$",
    re.IGNORECASE,
)
GENDER_MARKER = re.compile(r"\(\s*([mf])\s*\)", re.IGNORECASE)
NICKNAME_SPECIES = re.compile(r"\(([^()]*)\)")
STRIPPED_PUNCTUATION = re.compile(r"[.'’:]")


@dataclass
class SpeciesResolution:
    species: ResolvedSpecies
    inline_gender: Optional[Gender] = None
    form_gender: Optional[Gender] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)


def canonicalize(name: str) -> str:
    """Lowercase, strip accents and punctuation, join words with underscores."""

    decomposed = unicodedata.normalize("NFKD", name)
    ascii_name = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = STRIPPED_PUNCTUATION.sub("", ascii_name.strip().lower())
    cleaned = re.sub(r"\s*-\s*", "-", cleaned)
    return re.sub(r"\s+", "_", cleaned.strip())


def strip_cosmetic_suffixes(name: str) -> str:
    previous = None
    while previous != name:
        previous = name
        name = COSMETIC_SUFFIX.sub("", name).rstrip()
    return name


class SpeciesResolver:
    """Turns the species part of an entry header into a ResolvedSpecies."""

    def __init__(self, reference: ReferenceData) -> None:
        self.reference = reference

    def resolve(self, token: str, *, strict: bool = False, index: Optional[int] = None) -> SpeciesResolution:
        original = token.strip()
        diagnostics: List[Diagnostic] = []

        inline_gender: Optional[Gender] = None
        match = GENDER_MARKER.search(original)
        if match:
            inline_gender = Gender.parse(match.group(1))
        name = GENDER_MARKER.sub("", original).strip()

        # "Nickname (Species)" keeps the species inside the parentheses.
        nickname = NICKNAME_SPECIES.search(name)
        if nickname and nickname.group(1).strip():
            name = nickname.group(1).strip()
        else:
            name = NICKNAME_SPECIES.sub("", name).strip()

        name = canonicalize(strip_cosmetic_suffixes(name))
        base, aspects, form_gender, diagnostics = self._apply_form_rules(original, name)

        if strict and base and not self.reference.is_known(base):
            raise UnknownSpeciesError(base, index=index)

        return SpeciesResolution(
            species=ResolvedSpecies(canonical_id=base, aspects=tuple(aspects)),
            inline_gender=inline_gender,
            form_gender=form_gender,
            diagnostics=diagnostics,
        )

    def _apply_form_rules(self, original: str, name: str):
        diagnostics: List[Diagnostic] = []
        aspects: List[str] = []
        form_gender: Optional[Gender] = None
        base = name
        if not name or self.reference.is_known(name):
            return base, aspects, form_gender, diagnostics

        matched = False
        for rule in self.reference.form_rules:
            found = rule.match(name)
            if found is None:
                continue
            base = found
            if rule.aspect and rule.aspect not in aspects:
                aspects.append(rule.aspect)
            if rule.gender is not None:
                form_gender = rule.gender
            diagnostics.append(
                Diagnostic(original, f"matched {rule.category} form '{rule.match_key}'", "info")
            )
            matched = True
            if isinstance(rule, SuffixRule):
                # First suffix rule wins; containment rules only run when none matched.
                break

        if not matched and "-" in name:
            diagnostics.append(Diagnostic(original, "unrecognized form pattern"))
        return base, aspects, form_gender, diagnostics
