"""Tests for species normalization and form rules."""

from __future__ import annotations

import pytest

from showdown_rct.data import ContainmentRule, ReferenceData, SuffixRule, build_form_rules
from showdown_rct.errors import UnknownSpeciesError
from showdown_rct.models import Gender
from showdown_rct.parsers import SpeciesResolver, canonicalize

KNOWN = [
    "charizard",
    "ninetales",
    "tauros",
    "vivillon",
    "landorus",
    "ho-oh",
    "iron_hands",
    "mr_mime",
    "farfetchd",
    "flabebe",
    "pikachu",
    "indeedee",
    "meowstic",
    "basculegion",
    "oinkologne",
    "nidoran-f",
]


@pytest.fixture()
def resolver() -> SpeciesResolver:
    return SpeciesResolver(ReferenceData.build(KNOWN))


@pytest.mark.parametrize(
    "token, expected",
    [
        ("Charizard-Mega-X", "charizard"),
        ("Charizard-Gmax", "charizard"),
        ("Charizard-Tera Fire", "charizard"),
        ("Iron Hands", "iron_hands"),
        ("Mr. Mime", "mr_mime"),
        ("Farfetch’d", "farfetchd"),
        ("Flabébé", "flabebe"),
        ("Ho-Oh", "ho-oh"),
    ],
)
def test_cosmetic_suffixes_and_punctuation(resolver: SpeciesResolver, token: str, expected: str) -> None:
    result = resolver.resolve(token)

    assert result.species.canonical_id == expected
    assert result.species.aspects == ()


def test_regional_suffix_adds_aspect(resolver: SpeciesResolver) -> None:
    result = resolver.resolve("Ninetales-Alola")

    assert result.species.canonical_id == "ninetales"
    assert result.species.aspects == ("alolan",)
    assert result.diagnostics[0].severity == "info"


def test_paldean_tauros_breed(resolver: SpeciesResolver) -> None:
    result = resolver.resolve("Tauros-Paldea-Combat")

    assert result.species.canonical_id == "tauros"
    assert result.species.aspects == ("paldean-breed-combat",)


def test_regional_only_table_gives_plain_paldean() -> None:
    rules = build_form_rules(breeds={}, special={}, plumages={}, aspect_forms={})
    resolver = SpeciesResolver(ReferenceData.build(KNOWN, form_rules=rules))

    result = resolver.resolve("Tauros-Paldea")

    assert result.species.canonical_id == "tauros"
    assert result.species.aspects == ("paldean",)


def test_multi_word_vivillon_pattern(resolver: SpeciesResolver) -> None:
    result = resolver.resolve("Vivillon-High Plains")

    assert result.species.canonical_id == "vivillon"
    assert result.species.aspects == ("high_plains",)


def test_containment_rule_matches_non_trailing_token(resolver: SpeciesResolver) -> None:
    result = resolver.resolve("Landorus-Therian-Custom")

    assert result.species.canonical_id == "landorus"
    assert result.species.aspects == ("therian",)


def test_unknown_hyphenated_name_is_kept_with_diagnostic(resolver: SpeciesResolver) -> None:
    result = resolver.resolve("Pikachu-Rockstar")

    assert result.species.canonical_id == "pikachu-rockstar"
    assert result.species.aspects == ()
    assert [d.reason for d in result.diagnostics] == ["unrecognized form pattern"]


def test_inline_gender_and_nickname(resolver: SpeciesResolver) -> None:
    result = resolver.resolve("Sparky (Pikachu) (m)")

    assert result.species.canonical_id == "pikachu"
    assert result.inline_gender is Gender.MALE


def test_strict_mode_rejects_unknown_species(resolver: SpeciesResolver) -> None:
    with pytest.raises(UnknownSpeciesError) as excinfo:
        resolver.resolve("Missingno", strict=True, index=3)

    assert "Invalid Pokémon species: missingno" in str(excinfo.value)
    assert excinfo.value.index == 3


def test_rule_variants() -> None:
    suffix = SuffixRule("droopy", "droopy", frozenset({"tatsugiri"}))
    containment = ContainmentRule("origin", "origin", frozenset({"giratina"}))

    assert suffix.match("tatsugiri-droopy") == "tatsugiri"
    assert suffix.match("dondozo-droopy") is None
    assert containment.match("giratina-origin-shiny") == "giratina"
    assert containment.match("palkia-origin") is None


def test_canonicalize_collapses_whitespace() -> None:
    assert canonicalize("  Tapu   Koko ") == "tapu_koko"


@pytest.mark.parametrize(
    "token, expected, gender",
    [
        ("Indeedee-F", "indeedee", Gender.FEMALE),
        ("Meowstic-F", "meowstic", Gender.FEMALE),
        ("Basculegion-F", "basculegion", Gender.FEMALE),
        ("Oinkologne-F", "oinkologne", Gender.FEMALE),
        ("Indeedee-M", "indeedee", Gender.MALE),
        ("Meowstic-Female", "meowstic", Gender.FEMALE),
    ],
)
def test_gendered_form_suffix_locks_gender(
    resolver: SpeciesResolver, token: str, expected: str, gender: Gender
) -> None:
    result = resolver.resolve(token, strict=True)

    assert result.species.canonical_id == expected
    assert result.species.aspects == ()
    assert result.form_gender is gender
    assert "unrecognized form pattern" not in [d.reason for d in result.diagnostics]


def test_gendered_suffix_only_applies_to_listed_species(resolver: SpeciesResolver) -> None:
    nidoran = resolver.resolve("Nidoran-F")
    pikachu = resolver.resolve("Pikachu-F")

    assert nidoran.species.canonical_id == "nidoran-f"
    assert nidoran.form_gender is None
    assert pikachu.species.canonical_id == "pikachu-f"
    assert pikachu.form_gender is None
    assert [d.reason for d in pikachu.diagnostics] == ["unrecognized form pattern"]


def test_containment_rules_accumulate_regardless_of_category() -> None:
    rules = (
        ContainmentRule("therian", "therian", frozenset({"landorus"})),
        ContainmentRule("shiny", "shiny_coat", frozenset({"landorus"})),
    )
    resolver = SpeciesResolver(ReferenceData.build(KNOWN, form_rules=rules))

    result = resolver.resolve("Landorus-Therian-Shiny")

    assert result.species.canonical_id == "landorus"
    assert result.species.aspects == ("therian", "shiny_coat")


def test_suffix_rule_stops_evaluation_regardless_of_category() -> None:
    rules = (
        SuffixRule("droopy", "droopy", frozenset({"tatsugiri"}), "aspect"),
        ContainmentRule("droopy", "other", frozenset({"tatsugiri"})),
    )
    resolver = SpeciesResolver(ReferenceData.build(["tatsugiri"], form_rules=rules))

    result = resolver.resolve("Tatsugiri-Droopy")

    assert result.species.aspects == ("droopy",)
