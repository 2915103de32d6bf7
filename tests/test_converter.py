"""End-to-end tests for the conversion pipeline."""

from __future__ import annotations

import json

import pytest

from showdown_rct.config import Settings
from showdown_rct.data import load_reference_data
from showdown_rct.models import Gender, TrainerConfig
from showdown_rct.services import ShowdownConverter, convert

ENTRY = """{species} @ Leftovers
Ability: Levitate
EVs: 252 HP / 4 Def / 252 SpA
Modest Nature
- Thunderbolt
- Flash Cannon
"""


@pytest.fixture(scope="module")
def converter() -> ShowdownConverter:
    return ShowdownConverter(load_reference_data())


def _team(*species: str) -> str:
    return "\n".join(ENTRY.format(species=name) for name in species)


def test_single_entry_converts(converter: ShowdownConverter) -> None:
    result = converter.convert(_team("Garchomp"), TrainerConfig(name="Ash Ketchum!"))

    assert result.success
    document = json.loads(result.json)
    assert document["team"][0]["species"] == "garchomp"
    assert document["team"][0]["heldItem"] == "leftovers"
    assert document["team"][0]["gender"] == "MALE"
    assert document["team"][0]["level"] == 100
    assert result.filename == "ash_ketchum.json"
    assert result.path == "data/rctmod/trainers/ash_ketchum.json"
    assert result.warnings == []


def test_magnemite_is_genderless(converter: ShowdownConverter) -> None:
    result = converter.convert(_team("Magnemite"))

    assert result.document()["team"][0]["gender"] == Gender.GENDERLESS.value


def test_tauros_breed_aspect(converter: ShowdownConverter) -> None:
    result = converter.convert(_team("Tauros-Paldea-Combat"))

    member = result.document()["team"][0]
    assert member["species"] == "tauros"
    assert member["aspects"] == ["paldean-breed-combat"]
    assert any(d.severity == "info" for d in result.diagnostics)


def test_seven_entries_truncate_to_six(converter: ShowdownConverter) -> None:
    names = ["Pikachu", "Garchomp", "Rotom", "Gengar", "Lapras", "Snorlax", "Dragonite"]
    result = converter.convert(_team(*names))

    assert result.success
    assert len(result.document()["team"]) == 6
    assert result.warnings == ["Team has 7 Pokémon; only the first 6 were kept."]


def test_empty_input_fails_with_hint(converter: ShowdownConverter) -> None:
    result = converter.convert("   \n\n  ")

    assert not result.success
    assert result.error.startswith("No Pokémon team data provided")
    assert result.hint


def test_errors_are_aggregated(converter: ShowdownConverter) -> None:
    text = _team("Garchomp").rstrip("\n") + "\n- Earthquake\n- Outrage\n- Stone Edge\n\nPikachu\n- Thunderbolt\n"
    result = converter.convert(text)

    assert not result.success
    assert any("Too many moves" in error for error in result.errors)
    assert any(error.startswith("Pokémon #2 (pikachu): Missing ability") for error in result.errors)
    assert len(result.errors) == 3
    assert "Too many moves" in result.error


def test_missing_species(converter: ShowdownConverter) -> None:
    result = converter.convert("@ Leftovers\nAbility: Levitate\nModest Nature\n- Thunderbolt")

    assert not result.success
    assert result.error == "No Pokémon entries could be parsed from the input."
    assert result.errors == ["Pokémon #1: No valid Pokémon species found"]


def test_strict_mode_rejects_unknown_species() -> None:
    result = convert(_team("Fakemon"), strict=True)

    assert not result.success
    assert result.errors == ["Pokémon #1 (fakemon): Invalid Pokémon species: fakemon"]
    assert convert(_team("Fakemon")).success


def test_all_entries_unparseable_reports_no_parseable_entries(converter: ShowdownConverter) -> None:
    result = converter.convert("@ Leftovers\n- Tackle\n\n(M)\n- Tackle")

    assert not result.success
    assert result.error == "No Pokémon entries could be parsed from the input."
    assert result.hint.startswith("Separate each Pokémon with a blank line")
    assert result.errors == [
        "Pokémon #1: No valid Pokémon species found",
        "Pokémon #2: No valid Pokémon species found",
    ]


def test_one_parseable_entry_keeps_entry_errors(converter: ShowdownConverter) -> None:
    result = converter.convert("@ Leftovers\n- Tackle\n\n" + _team("Pikachu"))

    assert not result.success
    assert result.errors == ["Pokémon #1: No valid Pokémon species found"]
    assert result.error == "Pokémon #1: No valid Pokémon species found"


def test_gendered_form_sets_gender(converter: ShowdownConverter) -> None:
    result = converter.convert(_team("Indeedee-F", "Meowstic-M", "Meowstic-F (M)"))

    team = result.document()["team"]
    assert [member["species"] for member in team] == ["indeedee", "meowstic", "meowstic"]
    assert [member["gender"] for member in team] == ["FEMALE", "MALE", "MALE"]
    assert all("aspects" not in member for member in team)
    assert not any(d.reason == "unrecognized form pattern" for d in result.diagnostics)


def test_strict_mode_accepts_gendered_forms() -> None:
    result = convert(_team("Meowstic-F"), strict=True)

    assert result.success
    member = result.document()["team"][0]
    assert member["species"] == "meowstic"
    assert member["gender"] == "FEMALE"


def test_unknown_form_is_a_diagnostic_not_an_error(converter: ShowdownConverter) -> None:
    result = converter.convert(_team("Pikachu-Rockstar"))

    assert result.success
    assert result.document()["team"][0]["species"] == "pikachu-rockstar"
    assert [d.reason for d in result.diagnostics] == ["unrecognized form pattern"]


def test_settings_drive_defaults() -> None:
    settings = Settings(default_level=50, default_gender=Gender.FEMALE, battle_format="GEN_9_DOUBLES")
    converter = ShowdownConverter(load_reference_data(), settings=settings)

    document = converter.convert(_team("Pikachu")).document()

    assert document["team"][0]["level"] == 50
    assert document["team"][0]["gender"] == "FEMALE"
    assert document["battleFormat"] == "GEN_9_DOUBLES"


def test_debug_logger_receives_messages() -> None:
    messages: list[str] = []
    converter = ShowdownConverter(load_reference_data(), debug_logger=messages.append)

    converter.convert(_team("Pikachu"))

    assert any("Split input into 1 entries" in message for message in messages)


def test_result_to_dict(converter: ShowdownConverter) -> None:
    payload = converter.convert(_team("Pikachu"), TrainerConfig(name="Red")).to_dict()

    assert payload["success"] is True
    assert json.loads(payload["result"])["name"] == "Red"
    assert payload["filename"] == "red.json"
