"""Static reference tables injected into the converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

from .forms import FormRule, build_form_rules

GENDERLESS_SPECIES = frozenset(
    {
        "magnemite", "magneton", "magnezone", "voltorb", "electrode", "staryu",
        "starmie", "porygon", "porygon2", "porygon-z", "ditto", "shedinja",
        "lunatone", "solrock", "baltoy", "claydol", "beldum", "metang",
        "metagross", "bronzor", "bronzong", "rotom", "unown", "cryogonal",
        "klink", "klang", "klinklang", "golett", "golurk", "carbink", "minior",
        "dhelmise", "sinistea", "polteageist", "poltchageist", "sinistcha",
        "falinks", "dracozolt", "arctozolt", "dracovish", "arctovish",
        "gimmighoul", "gholdengo", "orthworm", "articuno", "zapdos", "moltres",
        "mewtwo", "mew", "raikou", "entei", "suicune", "lugia", "ho-oh",
        "celebi", "regirock", "regice", "registeel", "kyogre", "groudon",
        "rayquaza", "jirachi", "deoxys", "uxie", "mesprit", "azelf", "dialga",
        "palkia", "giratina", "phione", "manaphy", "darkrai", "shaymin",
        "arceus", "regigigas", "victini", "cobalion", "terrakion", "virizion",
        "reshiram", "zekrom", "kyurem", "keldeo", "meloetta", "genesect",
        "xerneas", "yveltal", "zygarde", "diancie", "hoopa", "volcanion",
        "type_null", "silvally", "tapu_koko", "tapu_lele", "tapu_bulu",
        "tapu_fini", "cosmog", "cosmoem", "solgaleo", "lunala", "nihilego",
        "buzzwole", "pheromosa", "xurkitree", "celesteela", "kartana",
        "guzzlord", "necrozma", "magearna", "marshadow", "poipole",
        "naganadel", "stakataka", "blacephalon", "zeraora", "meltan",
        "melmetal", "zacian", "zamazenta", "eternatus", "zarude", "regieleki",
        "regidrago", "glastrier", "spectrier", "calyrex", "great_tusk",
        "scream_tail", "brute_bonnet", "flutter_mane", "slither_wing",
        "sandy_shocks", "iron_treads", "iron_bundle", "iron_hands",
        "iron_jugulis", "iron_moth", "iron_thorns", "wo-chien", "chien-pao",
        "ting-lu", "chi-yu", "roaring_moon", "iron_valiant", "koraidon",
        "miraidon", "walking_wake", "iron_leaves", "gouging_fire",
        "raging_bolt", "iron_boulder", "iron_crown", "terapagos", "pecharunt",
    }
)

FEMALE_ONLY_SPECIES = frozenset(
    {
        "nidoran-f", "nidorina", "nidoqueen", "chansey", "blissey", "kangaskhan",
        "jynx", "smoochum", "miltank", "illumise", "happiny", "vespiquen",
        "wormadam", "froslass", "cresselia", "latias", "petilil", "lilligant",
        "vullaby", "mandibuzz", "flabebe", "floette", "florges", "salazzle",
        "bounsweet", "steenee", "tsareena", "hatenna", "hattrem", "hatterene",
        "milcery", "alcremie", "enamorus", "tinkatink", "tinkatuff", "tinkaton",
        "ogerpon", "fezandipiti",
    }
)

MALE_ONLY_SPECIES = frozenset(
    {
        "nidoran-m", "nidorino", "nidoking", "hitmonlee", "hitmonchan",
        "hitmontop", "tyrogue", "tauros", "volbeat", "mothim", "gallade",
        "latios", "throh", "sawk", "rufflet", "braviary", "tornadus",
        "thundurus", "landorus", "impidimp", "morgrem", "grimmsnarl",
        "okidogi", "munkidori",
    }
)

AI_TYPE = "rct"
MOVE_BIAS = 1.0
STAT_MOVE_BIAS = 0.1
SWITCH_BIAS = 0.65
ITEM_BIAS = 1.0
DEFAULT_MAX_SELECT_MARGIN = 0.15
DEFAULT_BATTLE_FORMAT = "GEN_9_SINGLES"
DEFAULT_BAG_ITEM = "cobblemon:full_restore"
DEFAULT_BAG_QUANTITY = 1
DEFAULT_OUTPUT_TEMPLATE = "data/rctmod/trainers/{filename}"
FALLBACK_FILENAME = "trainer"
MAX_TEAM_SIZE = 6
MAX_MOVES = 4


@dataclass(frozen=True)
class ReferenceData:
    """Read-only lookup tables used during conversion."""

    species: FrozenSet[str] = frozenset()
    form_rules: Tuple[FormRule, ...] = field(default_factory=build_form_rules)
    genderless: FrozenSet[str] = GENDERLESS_SPECIES
    female_only: FrozenSet[str] = FEMALE_ONLY_SPECIES
    male_only: FrozenSet[str] = MALE_ONLY_SPECIES

    @classmethod
    def build(
        cls,
        species: Iterable[str],
        *,
        form_rules: Optional[Iterable[FormRule]] = None,
        genderless: Optional[Iterable[str]] = None,
        female_only: Optional[Iterable[str]] = None,
        male_only: Optional[Iterable[str]] = None,
    ) -> "ReferenceData":
        return cls(
            species=frozenset(species),
            form_rules=tuple(form_rules) if form_rules is not None else build_form_rules(),
            genderless=frozenset(genderless) if genderless is not None else GENDERLESS_SPECIES,
            female_only=frozenset(female_only) if female_only is not None else FEMALE_ONLY_SPECIES,
            male_only=frozenset(male_only) if male_only is not None else MALE_ONLY_SPECIES,
        )

    def is_known(self, species: str) -> bool:
        return species in self.species
