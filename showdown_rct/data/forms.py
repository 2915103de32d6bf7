"""Form rules mapping Showdown form suffixes onto Cobblemon aspects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from ..models import Gender

# Keys are in canonical form: lowercase, spaces replaced by underscores.
REGIONAL_FORMS: Dict[str, str] = {
    "alola": "alolan",
    "galar": "galarian",
    "hisui": "hisuian",
    "paldea": "paldean",
}

# Multi-segment suffixes checked before the regional table so that
# "tauros-paldea-combat" is not read as a plain Paldean form.
BREED_FORMS: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "paldea-combat": ("paldean-breed-combat", ("tauros",)),
    "paldea-blaze": ("paldean-breed-blaze", ("tauros",)),
    "paldea-aqua": ("paldean-breed-aqua", ("tauros",)),
}

VIVILLON_PATTERNS = (
    "archipelago",
    "continental",
    "elegant",
    "fancy",
    "garden",
    "high_plains",
    "icy_snow",
    "jungle",
    "marine",
    "modern",
    "monsoon",
    "ocean",
    "pokeball",
    "polar",
    "river",
    "sandstorm",
    "savanna",
    "sun",
    "tundra",
)

SPECIAL_FORMS: Dict[str, Tuple[str, ...]] = {
    **{pattern: ("vivillon", "scatterbug", "spewpa") for pattern in VIVILLON_PATTERNS},
    "droopy": ("tatsugiri",),
    "stretchy": ("tatsugiri",),
    "blue-striped": ("basculin",),
    "white-striped": ("basculin",),
    "midnight": ("lycanroc",),
    "dusk": ("lycanroc",),
    "pom-pom": ("oricorio",),
    "pau": ("oricorio",),
    "sensu": ("oricorio",),
    "heat": ("rotom",),
    "wash": ("rotom",),
    "frost": ("rotom",),
    "fan": ("rotom",),
    "mow": ("rotom",),
    "sky": ("shaymin",),
    "four": ("maushold",),
    "three-segment": ("dudunsparce",),
}

GENDERED_SPECIES = ("indeedee", "meowstic", "basculegion", "oinkologne")

# Gender forms carry no aspect; they lock the gender instead.
GENDERED_FORMS: Dict[str, Gender] = {
    "f": Gender.FEMALE,
    "female": Gender.FEMALE,
    "m": Gender.MALE,
    "male": Gender.MALE,
}

SQUAWKABILLY_PLUMAGES: Dict[str, str] = {
    "blue": "blue_plumage",
    "yellow": "yellow_plumage",
    "white": "white_plumage",
}

# Forms whose token need not be the trailing segment of the name.
ASPECT_FORMS: Dict[str, Tuple[str, ...]] = {
    "therian": ("tornadus", "thundurus", "landorus", "enamorus"),
    "origin": ("dialga", "palkia", "giratina"),
    "rapid-strike": ("urshifu",),
    "crowned": ("zacian", "zamazenta"),
    "hearthflame": ("ogerpon",),
    "wellspring": ("ogerpon",),
    "cornerstone": ("ogerpon",),
    "bloodmoon": ("ursaluna",),
    "dusk-mane": ("necrozma",),
    "dawn-wings": ("necrozma",),
    "ice": ("calyrex",),
    "shadow": ("calyrex",),
}


@dataclass(frozen=True)
class FormRule:
    """Maps a form token onto an aspect, optionally only for some species."""

    match_key: str
    aspect: str
    species: FrozenSet[str] = frozenset()
    category: str = "special"
    gender: Optional[Gender] = None

    def match(self, name: str) -> Optional[str]:
        """Return the base species when ``name`` carries this form."""

        raise NotImplementedError


@dataclass(frozen=True)
class SuffixRule(FormRule):
    """Matches ``<species>-<match_key>`` anchored at the end of the name."""

    def match(self, name: str) -> Optional[str]:
        suffix = f"-{self.match_key}"
        if not name.endswith(suffix):
            return None
        base = name[: -len(suffix)]
        if not base:
            return None
        if self.species and base not in self.species:
            return None
        return base


@dataclass(frozen=True)
class ContainmentRule(FormRule):
    """Matches when the name mentions an owning species and ``-<match_key>``."""

    def match(self, name: str) -> Optional[str]:
        if f"-{self.match_key}" not in name:
            return None
        for species in sorted(self.species, key=len, reverse=True):
            if species in name:
                return species
        return None


def _aspect_from_key(key: str) -> str:
    return key.replace("-", "_")


def build_form_rules(
    *,
    regional: Optional[Dict[str, str]] = None,
    breeds: Optional[Dict[str, Tuple[str, Iterable[str]]]] = None,
    special: Optional[Dict[str, Iterable[str]]] = None,
    plumages: Optional[Dict[str, str]] = None,
    gendered: Optional[Dict[str, Gender]] = None,
    aspect_forms: Optional[Dict[str, Iterable[str]]] = None,
) -> Tuple[FormRule, ...]:
    """Assemble the rule list in evaluation order.

    Suffix rules come first: breed rules, then species specific forms (longest
    key first, gendered forms included), then the regional table. Containment rules follow.
    """

    regional = REGIONAL_FORMS if regional is None else regional
    breeds = BREED_FORMS if breeds is None else breeds
    special = SPECIAL_FORMS if special is None else special
    plumages = SQUAWKABILLY_PLUMAGES if plumages is None else plumages
    gendered = GENDERED_FORMS if gendered is None else gendered
    aspect_forms = ASPECT_FORMS if aspect_forms is None else aspect_forms

    rules: List[FormRule] = []
    for key, (aspect, owners) in sorted(breeds.items(), key=lambda kv: -len(kv[0])):
        rules.append(SuffixRule(key, aspect, frozenset(owners), "breed"))

    specific: List[FormRule] = [
        SuffixRule(key, _aspect_from_key(key), frozenset(owners), "special")
        for key, owners in special.items()
    ]
    specific.extend(
        SuffixRule(key, aspect, frozenset({"squawkabilly"}), "special")
        for key, aspect in plumages.items()
    )
    specific.extend(
        SuffixRule(key, "", frozenset(GENDERED_SPECIES), "gendered", gender)
        for key, gender in gendered.items()
    )
    specific.sort(key=lambda rule: -len(rule.match_key))
    rules.extend(specific)

    rules.extend(
        SuffixRule(key, aspect, frozenset(), "regional") for key, aspect in regional.items()
    )
    rules.extend(
        ContainmentRule(key, _aspect_from_key(key), frozenset(owners), "aspect")
        for key, owners in aspect_forms.items()
    )
    return tuple(rules)
