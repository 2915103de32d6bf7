"""Gender resolution rules."""

from __future__ import annotations

from typing import Optional

from ..data.reference import ReferenceData
from ..models import Gender


def resolve_gender(
    species: str,
    explicit: Optional[Gender],
    reference: ReferenceData,
    default: Gender = Gender.MALE,
    *,
    locked: Optional[Gender] = None,
) -> Gender:
    """Pick the final gender for ``species``.

    Order: genderless species, explicit signal, gender-locked species, default.
    ``locked`` is the gender carried by the form itself, as in ``Meowstic-F``.
    """

    if species in reference.genderless:
        return Gender.GENDERLESS
    if explicit in (Gender.MALE, Gender.FEMALE):
        return explicit
    if locked in (Gender.MALE, Gender.FEMALE):
        return locked
    if species in reference.female_only:
        return Gender.FEMALE
    if species in reference.male_only:
        return Gender.MALE
    return default
