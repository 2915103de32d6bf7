"""Load bundled reference data from disk."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .reference import ReferenceData

SPECIES_FILE = Path(__file__).with_name("species.txt")


def read_species_file(path: str | Path | None = None) -> List[str]:
    """Return canonical species ids, one per non-empty, non-comment line."""

    species_path = Path(path) if path else SPECIES_FILE
    if not species_path.exists():
        raise FileNotFoundError(f"Species file not found: {species_path}")
    names: List[str] = []
    for line in species_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        names.append(line.lower())
    return names


def load_reference_data(species_path: Optional[str | Path] = None) -> ReferenceData:
    """Build the reference tables, reading species from ``species_path``."""

    return ReferenceData.build(read_species_file(species_path))
