"""Reference data: species, forms, gender locks and AI constants."""

from .forms import ContainmentRule, FormRule, SuffixRule, build_form_rules
from .loader import load_reference_data, read_species_file
from .reference import ReferenceData

__all__ = [
    "ContainmentRule",
    "FormRule",
    "ReferenceData",
    "SuffixRule",
    "build_form_rules",
    "load_reference_data",
    "read_species_file",
]
