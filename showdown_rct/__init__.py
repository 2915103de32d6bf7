"""Convert Showdown team exports into RCT trainer files."""

from .data import ReferenceData, load_reference_data
from .models import TrainerConfig
from .services import ShowdownConverter, convert, generate_filename

__all__ = [
    "ReferenceData",
    "ShowdownConverter",
    "TrainerConfig",
    "convert",
    "generate_filename",
    "load_reference_data",
]
