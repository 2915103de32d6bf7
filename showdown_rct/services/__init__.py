"""Conversion services: gender rules, validation, serialization and the pipeline."""

from .converter import ShowdownConverter, convert, default_converter
from .gender import resolve_gender
from .serializer import build_document, generate_filename, output_path
from .validator import describe_ai_margin, lint_input, validate_entry

__all__ = [
    "ShowdownConverter",
    "build_document",
    "convert",
    "default_converter",
    "describe_ai_margin",
    "generate_filename",
    "lint_input",
    "output_path",
    "resolve_gender",
    "validate_entry",
]
