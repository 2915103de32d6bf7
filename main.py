"""Command-line interface for converting Showdown teams into RCT trainer files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from showdown_rct.config import load_settings
from showdown_rct.data import load_reference_data
from showdown_rct.models import TrainerConfig
from showdown_rct.services import ShowdownConverter, describe_ai_margin


def _read_team_text(path: str) -> str:
    if path == "-":
        data = sys.stdin.read()
        if not data.strip():
            raise SystemExit("No team text provided on stdin.")
        return data
    file_path = Path(path)
    if not file_path.exists():
        raise SystemExit(f"File not found: {file_path}")
    return file_path.read_text(encoding="utf-8")


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert Showdown teams into RCT trainer JSON")
    parser.add_argument(
        "team_file",
        help="Path to Showdown export text or '-' to read from stdin",
    )
    parser.add_argument("--name", default="", help="Trainer display name")
    parser.add_argument("--ai-margin", help="AI maxSelectMargin (default: 0.15)")
    parser.add_argument("--battle-format", help="RCT battle format (default: GEN_9_SINGLES)")
    parser.add_argument("--item-type", help="Bag item id (default: cobblemon:full_restore)")
    parser.add_argument("--item-quantity", help="Bag item quantity (default: 1)")
    parser.add_argument("--identity", help="Trainer identity (defaults to the name)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject species that are not in the bundled species list",
    )
    parser.add_argument(
        "--output",
        "--write",
        dest="output_dir",
        metavar="DIR",
        help="Write <trainer>.json into this directory instead of printing it",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Print form and stat diagnostics to stderr",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    _debug_print(args.debug, f"Arguments parsed: {args}")
    settings = load_settings()
    reference = load_reference_data(settings.species_file)
    _debug_print(args.debug, f"Loaded {len(reference.species)} species")
    converter = ShowdownConverter(
        reference,
        settings=settings,
        strict=True if args.strict else None,
        debug_logger=(lambda msg: _debug_print(args.debug, msg)),
    )
    team_text = _read_team_text(args.team_file)
    _debug_print(args.debug, f"Loaded team text ({len(team_text)} chars)")

    config = TrainerConfig(
        name=args.name,
        ai_margin=args.ai_margin,
        battle_format=args.battle_format,
        item_type=args.item_type,
        item_quantity=args.item_quantity,
        identity=args.identity,
    )
    result = converter.convert(team_text, config)

    if args.diagnostics:
        for diagnostic in result.diagnostics:
            sys.stderr.write(f"[{diagnostic.severity}] {diagnostic.input}: {diagnostic.reason}\n")

    if not result.success:
        sys.stderr.write(f"Conversion error: {result.error}\n")
        if result.hint:
            sys.stderr.write(f"Tip: {result.hint}\n")
        return 1

    for warning in result.warnings:
        sys.stderr.write(f"Warning: {warning}\n")
    advice = describe_ai_margin(args.ai_margin) if args.ai_margin else ""
    if advice:
        sys.stderr.write(f"Note: {advice}\n")

    if args.output_dir:
        target = Path(args.output_dir) / result.filename
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(result.json + "\n", encoding="utf-8")
        print(f"Wrote {target}")
        print(f"Place it in your Minecraft instance at: {result.path}")
    else:
        print(result.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
