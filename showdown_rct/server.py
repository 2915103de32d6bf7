"""FastMCP server exposing the Showdown to RCT conversion tools."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional

from fastmcp import FastMCP

from .config import load_settings
from .data import load_reference_data
from .models import TrainerConfig
from .services import ShowdownConverter, generate_filename, lint_input

app = FastMCP("showdown-rct", version="0.1.0")
_settings = load_settings()
_converter = ShowdownConverter(load_reference_data(_settings.species_file), settings=_settings)


@app.tool()
def convert_showdown_team(
    team_text: Annotated[str, "Showdown export text"],
    trainer_name: Annotated[str, "Trainer display name"] = "",
    ai_margin: Annotated[Optional[str], "AI maxSelectMargin (lower is harder)"] = None,
    battle_format: Annotated[Optional[str], "RCT battle format, e.g. GEN_9_SINGLES"] = None,
    item_type: Annotated[Optional[str], "Bag item id, e.g. cobblemon:full_restore"] = None,
    item_quantity: Annotated[Optional[str], "Bag item quantity"] = None,
    identity: Annotated[Optional[str], "Trainer identity; defaults to the name"] = None,
) -> Dict[str, Any]:
    """Convert a Showdown team into an RCT trainer JSON document."""

    config = TrainerConfig(
        name=trainer_name,
        ai_margin=ai_margin,
        battle_format=battle_format,
        item_type=item_type,
        item_quantity=item_quantity,
        identity=identity,
    )
    return _converter.convert(team_text, config).to_dict()


@app.tool()
def generate_trainer_filename(
    trainer_name: Annotated[str, "Trainer display name"],
) -> str:
    """Return the file stem used when saving the trainer JSON."""

    return generate_filename(trainer_name)


@app.tool()
def lint_showdown_team(
    team_text: Annotated[str, "Showdown export text"],
) -> List[str]:
    """Return line-level warnings (e.g. out-of-range levels) for the team text."""

    return lint_input(team_text)


def run() -> None:
    """Entry point for `python -m showdown_rct.server` or console script."""

    print("[showdown-rct] Starting MCP server. Press Ctrl+C to stop.")
    app.run()


if __name__ == "__main__":
    run()
