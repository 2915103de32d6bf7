"""FastAPI web server exposing the converter via a REST API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .config import load_settings
from .data import load_reference_data
from .models import TrainerConfig
from .services import ShowdownConverter, describe_ai_margin, generate_filename, lint_input

app = FastAPI(
    title="Showdown to RCT Web API",
    description="Convert Showdown team exports into RCT trainer files",
    version="0.1.0",
)

_settings = load_settings()
_converter = ShowdownConverter(load_reference_data(_settings.species_file), settings=_settings)


class ConvertRequest(BaseModel):
    """Request model for the convert endpoint."""

    team_text: str
    name: str = ""
    ai_margin: Optional[Union[float, str]] = None
    battle_format: Optional[str] = None
    item_type: Optional[str] = None
    item_quantity: Optional[Union[int, str]] = None
    identity: Optional[str] = None

    def to_config(self) -> TrainerConfig:
        return TrainerConfig(
            name=self.name,
            ai_margin=self.ai_margin,
            battle_format=self.battle_format,
            item_type=self.item_type,
            item_quantity=self.item_quantity,
            identity=self.identity,
        )


class ConvertResponse(BaseModel):
    """Response model for a successful conversion."""

    result: Dict[str, Any]
    filename: str
    path: str
    warnings: List[str]
    diagnostics: List[Dict[str, str]]


class TeamTextRequest(BaseModel):
    team_text: str


class LintResponse(BaseModel):
    warnings: List[str]


class FilenameResponse(BaseModel):
    filename: str


class AIMarginResponse(BaseModel):
    margin: Optional[float]
    advice: str


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve a short landing page pointing at the API."""
    return (
        "<html><body><h1>Showdown to RCT</h1>"
        "<p>POST your team to <code>/api/convert</code>.</p></body></html>"
    )


@app.post("/api/convert", response_model=ConvertResponse)
async def convert_team(request: ConvertRequest) -> ConvertResponse:
    """Convert a Showdown team; conversion failures become HTTP 400."""
    result = _converter.convert(request.team_text, request.to_config())
    if not result.success:
        raise HTTPException(
            status_code=400,
            detail={"error": result.error, "hint": result.hint, "errors": result.errors},
        )
    return ConvertResponse(
        result=result.document(),
        filename=result.filename,
        path=result.path,
        warnings=result.warnings,
        diagnostics=[d.to_dict() for d in result.diagnostics],
    )


@app.post("/api/validate", response_model=LintResponse)
async def validate_team(request: TeamTextRequest) -> LintResponse:
    """Return live input warnings for the team text."""
    return LintResponse(warnings=lint_input(request.team_text))


@app.get("/api/filename", response_model=FilenameResponse)
async def filename(name: str = Query("", description="Trainer display name")) -> FilenameResponse:
    return FilenameResponse(filename=generate_filename(name))


@app.get("/api/ai_margin", response_model=AIMarginResponse)
async def ai_margin(value: str = Query(..., description="AI maxSelectMargin")) -> AIMarginResponse:
    try:
        margin: Optional[float] = float(value)
    except ValueError:
        margin = None
    return AIMarginResponse(margin=margin, advice=describe_ai_margin(value))


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Entry point for running the web server."""
    import uvicorn

    print(f"[showdown-rct-web] Starting web server at http://{host}:{port}")
    print("[showdown-rct-web] Press Ctrl+C to stop.")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
