"""Tests for the FastAPI endpoints."""

from fastapi.testclient import TestClient

from showdown_rct.web_server import app

client = TestClient(app)

TEAM = """Rotom-Wash @ Sitrus Berry
Ability: Levitate
Bold Nature
- Hydro Pump
- Volt Switch
"""


def test_convert_endpoint_returns_document() -> None:
    response = client.post("/api/convert", json={"team_text": TEAM, "name": "Cyrus"})

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "cyrus.json"
    member = body["result"]["team"][0]
    assert member["species"] == "rotom"
    assert member["aspects"] == ["wash"]
    assert member["gender"] == "GENDERLESS"


def test_convert_endpoint_reports_failures() -> None:
    response = client.post("/api/convert", json={"team_text": ""})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error"].startswith("No Pokémon team data provided")
    assert detail["hint"]


def test_validate_filename_and_margin_endpoints() -> None:
    lint = client.post("/api/validate", json={"team_text": "Pikachu\nLevel: 0"})
    assert lint.json() == {"warnings": ["Line 2: Invalid level 0. Must be between 1 and 100."]}

    name = client.get("/api/filename", params={"name": "Ash Ketchum!"})
    assert name.json() == {"filename": "ash_ketchum"}

    margin = client.get("/api/ai_margin", params={"value": "0.05"})
    assert margin.json() == {"margin": 0.05, "advice": "Very challenging AI behavior"}


def test_root_serves_landing_page() -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "/api/convert" in response.text
