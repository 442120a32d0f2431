"""
Swiss Grid Simulator - Web API
===============================
FastAPI server around a single game session.

Usage:
    python -m grid_sim.web
    python cli.py web [--port 8080]
"""

import threading
from dataclasses import asdict
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import uvicorn

from grid_sim.display import InfoBoard
from grid_sim.errors import ConfigurationError
from grid_sim.game import GameLoop
from grid_sim.io import (
    DEFAULT_GAME_PATH, DEFAULT_PLANTS_PATH,
    load_game_config, load_plant_catalog, parse_building_type,
)
from grid_sim.plant import PowerPlant

app = FastAPI(title="Swiss Grid Simulator")

# Turns are not re-entrant: every request touching the session holds this
_lock = threading.Lock()
_session = {"game": None, "board": None}


# ---------------------------------------------------------------------------
# Pydantic models for request/response
# ---------------------------------------------------------------------------

class ImportRequest(BaseModel):
    fraction: float


class BuildRequest(BaseModel):
    slot: int
    plant_type: str


class ResetRequest(BaseModel):
    config_path: Optional[str] = None
    plants_path: Optional[str] = None


class PlantOut(BaseModel):
    plant_id: str
    name: str
    plant_type: str
    alive: bool
    switch_enabled: bool
    life_cycle: int
    capacity: int
    availability: float
    production_cost: int
    pollution: int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _new_game(config_path=None, plants_path=None) -> GameLoop:
    config = load_game_config(config_path or DEFAULT_GAME_PATH)
    catalog = load_plant_catalog(plants_path or DEFAULT_PLANTS_PATH)
    board = InfoBoard()
    game = GameLoop(config, catalog, board)
    _session["game"] = game
    _session["board"] = board
    return game


def _game() -> GameLoop:
    game = _session["game"]
    if game is None:
        game = _new_game()
    return game


def _plant_out(pp: PowerPlant) -> PlantOut:
    return PlantOut(
        plant_id=pp.plant_id,
        name=pp.name,
        plant_type=pp.plant_type.value,
        alive=pp.switch_enabled and pp.is_alive(),
        switch_enabled=pp.switch_enabled,
        life_cycle=pp.life_cycle,
        capacity=pp.capacity(),
        availability=pp.availability(),
        production_cost=pp.production_cost(),
        pollution=pp.pollution(),
    )


def _state_to_dict(game: GameLoop) -> dict:
    rm = game.resources
    return {
        "name": game.config.name,
        "turn": game.turn,
        "max_turns": game.config.max_turns,
        "game_over": game.is_over(),
        "import_fraction": rm.import_fraction,
        "info": asdict(_session["board"].data),
        "plants": [_plant_out(pp).model_dump() for pp in rm.plants],
        "slots": [
            {"slot_id": bb.slot_id,
             "plant_type": bb.plant_type.value if bb.plant_type else None,
             "turns_remaining": bb.turns_remaining}
            for bb in rm.build_buttons
        ],
    }


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------

@app.get("/api/state")
def api_state():
    with _lock:
        return _state_to_dict(_game())


@app.get("/api/history")
def api_history():
    with _lock:
        return [asdict(s) for s in _game().history]


@app.get("/api/catalog")
def api_catalog():
    with _lock:
        return {pt.value: asdict(c) for pt, c in _game().catalog.items()}


@app.post("/api/turn")
def api_turn():
    with _lock:
        game = _game()
        if game.is_over():
            raise HTTPException(400, "Game is over")
        snap = game.next_turn()
        return {"snapshot": asdict(snap), "state": _state_to_dict(game)}


@app.post("/api/import")
def api_import(req: ImportRequest):
    with _lock:
        game = _game()
        game.set_import_fraction(req.fraction)
        return _state_to_dict(game)


@app.post("/api/plants/{plant_id}/toggle")
def api_toggle(plant_id: str):
    with _lock:
        game = _game()
        try:
            toggled = game.toggle_plant(plant_id)
        except KeyError:
            raise HTTPException(404, f"Plant not found: {plant_id}")
        if not toggled:
            raise HTTPException(400, f"Plant {plant_id} has reached the end of its life cycle")
        return _state_to_dict(game)


@app.post("/api/build")
def api_build(req: BuildRequest):
    with _lock:
        game = _game()
        try:
            plant_type = parse_building_type(req.plant_type)
            started = game.build(req.slot, plant_type)
        except ConfigurationError as e:
            raise HTTPException(400, str(e))
        except IndexError:
            raise HTTPException(404, f"Build slot not found: {req.slot}")
        if not started:
            raise HTTPException(400, "Slot busy or not enough money")
        return _state_to_dict(game)


@app.post("/api/reset")
def api_reset(req: ResetRequest):
    with _lock:
        try:
            game = _new_game(req.config_path, req.plants_path)
        except FileNotFoundError as e:
            raise HTTPException(404, str(e))
        except ConfigurationError as e:
            raise HTTPException(400, str(e))
        return _state_to_dict(game)


def start_server(port: int = 8080):
    """Start the uvicorn server."""
    print(f"Starting Swiss Grid Simulator at http://localhost:{port}")
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="info")


if __name__ == "__main__":
    start_server()
