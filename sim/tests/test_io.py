"""Tests for YAML config loading."""

import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from grid_sim.errors import ConfigurationError
from grid_sim.io import (
    DATA_DIR, DEFAULT_GAME_PATH, DEFAULT_PLANTS_PATH,
    load_game_config, load_plant_catalog, parse_building_type, save_game_config,
)
from grid_sim.models import BuildingType, NUCLEAR_LIFE_SPAN


def _write(text: str) -> str:
    with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False, mode="w") as f:
        f.write(text)
        return f.name


def test_default_files_ship_inside_package():
    import grid_sim.io
    assert DATA_DIR.parent == Path(grid_sim.io.__file__).parent
    assert DEFAULT_PLANTS_PATH.exists()
    assert DEFAULT_GAME_PATH.exists()


def test_load_default_catalog():
    catalog = load_plant_catalog(DEFAULT_PLANTS_PATH)
    assert len(catalog) == len(BuildingType)
    nuclear = catalog.get(BuildingType.NUCLEAR)
    assert nuclear.capacity > 0
    assert 0.0 <= nuclear.availability <= 1.0


def test_load_default_game():
    gc = load_game_config(DEFAULT_GAME_PATH)
    assert gc.name == "Swiss Grid (Standard)"
    assert gc.import_cost == 8.0
    assert gc.import_in_summer is False
    assert gc.initial_plants[0].plant_type == BuildingType.NUCLEAR
    assert gc.initial_plants[0].name == "Gösgen"


def test_catalog_clamps_and_ignores_unknown_keys():
    path = _write(
        "powerplants:\n"
        "  solar:\n"
        "    capacity: 50\n"
        "    availability: 1.8\n"
        "    colour: yellow\n"
    )
    try:
        catalog = load_plant_catalog(path)
        solar = catalog.get(BuildingType.SOLAR)
        assert solar.capacity == 50
        assert solar.availability == 1.0
    finally:
        Path(path).unlink(missing_ok=True)


def test_catalog_missing_category():
    path = _write("powerplants:\n  gas:\n    capacity: 10\n")
    try:
        catalog = load_plant_catalog(path)
        assert BuildingType.GAS in catalog
        with pytest.raises(ConfigurationError):
            catalog.get(BuildingType.NUCLEAR)
    finally:
        Path(path).unlink(missing_ok=True)


def test_unknown_category():
    with pytest.raises(ConfigurationError):
        parse_building_type("coal")
    assert parse_building_type(" Nuclear ") == BuildingType.NUCLEAR


def test_save_and_reload_round_trip(small_config):
    with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False, mode="w") as f:
        tmppath = f.name

    try:
        save_game_config(small_config, tmppath)
        loaded = load_game_config(tmppath)
        assert loaded.name == "Test Grid"
        assert loaded.budget_per_turn == 500
        assert loaded.demand_winter == 200.0
        assert [p.plant_type for p in loaded.initial_plants] == \
            [BuildingType.GAS, BuildingType.SOLAR]
        assert loaded.initial_plants[0].name == "Gas A"
        assert loaded.initial_plants[1].name is None
    finally:
        Path(tmppath).unlink(missing_ok=True)


def test_default_life_cycle_kept_as_zero():
    catalog = load_plant_catalog(DEFAULT_PLANTS_PATH)
    from grid_sim.plant import PowerPlant
    pp = PowerPlant.from_config("n", BuildingType.NUCLEAR, catalog.get(BuildingType.NUCLEAR))
    assert pp.life_cycle == NUCLEAR_LIFE_SPAN
