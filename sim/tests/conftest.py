"""Shared test fixtures for the Swiss Grid simulator test suite."""

import sys
from pathlib import Path

import pytest

# Ensure sim/ is on the path so `grid_sim` imports work
SIM_ROOT = Path(__file__).parent.parent
if str(SIM_ROOT) not in sys.path:
    sys.path.insert(0, str(SIM_ROOT))

from grid_sim.display import InfoBoard
from grid_sim.io import PlantCatalog
from grid_sim.models import (
    BuildingType, GameConfig, InitialPlant, PowerPlantConfigData, Season,
)
from grid_sim.plant import PowerPlant
from grid_sim.resources import ResourceManager


@pytest.fixture
def board():
    return InfoBoard()


@pytest.fixture
def gas_plant():
    """Plain gas plant: 100 capacity, full availability, 10 turns of life."""
    return PowerPlant(
        "gas_0", BuildingType.GAS,
        production_cost=50, capacity=100, availability=1.0, pollution=20,
        land_use=0.1, biodiversity=0.1, life_cycle=10,
    )


@pytest.fixture
def small_catalog():
    return PlantCatalog({
        BuildingType.GAS: PowerPlantConfigData(
            build_cost=200, build_time=1, production_cost=40, capacity=60,
            availability=1.0, pollution=30, land_use=0.05, biodiversity=0.02,
        ),
        BuildingType.SOLAR: PowerPlantConfigData(
            build_cost=100, build_time=2, production_cost=5, capacity=50,
            availability=0.5, pollution=0, land_use=0.1, biodiversity=0.05,
            summer_factor=1.5, winter_factor=0.5,
        ),
        BuildingType.NUCLEAR: PowerPlantConfigData(
            build_cost=1000, build_time=3, production_cost=60, capacity=500,
            availability=1.0, pollution=10, land_use=0.01, biodiversity=0.01,
        ),
    })


@pytest.fixture
def winter_shortage_rm(board):
    """Winter demand 100 against 60 of plant supply; import at 8/unit."""
    rm = ResourceManager(
        board,
        import_in_summer=False,
        import_cost=8.0,
        import_pollution=0.2,
        demand={Season.SUMMER: 50.0, Season.WINTER: 100.0},
    )
    rm.update_power_plants([
        PowerPlant("gas_0", BuildingType.GAS, production_cost=30, capacity=60,
                   availability=1.0, pollution=20, land_use=0.1, biodiversity=0.2,
                   life_cycle=10),
    ])
    rm.import_fraction = 1.0
    return rm


@pytest.fixture
def small_config():
    return GameConfig(
        name="Test Grid",
        start_money=1000,
        budget_per_turn=500,
        max_turns=8,
        demand_summer=100.0,
        demand_winter=200.0,
        build_slots=2,
        initial_plants=[
            InitialPlant(BuildingType.GAS, "Gas A"),
            InitialPlant(BuildingType.SOLAR),
        ],
    )
