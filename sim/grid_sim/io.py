"""
Swiss Grid Simulator - I/O
===========================
Load the plant catalog and game config from YAML files.
"""

from pathlib import Path
from typing import Dict, Iterator, Optional

import yaml

from grid_sim.errors import ConfigurationError
from grid_sim.models import (
    BuildingType, GameConfig, InitialPlant, PowerPlantConfigData,
)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_PLANTS_PATH = DATA_DIR / "powerplants.yaml"
DEFAULT_GAME_PATH = DATA_DIR / "game.yaml"


def parse_building_type(key: str) -> BuildingType:
    try:
        return BuildingType(key.strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unknown plant category: {key}") from None


# ---------------------------------------------------------------------------
# Plant catalog
# ---------------------------------------------------------------------------

class PlantCatalog:
    """Read-only mapping of plant category -> parameter bundle."""

    def __init__(self, entries: Optional[Dict[BuildingType, PowerPlantConfigData]] = None):
        self._entries = dict(entries or {})

    def get(self, plant_type: BuildingType) -> PowerPlantConfigData:
        try:
            return self._entries[plant_type]
        except KeyError:
            raise ConfigurationError(
                f"Plant category not in catalog: {plant_type.value}") from None

    def __contains__(self, plant_type: BuildingType) -> bool:
        return plant_type in self._entries

    def __iter__(self) -> Iterator[BuildingType]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self):
        return self._entries.items()


def _config_from_block(block: dict) -> PowerPlantConfigData:
    fields = PowerPlantConfigData.__dataclass_fields__
    return PowerPlantConfigData(**{k: block[k] for k in block if k in fields})


def load_plant_catalog(filepath=DEFAULT_PLANTS_PATH) -> PlantCatalog:
    with open(filepath, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    entries = {}
    for key, block in data.get("powerplants", {}).items():
        entries[parse_building_type(key)] = _config_from_block(block or {})
    return PlantCatalog(entries)


# ---------------------------------------------------------------------------
# Game config
# ---------------------------------------------------------------------------

def load_game_config(filepath=DEFAULT_GAME_PATH) -> GameConfig:
    with open(filepath, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    imports = data.get("imports", {})
    demand = data.get("demand", {})

    gc = GameConfig(
        name=data.get("name", Path(filepath).stem),
        start_money=data.get("start_money", 1000),
        budget_per_turn=data.get("budget_per_turn", 1000),
        max_turns=data.get("max_turns", 10),
        import_in_summer=imports.get("in_summer", False),
        import_cost=imports.get("cost", 8.0),
        import_pollution=imports.get("pollution", 0.2),
        demand_summer=demand.get("summer", 1000.0),
        demand_winter=demand.get("winter", 1400.0),
        build_slots=data.get("build_slots", 6),
    )

    for item in data.get("initial_plants", []):
        # Either a bare category or {type: ..., name: ...}
        if isinstance(item, str):
            gc.initial_plants.append(InitialPlant(parse_building_type(item)))
        else:
            gc.initial_plants.append(
                InitialPlant(parse_building_type(item["type"]), item.get("name"))
            )
    return gc


def save_game_config(gc: GameConfig, filepath):
    data = {
        "name": gc.name,
        "start_money": gc.start_money,
        "budget_per_turn": gc.budget_per_turn,
        "max_turns": gc.max_turns,
        "build_slots": gc.build_slots,
        "imports": {
            "in_summer": gc.import_in_summer,
            "cost": gc.import_cost,
            "pollution": gc.import_pollution,
        },
        "demand": {
            "summer": gc.demand_summer,
            "winter": gc.demand_winter,
        },
    }
    data["initial_plants"] = [
        {"type": p.plant_type.value, "name": p.name} if p.name else p.plant_type.value
        for p in gc.initial_plants
    ]

    with open(filepath, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
