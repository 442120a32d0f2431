"""
Swiss Grid Simulator - Data Models
===================================
Enums and dataclasses shared by the plant, manager and game modules.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


def clamp01(value: float) -> float:
    """Clamp a ratio into [0, 1]."""
    return max(0.0, min(value, 1.0))


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class BuildingType(Enum):
    GAS = "gas"
    HYDRO = "hydro"
    RIVER = "river"
    NUCLEAR = "nuclear"
    SOLAR = "solar"
    WIND = "wind"
    TREE = "tree"


class Season(Enum):
    SUMMER = "summer"
    WINTER = "winter"


# Life cycle of a nuclear plant vs everything else (in turns)
NUCLEAR_LIFE_SPAN = 5
DEFAULT_LIFE_SPAN = 10


def default_life_span(plant_type: BuildingType) -> int:
    return NUCLEAR_LIFE_SPAN if plant_type == BuildingType.NUCLEAR else DEFAULT_LIFE_SPAN


# ---------------------------------------------------------------------------
# Plant configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PowerPlantConfigData:
    """Validated parameter bundle for one plant category."""
    build_cost: int = 0
    build_time: int = 0
    life_cycle: int = 0            # 0 = use the category default

    production_cost: int = 0
    capacity: int = 0
    availability: float = 0.0      # clamped to [0, 1]

    pollution: int = 0             # can be negative (trees)
    land_use: float = 0.0
    biodiversity: float = 0.0      # negative = improves biodiversity

    # Seasonal multipliers on availability
    summer_factor: float = 1.0
    winter_factor: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "availability", clamp01(self.availability))

    def season_factor(self, season: Season) -> float:
        return self.summer_factor if season == Season.SUMMER else self.winter_factor


# ---------------------------------------------------------------------------
# Per-turn resource snapshots
# ---------------------------------------------------------------------------

@dataclass
class Energy:
    supply_summer: float = 0.0
    supply_winter: float = 0.0
    demand_summer: float = 0.0
    demand_winter: float = 0.0
    surplus_summer: float = 0.0    # negative = shortage
    surplus_winter: float = 0.0
    import_summer: float = 0.0     # already included in supply_summer
    import_winter: float = 0.0     # already included in supply_winter


@dataclass
class Environment:
    pollution: int = 0
    land_use: float = 0.0
    biodiversity: float = 0.0
    imported_pollution: int = 0

    def __post_init__(self):
        # Both metrics are percentages of the country
        self.land_use = clamp01(self.land_use)
        self.biodiversity = clamp01(self.biodiversity)

    def env_bar_value(self) -> float:
        """Signed score rewarding biodiversity and penalising land use."""
        return 2.0 * (0.5 * self.biodiversity - 0.5 * self.land_use)


@dataclass
class Support:
    energy_affordability: float = 0.0   # money spent per unit of demand
    env_aesthetic: float = 1.0          # share of untouched land


# ---------------------------------------------------------------------------
# Money ledger
# ---------------------------------------------------------------------------

@dataclass
class MoneyData:
    money: int = 0
    budget: int = 0
    production: int = 0
    build: int = 0
    imports: int = 0

    @classmethod
    def starting_with(cls, start_money: int) -> "MoneyData":
        return cls(money=start_money, budget=start_money)

    def next_turn(self, new_budget: int, production: int, import_cost: int):
        """Close the round: pay production and imports, cash in the budget."""
        self.money += new_budget - production - import_cost
        self.budget = self.money
        self.production = production
        self.build = 0
        self.imports = import_cost

    def spend_money(self, amount_build: int):
        self.build += amount_build
        self.money -= amount_build


# ---------------------------------------------------------------------------
# Display projection
# ---------------------------------------------------------------------------

@dataclass
class InfoData:
    """Integer values shown in the info boxes. Presentational only."""
    N_W_ENERGY_FIELDS = 2
    N_S_ENERGY_FIELDS = 2
    N_ENV_FIELDS = 5
    N_SUPPORT_FIELDS = 2
    N_MONEY_FIELDS = 5

    w_energy_demand: int = 0
    w_energy_supply: int = 0
    s_energy_demand: int = 0
    s_energy_supply: int = 0

    energy_affordability: int = 0       # percent
    env_aesthetic: int = 0

    land_use: int = 0
    pollution: int = 0
    biodiversity: int = 0
    env_bar_value: int = 0
    imported_pollution: int = 0

    budget: int = 0
    production: int = 0
    building: int = 0
    money: int = 0
    imports: int = 0


# ---------------------------------------------------------------------------
# Game configuration
# ---------------------------------------------------------------------------

@dataclass
class InitialPlant:
    plant_type: BuildingType
    name: Optional[str] = None


@dataclass
class GameConfig:
    name: str = "Swiss Grid"
    start_money: int = 1000
    budget_per_turn: int = 1000
    max_turns: int = 10

    import_in_summer: bool = False
    import_cost: float = 8.0        # money per imported unit
    import_pollution: float = 0.2   # pollution per imported unit

    demand_summer: float = 1000.0
    demand_winter: float = 1400.0

    build_slots: int = 6
    initial_plants: List[InitialPlant] = field(default_factory=list)

    def demand(self) -> Dict[Season, float]:
        return {Season.SUMMER: self.demand_summer, Season.WINTER: self.demand_winter}


# ---------------------------------------------------------------------------
# Game history
# ---------------------------------------------------------------------------

@dataclass
class TurnSnapshot:
    turn: int
    money: int = 0
    production: int = 0
    imports: int = 0
    supply_summer: float = 0.0
    supply_winter: float = 0.0
    surplus_summer: float = 0.0
    surplus_winter: float = 0.0
    pollution: int = 0
    land_use: float = 0.0
    biodiversity: float = 0.0
    env_bar_value: float = 0.0
    live_plants: int = 0
