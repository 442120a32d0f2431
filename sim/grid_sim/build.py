"""
Swiss Grid Simulator - Build Slots
===================================
Construction slots the player uses to commission new plants.
"""

from dataclasses import dataclass
from typing import Optional

from grid_sim.models import BuildingType, MoneyData, PowerPlantConfigData
from grid_sim.plant import PowerPlant


@dataclass
class BuildButton:
    slot_id: str
    plant_type: Optional[BuildingType] = None
    config: Optional[PowerPlantConfigData] = None
    turns_remaining: int = 0
    completed: int = 0              # plants delivered by this slot so far

    @property
    def is_building(self) -> bool:
        return self.plant_type is not None

    def start(self, plant_type: BuildingType, config: PowerPlantConfigData,
              money: MoneyData) -> bool:
        """Charge the build cost and start construction.

        Returns False (nothing charged) if the slot is busy or the money
        doesn't cover the build cost.
        """
        if self.is_building or money.money < config.build_cost:
            return False
        money.spend_money(config.build_cost)
        self.plant_type = plant_type
        self.config = config
        self.turns_remaining = config.build_time
        return True

    def next_turn(self) -> Optional[PowerPlant]:
        """Advance construction; returns the finished plant on completion."""
        if not self.is_building:
            return None
        self.turns_remaining -= 1
        if self.turns_remaining > 0:
            return None

        plant = PowerPlant.from_config(
            f"{self.slot_id}-{self.completed}", self.plant_type, self.config,
        )
        self.completed += 1
        self.plant_type = None
        self.config = None
        self.turns_remaining = 0
        return plant
