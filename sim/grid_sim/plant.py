"""
Swiss Grid Simulator - Power Plants
====================================
One generation unit: configured values, per-turn state and its life cycle.

Life cycle (remaining = turns left after the decrement):
    remaining > 0   active
    remaining == 0  killed this turn, still reported alive for one refresh
    remaining < 0   dead for good
"""

from typing import Optional

from grid_sim.errors import ConfigurationError
from grid_sim.models import (
    BuildingType, PowerPlantConfigData, Season,
    clamp01, default_life_span,
)


class PowerPlant:
    def __init__(
        self,
        plant_id: str,
        plant_type: BuildingType = BuildingType.GAS,
        name: Optional[str] = None,
        *,
        build_cost: int = 0,
        build_time: int = 0,
        life_cycle: Optional[int] = None,
        production_cost: int = 0,
        capacity: int = 100,
        availability: float = 1.0,
        pollution: int = 10,
        land_use: float = 0.1,
        biodiversity: float = 0.1,
        summer_factor: float = 1.0,
        winter_factor: float = 1.0,
    ):
        self.plant_id = plant_id
        self.plant_type = plant_type
        self.name = name or f"{plant_type.value.title()} Plant"

        self.build_cost = build_cost
        self.build_time = build_time
        self.life_cycle = default_life_span(plant_type) if life_cycle is None else life_cycle

        # Values restored on (re)activation
        self.initial_production_cost = production_cost
        self.initial_capacity = capacity
        self.initial_availability = availability
        self.initial_pollution = pollution

        # Static environment impact
        self.land_use = land_use
        self.biodiversity_impact = biodiversity
        self.summer_factor = summer_factor
        self.winter_factor = winter_factor

        self._production_cost = 0
        self._capacity = 0
        self._availability = 0.0
        self._pollution = 0
        self._alive = False

        # Cleared once the plant expires; a disabled switch can't revive it
        self.switch_enabled = True

        self._activate()

    @classmethod
    def from_config(
        cls,
        plant_id: str,
        plant_type: BuildingType,
        config: Optional[PowerPlantConfigData],
        name: Optional[str] = None,
    ) -> "PowerPlant":
        if config is None:
            raise ConfigurationError(f"No configuration for plant type {plant_type.value}")
        return cls(
            plant_id,
            plant_type,
            name,
            build_cost=config.build_cost,
            build_time=config.build_time,
            life_cycle=config.life_cycle or None,
            production_cost=config.production_cost,
            capacity=config.capacity,
            availability=config.availability,
            pollution=config.pollution,
            land_use=config.land_use,
            biodiversity=config.biodiversity,
            summer_factor=config.summer_factor,
            winter_factor=config.winter_factor,
        )

    def __repr__(self):
        state = "on" if self._alive else "off"
        return f"PowerPlant({self.plant_id!r}, {self.plant_type.value}, {state}, life={self.life_cycle})"

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    def capacity(self) -> int:
        return self._capacity

    def pollution(self) -> int:
        return self._pollution

    def production_cost(self) -> int:
        return self._production_cost

    def availability(self, season: Optional[Season] = None) -> float:
        """Current availability in [0, 1], optionally scaled for a season."""
        value = clamp01(self._availability)
        if season is None:
            return value
        factor = self.summer_factor if season == Season.SUMMER else self.winter_factor
        return clamp01(value * factor)

    def is_alive(self) -> bool:
        return self._alive

    @property
    def expired(self) -> bool:
        return self.life_cycle < 0

    # ------------------------------------------------------------------
    # Turn update
    # ------------------------------------------------------------------

    def next_turn(self):
        self.life_cycle -= 1
        if self.life_cycle <= 0 and self.switch_enabled:
            self._kill()
            self.switch_enabled = False
            # Keep reporting alive once so the off state gets displayed
            self._alive = True
        if self.life_cycle < 0:
            self._alive = False

    def set_fields(
        self,
        production_cost: Optional[int] = None,
        capacity: Optional[int] = None,
        availability: Optional[float] = None,
    ):
        """Partial update; None leaves a field unchanged."""
        if production_cost is not None:
            self._production_cost = production_cost
        if capacity is not None:
            self._capacity = capacity
        if availability is not None:
            self._availability = clamp01(availability)

    def toggle(self) -> bool:
        """Flip the power switch. Returns False if the switch is disabled."""
        if not self.switch_enabled:
            return False
        if self._alive:
            self._kill()
        else:
            self._activate()
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _kill(self):
        self._alive = False
        self._capacity = 0
        self._availability = 0.0
        self._production_cost = 0
        # No pollution while powered off
        self._pollution = 0

    def _activate(self):
        self._alive = True
        self._capacity = self.initial_capacity
        self._availability = clamp01(self.initial_availability)
        self._production_cost = self.initial_production_cost
        self._pollution = self.initial_pollution
