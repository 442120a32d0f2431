"""
Swiss Grid Simulator - Resource Manager
========================================
Orchestrates one turn across build slots, plants and the seasonal managers,
closes the money ledger and publishes the results.

Turn order (never reordered):
    1. build slots       (finished plants join the fleet)
    2. plant life cycles
    3. energy            (supply/demand/imports)
    4. import pollution
    5. environment
    6. money ledger
    7. publish
"""

import math
from typing import Dict, Iterable, List, Optional, Tuple

from grid_sim.build import BuildButton
from grid_sim.display import DisplaySink, InfoType
from grid_sim.errors import ConfigurationError
from grid_sim.managers import EnergyManager, EnvironmentManager, SupportManager
from grid_sim.models import Energy, Environment, MoneyData, Season, Support, clamp01
from grid_sim.plant import PowerPlant


class ResourceManager:
    def __init__(
        self,
        sink: Optional[DisplaySink],
        import_in_summer: bool = False,
        import_cost: float = 8.0,
        import_pollution: float = 0.2,
        demand: Optional[Dict[Season, float]] = None,
    ):
        if sink is None:
            raise ConfigurationError("ResourceManager needs a display sink")
        self.sink = sink
        self.import_in_summer = import_in_summer
        self.import_cost = import_cost
        self.import_pollution = import_pollution

        self.energy_manager = EnergyManager(demand)
        self.environment_manager = EnvironmentManager()
        self.support_manager = SupportManager()

        self._plants: Dict[str, PowerPlant] = {}
        self._build_buttons: List[BuildButton] = []
        self._import_fraction = 0.0

        self.last_energy: Optional[Energy] = None
        self.last_environment: Optional[Environment] = None
        self.last_support: Optional[Support] = None

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    @property
    def plants(self) -> Tuple[PowerPlant, ...]:
        return tuple(self._plants.values())

    @property
    def build_buttons(self) -> Tuple[BuildButton, ...]:
        return tuple(self._build_buttons)

    def get_plant(self, plant_id: str) -> PowerPlant:
        return self._plants[plant_id]

    def update_power_plants(self, plants: Iterable[PowerPlant]):
        """Replace the whole plant fleet."""
        fleet: Dict[str, PowerPlant] = {}
        for pp in plants:
            if pp.plant_id in fleet:
                raise ConfigurationError(f"Duplicate plant id: {pp.plant_id}")
            fleet[pp.plant_id] = pp
        self._plants = fleet
        self._share_plants()

    def update_build_buttons(self, buttons: Iterable[BuildButton]):
        """Replace the whole set of build slots."""
        self._build_buttons = list(buttons)

    def _share_plants(self):
        snapshot = self.plants
        self.energy_manager.update_power_plants(snapshot)
        self.environment_manager.update_power_plants(snapshot)

    # ------------------------------------------------------------------
    # Player inputs
    # ------------------------------------------------------------------

    @property
    def import_fraction(self) -> float:
        return self._import_fraction

    @import_fraction.setter
    def import_fraction(self, value: float):
        self._import_fraction = clamp01(value)

    def toggle_plant(self, plant_id: str) -> bool:
        """Flip a plant's switch and preview the result."""
        toggled = self._plants[plant_id].toggle()
        if toggled:
            self.update_resources_ui(predictive=True)
        return toggled

    # ------------------------------------------------------------------
    # Turn
    # ------------------------------------------------------------------

    def next_turn(self, money: MoneyData, budget: int) -> Tuple[Energy, Environment]:
        if money is None:
            raise ConfigurationError("next_turn needs the money ledger")

        finished = [pp for pp in (bb.next_turn() for bb in self._build_buttons) if pp]
        if finished:
            self.update_power_plants(list(self._plants.values()) + finished)

        for pp in self._plants.values():
            pp.next_turn()

        energy = self.energy_manager.get_energy_values(
            self._import_fraction, self.import_in_summer)

        imported = self.energy_manager.compute_total_import_amount(
            self._import_fraction, self.import_in_summer)
        self.environment_manager.update_import_pollution(imported, self.import_pollution)

        env = self.environment_manager.next_turn()

        production = self.aggregate_production_cost()
        import_cost = self.get_total_import_cost(self._import_fraction)
        money.next_turn(budget, production, import_cost)

        support = self.support_manager.get_support_values(
            energy, env, production, import_cost)
        self._publish_energy(energy)
        self._publish_environment(env)
        self._publish_support(support)
        self.publish_money(money)
        return energy, env

    def update_resources_ui(self, predictive: bool = False):
        """Recompute and republish the current projections.

        Nothing is advanced. With ``predictive`` the energy payload is left
        alone and only imports and the environment are redone.
        """
        energy = None
        if not predictive:
            energy = self.energy_manager.get_energy_values(
                self._import_fraction, self.import_in_summer)
            self._publish_energy(energy)

        imported = self.energy_manager.compute_total_import_amount(
            self._import_fraction, self.import_in_summer)
        self.environment_manager.update_import_pollution(imported, self.import_pollution)

        env = self.environment_manager.get_env_values()
        self._publish_environment(env)
        return energy, env

    # ------------------------------------------------------------------
    # Money
    # ------------------------------------------------------------------

    def get_total_import_cost(self, import_fraction: float) -> int:
        winter, summer = self.energy_manager.compute_import_amount(
            import_fraction, self.import_in_summer)
        return int((winter + summer) * self.import_cost)

    def aggregate_production_cost(self) -> int:
        return sum(pp.production_cost() for pp in self._plants.values() if pp.is_alive())

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------

    def _publish_energy(self, energy: Energy):
        self.last_energy = energy
        self.sink.update_data(
            InfoType.W_ENERGY,
            int(math.floor(energy.demand_winter)),
            int(math.floor(energy.supply_winter)),
        )
        self.sink.update_data(
            InfoType.S_ENERGY,
            int(math.floor(energy.demand_summer)),
            int(math.floor(energy.supply_summer)),
        )

    def _publish_environment(self, env: Environment):
        self.last_environment = env
        self.sink.update_data(
            InfoType.ENVIRONMENT,
            int(env.land_use * 100),
            env.pollution,
            int(env.biodiversity * 100),
            int(env.env_bar_value() * 100),
            env.imported_pollution,
        )

    def _publish_support(self, support: Support):
        self.last_support = support
        self.sink.update_data(
            InfoType.SUPPORT,
            int(support.energy_affordability * 100),
            int(support.env_aesthetic * 100),
        )

    def publish_money(self, money: MoneyData):
        self.sink.update_data(
            InfoType.MONEY,
            money.budget, money.production, money.build, money.money, money.imports,
        )
