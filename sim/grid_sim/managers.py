"""
Swiss Grid Simulator - Resource Managers
=========================================
Seasonal aggregation of the live plant set into energy, environment and
support figures.

Managers never own plants: they hold the tuple last handed over by the
ResourceManager and recompute from it on every call.
"""

import math
from typing import Dict, Optional, Sequence, Tuple

from grid_sim.models import Energy, Environment, Season, Support, clamp01
from grid_sim.plant import PowerPlant


def _live(plants: Sequence[PowerPlant]):
    return (pp for pp in plants if pp.is_alive())


# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------

class EnergyManager:
    def __init__(self, demand: Optional[Dict[Season, float]] = None):
        self.demand: Dict[Season, float] = {Season.SUMMER: 0.0, Season.WINTER: 0.0}
        if demand:
            self.demand.update(demand)
        self._plants: Tuple[PowerPlant, ...] = ()

    def update_power_plants(self, plants: Sequence[PowerPlant]):
        self._plants = tuple(plants)

    def supply(self, season: Season) -> float:
        """Plant supply for a season, imports excluded."""
        return sum(pp.capacity() * pp.availability(season) for pp in _live(self._plants))

    def compute_import_amount(self, import_fraction: float,
                              import_in_summer: bool) -> Tuple[float, float]:
        """Import volume as (winter, summer).

        The slider asks for a fraction of the season's demand; the import
        only ever covers the season's shortage.
        """
        fraction = clamp01(import_fraction)
        winter = self._season_import(Season.WINTER, fraction)
        summer = self._season_import(Season.SUMMER, fraction) if import_in_summer else 0.0
        return winter, summer

    def compute_total_import_amount(self, import_fraction: float,
                                    import_in_summer: bool) -> int:
        winter, summer = self.compute_import_amount(import_fraction, import_in_summer)
        return int(math.floor(winter + summer))

    def get_energy_values(self, import_fraction: float, import_in_summer: bool) -> Energy:
        import_w, import_s = self.compute_import_amount(import_fraction, import_in_summer)
        supply_s = self.supply(Season.SUMMER) + import_s
        supply_w = self.supply(Season.WINTER) + import_w
        demand_s = self.demand[Season.SUMMER]
        demand_w = self.demand[Season.WINTER]
        return Energy(
            supply_summer=supply_s,
            supply_winter=supply_w,
            demand_summer=demand_s,
            demand_winter=demand_w,
            surplus_summer=supply_s - demand_s,
            surplus_winter=supply_w - demand_w,
            import_summer=import_s,
            import_winter=import_w,
        )

    def _season_import(self, season: Season, fraction: float) -> float:
        demand = self.demand[season]
        shortage = max(0.0, demand - self.supply(season))
        return min(shortage, fraction * demand)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

class EnvironmentManager:
    def __init__(self):
        self._plants: Tuple[PowerPlant, ...] = ()
        self.imported_pollution = 0

    def update_power_plants(self, plants: Sequence[PowerPlant]):
        self._plants = tuple(plants)

    def update_import_pollution(self, imported: float, unit_pollution: float):
        self.imported_pollution = int(imported * unit_pollution)

    def get_env_values(self) -> Environment:
        live = list(_live(self._plants))
        pollution = sum(pp.pollution() for pp in live)
        # Ratios are summed raw; Environment clamps them
        return Environment(
            pollution=pollution + self.imported_pollution,
            land_use=sum(pp.land_use for pp in live),
            biodiversity=sum(pp.biodiversity_impact for pp in live),
            imported_pollution=self.imported_pollution,
        )

    def next_turn(self) -> Environment:
        return self.get_env_values()


# ---------------------------------------------------------------------------
# Support
# ---------------------------------------------------------------------------

class SupportManager:
    def get_support_values(self, energy: Energy, env: Environment,
                           production_cost: int, import_cost: int) -> Support:
        mean_demand = (energy.demand_summer + energy.demand_winter) / 2
        spend = production_cost + import_cost
        affordability = spend / mean_demand if mean_demand > 0 else 0.0
        return Support(
            energy_affordability=affordability,
            env_aesthetic=1.0 - env.land_use,
        )
