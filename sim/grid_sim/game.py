"""
Swiss Grid Simulator - Game Loop
=================================
Headless driver for one game session: owns the money ledger, the plant
fleet (through the ResourceManager) and the turn counter.
"""

from typing import List, Optional

from grid_sim.build import BuildButton
from grid_sim.display import DisplaySink, InfoBoard
from grid_sim.io import PlantCatalog
from grid_sim.models import BuildingType, GameConfig, MoneyData, TurnSnapshot
from grid_sim.plant import PowerPlant
from grid_sim.resources import ResourceManager


class GameLoop:
    def __init__(self, config: GameConfig, catalog: PlantCatalog,
                 sink: Optional[DisplaySink] = None):
        self.config = config
        self.catalog = catalog
        self.sink = sink if sink is not None else InfoBoard()
        self.turn = 0
        self.money = MoneyData.starting_with(config.start_money)
        self.history: List[TurnSnapshot] = []

        self.resources = ResourceManager(
            self.sink,
            import_in_summer=config.import_in_summer,
            import_cost=config.import_cost,
            import_pollution=config.import_pollution,
            demand=config.demand(),
        )

        plants = []
        for i, ip in enumerate(config.initial_plants):
            plants.append(PowerPlant.from_config(
                f"plant_{i}", ip.plant_type, catalog.get(ip.plant_type), ip.name,
            ))
        self.resources.update_power_plants(plants)
        self.resources.update_build_buttons(
            BuildButton(slot_id=f"slot_{i}") for i in range(config.build_slots)
        )

        # Show the opening state before the first turn
        self.resources.update_resources_ui()
        self.resources.publish_money(self.money)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def budget_per_turn(self) -> int:
        return self.config.budget_per_turn

    def is_over(self) -> bool:
        return self.turn >= self.config.max_turns

    def next_turn(self) -> TurnSnapshot:
        if self.is_over():
            raise RuntimeError(f"Game over after {self.config.max_turns} turns")
        self.turn += 1
        energy, env = self.resources.next_turn(self.money, self.budget_per_turn)

        snap = TurnSnapshot(
            turn=self.turn,
            money=self.money.money,
            production=self.money.production,
            imports=self.money.imports,
            supply_summer=energy.supply_summer,
            supply_winter=energy.supply_winter,
            surplus_summer=energy.surplus_summer,
            surplus_winter=energy.surplus_winter,
            pollution=env.pollution,
            land_use=env.land_use,
            biodiversity=env.biodiversity,
            env_bar_value=env.env_bar_value(),
            live_plants=sum(1 for pp in self.resources.plants if pp.is_alive()),
        )
        self.history.append(snap)
        return snap

    def run(self, turns: Optional[int] = None) -> List[TurnSnapshot]:
        """Play ``turns`` turns, or until the game is over."""
        played = []
        while not self.is_over() and (turns is None or len(played) < turns):
            played.append(self.next_turn())
        return played

    def build(self, slot_index: int, plant_type: BuildingType) -> bool:
        if slot_index < 0:
            raise IndexError(f"Build slot out of range: {slot_index}")
        slot = self.resources.build_buttons[slot_index]
        started = slot.start(plant_type, self.catalog.get(plant_type), self.money)
        if started:
            self.resources.publish_money(self.money)
        return started

    def toggle_plant(self, plant_id: str) -> bool:
        return self.resources.toggle_plant(plant_id)

    def set_import_fraction(self, fraction: float):
        self.resources.import_fraction = fraction
        self.resources.update_resources_ui()
