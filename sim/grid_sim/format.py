"""
Swiss Grid Simulator - Output Formatting
=========================================
Pretty-printing for game state and history.
"""

from typing import Iterable, List

from grid_sim.io import PlantCatalog
from grid_sim.models import InfoData, TurnSnapshot
from grid_sim.plant import PowerPlant


def fmt_energy(val: float) -> str:
    if abs(val) >= 1000:
        return f"{val:.0f}"
    return f"{val:.1f}"


def fmt_pct(val: float) -> str:
    return f"{val:.0%}"


def print_full_report(name: str, history: List[TurnSnapshot], plants: Iterable[PowerPlant]):
    print()
    print("=" * 70)
    print(f"  SWISS GRID SIMULATOR")
    print(f"  Scenario: {name}")
    print(f"  Turns played: {len(history)}")
    print("=" * 70)

    print_turns(history)
    print_plants(plants)
    print_summary(history)


def print_turns(history: List[TurnSnapshot]):
    print()
    print("--- TURNS ---")
    print(f" {'Turn':>4} {'Money':>7} {'Prod':>6} {'Import':>6} "
          f"{'S surp':>8} {'W surp':>8} {'Poll':>5} {'Land':>5} {'Bio':>5} {'Plants':>6}")
    print(f" {'----':>4} {'-----':>7} {'----':>6} {'------':>6} "
          f"{'------':>8} {'------':>8} {'----':>5} {'----':>5} {'---':>5} {'------':>6}")
    for s in history:
        print(f" {s.turn:>4} {s.money:>7} {s.production:>6} {s.imports:>6} "
              f"{fmt_energy(s.surplus_summer):>8} {fmt_energy(s.surplus_winter):>8} "
              f"{s.pollution:>5} {fmt_pct(s.land_use):>5} {fmt_pct(s.biodiversity):>5} "
              f"{s.live_plants:>6}")


def print_plants(plants: Iterable[PowerPlant]):
    print()
    print("--- PLANTS ---")
    print(f" {'Id':<12} {'Name':<20} {'Type':<8} {'State':<8} {'Life':>4} {'Cap':>5} {'Avail':>6}")
    for pp in plants:
        if not pp.switch_enabled:
            state = "retired"
        elif pp.is_alive():
            state = "on"
        else:
            state = "off"
        print(f" {pp.plant_id:<12} {pp.name[:20]:<20} {pp.plant_type.value:<8} {state:<8} "
              f"{max(pp.life_cycle, 0):>4} {pp.capacity():>5} {fmt_pct(pp.availability()):>6}")


def print_summary(history: List[TurnSnapshot]):
    print()
    print("--- SUMMARY ---")
    if not history:
        print(" No turns played")
        return
    last = history[-1]
    shortage_turns = sum(1 for s in history if s.surplus_winter < 0 or s.surplus_summer < 0)
    print(f" Final money:          {last.money}")
    print(f" Total imports spent:  {sum(s.imports for s in history)}")
    print(f" Total production:     {sum(s.production for s in history)}")
    print(f" Peak pollution:       {max(s.pollution for s in history)}")
    print(f" Turns with shortage:  {shortage_turns}")
    print(f" Final env bar:        {last.env_bar_value:+.2f}")


def print_info(info: InfoData):
    """Dump the info boxes as the player would see them."""
    print()
    print("--- INFO ---")
    print(f" Winter energy:  {info.w_energy_supply} / {info.w_energy_demand}")
    print(f" Summer energy:  {info.s_energy_supply} / {info.s_energy_demand}")
    print(f" Environment:    land {info.land_use}%  pollution {info.pollution}  "
          f"biodiversity {info.biodiversity}%  bar {info.env_bar_value}%  "
          f"(imported {info.imported_pollution})")
    print(f" Support:        affordability {info.energy_affordability}%  "
          f"aesthetic {info.env_aesthetic}%")
    print(f" Money:          {info.money} (budget {info.budget}, production {info.production}, "
          f"build {info.building}, imports {info.imports})")


def print_catalog(catalog: PlantCatalog):
    print(f"{'Type':<9} {'Cost':>6} {'Time':>4} {'Life':>4} {'Prod':>5} "
          f"{'Cap':>5} {'Avail':>6} {'Poll':>5} {'Land':>5} {'Bio':>5}")
    print("-" * 64)
    for plant_type, c in catalog.items():
        print(f"{plant_type.value:<9} {c.build_cost:>6} {c.build_time:>4} "
              f"{c.life_cycle or '-':>4} {c.production_cost:>5} {c.capacity:>5} "
              f"{fmt_pct(c.availability):>6} {c.pollution:>5} "
              f"{fmt_pct(c.land_use):>5} {fmt_pct(c.biodiversity):>5}")
