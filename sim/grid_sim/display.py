"""
Swiss Grid Simulator - Display Sink
====================================
The presentation side of the simulation. The core only ever calls
``update_data(info_type, *values)`` with integer payloads.
"""

from enum import Enum
from typing import List, Protocol, Tuple

from grid_sim.models import InfoData


class InfoType(Enum):
    W_ENERGY = "w_energy"
    S_ENERGY = "s_energy"
    ENVIRONMENT = "environment"
    SUPPORT = "support"
    MONEY = "money"


FIELD_COUNTS = {
    InfoType.W_ENERGY: InfoData.N_W_ENERGY_FIELDS,
    InfoType.S_ENERGY: InfoData.N_S_ENERGY_FIELDS,
    InfoType.ENVIRONMENT: InfoData.N_ENV_FIELDS,
    InfoType.SUPPORT: InfoData.N_SUPPORT_FIELDS,
    InfoType.MONEY: InfoData.N_MONEY_FIELDS,
}


class DisplaySink(Protocol):
    def update_data(self, info_type: InfoType, *values: int) -> None:
        ...


class InfoBoard:
    """In-process sink: keeps the latest values plus a publish log."""

    def __init__(self):
        self.data = InfoData()
        self.log: List[Tuple[InfoType, Tuple[int, ...]]] = []

    def update_data(self, info_type: InfoType, *values: int) -> None:
        expected = FIELD_COUNTS[info_type]
        if len(values) != expected:
            raise ValueError(
                f"{info_type.value} expects {expected} values, got {len(values)}"
            )
        d = self.data
        if info_type == InfoType.W_ENERGY:
            d.w_energy_demand, d.w_energy_supply = values
        elif info_type == InfoType.S_ENERGY:
            d.s_energy_demand, d.s_energy_supply = values
        elif info_type == InfoType.ENVIRONMENT:
            (d.land_use, d.pollution, d.biodiversity,
             d.env_bar_value, d.imported_pollution) = values
        elif info_type == InfoType.SUPPORT:
            d.energy_affordability, d.env_aesthetic = values
        elif info_type == InfoType.MONEY:
            d.budget, d.production, d.building, d.money, d.imports = values
        self.log.append((info_type, tuple(values)))

    def last(self, info_type: InfoType):
        """Most recent payload published for a given info type, or None."""
        for kind, values in reversed(self.log):
            if kind == info_type:
                return values
        return None

    def clear_log(self):
        self.log.clear()
