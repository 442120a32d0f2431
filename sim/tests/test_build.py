"""Tests for construction slots."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from grid_sim.build import BuildButton
from grid_sim.models import BuildingType, MoneyData, PowerPlantConfigData

HYDRO = PowerPlantConfigData(build_cost=400, build_time=3, capacity=300, availability=0.8)


def test_start_charges_build_cost():
    money = MoneyData.starting_with(1000)
    slot = BuildButton("slot_0")
    assert slot.start(BuildingType.HYDRO, HYDRO, money)
    assert money.money == 600
    assert money.build == 400
    assert slot.is_building
    assert slot.turns_remaining == 3


def test_start_rejected_without_funds():
    money = MoneyData.starting_with(100)
    slot = BuildButton("slot_0")
    assert not slot.start(BuildingType.HYDRO, HYDRO, money)
    assert money.money == 100
    assert money.build == 0
    assert not slot.is_building


def test_busy_slot_rejects_second_build():
    money = MoneyData.starting_with(5000)
    slot = BuildButton("slot_0")
    assert slot.start(BuildingType.HYDRO, HYDRO, money)
    assert not slot.start(BuildingType.HYDRO, HYDRO, money)
    assert money.build == 400


def test_delivers_plant_after_build_time():
    money = MoneyData.starting_with(1000)
    slot = BuildButton("slot_0")
    slot.start(BuildingType.HYDRO, HYDRO, money)

    assert slot.next_turn() is None
    assert slot.next_turn() is None
    plant = slot.next_turn()
    assert plant is not None
    assert plant.plant_type == BuildingType.HYDRO
    assert plant.plant_id == "slot_0-0"
    assert plant.capacity() == 300
    assert plant.is_alive()
    assert not slot.is_building


def test_zero_build_time_completes_next_turn():
    money = MoneyData.starting_with(1000)
    slot = BuildButton("slot_1")
    instant = PowerPlantConfigData(build_cost=10, build_time=0, capacity=5)
    slot.start(BuildingType.TREE, instant, money)
    assert slot.next_turn() is not None


def test_idle_slot_does_nothing():
    assert BuildButton("slot_0").next_turn() is None


def test_plant_ids_unique_per_slot():
    money = MoneyData.starting_with(10000)
    slot = BuildButton("slot_0")
    quick = PowerPlantConfigData(build_cost=10, build_time=1, capacity=5)
    ids = []
    for _ in range(3):
        slot.start(BuildingType.SOLAR, quick, money)
        ids.append(slot.next_turn().plant_id)
    assert ids == ["slot_0-0", "slot_0-1", "slot_0-2"]
