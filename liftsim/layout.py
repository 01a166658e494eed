"""Static description of a building, its floors and elevator cars."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

__all__ = ["ElevatorCar", "FloorPlan", "BuildingPlan", "create_building"]

DISTANCE_BETWEEN_FLOORS = 4.5


@dataclass
class ElevatorCar:
    """One elevator car and its current state."""

    id: int = 0
    status: int = 0
    current_floor: int = 0
    position_on_floor: int = 0
    speed: float = 0.0
    acceleration: float = 0.0
    max_capacity: int = 0
    current_capacity: int = 0


@dataclass
class FloorPlan:
    """One floor of the building with the elevators serving it."""

    building_level: int
    elevators: List[ElevatorCar] = field(default_factory=list)
    appartments: int = 0
    current_persons_in_floor: int = 0

    @property
    def count_elevators(self) -> int:
        return len(self.elevators)


@dataclass
class BuildingPlan:
    """A building: number of floors, elevators and spacing between floors."""

    floors: int
    elevator_count: int
    distance_between_floors: float = DISTANCE_BETWEEN_FLOORS


def create_building(floors: int, elevator_count: int) -> BuildingPlan:
    """Return a building with the standard distance between floors."""
    return BuildingPlan(
        floors=floors,
        elevator_count=elevator_count,
        distance_between_floors=DISTANCE_BETWEEN_FLOORS,
    )