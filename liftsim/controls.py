"""Movement and door handling of the elevator."""

from __future__ import annotations

import time
from typing import Callable, Optional, Union

from liftsim.structures import (
    DISTANCE_BETWEEN_FLOORS,
    ELEVATOR_DOOR_SPEED,
    ELEVATOR_SPEED,
    SPEEDUP_SLOWDOWN_TIME,
    Building,
    Elevator,
    ElevatorStatus,
    Floor,
)

__all__ = ["ElevatorController", "floors_between", "travel_time_per_floor"]

START_DELAY = 0.1  # seconds between choosing a direction and starting to move


def floors_between(f1: int, f2: int) -> int:
    """Return how many floors lie between two levels."""
    return abs(f1 - f2)


def travel_time_per_floor() -> float:
    """Seconds the elevator needs to travel one floor, speeding up and slowing down."""
    return DISTANCE_BETWEEN_FLOORS / ELEVATOR_SPEED + SPEEDUP_SLOWDOWN_TIME


class ElevatorController:
    """Drives one elevator, updating its status and floor while time passes."""

    def __init__(
        self,
        elevator: Elevator,
        building: Optional[Building] = None,
        time_scale: float = 1.0,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        if time_scale < 0:
            raise ValueError("time_scale must not be negative")
        self.elevator = elevator
        self.building = building
        self.time_scale = time_scale
        self._sleep = sleep

    def _pause(self, seconds: float) -> None:
        self._sleep(seconds * self.time_scale)

    def open_close_doors(self) -> None:
        """Open and close the doors, then become ready."""
        self.elevator.status = ElevatorStatus.OPENING
        self._pause(ELEVATOR_DOOR_SPEED)
        self.elevator.status = ElevatorStatus.CLOSING
        self._pause(ELEVATOR_DOOR_SPEED)
        self.elevator.status = ElevatorStatus.READY

    def moving_time(self, num_of_floors: int) -> None:
        """Travel ``num_of_floors`` floors in the current direction."""
        if num_of_floors < 0:
            raise ValueError("number of floors must not be negative")
        step = travel_time_per_floor()
        for _ in range(num_of_floors):
            self._pause(step)
            current = self.elevator.current_floor
            if current is None:
                continue
            if self.elevator.status is ElevatorStatus.MOVING_UP and current.next_floor:
                self.elevator.current_floor = current.next_floor
            elif (
                self.elevator.status is ElevatorStatus.MOVING_DOWN
                and current.prev_floor
            ):
                self.elevator.current_floor = current.prev_floor

    def move_to(self, to_floor: Union[Floor, int]) -> Floor:
        """Move to a floor (or level), stop there and cycle the doors."""
        if isinstance(to_floor, int):
            if self.building is None:
                raise ValueError("a level needs a building to look it up in")
            to_floor = self.building.floor(to_floor)
        origin = self.elevator.current_floor
        if origin is None:
            raise RuntimeError("the elevator is on no floor")
        start, target = origin.building_level, to_floor.building_level
        self.elevator.status = (
            ElevatorStatus.MOVING_UP if start < target else ElevatorStatus.MOVING_DOWN
        )
        self._pause(START_DELAY)
        self.moving_time(floors_between(start, target))
        self.elevator.status = ElevatorStatus.STOPPED
        self.elevator.current_floor = to_floor
        self.open_close_doors()
        return to_floor