"""Data model of the elevator simulation: floors, requests, elevator and building."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Deque, Iterator, List, Optional

__all__ = [
    "ElevatorStatus",
    "Floor",
    "Request",
    "Elevator",
    "Building",
    "status_label",
    "NUM_OF_FLOORS",
    "DISTANCE_BETWEEN_FLOORS",
    "ELEVATOR_COUNT",
    "NUM_APARTMENTS",
    "APP_RUNTIME",
    "MAX_NUM_OF_REQUESTS",
    "MAX_CAPACITY_ELEVATOR",
    "ELEVATOR_SPEED",
    "ELEVATOR_ACCELERATION",
    "SPEEDUP_SLOWDOWN_TIME",
    "ELEVATOR_DOOR_SPEED",
]

NUM_OF_FLOORS = 5
DISTANCE_BETWEEN_FLOORS = 4.5  # metres
ELEVATOR_COUNT = 1
NUM_APARTMENTS = 5
APP_RUNTIME = 3600.0  # seconds
MAX_NUM_OF_REQUESTS = 100
MAX_CAPACITY_ELEVATOR = 5
ELEVATOR_SPEED = 3.0  # m/s
ELEVATOR_ACCELERATION = 2.0
SPEEDUP_SLOWDOWN_TIME = 4.0  # seconds to reach full speed or come to a stop
ELEVATOR_DOOR_SPEED = 3.0  # seconds to open or to close the doors

UNKNOWN_STATUS = "??????"


class ElevatorStatus(IntEnum):
    """What the elevator is doing right now."""

    STOPPED = 1
    MOVING_UP = 2
    MOVING_DOWN = 3
    OPENING = 4
    CLOSING = 5
    READY = 6

    def label(self) -> str:
        """Return the text shown for this status."""
        return self.name.replace("_", " ")


def status_label(status: int) -> str:
    """Return the label of a status value, or ``??????`` for an unknown one."""
    try:
        return ElevatorStatus(status).label()
    except ValueError:
        return UNKNOWN_STATUS


@dataclass(eq=False)
class Floor:
    """One floor, linked to the floors above and below it."""

    building_level: int
    appartments: int = 0
    waiting_for_elevator: int = 0
    current_persons_in_floor: int = 0
    visitors: int = 0
    next_floor: Optional["Floor"] = field(default=None, repr=False)
    prev_floor: Optional["Floor"] = field(default=None, repr=False)


@dataclass(eq=False)
class Request:
    """A ride asked for from one floor to another."""

    from_floor: Floor
    to_floor: Floor
    num_of_people: int = 0


@dataclass(eq=False)
class Elevator:
    """The elevator car with its pending requests in arrival order."""

    id: int = 1
    status: ElevatorStatus = ElevatorStatus.READY
    current_floor: Optional[Floor] = None
    speed: float = ELEVATOR_SPEED
    acceleration: float = ELEVATOR_ACCELERATION
    max_capacity: int = MAX_CAPACITY_ELEVATOR
    current_capacity: int = 0
    current_requests: int = 0
    requests: Deque[Request] = field(default_factory=deque)

    @property
    def num_of_request(self) -> int:
        return len(self.requests)


@dataclass(eq=False)
class Building:
    """A building whose floors form a chain from ``start_floor`` to ``end_floor``."""

    start_floor: Floor
    end_floor: Floor
    elevator: Elevator
    num_floors: int = NUM_OF_FLOORS
    distance_between_floors: float = DISTANCE_BETWEEN_FLOORS

    def _bottom_up(self) -> Iterator[Floor]:
        floor: Optional[Floor] = self.start_floor
        while floor is not None:
            yield floor
            floor = floor.next_floor

    def floor(self, level: int) -> Floor:
        """Return the floor at ``level``; raises KeyError if there is none."""
        for floor in self._bottom_up():
            if floor.building_level == level:
                return floor
        raise KeyError(f"no floor at level {level}")

    def floors_top_down(self) -> List[Floor]:
        """Return the floors from the top one down to the ground floor."""
        floors = []
        floor: Optional[Floor] = self.end_floor
        while floor is not None:
            floors.append(floor)
            floor = floor.prev_floor
        return floors