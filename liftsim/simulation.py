"""Elevator simulation: people appear on floors, ask for rides and are carried."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import Any, List, Optional, Sequence, TextIO

from liftsim.controls import ElevatorController
from liftsim.ntk import Mailbox, Semaphore, Task
from liftsim.structures import (
    APP_RUNTIME,
    DISTANCE_BETWEEN_FLOORS,
    MAX_NUM_OF_REQUESTS,
    NUM_APARTMENTS,
    NUM_OF_FLOORS,
    Building,
    Elevator,
    ElevatorStatus,
    Floor,
    Request,
    status_label,
)

__all__ = ["Simulation", "construct_building", "spawn_random_persons", "main"]

FLOOR_CHECK_INTERVAL = 10.0
REQUEST_POLL_INTERVAL = 1.0
ELEVATOR_POLL_INTERVAL = 1.0
UI_REFRESH_INTERVAL = 1.0
STOP_TIMEOUT = 2.0
CLEAR_SCREEN = "\033[2J\033[H"
RULE = "--------------------------------------------------------------------------"


def construct_building() -> Building:
    """Build the floors bottom-up with the elevator waiting on the ground floor."""
    ground = Floor(0)
    elevator = Elevator(current_floor=ground)
    current = ground
    for level in range(1, NUM_OF_FLOORS):
        floor = Floor(
            level,
            appartments=NUM_APARTMENTS,
            current_persons_in_floor=NUM_APARTMENTS,
            prev_floor=current,
        )
        current.next_floor = floor
        current = floor
    return Building(
        start_floor=ground,
        end_floor=current,
        elevator=elevator,
        num_floors=NUM_OF_FLOORS,
        distance_between_floors=DISTANCE_BETWEEN_FLOORS,
    )


def spawn_random_persons(floor: Floor, rng: Any = None) -> int:
    """Send some of the floor's residents to wait for the elevator; return how many."""
    rng = rng or random
    persons = floor.current_persons_in_floor
    if persons == 1:
        return 1
    if persons == 0:
        return 0
    count = rng.randrange(persons) + 1
    floor.waiting_for_elevator += count
    floor.current_persons_in_floor -= count
    return count


class Simulation:
    """One building and elevator, driven by tasks for floors, requests, car and display."""

    def __init__(
        self,
        rng: Any = None,
        time_scale: float = 1.0,
        output: Optional[TextIO] = None,
    ) -> None:
        if time_scale < 0:
            raise ValueError("time_scale must not be negative")
        self.rng = rng or random.Random()
        self.time_scale = time_scale
        self.output = output
        self.building = construct_building()
        self.elevator = self.building.elevator
        self.mailbox = Mailbox(MAX_NUM_OF_REQUESTS)
        self.request_guard = Semaphore(1, 1)
        self.served: List[Request] = []
        self.tasks: List[Task] = []
        self._stop = threading.Event()
        self._requests_lock = threading.Lock()
        self.controller = ElevatorController(
            self.elevator, self.building, time_scale, self._stop.wait
        )

    def random_floor(self, level: int) -> Floor:
        return self.building.floor(level)

    def make_request(self, floor: Floor) -> Optional[Request]:
        """Maybe spawn people on ``floor`` and post their ride to the mailbox."""
        if floor.building_level != self.rng.randrange(4):
            return None
        spawned = spawn_random_persons(floor, self.rng)
        destination = self.random_floor(self.rng.randrange(NUM_OF_FLOORS))
        request = Request(floor, destination, spawned)
        self.mailbox.put(request)
        return request

    def collect_request(self) -> Optional[Request]:
        """Move one request from the mailbox to the elevator, if there is one."""
        if self.mailbox.is_empty():
            return None
        with self.request_guard:
            request = self.mailbox.get()
            self.add_request(request)
        return request

    def add_request(self, request: Request) -> None:
        with self._requests_lock:
            self.elevator.requests.append(request)

    def delete_request(self) -> Request:
        """Remove and return the oldest pending request; raises LookupError if none."""
        with self._requests_lock:
            if not self.elevator.requests:
                raise LookupError("no pending requests")
            return self.elevator.requests.popleft()

    def serve_next(self) -> Optional[Request]:
        """Carry out the oldest request if the elevator can; return it when done."""
        with self._requests_lock:
            if not self.elevator.requests:
                return None
            request = self.elevator.requests[0]
        if request.from_floor.building_level != request.to_floor.building_level:
            if self.elevator.status is not ElevatorStatus.READY:
                return None
            current = self.elevator.current_floor
            if current is None or current.building_level != request.from_floor.building_level:
                self.controller.move_to(request.from_floor)
            self.controller.move_to(request.to_floor)
        else:
            self.controller.move_to(request.to_floor)
        self.delete_request()
        self.served.append(request)
        return request

    def render_ui(self) -> str:
        """Return the building drawn floor by floor from the top."""
        lines: List[str] = []
        elevator = self.elevator
        for floor in self.building.floors_top_down():
            lines.append(
                f"------- FLOOR {floor.building_level} "
                "---------------------------------------------------------\n"
            )
            here = (
                elevator.current_floor is not None
                and elevator.current_floor.building_level == floor.building_level
            )
            if not here:
                lines.append(f"Num of ppl:  {floor.current_persons_in_floor}    | \n")
                lines.append(f"ppl waiting: {floor.waiting_for_elevator}    |\n")
                lines.append(f"visitors: {floor.visitors}       |\n ")
            else:
                lines.append(
                    f"Num of ppl:  {floor.current_persons_in_floor}    | \t\t __________   "
                    f"{status_label(elevator.status)}\n"
                )
                with self._requests_lock:
                    current = elevator.requests[0] if elevator.requests else None
                if current is not None:
                    lines.append(
                        f"ppl waiting: {floor.waiting_for_elevator}    | \t\t |        |  "
                        f"( {current.from_floor.building_level} -> "
                        f"{current.to_floor.building_level} )\n"
                    )
                else:
                    lines.append(
                        f"ppl waiting: {floor.waiting_for_elevator}    | \t\t |        | \n"
                    )
                lines.append(f"visitors: {floor.visitors}       | \t\t |________|\n ")
            lines.append(RULE + "\n")
            lines.append("\n\n")
        lines.append("\n")
        return "".join(lines)

    def _wait(self, seconds: float) -> None:
        self._stop.wait(seconds * self.time_scale)

    def _running(self, task: Task) -> bool:
        return task.checkpoint() and not self._stop.is_set()

    def _floor_loop(self, task: Task) -> None:
        floor = task.argument
        while self._running(task):
            self.make_request(floor)
            self._wait(FLOOR_CHECK_INTERVAL)

    def _request_loop(self, task: Task) -> None:
        while self._running(task):
            self._wait(REQUEST_POLL_INTERVAL)
            if not self._stop.is_set():
                self.collect_request()

    def _elevator_loop(self, task: Task) -> None:
        while self._running(task):
            self.serve_next()
            self._wait(ELEVATOR_POLL_INTERVAL)

    def _ui_loop(self, task: Task) -> None:
        out = self.output or sys.stdout
        while self._running(task):
            print(CLEAR_SCREEN + self.render_ui(), file=out, end="", flush=True)
            self._wait(UI_REFRESH_INTERVAL)

    def start(self) -> None:
        """Start one task per floor plus the request, elevator and display tasks."""
        if any(task.is_alive() for task in self.tasks):
            raise RuntimeError("simulation is already running")
        self._stop.clear()
        self.tasks = [
            Task(self._floor_loop, floor)
            for floor in reversed(self.building.floors_top_down())
        ]
        self.tasks.append(Task(self._request_loop))
        self.tasks.append(Task(self._elevator_loop))
        self.tasks.append(Task(self._ui_loop))

    def stop(self) -> None:
        """Ask every task to finish and wait a little for each."""
        self._stop.set()
        for task in self.tasks:
            task.terminate()
        for task in self.tasks:
            try:
                task.delete(STOP_TIMEOUT)
            except TimeoutError:
                pass

    def run(self, duration: Optional[float] = None) -> int:
        """Run for ``duration`` seconds and return how many requests were served."""
        if duration is None:
            duration = APP_RUNTIME * self.time_scale
        self.start()
        try:
            time.sleep(duration)
        finally:
            self.stop()
        return len(self.served)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="liftsim", description="Simulate an elevator in a small building."
    )
    parser.add_argument("--duration", type=float, default=None, help="seconds to run")
    parser.add_argument(
        "--time-scale", type=float, default=1.0, help="factor applied to every delay"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        simulation = Simulation(
            rng=random.Random(args.seed), time_scale=args.time_scale
        )
    except ValueError as exc:
        parser.error(str(exc))
    served = simulation.run(args.duration)
    print(f"Served {served} requests.")
    return 0


if __name__ == "__main__":
    sys.exit(main())