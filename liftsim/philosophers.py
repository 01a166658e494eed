"""Dining philosophers built on the task and semaphore primitives."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import List, Optional, Sequence, TextIO

from liftsim.ntk import Semaphore, Task

__all__ = ["DiningTable", "main"]

NUM_DINERS = 5
EAT_TIMES = 3
SEATS = 2
MAX_PAUSE = 2.0
RUN_TIME = 25.0


class DiningTable:
    """Philosophers sharing forks, with a limited number eating at once."""

    def __init__(
        self,
        diners: int = NUM_DINERS,
        eat_times: int = EAT_TIMES,
        seats: int = SEATS,
        max_pause: float = MAX_PAUSE,
        rng: Optional[random.Random] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        if diners < 2:
            raise ValueError("at least two diners are needed to share forks")
        if max_pause < 0:
            raise ValueError("max_pause must not be negative")
        self.diners = diners
        self.eat_times = eat_times
        self.max_pause = max_pause
        self.output = output
        self.forks = [Semaphore(1, 1) for _ in range(diners)]
        self.seats = Semaphore(seats, seats)
        self.meals: List[int] = [0] * diners
        self._rng = rng or random.Random()
        self._print_lock = threading.Lock()
        self._meal_lock = threading.Lock()

    def _say(self, text: str) -> None:
        with self._print_lock:
            print(text, file=self.output or sys.stdout, flush=True)

    def _pause(self) -> None:
        time.sleep(self._rng.uniform(0, self.max_pause))

    def _thinking(self, person_id: int) -> None:
        self._say(f"Person {person_id} is thinking")
        self._pause()

    def _eating(self, person_id: int) -> None:
        self._say(f"Person {person_id} is Eating")
        with self._meal_lock:
            self.meals[person_id] += 1
        self._pause()

    def philosopher(self, person_id: int) -> None:
        """Think and eat ``eat_times`` times, taking both neighbouring forks."""
        if not 0 <= person_id < self.diners:
            raise ValueError(f"no diner with id {person_id}")
        left = self.forks[person_id]
        right = self.forks[(person_id + 1) % self.diners]
        for _ in range(self.eat_times):
            self._thinking(person_id)
            with left, right, self.seats:
                self._eating(person_id)
        self._say(f"Person {person_id} is DONE eating")

    def run(self) -> List[int]:
        """Start every philosopher and return the ids of those that finished in time."""
        tasks = [
            Task(lambda task: self.philosopher(task.argument), person_id)
            for person_id in range(self.diners)
        ]
        deadline = time.monotonic() + RUN_TIME
        finished = []
        for task in tasks:
            try:
                task.delete(max(0.0, deadline - time.monotonic()))
            except TimeoutError:
                continue
            if task.exception is None:
                finished.append(task.argument)
        self._say("All done!")
        return finished


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="liftsim-philosophers", description="Run the dining philosophers."
    )
    parser.add_argument("--diners", type=int, default=NUM_DINERS)
    parser.add_argument("--eat-times", type=int, default=EAT_TIMES)
    parser.add_argument("--seats", type=int, default=SEATS)
    parser.add_argument("--max-pause", type=float, default=MAX_PAUSE)
    args = parser.parse_args(argv)
    print(
        f"Main started. {args.diners} philosophers that eat {args.eat_times} times."
    )
    try:
        table = DiningTable(
            diners=args.diners,
            eat_times=args.eat_times,
            seats=args.seats,
            max_pause=args.max_pause,
        )
    except ValueError as exc:
        parser.error(str(exc))
    table.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())