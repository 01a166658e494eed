"""Small real-time kernel primitives: tasks, semaphores, events, mailboxes, rendezvous."""

from __future__ import annotations

import itertools
import threading
from collections import deque
from enum import IntEnum
from typing import Any, Callable, Optional

__all__ = ["Priority", "Task", "Semaphore", "Event", "Mailbox", "RendezVous"]


class Priority(IntEnum):
    """Scheduling priority of a task."""

    LOW = -2
    BELOW = -1
    NORMAL = 0
    ABOVE = 1
    HIGH = 2


_task_ids = itertools.count(1)


class Task:
    """A thread running ``code(task)``; the code reads its input from ``task.argument``.

    Suspension is cooperative: a suspended task does not start until resumed,
    and a running task pauses at its next call to :meth:`checkpoint`.
    """

    def __init__(
        self,
        code: Callable[["Task"], Any],
        argument: Any = None,
        suspended: bool = False,
    ) -> None:
        self.code = code
        self.argument = argument
        self.task_id = next(_task_ids)
        self.priority = Priority.NORMAL
        self.terminated = False
        self.result: Any = None
        self.exception: Optional[BaseException] = None
        self._lock = threading.Lock()
        self._gate = threading.Event()
        self._suspend_count = 1 if suspended else 0
        if not suspended:
            self._gate.set()
        self._thread = threading.Thread(
            target=self._run, name=f"task-{self.task_id}", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        self._gate.wait()
        if self.terminated:
            return
        try:
            self.result = self.code(self)
        except BaseException as exc:  # kept for the owner to inspect
            self.exception = exc

    @property
    def suspend_count(self) -> int:
        return self._suspend_count

    def resume(self) -> int:
        """Decrease the suspend count and return its previous value."""
        with self._lock:
            previous = self._suspend_count
            if self._suspend_count > 0:
                self._suspend_count -= 1
            if self._suspend_count == 0:
                self._gate.set()
            return previous

    def suspend(self) -> int:
        """Increase the suspend count and return its previous value."""
        with self._lock:
            previous = self._suspend_count
            self._suspend_count += 1
            self._gate.clear()
            return previous

    def checkpoint(self) -> bool:
        """Block while suspended; return True while the task should keep running."""
        self._gate.wait()
        return not self.terminated

    def delete(self, timeout: Optional[float] = None) -> None:
        """Mark the task terminated and wait for its thread to finish."""
        self.terminated = True
        with self._lock:
            self._suspend_count = 0
            self._gate.set()
        if self._thread is threading.current_thread():
            return
        self._thread.join(timeout)
        if self._thread.is_alive():
            raise TimeoutError(f"task {self.task_id} did not finish in time")

    def terminate(self) -> None:
        """Mark the task as terminated without waiting for it."""
        self.terminated = True

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def describe(self) -> str:
        """Return a readable summary of the task's control block."""
        return "\n".join(
            [
                f"taskId:\t\t\t{self.task_id}",
                f"arg:\t\t\t{self.argument!r}",
                f"priority:\t\t{self.priority.name}",
                f"suspended:\t\t{self._suspend_count}",
                f"terminated:\t\t{int(self.terminated)}",
            ]
        )


class Semaphore:
    """Counting semaphore with an upper bound."""

    def __init__(self, initial: int, maximum: int) -> None:
        if maximum <= 0:
            raise ValueError("maximum must be positive")
        if not 0 <= initial <= maximum:
            raise ValueError("initial must lie between 0 and maximum")
        self.maximum = maximum
        self._value = initial
        self._cond = threading.Condition()

    @property
    def value(self) -> int:
        return self._value

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Take one unit; return False if the timeout passed first."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._value > 0, timeout):
                return False
            self._value -= 1
            return True

    def signal(self) -> None:
        """Give one unit back; raises ValueError if that would exceed the maximum."""
        with self._cond:
            if self._value >= self.maximum:
                raise ValueError("semaphore released beyond its maximum")
            self._value += 1
            self._cond.notify()

    def __enter__(self) -> "Semaphore":
        self.wait()
        return self

    def __exit__(self, *args: Any) -> None:
        self.signal()


class Event:
    """Signal between tasks; an auto-reset event wakes one waiter and clears itself."""

    def __init__(self, auto_reset: bool = False) -> None:
        self.auto_reset = auto_reset
        self._flag = False
        self._cond = threading.Condition()

    @property
    def is_set(self) -> bool:
        return self._flag

    def set(self) -> None:
        with self._cond:
            self._flag = True
            if self.auto_reset:
                self._cond.notify()
            else:
                self._cond.notify_all()

    def reset(self) -> None:
        with self._cond:
            self._flag = False

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait until set; return False if the timeout passed first."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._flag, timeout):
                return False
            if self.auto_reset:
                self._flag = False
            return True


class Mailbox:
    """Bounded FIFO buffer for asynchronous messages between tasks."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._filled = Semaphore(0, capacity)
        self._available = Semaphore(capacity, capacity)
        self._lock = threading.Lock()

    def put(self, message: Any, timeout: Optional[float] = None) -> None:
        """Place a message, waiting for room; raises TimeoutError if none came."""
        if not self._available.wait(timeout):
            raise TimeoutError("mailbox stayed full")
        with self._lock:
            self._items.append(message)
        self._filled.signal()

    def get(self, timeout: Optional[float] = None) -> Any:
        """Take the oldest message, waiting for one; raises TimeoutError if none came."""
        if not self._filled.wait(timeout):
            raise TimeoutError("mailbox stayed empty")
        with self._lock:
            message = self._items.popleft()
        self._available.signal()
        return message

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class RendezVous:
    """Synchronous hand-over: the sender waits until a receiver has taken the message."""

    def __init__(self) -> None:
        self._for_sender = Event(auto_reset=True)
        self._for_receiver = Event(auto_reset=True)
        self._send_lock = threading.Lock()
        self._message: Any = None

    def send(self, message: Any) -> None:
        with self._send_lock:
            self._message = message
            self._for_receiver.set()
            self._for_sender.wait()

    def receive(self) -> Any:
        self._for_receiver.wait()
        message = self._message
        self._message = None
        self._for_sender.set()
        return message