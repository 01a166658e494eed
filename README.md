# liftsim

A small simulation toolkit built on threaded tasks, counting semaphores,
events, bounded mailboxes and rendezvous channels. It comes with two
simulations:

- an elevator that serves a five-storey building. People turn up on floors
  and post ride requests to a mailbox. The elevator carries out the requests
  one at a time, in the order they arrived.
- the dining philosophers. Five diners share forks, and only a limited
  number of them may eat at the same time.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Start the elevator simulation:

```
liftsim
liftsim --duration 60 --time-scale 0.1 --seed 7
```

The simulation redraws the building on the terminal using ANSI clear-screen
codes. When it finishes, it prints how many requests were served.

Options:

- `--duration`: the number of seconds to run. The default is one simulated
  hour, multiplied by the time scale.
- `--time-scale`: a factor applied to every delay.
- `--seed`: the random seed.

Run the dining philosophers:

```
liftsim-philosophers
liftsim-philosophers --diners 5 --eat-times 3 --seats 2 --max-pause 2.0
```

Each philosopher thinks, then takes both neighbouring forks and a seat and
eats. This repeats `--eat-times` times. The run waits at most 25 seconds for
the diners to finish.

## Library use

The concurrency primitives live in `liftsim.ntk`:

```python
from liftsim.ntk import Mailbox, Task

box = Mailbox(capacity=10)

def producer(task):
    for n in range(3):
        box.put(n)

worker = Task(producer, None, suspended=False)
print([box.get() for _ in range(3)])   # [0, 1, 2]
worker.delete()
```

- `Semaphore(initial, maximum)` works as a context manager. If a signal would
  go past the maximum, it raises `ValueError`.
- `Event(auto_reset=True)` wakes one waiter and then clears itself.
- `Mailbox.put` and `Mailbox.get` raise `TimeoutError` when their timeout
  runs out.
- `RendezVous.send` blocks until a receiver has taken the message.
- `Task` passes itself to its code, and the code reads its input from
  `task.argument`.

Suspending a `Task` is cooperative. A suspended task does not start until it
is resumed. A task that is already running pauses only when it next calls
`checkpoint()`.

The elevator model is split across `liftsim.structures`, `liftsim.controls`
and `liftsim.simulation`:

```python
from liftsim.simulation import Simulation
from liftsim.structures import Request

sim = Simulation(time_scale=0.0)
building = sim.building
sim.add_request(Request(building.floor(2), building.floor(4)))
sim.serve_next()
print(sim.render_ui())
```

With `time_scale=0.0` the elevator moves and the doors open and close without
waiting. This is handy for scripted runs and tests. `Simulation.start()` and
`Simulation.stop()` run the floor, request, elevator and display tasks in the
background.

There are also some smaller helpers:

- `liftsim.linkedlist.LinkedList`: a singly linked list of integers.
- `liftsim.randutil.rand_between` and `liftsim.randutil.random_number`.
- `liftsim.layout.create_building`: a static description of a building.

## Limitations

There is only one elevator. It takes one request at a time and does not pick
up passengers on the way. It does not track its load, and no real-time
scheduling priorities are applied to tasks. `Task.priority` is recorded only.