import io
import random

import pytest

from liftsim.simulation import (
    Simulation,
    construct_building,
    main,
    spawn_random_persons,
)
from liftsim.structures import (
    NUM_APARTMENTS,
    NUM_OF_FLOORS,
    ElevatorStatus,
    Floor,
    Request,
)


class FixedRng:
    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


def test_construct_building_shape():
    building = construct_building()
    levels = [floor.building_level for floor in building.floors_top_down()]
    assert levels == list(reversed(range(NUM_OF_FLOORS)))
    assert building.start_floor.current_persons_in_floor == 0
    assert all(
        building.floor(level).current_persons_in_floor == NUM_APARTMENTS
        for level in range(1, NUM_OF_FLOORS)
    )
    assert building.elevator.current_floor is building.start_floor
    assert building.elevator.status is ElevatorStatus.READY


def test_spawn_single_person_floor_is_left_alone():
    floor = Floor(1, current_persons_in_floor=1)
    assert spawn_random_persons(floor, FixedRng()) == 1
    assert floor.current_persons_in_floor == 1
    assert floor.waiting_for_elevator == 0


def test_spawn_empty_floor():
    floor = Floor(1)
    assert spawn_random_persons(floor, FixedRng()) == 0


@pytest.mark.parametrize("seed", range(5))
def test_spawn_keeps_people_count(seed):
    floor = Floor(2, current_persons_in_floor=NUM_APARTMENTS)
    count = spawn_random_persons(floor, random.Random(seed))
    assert 1 <= count <= NUM_APARTMENTS
    assert floor.waiting_for_elevator == count
    assert floor.current_persons_in_floor + floor.waiting_for_elevator == NUM_APARTMENTS


def test_make_request_when_level_drawn():
    sim = Simulation(rng=FixedRng(2, 0, 4), time_scale=0.0)
    floor = sim.random_floor(2)
    request = sim.make_request(floor)
    assert request.from_floor is floor
    assert request.to_floor is sim.random_floor(4)
    assert request.num_of_people == floor.waiting_for_elevator
    assert len(sim.mailbox) == 1


def test_make_request_when_other_level_drawn():
    sim = Simulation(rng=FixedRng(1), time_scale=0.0)
    assert sim.make_request(sim.random_floor(2)) is None
    assert sim.mailbox.is_empty()


def test_collect_request_moves_into_elevator():
    sim = Simulation(rng=FixedRng(3, 0, 1), time_scale=0.0)
    assert sim.collect_request() is None
    posted = sim.make_request(sim.random_floor(3))
    collected = sim.collect_request()
    assert collected is posted
    assert sim.mailbox.is_empty()
    assert list(sim.elevator.requests) == [posted]


def test_delete_request_order_and_empty():
    sim = Simulation(time_scale=0.0)
    first = Request(sim.random_floor(0), sim.random_floor(1))
    second = Request(sim.random_floor(2), sim.random_floor(3))
    sim.add_request(first)
    sim.add_request(second)
    assert sim.delete_request() is first
    assert sim.delete_request() is second
    with pytest.raises(LookupError):
        sim.delete_request()


def test_serve_next_carries_request():
    sim = Simulation(time_scale=0.0)
    request = Request(sim.random_floor(2), sim.random_floor(4))
    sim.add_request(request)
    assert sim.serve_next() is request
    assert sim.elevator.current_floor is sim.random_floor(4)
    assert sim.elevator.status is ElevatorStatus.READY
    assert sim.elevator.num_of_request == 0
    assert sim.served == [request]


def test_serve_next_same_floor_request():
    sim = Simulation(time_scale=0.0)
    request = Request(sim.random_floor(3), sim.random_floor(3))
    sim.add_request(request)
    assert sim.serve_next() is request
    assert sim.elevator.current_floor is sim.random_floor(3)


def test_serve_next_waits_for_ready_elevator():
    sim = Simulation(time_scale=0.0)
    sim.elevator.status = ElevatorStatus.STOPPED
    request = Request(sim.random_floor(1), sim.random_floor(2))
    sim.add_request(request)
    assert sim.serve_next() is None
    assert list(sim.elevator.requests) == [request]


def test_serve_next_without_requests():
    sim = Simulation(time_scale=0.0)
    assert sim.serve_next() is None
    assert sim.served == []


def test_render_ui():
    sim = Simulation(time_scale=0.0)
    text = sim.render_ui()
    assert text.index("FLOOR 4") < text.index("FLOOR 0")
    assert "READY" in text
    sim.add_request(Request(sim.random_floor(2), sim.random_floor(4)))
    assert "( 2 -> 4 )" in sim.render_ui()


def test_run_starts_and_stops_tasks():
    out = io.StringIO()
    sim = Simulation(rng=random.Random(1), time_scale=0.001, output=out)
    served = sim.run(0.2)
    assert served == len(sim.served)
    assert len(sim.tasks) == NUM_OF_FLOORS + 3
    assert not any(task.is_alive() for task in sim.tasks)
    assert "FLOOR 0" in out.getvalue()


def test_negative_time_scale_rejected():
    with pytest.raises(ValueError):
        Simulation(time_scale=-1.0)


def test_main(capsys):
    code = main(["--duration", "0.05", "--time-scale", "0.001", "--seed", "7"])
    captured = capsys.readouterr().out
    assert code == 0
    assert "FLOOR 0" in captured
    assert "Served" in captured