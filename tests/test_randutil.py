import random

import pytest

from liftsim.randutil import rand_between, random_number


def test_closed_interval_bounds_and_coverage():
    rng = random.Random(1)
    draws = {rand_between(3, 7, rng) for _ in range(500)}
    assert draws == {3, 4, 5, 6, 7}


def test_reversed_bounds_give_open_interval():
    rng = random.Random(2)
    draws = {rand_between(7, 3, rng) for _ in range(500)}
    assert draws == {4, 5, 6}


def test_equal_bounds_yield_one_above():
    assert rand_between(4, 4, random.Random(0)) == 5


def test_adjacent_reversed_bounds_raise():
    with pytest.raises(ValueError):
        rand_between(5, 4, random.Random(0))


def test_random_number_covers_zero_to_max():
    rng = random.Random(3)
    draws = {random_number(4, rng) for _ in range(500)}
    assert draws == {0, 1, 2, 3, 4}


def test_same_seed_same_sequence():
    first = [rand_between(0, 100, random.Random(42)) for _ in range(5)]
    second = [rand_between(0, 100, random.Random(42)) for _ in range(5)]
    assert first == second


def test_default_rng_stays_in_range():
    for _ in range(100):
        assert -3 <= rand_between(-3, 3) <= 3