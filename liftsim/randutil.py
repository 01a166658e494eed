"""Random integers drawn from closed or open intervals."""

from __future__ import annotations

import random
from typing import Optional

__all__ = ["rand_between", "random_number"]


def rand_between(
    min_num: int, max_num: int, rng: Optional[random.Random] = None
) -> int:
    """Return a random integer between the bounds.

    With ``min_num < max_num`` the result lies in ``[min_num, max_num]``.
    Otherwise the bounds are taken the other way round as the half-open range
    ``[max_num + 1, min_num)``; equal bounds yield ``max_num + 1`` and an empty
    range raises ValueError.
    """
    rng = rng or random
    if min_num < max_num:
        low, high = min_num, max_num + 1
    else:
        low, high = max_num + 1, min_num
    span = high - low
    if span == 0:
        raise ValueError(f"no integer lies between {min_num} and {max_num}")
    if span < 0:
        return low
    return low + rng.randrange(span)


def random_number(max_num: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in ``[0, max_num]``."""
    return rand_between(0, max_num, rng)