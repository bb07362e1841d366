"""Generators of integer test arrays."""

from __future__ import annotations

import random


def generate_random_array(n: int, range_l: int, range_r: int) -> list[int]:
    """Return ``n`` random integers drawn from ``[range_l, range_r]``."""
    if n <= 0:
        raise ValueError("n must be positive")
    if range_l > range_r:
        raise ValueError("range_l must not exceed range_r")
    return [random.randint(range_l, range_r) for _ in range(n)]


def generate_nearly_ordered_array(n: int, swap_times: int) -> list[int]:
    """Return ``0..n-1`` with ``swap_times`` random pairs swapped."""
    if n <= 0:
        raise ValueError("n must be positive")
    if swap_times <= 0:
        raise ValueError("swap_times must be positive")
    arr = list(range(n))
    for _ in range(swap_times):
        x = random.randrange(n)
        y = random.randrange(n)
        arr[x], arr[y] = arr[y], arr[x]
    return arr


def generate_ordered_array(n: int) -> list[int]:
    """Return the ascending integers ``0..n-1``."""
    if n <= 0:
        raise ValueError("n must be positive")
    return list(range(n))