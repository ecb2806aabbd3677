"""Identify a cycle in an infinite sequence."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def floyd(start: T, successor: Callable[[T], T]) -> tuple[int, T, int]:
    """Find a cycle with Floyd's algorithm.

    Return the cycle length, its first element and the index of that element.
    Never returns if the sequence has no cycle.
    """
    tortoise = successor(start)
    hare = successor(successor(start))
    while tortoise != hare:
        tortoise, hare = successor(tortoise), successor(successor(hare))
    mu = 0
    tortoise = start
    while tortoise != hare:
        tortoise, hare, mu = successor(tortoise), successor(hare), mu + 1
    lam = 1
    hare = successor(tortoise)
    while tortoise != hare:
        hare, lam = successor(hare), lam + 1
    return lam, tortoise, mu


def brent(start: T, successor: Callable[[T], T]) -> tuple[int, T, int]:
    """Find a cycle with Brent's algorithm.

    Return the cycle length, its first element and the index of that element.
    Never returns if the sequence has no cycle.
    """
    power = 1
    lam = 1
    tortoise = start
    hare = successor(start)
    while tortoise != hare:
        if power == lam:
            tortoise, power, lam = hare, power * 2, 0
        hare, lam = successor(hare), lam + 1
    mu = 0
    tortoise = hare = start
    for _ in range(lam):
        hare = successor(hare)
    while tortoise != hare:
        tortoise, hare, mu = successor(tortoise), successor(hare), mu + 1
    return lam, hare, mu