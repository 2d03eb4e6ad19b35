"""Factorial and Fibonacci numbers."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Product 1 * 2 * ... * n for n >= 1."""
    if n < 1:
        raise ValueError("factorial is defined here for n >= 1")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("Fibonacci index must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting from 0."""
    if count < 0:
        raise ValueError("count must be non-negative")
    series: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        series.append(current)
        current, following = following, current + following
    return series