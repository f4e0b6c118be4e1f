"""Divisibility predicate factory."""

from __future__ import annotations

from typing import Callable

from .errors import FizzBuzzError

Predicate = Callable[[int], bool]


def make_divisibility_predicate(divisor: int) -> Predicate:
    """Build a predicate that tests divisibility by ``divisor``.

    Args:
        divisor: Positive modulus captured by the returned closure.

    Returns:
        A pure function returning True iff its argument is a multiple
        of ``divisor``.

    Raises:
        FizzBuzzError: If ``divisor`` is not a positive integer.
    """
    # bool is an int subclass; True would silently mean "divisible by 1"
    if isinstance(divisor, bool) or not isinstance(divisor, int):
        raise FizzBuzzError(
            f"validation error: divisor must be an integer, got {type(divisor).__name__}"
        )
    if divisor <= 0:
        raise FizzBuzzError(f"validation error: divisor must be positive, got {divisor}")

    def is_multiple(candidate: int) -> bool:
        return candidate % divisor == 0

    is_multiple.__name__ = f"divisible_by_{divisor}"
    is_multiple.__qualname__ = f"make_divisibility_predicate.<locals>.divisible_by_{divisor}"
    return is_multiple
