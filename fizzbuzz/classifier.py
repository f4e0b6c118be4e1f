"""FizzBuzz classification and output driver."""

from __future__ import annotations

import sys
from typing import TextIO

from .constants import (
    BUZZ_DIVISOR,
    BUZZ_WORD,
    FIZZ_DIVISOR,
    FIZZ_WORD,
    FIZZBUZZ_WORD,
    RANGE_END,
    RANGE_START,
)
from .predicates import Predicate, make_divisibility_predicate


def classify(
    n: int,
    is_fizz: Predicate | None = None,
    is_buzz: Predicate | None = None,
) -> str:
    """Return the FizzBuzz label for ``n``.

    Args:
        n: Positive integer to classify.
        is_fizz: Multiple-of-3 predicate. Built fresh when omitted.
        is_buzz: Multiple-of-5 predicate. Built fresh when omitted.

    Returns:
        "FizzBuzz", "Fizz", "Buzz", or the decimal string of ``n``.
    """
    if is_fizz is None:
        is_fizz = make_divisibility_predicate(FIZZ_DIVISOR)
    if is_buzz is None:
        is_buzz = make_divisibility_predicate(BUZZ_DIVISOR)

    fizz = is_fizz(n)
    buzz = is_buzz(n)
    if fizz and buzz:
        return FIZZBUZZ_WORD
    if fizz:
        return FIZZ_WORD
    if buzz:
        return BUZZ_WORD
    return str(n)


def classify_and_emit(
    n: int,
    stream: TextIO | None = None,
    is_fizz: Predicate | None = None,
    is_buzz: Predicate | None = None,
) -> None:
    """Write the label for ``n`` as one line to ``stream`` (stdout by default)."""
    target = stream if stream is not None else sys.stdout
    target.write(classify(n, is_fizz, is_buzz) + "\n")


def fizzbuzz_lines() -> list[str]:
    """Return the labels for the full range, in ascending order."""
    is_fizz = make_divisibility_predicate(FIZZ_DIVISOR)
    is_buzz = make_divisibility_predicate(BUZZ_DIVISOR)
    return [classify(n, is_fizz, is_buzz) for n in range(RANGE_START, RANGE_END + 1)]


def run(stream: TextIO | None = None) -> None:
    """Emit one line per value from 1 to 100.

    Both predicates are built once and shared by every iteration.

    Args:
        stream: Output stream. Defaults to stdout.
    """
    is_fizz = make_divisibility_predicate(FIZZ_DIVISOR)
    is_buzz = make_divisibility_predicate(BUZZ_DIVISOR)
    for n in range(RANGE_START, RANGE_END + 1):
        classify_and_emit(n, stream, is_fizz, is_buzz)
