"""FizzBuzz built from divisibility predicate closures."""

from .classifier import classify, classify_and_emit, fizzbuzz_lines, run
from .errors import FizzBuzzError
from .predicates import make_divisibility_predicate

__all__ = [
    "FizzBuzzError",
    "classify",
    "classify_and_emit",
    "fizzbuzz_lines",
    "make_divisibility_predicate",
    "run",
]
