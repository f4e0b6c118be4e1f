"""Constants used across fizzbuzz modules."""

# inclusive bounds of the printed range
RANGE_START = 1
RANGE_END = 100

FIZZ_DIVISOR = 3
BUZZ_DIVISOR = 5

FIZZ_WORD = "Fizz"
BUZZ_WORD = "Buzz"
FIZZBUZZ_WORD = FIZZ_WORD + BUZZ_WORD

USAGE = """usage: fizzbuzz [-h]

Print FizzBuzz labels for 1..100, one per line.

options:
  -h, --help  show this help message and exit"""
