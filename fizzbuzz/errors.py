"""Error types for fizzbuzz."""


class FizzBuzzError(RuntimeError):
    """Raised when fizzbuzz receives input it cannot handle."""
