"""fizzbuzz CLI entrypoint."""

from __future__ import annotations

import sys

from . import classifier
from .constants import USAGE
from .errors import FizzBuzzError


class FizzBuzzApplication:
    """Application coordinator for the fizzbuzz command."""

    def run(self, argv: list[str]) -> int:
        """Run the CLI from argv.

        Args:
            argv: CLI args excluding program name.

        Returns:
            Exit status code.
        """
        if argv and argv[0] in {"-h", "--help"}:
            self._print_help()
            return 0

        try:
            self._validate_args(argv)
            classifier.run(sys.stdout)
        except FizzBuzzError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        return 0

    def _validate_args(self, argv: list[str]) -> None:
        """Reject any argument; the command takes none."""
        if argv:
            raise FizzBuzzError(f"validation error: unexpected argument '{argv[0]}'")

    def _print_help(self) -> None:
        print(USAGE)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Optional argv vector.

    Returns:
        Exit status code.
    """
    application = FizzBuzzApplication()
    return application.run(argv if argv is not None else sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
