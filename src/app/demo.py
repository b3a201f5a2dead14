"""Demo application: calls every core function with fixed inputs and prints the results."""

import argparse
import sys
from dataclasses import dataclass
from typing import Final, Optional, Sequence

from src.core.formatting import format_number
from src.core.math import add, factorial, multiply
from src.core.text import reverse, to_upper
from src.utils.logging import get_logger, setup_logging

APP_TITLE: Final[str] = "Gangaji Example App"


@dataclass(frozen=True)
class DemoEntry:
    """One "<label> = <result>" line of demo output."""

    label: str
    result: object

    def render(self) -> str:
        return f"{self.label} = {self.result}"


def build_demo_entries() -> list[DemoEntry]:
    """Run the fixed sample calls."""
    return [
        # Math operations
        DemoEntry("5 + 3", add(5, 3)),
        DemoEntry("5 * 3", multiply(5, 3)),
        DemoEntry("5!", factorial(5)),
        # String operations
        DemoEntry("reverse('hello')", reverse("hello")),
        DemoEntry("to_upper('hello')", to_upper("hello")),
        # Formatting
        DemoEntry("format_number(42)", format_number(42)),
    ]


def render_demo(entries: Sequence[DemoEntry]) -> list[str]:
    """Title, underline and one line per entry."""
    lines = [APP_TITLE, "=" * len(APP_TITLE)]
    lines.extend(entry.render() for entry in entries)
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=APP_TITLE)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)
    logger = get_logger(__name__)

    entries = build_demo_entries()
    logger.info("Computed %d demo entries", len(entries))

    for line in render_demo(entries):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
