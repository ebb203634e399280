"""Command line entry point: generate guitars and report on them."""

from __future__ import annotations

import argparse
import random
import sys

from guitarstock.initializer import generate_instruments
from guitarstock.manager import (
    average_price,
    find_cheapest_instrument,
    find_instrument_in_offer,
    find_most_expensive_instrument,
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="guitarstock",
        description="Generate random electric guitars and report prices.",
    )
    parser.add_argument("--size", type=int, help="number of instruments to generate")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the program; return the exit status."""
    args = _parse_args(argv)
    size = args.size
    if size is None:
        raw = input("Input size of musical instruments: ")
        try:
            size = int(raw.strip())
        except ValueError:
            print(f"invalid size: {raw.strip()!r}", file=sys.stderr)
            return 1
    if size < 1:
        print("size must be at least 1", file=sys.stderr)
        return 1

    instruments = generate_instruments(size, random.Random(args.seed))
    for inst in instruments:
        print(inst)

    in_offer = find_instrument_in_offer(instruments)
    cheapest = find_cheapest_instrument(instruments)
    most_expensive = find_most_expensive_instrument(instruments)
    average = average_price(instruments)

    print("The cheapest instrument is: \n" + str(cheapest))
    print("The most expensive instrument is: \n" + str(most_expensive))
    print("Example of an instrunent in offer: \n" + str(in_offer))
    print(f"The average price of an instrument is: {average:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())