"""Queries over a collection of instruments."""

from __future__ import annotations

from collections.abc import Sequence

from guitarstock.instrument import MusicalInstrument


def _require_items(instruments: Sequence[MusicalInstrument]) -> None:
    if not instruments:
        raise ValueError("no instruments given")


def find_instrument_in_offer(instruments: Sequence[MusicalInstrument]) -> MusicalInstrument:
    """Return the first instrument in offer, or the not-found placeholder."""
    return next(
        (inst for inst in instruments if inst.is_in_offer),
        MusicalInstrument.not_found(),
    )


def find_cheapest_instrument(instruments: Sequence[MusicalInstrument]) -> MusicalInstrument:
    """Return the first instrument with the lowest price."""
    _require_items(instruments)
    return min(instruments, key=lambda inst: inst.price)


def find_most_expensive_instrument(instruments: Sequence[MusicalInstrument]) -> MusicalInstrument:
    """Return the first instrument with the highest price."""
    _require_items(instruments)
    return max(instruments, key=lambda inst: inst.price)


def average_price(instruments: Sequence[MusicalInstrument]) -> float:
    """Return the mean price of the instruments."""
    _require_items(instruments)
    return sum(inst.price for inst in instruments) / len(instruments)