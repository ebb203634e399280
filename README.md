# guitarstock

A small command-line tool that builds a random stock of electric guitars
and reports on it.

Each guitar gets a brand, a model, pickups, body, neck and fretboard woods,
a bridge, a number of strings (6 to 8) and of pickups (2 to 3), a whole-number
price from 240 to 2400, a release year, and whether it is on offer. A guitar
on offer has between 1 and 100 offered; one not on offer has 0.

## Installation

```
pip install .
```

## Usage

```
guitarstock [--size N] [--seed S]
```

- `--size N` sets how many instruments to generate. Without it the program
  asks: `Input size of musical instruments:`.
- `--seed S` seeds the random generator, so the same seed gives the same stock.

The size must be a whole number of at least 1; otherwise the program prints
an error to standard error and exits with status 1.

The program prints every instrument, and then:

- the cheapest instrument,
- the most expensive instrument,
- an example of an instrument on offer (or a "not found" placeholder when
  none is on offer),
- the average price of an instrument.

When several instruments share the lowest or highest price, the first of
them is reported.

## Library use

```python
import random

from guitarstock.initializer import generate_instruments, random_instrument
from guitarstock.instrument import MusicalInstrument
from guitarstock.manager import (
    average_price,
    find_cheapest_instrument,
    find_instrument_in_offer,
    find_most_expensive_instrument,
)

stock = generate_instruments(5, random.Random(42))
print(find_cheapest_instrument(stock))
print(find_most_expensive_instrument(stock))
print(find_instrument_in_offer(stock))
print(average_price(stock))
```

- `MusicalInstrument` is a dataclass holding one instrument; `str()` of it
  gives its multi-line description.
- `MusicalInstrument.not_found()` gives the placeholder returned by
  `find_instrument_in_offer` when nothing is on offer.
- `random_instrument(rng)` builds one random electric guitar;
  `generate_instruments(size, rng)` builds a list of them and raises
  `ValueError` for a negative size. Both take an optional `random.Random`.
- `find_cheapest_instrument`, `find_most_expensive_instrument` and
  `average_price` raise `ValueError` when given no instruments.

## What it does not do

The stock exists only while the program runs: it is not saved, loaded or
edited, and there is no way to enter instruments by hand from the command
line.

## Tests

```
pip install .[test]
pytest
```