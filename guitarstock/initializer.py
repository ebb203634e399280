"""Random generation of electric guitars."""

from __future__ import annotations

import random

from guitarstock.instrument import MusicalInstrument

TYPE_OF_MUSICAL_INSTRUMENT = "Electric guitar"

BRANDS = (
    "IBANEZ", "JACKSON", "SOLAR", "FENDER", "GIBSON",
    "CORT", "YAMAHA", "EPIPHONE", "SQUIER", "HARLEY BENTON",
)
MODELS = (
    "GRG2458", "STAR", "SUPERSTRAT", "TELECASTER", "STRATOCASTER",
    "JAGUAR", "LESPAUL", "JAZZMASTER", "SG", "Rhoads",
    "Soloist", "Dinky", "Warrior", "Kelly", "Dominion",
    "Type A", "Type S", "Type E", "Type V", "Type G",
)
MODELS_OF_PICKUPS = ("DiMarzio", "Bellcat", "Musiclily", "Seymour", "Shadow", "Quntum")
MATERIALS_OF_BODY = (
    "Koa", "Ash", "Walnut", "Alder", "Maple",
    "Basswood", "Mahogany", "Agathis", "Poplar", "Spruce",
)
MATERIALS_OF_NECK = MATERIALS_OF_BODY
MATERIALS_OF_FRETBOARD = (
    "Maple", "Rosewood", "Walnut", "Ebony", "Jatoba", "Mahogany", "Wenge", "Magatis",
)
MODELS_OF_BRIDGE = ("F106", "F107", "F108", "F88", "F0909", "G300", "Mg-500", "ASDF1234")
DATES_OF_RELEASE = (
    "1960", "1961", "1969", "1970", "1974", "1979", "2000", "2001",
    "2002", "2007", "2009", "2011", "2015", "2021", "2022", "2025",
)

AMOUNT_OF_STRINGS_RANGE = (6, 8)
AMOUNT_OF_PICKUPS_RANGE = (2, 3)
PRICE_RANGE = (240, 2400)
AMOUNT_IN_OFFER_RANGE = (1, 100)


def random_instrument(rng: random.Random | None = None) -> MusicalInstrument:
    """Build one electric guitar with randomly chosen attributes."""
    rng = rng or random.Random()
    is_in_offer = rng.randrange(2) == 1
    return MusicalInstrument(
        type_of_musical_instrument=TYPE_OF_MUSICAL_INSTRUMENT,
        brand=rng.choice(BRANDS),
        model=rng.choice(MODELS),
        model_of_pickups=rng.choice(MODELS_OF_PICKUPS),
        material_of_body=rng.choice(MATERIALS_OF_BODY),
        material_of_neck=rng.choice(MATERIALS_OF_NECK),
        material_of_fretboard=rng.choice(MATERIALS_OF_FRETBOARD),
        model_of_bridge=rng.choice(MODELS_OF_BRIDGE),
        amount_of_strings=rng.randint(*AMOUNT_OF_STRINGS_RANGE),
        amount_of_pickups=rng.randint(*AMOUNT_OF_PICKUPS_RANGE),
        price=float(rng.randint(*PRICE_RANGE)),
        is_in_offer=is_in_offer,
        amount_in_offer=rng.randint(*AMOUNT_IN_OFFER_RANGE) if is_in_offer else 0,
        date_of_release=rng.choice(DATES_OF_RELEASE),
    )


def generate_instruments(size: int, rng: random.Random | None = None) -> list[MusicalInstrument]:
    """Generate ``size`` random electric guitars."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    rng = rng or random.Random()
    return [random_instrument(rng) for _ in range(size)]