import random

import pytest

from guitarstock import initializer
from guitarstock.initializer import generate_instruments, random_instrument


def test_generate_size():
    assert len(generate_instruments(25, random.Random(3))) == 25
    assert generate_instruments(0, random.Random(3)) == []


def test_negative_size_raises():
    with pytest.raises(ValueError):
        generate_instruments(-1, random.Random(0))


def test_values_come_from_catalogue():
    for inst in generate_instruments(200, random.Random(7)):
        assert inst.type_of_musical_instrument == "Electric guitar"
        assert inst.brand in initializer.BRANDS
        assert inst.model in initializer.MODELS
        assert inst.model_of_pickups in initializer.MODELS_OF_PICKUPS
        assert inst.material_of_body in initializer.MATERIALS_OF_BODY
        assert inst.material_of_neck in initializer.MATERIALS_OF_NECK
        assert inst.material_of_fretboard in initializer.MATERIALS_OF_FRETBOARD
        assert inst.model_of_bridge in initializer.MODELS_OF_BRIDGE
        assert inst.date_of_release in initializer.DATES_OF_RELEASE


def test_numeric_ranges():
    for inst in generate_instruments(200, random.Random(11)):
        assert 6 <= inst.amount_of_strings <= 8
        assert 2 <= inst.amount_of_pickups <= 3
        assert 240 <= inst.price <= 2400


def test_offer_amount_consistent():
    instruments = generate_instruments(200, random.Random(5))
    for inst in instruments:
        if inst.is_in_offer:
            assert 1 <= inst.amount_in_offer <= 100
        else:
            assert inst.amount_in_offer == 0
    assert any(i.is_in_offer for i in instruments)
    assert any(not i.is_in_offer for i in instruments)


def test_seeded_is_deterministic():
    first = generate_instruments(10, random.Random(42))
    second = generate_instruments(10, random.Random(42))
    assert len(first) == 10
    assert [str(inst) for inst in first] == [str(inst) for inst in second]

    single_a = random_instrument(random.Random(1))
    single_b = random_instrument(random.Random(1))
    assert str(single_a) == str(single_b)
    assert single_a.brand in initializer.BRANDS


def test_generate_matches_repeated_random_instrument():
    shared = random.Random(9)
    one_by_one = [random_instrument(shared) for _ in range(3)]
    batch = generate_instruments(3, random.Random(9))
    assert [str(inst) for inst in batch] == [str(inst) for inst in one_by_one]