from enum import Enum

import pytest

from petrol_survivor.enum_map import EnumMap, all_truthy


class Color(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2


class Other(Enum):
    RED = 0


def test_default_fills_every_slot():
    m = EnumMap(Color, default=0.0)
    assert list(m) == [0.0, 0.0, 0.0]
    assert len(m) == len(Color)


def test_mapping_initialisation_and_defaults():
    m = EnumMap(Color, {Color.GREEN: "g"}, default="-")
    assert m[Color.GREEN] == "g"
    assert m[Color.RED] == "-"
    assert m[Color.BLUE] == "-"


def test_sequence_initialisation_follows_order():
    m = EnumMap(Color, ["r", "g", "b"])
    assert list(m.pairs()) == [(Color.RED, "r"), (Color.GREEN, "g"), (Color.BLUE, "b")]


def test_sequence_of_wrong_length_rejected():
    with pytest.raises(ValueError):
        EnumMap(Color, ["r", "g"])


def test_set_and_get():
    m = EnumMap(Color, default=1.0)
    m[Color.BLUE] += 0.5
    assert m[Color.BLUE] == 1.5
    assert m.get_checked(Color.BLUE) == 1.5


def test_foreign_key_rejected():
    m = EnumMap(Color, default=0)
    with pytest.raises(KeyError):
        m.get_checked(Other.RED)
    with pytest.raises(KeyError):
        m[Other.RED] = 1
    assert Other.RED not in m
    assert Color.RED in m


def test_keys_follow_declaration_order():
    assert list(EnumMap(Color).keys()) == list(Color)


def test_all_truthy():
    assert all_truthy(EnumMap(Color, ["a", "b", "c"]))
    assert not all_truthy(EnumMap(Color, {Color.RED: "a"}))
    assert all_truthy({1: True, 2: "x"})
    assert not all_truthy({1: True, 2: None})