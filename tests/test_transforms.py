"""Tests for the named transformations and their registry."""

from __future__ import annotations

import pytest

from maplist import NOTHING, MapListError, UnknownTransformError, mapcycle, maplist
from maplist import transforms


def test_partial_rot13_round_trips():
    plan = [transforms.rot13, transforms.rot13, transforms.identity]
    plaintext = "Too many secrets."

    cyphertext = "".join(mapcycle(plan, plaintext))

    assert cyphertext == "Gbo zaal frcertf."
    assert "".join(mapcycle(plan, cyphertext)) == plaintext


def test_rot13_keeps_non_letters():
    assert transforms.rot13("a-Z 9!") == "n-M 9!"


def test_drop_filters_every_element():
    assert mapcycle([transforms.drop], [1, 2, 3]) == []
    assert transforms.drop("x") is NOTHING


def test_constant_ignores_input():
    zero_one = [transforms.constant(0), transforms.constant(1)]
    values = [1, 2, 3, "Good morning", None]

    assert mapcycle(zero_one, values) == [0, 1, 0, 1, 0]
    assert maplist(zero_one, values) == [0, 1]


def test_lookup_decodes_part_number():
    colours = transforms.lookup({"1": "red", "2": "blue"})
    sizes = transforms.lookup({"S": "small", "L": "large"}, default="unknown")

    assert maplist([colours, sizes], "2L") == ["blue", "large"]
    assert maplist([colours, sizes], "9X") == ["unknown"]


def test_case_helpers():
    assert mapcycle([transforms.upper, transforms.lower], "abcd") == ["A", "b", "C", "d"]


def test_resolve_known_names():
    for name, fn in transforms.REGISTRY.items():
        assert transforms.resolve(name) is fn


def test_resolve_unknown_name():
    with pytest.raises(UnknownTransformError, match="unknown transformation 'nope'"):
        transforms.resolve("nope")
    with pytest.raises(KeyError):
        transforms.resolve("nope")
    with pytest.raises(MapListError):
        transforms.resolve("nope")


def test_resolve_all_keeps_absent_slots():
    assert transforms.resolve_all(["upper", None]) == [transforms.upper, None]
