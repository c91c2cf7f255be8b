from __future__ import annotations

import copy
import pickle

import pytest

from maplist.types import NOTHING, Slot


def test_nothing_is_a_singleton():
    assert copy.deepcopy(NOTHING) is NOTHING
    assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING
    assert type(NOTHING)() is NOTHING
    assert repr(NOTHING) == "NOTHING"


def test_absent_slot_yields_nothing():
    slot = Slot.absent()
    assert not slot.present
    assert slot.apply(5) is NOTHING


def test_present_slot_applies_its_transform():
    slot = Slot.of(lambda x: x * 3)
    assert slot.present
    assert slot.apply(2) == 6


def test_wrap():
    slot = Slot.of(str)
    assert Slot.wrap(slot) is slot
    assert Slot.wrap(None) == Slot.absent()
    assert Slot.wrap(len).fn is len


def test_of_requires_a_transform():
    with pytest.raises(TypeError):
        Slot.of(None)
