from dataclasses import dataclass

import pytest

from npputils.prehashed import PreHashed


@dataclass(frozen=True)
class CoolThing:
    name: str


def test_map_indexed_by_key_type():
    mapping = {"hello": 1, "bonjour": 2, "ola": 3}
    k1 = PreHashed.make("goodbye")
    k2 = PreHashed.make("hello")
    assert k1 not in mapping
    assert k2 in mapping
    found = next(key for key in mapping if key == k2)
    assert k2.value == found
    assert mapping[k2] == 1


def test_map_with_custom_type():
    mapping = {CoolThing("pony"): 1, CoolThing("train"): 2, CoolThing("ice"): 3}
    key = PreHashed.make("train", factory=CoolThing)
    assert key.value == CoolThing("train")
    assert mapping[key] == 2


def test_set_indexed_by_key_type():
    items = {"hello", "bonjour", "ola"}
    assert PreHashed.make("goodbye") not in items
    key = PreHashed.make("bonjour")
    assert key in items
    assert next(item for item in items if item == key) == key.value


def test_set_with_custom_type():
    items = {CoolThing("pony"), CoolThing("train"), CoolThing("ice")}
    key = PreHashed.make(name="train", factory=CoolThing)
    assert key in items
    assert PreHashed.make("boat", factory=CoolThing) not in items


def test_hash_is_computed_once():
    calls = []

    def counting_hash(value):
        calls.append(value)
        return hash(value)

    key = PreHashed.make("hello", hasher=counting_hash)
    assert key.value == "hello"
    mapping = {"hello": 5, "world": 7}
    assert mapping[key] == 5
    assert mapping[key] == 5
    assert calls == ["hello"]


def test_prehashed_equality():
    assert PreHashed("a") == PreHashed("a")
    assert PreHashed("a") == "a"
    assert not PreHashed("a") == PreHashed("b")


def test_make_without_value_fails():
    with pytest.raises(TypeError):
        PreHashed.make()
    with pytest.raises(TypeError):
        PreHashed.make("a", "b")