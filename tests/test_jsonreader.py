import enum
import json
from dataclasses import dataclass

import pytest

from npputils.jsonconv import JsonTypeError, convert_json, register_converter
from npputils.jsonreader import JsonReader


class Fruit(enum.Enum):
    STRAWBERRY = "strawberry"
    RASPBERRY = "raspberry"
    CHERRY = "cherry"
    TOMATO = "tomato"


class Rock(enum.Enum):
    GRANITE = "granite"
    ANDESITE = "andesite"
    AMETHYST = "amethyst"


_FRUITS = {
    "strawberry": Fruit.STRAWBERRY,
    "raspberry": Fruit.RASPBERRY,
    "charry": Fruit.CHERRY,
    "tomato": Fruit.TOMATO,
}

_ROCKS = {
    "granite": Rock.GRANITE,
    "andesite": Rock.ANDESITE,
    "amethyst": Rock.AMETHYST,
}


def _fruit_from_json(data):
    repr_ = convert_json(data, str)
    if repr_ not in _FRUITS:
        raise ValueError(f"Bad fruit : {repr_}")
    return _FRUITS[repr_]


def _rock_from_json(data):
    repr_ = convert_json(data, str)
    if repr_ not in _ROCKS:
        raise ValueError(f"Bad rock : {repr_}")
    return _ROCKS[repr_]


register_converter(Fruit, _fruit_from_json)


@dataclass
class Stuff:
    food: Fruit
    cool_mineral: Rock
    integer: int
    real_number: float


@dataclass
class DummyData:
    name: str
    id: int
    some_stuff: Stuff
    val1: int
    val2: int
    old_val: int
    is_cold: bool


@dataclass
class StringHolder:
    data: str


def test_basic_deserialization():
    reader = JsonReader(json.loads('{ "value": 80, "badval": "hello" }'))

    assert reader.read("value", int) == 80
    with pytest.raises(KeyError):
        reader.read("sth", int)
    with pytest.raises(JsonTypeError):
        reader.read("badval", int)

    assert reader.read_opt("sth", int) is None
    assert reader.read_opt("value", int) == 80
    with pytest.raises(JsonTypeError):
        reader.read_opt("badval", int)

    assert reader.read_opt("value", int, 50) == 80
    assert reader.read_opt("sth", int, 50) == 50
    with pytest.raises(JsonTypeError):
        reader.read_opt("badval", int, 50)


def test_custom_default_provider():
    reader = JsonReader(json.loads('{ "message": "hello", "count": 2 }'))
    number = 5

    def default_provider():
        return f"nb={number}"

    assert reader.read_opt("message", str, default_provider) == "hello"
    assert reader.read_opt("def", str, default_provider) == "nb=5"
    with pytest.raises(JsonTypeError):
        reader.read_opt("count", str, default_provider)


def test_custom_converter():
    reader = JsonReader(json.loads('{ "message": "hello" }'))
    value = reader.read("message", lambda data: StringHolder(convert_json(data, str)))
    assert value == StringHolder("hello")


def _read_stuff(reader):
    return Stuff(
        food=reader.read_opt("food", Fruit, Fruit.RASPBERRY),
        cool_mineral=reader.read_opt("cool_mineral", _rock_from_json),
        integer=reader.read_opt("integer", int, 12),
        real_number=reader.read_opt("real_number", float, 3.14),
    )


def test_complex_structure():
    reader = JsonReader(json.loads("""{
        "name": "John",
        "id": 718549,
        "some_stuff": {
            "food": "strawberry",
            "cool_mineral": "amethyst",
            "integer": 1
        },
        "val1": 42,
        "is_cold": true
    }"""))

    val1 = reader.read_opt("val1", int, 15)
    value = DummyData(
        name=reader.read("name", str),
        id=reader.read("id", int),
        some_stuff=reader.recurse("some_stuff", _read_stuff),
        val1=val1,
        val2=reader.read_opt("val2", int, lambda: val1 + 12),
        old_val=reader.read_opt("old_val", int, 12),
        is_cold=reader.read_opt("is_cold", bool, False),
    )

    expected = DummyData(
        name="John",
        id=718549,
        some_stuff=Stuff(
            food=Fruit.STRAWBERRY,
            cool_mineral=Rock.AMETHYST,
            integer=1,
            real_number=3.14,
        ),
        val1=42,
        val2=54,
        old_val=12,
        is_cold=True,
    )
    assert value == expected


def test_registered_converter_rejects_unknown_value():
    reader = JsonReader({"food": "cherry"})
    with pytest.raises(ValueError, match="Bad fruit"):
        reader.read("food", Fruit)


def test_recurse_missing_key():
    reader = JsonReader({"a": {"b": 1}})
    assert reader.recurse("a", lambda sub: sub.read("b", int)) == 1
    with pytest.raises(KeyError):
        reader.recurse("z", lambda sub: sub.read("b", int))
    assert reader.recurse_opt("z", lambda sub: sub.read("b", int)) is None
    assert reader.recurse_opt("a", lambda sub: sub.read("b", int)) == 1


def test_non_object_has_no_keys():
    reader = JsonReader([1, 2, 3])
    with pytest.raises(KeyError):
        reader.read("0", int)
    assert reader.read_opt("0", int, 7) == 7


def test_unknown_converter():
    reader = JsonReader({"value": 1})
    with pytest.raises(TypeError):
        reader.read("value", 42)