import dataclasses

import pytest

from metagems.serialize import stream_simple
from metagems.tuples import (
    cir_tuple,
    get,
    make_tuple_type,
    stable_unique,
    unique_tuple_type,
)


def test_member_names_follow_positions():
    cls = make_tuple_type(int, str, float)
    names = [f.name for f in dataclasses.fields(cls)]
    assert names == ["_0", "_1", "_2"]


def test_same_arguments_give_same_class():
    assert make_tuple_type(int, str) is make_tuple_type(int, str)
    assert make_tuple_type(int, str) is not make_tuple_type(str, int)


def test_members_can_be_set_by_name_and_read_by_position():
    obj = make_tuple_type(int, str, float)()
    obj._0 = 1
    obj._1 = "Second member"
    obj._2 = 2.345
    assert [get(obj, i) for i in range(3)] == [1, "Second member", 2.345]


def test_default_construction_uses_member_types():
    obj = make_tuple_type(int, str, float, list)()
    assert (obj._0, obj._1, obj._2, obj._3) == (int(), str(), float(), list())


def test_cir_tuple_takes_argument_types():
    obj = cir_tuple("A proper std::string", 1.618, 42)
    assert type(obj) is make_tuple_type(str, float, int)
    assert get(obj, 0) == "A proper std::string"
    assert get(obj, 2) == 42


def test_cir_tuple_renders_members():
    obj = cir_tuple("A proper std::string", 1.618, 42)
    assert stream_simple(obj) == "{ _0 : A proper std::string, _1 : 1.618, _2 : 42 }"


def test_get_out_of_range():
    obj = cir_tuple(5, "Hello tuple")
    with pytest.raises(IndexError):
        get(obj, 2)
    with pytest.raises(IndexError):
        get(obj, -1)


def test_get_on_plain_tuple():
    assert get((5, "Hello tuple", 1.618), 1) == "Hello tuple"


def test_get_rejects_non_tuple():
    with pytest.raises(TypeError):
        get(42, 0)


def test_make_tuple_type_rejects_non_types():
    with pytest.raises(TypeError):
        make_tuple_type(int, "double")


def test_stable_unique_keeps_first_occurrence_order():
    items = [int, float, bytes, float, bytes, complex]
    assert stable_unique(items) == [int, float, bytes, complex]


def test_stable_unique_handles_unhashable_items():
    items = [[1], [2], [1], [3], [2]]
    assert stable_unique(items) == [[1], [2], [3]]


def test_stable_unique_does_not_modify_input():
    items = [3, 1, 3, 2]
    stable_unique(items)
    assert items == [3, 1, 3, 2]


def test_unique_tuple_type_has_four_members():
    cls = unique_tuple_type(int, float, bytes, float, bytes, complex)
    assert cls is make_tuple_type(int, float, bytes, complex)
    assert len(dataclasses.fields(cls)) == 4