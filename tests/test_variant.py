from dataclasses import dataclass

import pytest

from metagems.cirformat import cirformat
from metagems.variant import Variant


@dataclass
class Vec3:
    x: float
    y: float
    z: float


TYPES = (int, float, Vec3, list)


def test_empty_variant():
    v = Variant(TYPES)
    assert v.tag() is None
    assert not v
    assert v.safe_get(int) is None


def test_construct_with_value_sets_tag():
    v = Variant(TYPES, 100)
    assert v.tag() == 0
    assert bool(v)
    assert v.get(int) == 100


def test_set_switches_active_member():
    v = Variant(TYPES, 100)
    v.set(3.14)
    assert v.tag() == 1
    assert v.get_index(1) == 3.14
    assert v.safe_get(int) is None


def test_set_returns_stored_object():
    v = Variant(TYPES)
    vec = v.set([])
    vec.append(100)
    vec.append(200)
    assert v.get(list) == [100, 200]


def test_set_requires_exact_type():
    v = Variant(TYPES)
    with pytest.raises(TypeError):
        v.set(True)
    with pytest.raises(TypeError):
        v.set("text")
    assert v.tag() is None


def test_reset_clears():
    v = Variant(TYPES, 15)
    v.reset()
    assert v.tag() is None
    assert not v


def test_get_wrong_type_raises():
    v = Variant(TYPES, 100)
    with pytest.raises(LookupError):
        v.get(float)


def test_get_index_checks():
    v = Variant(TYPES, 100)
    with pytest.raises(IndexError):
        v.get_index(4)
    with pytest.raises(LookupError):
        v.get_index(1)


def test_safe_get_accepts_base_type():
    class Base:
        pass

    class Derived(Base):
        pass

    d = Derived()
    v = Variant((int, Derived), d)
    assert v.safe_get(Base) is d
    assert v.get(Base) is d


def test_take_is_destructive_move():
    v = Variant(TYPES, 100)
    moved = v.take()
    assert moved.get(int) == 100
    assert moved.tag() == 0
    assert v.tag() is None


def test_copy_is_independent():
    v = Variant(TYPES, [100, 200])
    c = v.copy()
    c.get(list).append(300)
    assert v.get(list) == [100, 200]
    assert c.tag() == v.tag()


def test_visit_passes_active_value():
    v = Variant(TYPES, Vec3(5, 6, 7))
    assert v.visit(lambda m: type(m).__name__) == "Vec3"
    assert v.visit(lambda m: cirformat("vec3_t: %", m)) == "vec3_t: { x : 5, y : 6, z : 7 }"


def test_visit_empty_raises():
    with pytest.raises(LookupError):
        Variant(TYPES).visit(lambda m: m)


def test_invalid_member_types_rejected():
    with pytest.raises(TypeError):
        Variant((int, type(None)))
    with pytest.raises(TypeError):
        Variant((int, "double"))