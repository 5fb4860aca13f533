from dataclasses import dataclass

import pytest

from tinterrain.objpool import ObjPool, PoolPtr


@dataclass
class Item:
    name: str = ""
    weight: int = 0


def test_spawn_creates_objects_with_arguments():
    pool = ObjPool(Item)
    a = pool.spawn("a", weight=3)
    b = pool.spawn("b")
    assert a.get() == Item("a", 3)
    assert b.get().name == "b"
    assert len(pool) == 2
    assert a.index == 0 and b.index == 1


def test_handles_refer_to_same_object():
    pool = ObjPool(Item)
    a = pool.spawn("a")
    a.get().weight = 5
    assert PoolPtr(pool, 0).get().weight == 5


def test_contains_and_validity():
    pool = ObjPool(Item)
    other = ObjPool(Item)
    a = pool.spawn()
    assert pool.contains(a)
    assert not other.contains(a)
    assert a.is_valid()
    assert bool(a)
    assert not PoolPtr(pool, 5).is_valid()
    assert not PoolPtr().is_valid()


def test_clear_invalidates():
    pool = ObjPool(Item)
    a = pool.spawn()
    a.clear()
    assert not a
    assert a.pool is None
    with pytest.raises(ValueError):
        a.get()


def test_recycle_detaches_handle_but_keeps_pool_size():
    pool = ObjPool(Item)
    a = pool.spawn()
    a.recycle()
    assert not a.is_valid()
    assert len(pool) == 1


def test_equality_hash_and_order():
    pool = ObjPool(Item)
    a = pool.spawn()
    b = pool.spawn()
    assert a == PoolPtr(pool, 0)
    assert a != b
    assert len({a, PoolPtr(pool, 0), b}) == 2
    assert a < b
    assert not b < a
    assert sorted([b, a]) == [a, b]


def test_equality_across_pools():
    p1 = ObjPool(Item)
    p2 = ObjPool(Item)
    assert p1.spawn() != p2.spawn()