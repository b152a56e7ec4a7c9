import pytest
from petdb.store import PetStore, CAPACITY
from petdb.record import Pet
from petdb.exceptions import DatabaseFull, InvalidAttribute, InvalidPosition
from testdata import PETS, filled_store


def test_store_repr():
    store = PetStore()
    store.add("Rex", 4)
    assert repr(store) == "PetStore(1/100)"


def test_length():
    store = PetStore()
    assert len(store) == 0
    assert store.size() == 0
    store.add("Rex", 4)
    assert len(store) == 1
    store.add("Fido", 2)
    assert store.size() == 2


def test_add_returns_position():
    store = PetStore()
    assert store.add("Rex", 4) == 0
    assert store.add("Fido", 2) == 1
    assert store.list() == [(0, "Rex", 4), (1, "Fido", 2)]


def test_add_invalid_age_leaves_store():
    store = PetStore()
    store.add("Rex", 4)
    with pytest.raises(InvalidAttribute):
        store.add("Old", 51)
    assert store.list() == [(0, "Rex", 4)]


def test_add_then_remove():
    store = PetStore()
    assert store.add("Rex", 4) == 0
    assert store.add("Fido", 2) == 1
    removed = store.remove_at(0)
    assert removed == Pet(name="Rex", age=4)
    assert store.list() == [(0, "Fido", 2)]


def test_remove_shifts_in_order():
    store = PetStore()
    store.add_pets(PETS + [Pet(name="Bella", age=9)])
    store.remove_at(1)
    assert store.list() == [(0, "Rex", 4), (1, "Milo", 7), (2, "Bella", 9)]


@pytest.mark.parametrize("position", [-1, 3, 4, 100])
def test_remove_invalid_position(position):
    store = PetStore()
    store.add_pets(PETS)
    before = store.list()
    with pytest.raises(InvalidPosition):
        store.remove_at(position)
    assert store.list() == before


def test_remove_from_empty():
    with pytest.raises(InvalidPosition):
        PetStore().remove_at(0)


def test_capacity_boundary():
    store = filled_store()
    assert store.size() == CAPACITY
    assert store.is_full()
    with pytest.raises(DatabaseFull):
        store.add("Extra", 5)
    with pytest.raises(DatabaseFull):
        store.add_pet(Pet(name="Extra", age=5))
    assert store.size() == CAPACITY


def test_full_checked_before_validation():
    store = filled_store()
    with pytest.raises(DatabaseFull):
        store.add("Extra", 99)


def test_custom_capacity():
    store = PetStore(capacity=2)
    store.add("a", 1)
    store.add("b", 2)
    with pytest.raises(DatabaseFull):
        store.add("c", 3)


def test_no_aliasing():
    pet = Pet(name="Rex", age=4)
    store = PetStore()
    store.add_pet(pet)
    pet.age = 10
    assert store.get(0).age == 4
    store.get(0).age = 20
    assert store.list() == [(0, "Rex", 4)]
    for stored in store:
        stored.name = "Changed"
    assert store.list() == [(0, "Rex", 4)]


def test_get_invalid_position():
    with pytest.raises(InvalidPosition):
        PetStore().get(0)


def test_iter():
    store = PetStore()
    store.add_pets(PETS)
    assert list(store) == PETS


def test_reset():
    store = PetStore()
    store.add_pets(PETS)
    store.reset()
    assert len(store) == 0
    assert store.list() == []


@pytest.mark.parametrize("age", [True, "7", 4.5, "x", None])
def test_add_non_integer_age(age):
    store = PetStore()
    store.add("Rex", 4)
    with pytest.raises(InvalidAttribute):
        store.add("Fido", age)
    assert store.list() == [(0, "Rex", 4)]
