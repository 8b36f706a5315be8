import pytest

from pharmasim.inventory import Inventory
from pharmasim.medicine import ActiveSubstance, Affliction, Capsules, Drops, Medicine
from pharmasim.price import Price


@pytest.fixture
def stock():
    inventory = Inventory()
    Medicine.reset_ids()
    assert inventory.number_of_medicines() == 0
    meds = [
        Capsules("Capsules1", Affliction.ACHE, ActiveSubstance.ASPIRIN, 200, Price(16, 99), 100, 30),
        Drops("Drops1", Affliction.PAIN, ActiveSubstance.METFORMIN, 1000, Price(23, 0), 100, 100),
        Capsules("Syrup1", Affliction.PAIN, ActiveSubstance.SERTRALINE, 500, Price(80, 0), 100, 500),
        Capsules("Tablets1", Affliction.ACHE, ActiveSubstance.SERTRALINE, 560, Price(27, 55), 100, 50),
        Capsules("Tablets2", Affliction.RASH, ActiveSubstance.OMEPRAZOLE, 300, Price(18, 60), 1, 30),
        Drops("No in magazine", Affliction.ALLERGY, ActiveSubstance.METAMIZOLE, 200, Price(30, 50), 0, 500),
    ]
    for medicine in meds:
        inventory.add_medicine(medicine)
    return inventory, meds


def test_basic_counts(stock):
    inventory, _ = stock
    assert inventory.number_of_medicines() == 6
    assert inventory.number_of_medicines(Affliction.RASH) == 1
    assert inventory.number_of_medicines(Affliction.PAIN) == 2
    assert inventory.number_of_medicines(Affliction.ACHE) == 2
    assert inventory.number_of_medicines(Affliction.POISONING) == 0


def test_adding_twice_is_ignored(stock):
    inventory, meds = stock
    inventory.add_medicine(meds[0])
    assert inventory.number_of_medicines() == 6


def test_picking_and_in_stock(stock):
    inventory, meds = stock
    ptr1, ptr2, _, _, ptr5, ptr6 = meds
    assert inventory.is_in_stock(ptr1)
    assert inventory.is_in_stock(ptr2)
    assert not inventory.is_in_stock(ptr6)
    inventory.pick_medicine(ptr5)
    assert not inventory.is_in_stock(ptr5)
    inventory.pick_medicine(ptr1)
    assert ptr1.amount_in_pharmacy == 99
    inventory.pick_medicine(ptr1)
    assert ptr1.amount_in_pharmacy == 98
    inventory.pick_medicine(ptr5)
    assert not inventory.is_in_stock(ptr5)
    assert inventory.how_many_in_stock(ptr5) == 0


def test_pick_several(stock):
    inventory, meds = stock
    ptr1 = meds[0]
    inventory.pick_medicine(ptr1, 10)
    assert inventory.how_many_in_stock(ptr1) == 90
    with pytest.raises(ValueError):
        inventory.pick_medicine(ptr1, 91)
    assert inventory.how_many_in_stock(ptr1) == 90


def test_in_stock_with_number(stock):
    inventory, meds = stock
    ptr1 = meds[0]
    assert inventory.is_in_stock(ptr1, 99)
    assert not inventory.is_in_stock(ptr1, 100)


def test_find_substitute(stock):
    inventory, meds = stock
    substitute = inventory.find_substitute(meds[2])
    assert substitute.name == "Drops1"
    assert substitute.affliction == Affliction.PAIN


def test_no_cheaper_substitute(stock):
    inventory, meds = stock
    assert inventory.find_substitute(meds[1]) is None
    assert inventory.find_substitute(meds[4]) is None


def test_general_substitute(stock):
    inventory, meds = stock
    assert inventory.find_general_substitute(meds[2]) is meds[1]
    assert inventory.find_general_substitute(meds[5]) is None


def test_random_medicine_with_affliction(stock):
    inventory, meds = stock
    found = inventory.find_random_medicine(Affliction.ACHE)
    assert found.affliction == Affliction.ACHE
    assert found in (meds[0], meds[3])


def test_random_medicine_for_empty_affliction(stock):
    inventory, _ = stock
    with pytest.raises(LookupError):
        inventory.find_random_medicine(Affliction.POISONING)