import pytest

from pharmasim.price import Price


@pytest.fixture
def price1():
    return Price(1345, 34)


@pytest.fixture
def price2():
    return Price(1345, 178)


def test_construction_normalises_grosze(price1, price2):
    assert (price1.zlotys, price1.grosze) == (1345, 34)
    assert (price2.zlotys, price2.grosze) == (1346, 78)


def test_setting_zlotys(price1, price2):
    price1.zlotys = 3450
    price2.zlotys = 7462
    assert (price1.zlotys, price1.grosze) == (3450, 34)
    assert (price2.zlotys, price2.grosze) == (7462, 78)


def test_setting_grosze(price1, price2):
    price1.grosze = 456
    price2.grosze = 4
    assert (price1.zlotys, price1.grosze) == (1349, 56)
    assert (price2.zlotys, price2.grosze) == (1346, 4)


def test_comparing(price1, price2):
    assert price1 != price2
    assert not price1 == price2
    assert price1 < price2
    assert not price1 > price2
    assert price1 <= price2
    assert not price1 >= price2
    assert not price2 < price1
    assert price2 > price1
    assert not price2 <= price1
    assert price2 >= price1


def test_comparing_equal_prices(price1, price2):
    price2.zlotys = 1345
    price2.grosze = 34
    assert price1 == price2
    assert not price1 != price2
    assert not price1 < price2
    assert not price1 > price2
    assert price1 <= price2
    assert price1 >= price2
    assert price2 <= price1
    assert price2 >= price1


def test_in_place_addition(price1, price2):
    price1 += price2
    assert (price1.zlotys, price1.grosze) == (2692, 12)
    assert (price2.zlotys, price2.grosze) == (1346, 78)


def test_addition(price1, price2):
    price3 = price1 + price2
    assert (price1.zlotys, price1.grosze) == (1345, 34)
    assert (price2.zlotys, price2.grosze) == (1346, 78)
    assert (price3.zlotys, price3.grosze) == (2692, 12)


def test_in_place_subtraction(price1, price2):
    price2 -= price1
    assert (price1.zlotys, price1.grosze) == (1345, 34)
    assert (price2.zlotys, price2.grosze) == (1, 44)


def test_subtraction(price1, price2):
    price3 = price2 - price1
    assert (price2.zlotys, price2.grosze) == (1346, 78)
    assert (price3.zlotys, price3.grosze) == (1, 44)


def test_multiplication(price1):
    price3 = price1 * 4
    assert (price1.zlotys, price1.grosze) == (1345, 34)
    assert (price3.zlotys, price3.grosze) == (5381, 36)
    assert 4 * price1 == price3


def test_division(price2):
    price3 = price2 / 2
    assert (price3.zlotys, price3.grosze) == (673, 39)
    assert (price2.zlotys, price2.grosze) == (1346, 78)


def test_string_form():
    assert str(Price(17, 83)) == "17,83 PLN"
    assert str(Price(25, 30)) == "25,30 PLN"


def test_negative_result_is_rejected(price1, price2):
    with pytest.raises(ValueError):
        price1 - price2
    assert (price1.zlotys, price1.grosze) == (1345, 34)
    assert (price2.zlotys, price2.grosze) == (1346, 78)


def test_negative_amount_is_rejected():
    with pytest.raises(ValueError):
        Price(-1, 0)


def test_sum_round_trip(price1, price2):
    assert sum([price1, price2], Price()) - price2 == price1