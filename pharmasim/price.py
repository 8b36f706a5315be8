"""Amounts of money in zlotys and grosze."""

from functools import total_ordering


def _check_amount(value, what):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} cannot be negative")


@total_ordering
class Price:
    """A non-negative amount of money; grosze above 99 carry into zlotys."""

    __slots__ = ("_total",)

    def __init__(self, zlotys=0, grosze=0):
        _check_amount(zlotys, "zlotys")
        _check_amount(grosze, "grosze")
        self._total = zlotys * 100 + grosze

    @classmethod
    def _from_total(cls, total):
        if total < 0:
            raise ValueError("price cannot be negative")
        price = cls.__new__(cls)
        price._total = total
        return price

    @property
    def zlotys(self):
        return self._total // 100

    @zlotys.setter
    def zlotys(self, value):
        _check_amount(value, "zlotys")
        self._total = value * 100 + self._total % 100

    @property
    def grosze(self):
        return self._total % 100

    @grosze.setter
    def grosze(self, value):
        _check_amount(value, "grosze")
        self._total = (self._total // 100) * 100 + value

    @property
    def total_grosze(self):
        return self._total

    def __add__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return Price._from_total(self._total + other._total)

    def __sub__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return Price._from_total(self._total - other._total)

    def __mul__(self, multiplier):
        if isinstance(multiplier, bool) or not isinstance(multiplier, int):
            return NotImplemented
        return Price._from_total(self._total * multiplier)

    __rmul__ = __mul__

    def __truediv__(self, divider):
        if isinstance(divider, bool) or not isinstance(divider, int):
            return NotImplemented
        if divider <= 0:
            raise ZeroDivisionError("price can only be divided by a positive integer")
        return Price._from_total(self._total // divider)

    def __eq__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return self._total == other._total

    def __lt__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return self._total < other._total

    __hash__ = None

    def __repr__(self):
        return f"Price({self.zlotys}, {self.grosze})"

    def __str__(self):
        return f"{self.zlotys},{self.grosze:02d} PLN"