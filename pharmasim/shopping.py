"""Shopping lists carried by clients."""

from dataclasses import dataclass

from pharmasim.exceptions import MedicineDoesntExistOnList
from pharmasim.medicine import Medicine
from pharmasim.price import Price


@dataclass
class ShoppingItem:
    """A medicine together with how many packages of it are wanted."""

    medicine: Medicine
    count: int

    def increase(self, number):
        self.count += number

    def total_price(self):
        return self.medicine.calculate_price() * self.count

    def __str__(self):
        return f"{self.count} x {self.medicine.name} ({self.medicine.id})"


class ShoppingList:
    """Ordered items to buy; each medicine appears at most once."""

    def __init__(self):
        self._items = []

    def _index(self, medicine):
        for index, item in enumerate(self._items):
            if item.medicine is medicine:
                return index
        raise MedicineDoesntExistOnList(medicine.name)

    def add(self, medicine, count):
        """Add packages of a medicine, merging with an existing entry."""
        try:
            self._items[self._index(medicine)].increase(count)
        except MedicineDoesntExistOnList:
            self._items.append(ShoppingItem(medicine, count))

    def remove(self, medicine):
        """Remove the entry for a medicine and return it."""
        return self._items.pop(self._index(medicine))

    def replace(self, old, new):
        """Put another medicine in place of one, keeping the count."""
        self._items[self._index(old)].medicine = new

    def change_amount(self, medicine, count):
        """Set how many packages of a medicine are wanted; 0 removes it."""
        index = self._index(medicine)
        if count == 0:
            del self._items[index]
        else:
            self._items[index].count = count

    def total_netto_price(self):
        return sum((item.total_price() for item in self._items), Price())

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __copy__(self):
        duplicate = ShoppingList()
        duplicate._items = [ShoppingItem(item.medicine, item.count) for item in self._items]
        return duplicate

    def __repr__(self):
        return f"ShoppingList({self._items!r})"