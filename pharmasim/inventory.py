"""Stock of medicines grouped by the affliction they treat."""

import random

from pharmasim.medicine import Affliction


class Inventory:
    """Medicines kept by the pharmacy."""

    def __init__(self):
        self._by_affliction = {affliction: [] for affliction in Affliction}

    def add_medicine(self, medicine):
        shelf = self._by_affliction[medicine.affliction]
        if not any(item is medicine for item in shelf):
            shelf.append(medicine)

    def find_substitute(self, medicine):
        """A cheaper medicine in stock for the same affliction, or None."""
        price = medicine.calculate_price()
        return next(
            (
                candidate
                for candidate in self._by_affliction[medicine.affliction]
                if candidate.calculate_price() < price and self.is_in_stock(candidate)
            ),
            None,
        )

    def find_general_substitute(self, medicine):
        """Any medicine in stock for the same affliction, or None."""
        return next(
            (candidate for candidate in self._by_affliction[medicine.affliction] if self.is_in_stock(candidate)),
            None,
        )

    def pick_medicine(self, medicine, number=None):
        """Take packages out of stock.

        Without a number one package is taken if any is left; with a number
        that many are taken and running short is an error.
        """
        if number is None:
            if self.is_in_stock(medicine):
                medicine.decrement()
            return
        if medicine.amount_in_pharmacy < number:
            raise ValueError(f"only {medicine.amount_in_pharmacy} of {medicine.name} left in the pharmacy")
        for _ in range(number):
            medicine.decrement()

    def is_in_stock(self, medicine, number=None):
        """Whether any package is left, or more than the given number."""
        if number is None:
            return medicine.amount_in_pharmacy > 0
        return medicine.amount_in_pharmacy > number

    def how_many_in_stock(self, medicine):
        return medicine.amount_in_pharmacy

    def find_random_medicine(self, affliction=None):
        """A random medicine for the affliction, or for a random affliction."""
        if affliction is None:
            affliction = random.choice(list(Affliction))
        shelf = self._by_affliction[Affliction(affliction)]
        if not shelf:
            raise LookupError(f"no medicine for {affliction} in the inventory")
        return random.choice(shelf)

    def number_of_medicines(self, affliction=None):
        """How many kinds of medicine are kept, overall or for one affliction."""
        if affliction is None:
            return sum(len(shelf) for shelf in self._by_affliction.values())
        return len(self._by_affliction[Affliction(affliction)])