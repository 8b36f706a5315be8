"""Clients of the pharmacy and the taxes they pay."""

import copy
from abc import ABC, abstractmethod

from pharmasim.exceptions import ProbabilityOutOfRange


class Client(ABC):
    """A client with a shopping list; ids are numbered from 1."""

    _next_id = 1

    def __init__(self, name, surname, shopping_list, probability_of_actions):
        self.id = Client._next_id
        Client._next_id += 1
        self.name = name
        self.surname = surname
        self.shopping_list = copy.copy(shopping_list)
        self._probability_of_actions = 0.5
        self.probability_of_actions = probability_of_actions

    @property
    @abstractmethod
    def tax_percentage(self):
        """Percentage of the netto price paid as tax."""

    @property
    def probability_of_actions(self):
        """Chance, in [0, 1], that the client agrees to a change at the counter."""
        return self._probability_of_actions

    @probability_of_actions.setter
    def probability_of_actions(self, value):
        if not 0 <= value <= 1:
            raise ProbabilityOutOfRange(value)
        self._probability_of_actions = value

    def replace_medicine(self, old, new):
        self.shopping_list.replace(old, new)

    def add_medicine(self, medicine, count):
        self.shopping_list.add(medicine, count)

    def remove_medicine(self, medicine):
        return self.shopping_list.remove(medicine)

    def change_medicine_amount(self, medicine, count):
        self.shopping_list.change_amount(medicine, count)

    def calculate_netto_price(self):
        return self.shopping_list.total_netto_price()

    def calculate_tax(self):
        return self.calculate_netto_price() * self.tax_percentage / 100

    def calculate_brutto_price(self):
        return self.calculate_netto_price() + self.calculate_tax()

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, {self.surname!r}, id={self.id})"

    @staticmethod
    def reset_ids():
        """Restart client numbering from 1."""
        Client._next_id = 1


class IndividualClient(Client):
    """A private person paying the full tax."""

    tax_percentage = 23


class BusinessClient(Client):
    """A company paying the reduced tax."""

    tax_percentage = 8