"""Errors raised by the pharmacy simulation."""


class PharmacyError(Exception):
    """Base class of every error raised by the simulation."""


class ProbabilityOutOfRange(PharmacyError, ValueError):
    """A probability lies outside the closed range [0, 1]."""

    def __init__(self, probability):
        self.probability = probability
        super().__init__(f"Given probability ({probability}) is out of range [0; 1]")


class MedicineDoesntExistOnList(PharmacyError, ValueError):
    """A medicine was looked up on a shopping list that does not hold it."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Medicine {name} doesn't exist on the shopping list")


class ClientsQueueIsAlreadyEmpty(PharmacyError, IndexError):
    """A client was requested from an empty queue."""

    def __init__(self):
        super().__init__("Queue is already empty, so you cannot pop a Client")


class SimulationFinishedEarlier(PharmacyError, IndexError):
    """The simulation ran out of clients before its last turn."""

    def __init__(self):
        super().__init__("Simulation has been finished due to lack of clients in pharmacy")


class TransactionGotWrongCounter(PharmacyError, ValueError):
    """A transaction was started at a closed or occupied counter."""

    def __init__(self):
        super().__init__("Given counter to the transaction is closed or occupied")


class WrongJSONPath(PharmacyError, ValueError):
    """The configuration file could not be opened."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Given path: {path} is incorrect and file could not be opened.")


class IncorrectDataFromJSON(PharmacyError, ValueError):
    """The configuration file holds inconsistent values."""

    def __init__(self):
        super().__init__("Some data passed by JSON file are incorrect")