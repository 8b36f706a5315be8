# pharmasim

Building blocks of a turn-based pharmacy simulation: amounts of money,
medicines and their prices, the stock kept in an inventory, clients with
shopping lists, the queue they stand in, the counters that serve them, and a
log stamped with the turn number. The package has no dependencies outside the
standard library.

## Prices

`pharmasim.price.Price` holds a non-negative amount in zloty and grosze.
Grosze above 99 carry over into zloty. Prices can be added, subtracted
(a negative result raises `ValueError`), multiplied by a whole number,
divided by a positive whole number (the remainder in grosze is dropped) and
compared.

```python
from pharmasim.price import Price

total = Price(1345, 34) + Price(1345, 178)
print(total)                  # 2692,12 PLN
print(total.zlotys, total.grosze)
print(Price(1346, 78) / 2)    # 673,39 PLN
```

## Medicines

`pharmasim.medicine` defines the `Affliction` and `ActiveSubstance`
enumerations and the abstract `Medicine` with two kinds, `Capsules` and
`Drops`. Every medicine has a name, an id numbered from 1
(`Medicine.reset_ids()` restarts it), the affliction it treats, an active
substance with a dose in milligrams, a base price and an amount kept in the
pharmacy. Each kind adds its own margin on top of the base price
(`calculate_price()`) and has its own prescription limits per substance
(`check_is_on_prescription()`).

```python
from pharmasim.medicine import ActiveSubstance, Affliction, Capsules, Drops
from pharmasim.price import Price

capsules = Capsules("Capsules1", Affliction.ACHE, ActiveSubstance.ASPIRIN,
                    200, Price(16, 99), 100, 30)
drops = Drops("Drops1", Affliction.PAIN, ActiveSubstance.METFORMIN,
              1000, Price(23, 0), 100, 100)

print(capsules.calculate_price())         # 17,83 PLN
print(drops.check_is_on_prescription())   # True
print(capsules.represent_as_string())
capsules.decrement()                      # one package fewer in stock
```

## Shopping lists and clients

`pharmasim.shopping.ShoppingList` keeps `ShoppingItem`s in the order they were
added; adding the same medicine again raises its count. `remove`, `replace`
and `change_amount` (where an amount of 0 removes the entry) raise
`MedicineDoesntExistOnList` for a medicine that is not on the list.
`total_netto_price()` sums the prices of all items.

`pharmasim.client` has `IndividualClient` (23% tax) and `BusinessClient`
(8% tax). A client takes its own copy of the shopping list it is given.
Its `probability_of_actions` must lie in [0, 1], otherwise
`ProbabilityOutOfRange` is raised.

```python
from pharmasim.client import IndividualClient
from pharmasim.shopping import ShoppingList

shopping = ShoppingList()
shopping.add(capsules, 3)

client = IndividualClient("Jan", "Kowalski", shopping, 0.789)
print(client.calculate_netto_price())   # 53,49 PLN
print(client.calculate_tax())           # 12,30 PLN
print(client.calculate_brutto_price())  # 65,79 PLN
```

## Queue, counters and inventory

```python
from pharmasim.clients_queue import ClientsQueue
from pharmasim.counters import CountersList
from pharmasim.inventory import Inventory

queue = ClientsQueue()
queue.push_individual_client("Jan", "Kowalski", shopping, 0.789)
first = queue.pop_client()          # ClientsQueueIsAlreadyEmpty when empty

counters = CountersList(5, 3)       # five counters, the first three open
counters.next_turn()                # open counters count one more turn
free = counters.get_open_counter()  # first open, unoccupied counter
longest = counters.find_longest_working()
counters.close_counter(longest.id)

inventory = Inventory()
inventory.add_medicine(capsules)
inventory.add_medicine(drops)
inventory.pick_medicine(capsules)          # one package, if any is left
inventory.pick_medicine(capsules, 5)       # ValueError if fewer are left
cheaper = inventory.find_substitute(drops) # cheaper medicine in stock, or None
print(inventory.number_of_medicines())     # 2
```

`find_general_substitute` returns any medicine in stock for the same
affliction, and `find_random_medicine` picks one at random, for a given
affliction or a random one.

## Logging and input files

`pharmasim.logger.Logger` writes every value, prefixed with `[turn] `, both
to an output file and to standard output, and waits `delay` seconds (2 by
default) after each one. `next_turn()` advances the turn number. Use it as a
context manager so the file is closed.

```python
from pharmasim.logger import Logger

with Logger("run.log", delay=0) as log:
    log.write("Simulation begins").newline()
    log.next_turn()
```

`pharmasim.input_files` opens and reads the lists the simulation draws from:
`open_verified(path)` opens a file or raises `ValueError`,
`names_from_files(first, last)` returns a `Names` with first and last names,
and `medicine_names_from_file(file)` returns a list of medicine names, one per
line with carriage returns stripped. `verify_output_path(path)` returns a path
ending in `log` unchanged, appends `output.log` to a path ending in `/`, and
raises `ValueError` otherwise.

## What the package does not do

It provides the parts of the simulation, not the simulation itself: there is
no pharmacy object that ties them together, no turn loop, no transactions at
the counters, no loading of a JSON configuration and no command-line program.
The exceptions `SimulationFinishedEarlier`, `TransactionGotWrongCounter`,
`WrongJSONPath` and `IncorrectDataFromJSON` are defined in
`pharmasim.exceptions` for such code but nothing in the package raises them.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```