"""Parts of a turn-based pharmacy simulation: prices, medicines, inventory, shopping lists, clients, queues, counters and a turn log."""

__version__ = "0.1.0"