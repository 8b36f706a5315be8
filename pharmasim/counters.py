"""Pharmacy counters and the set of them."""


class Counter:
    """A service counter that may be open and occupied; ids are numbered from 1."""

    _next_id = 1

    def __init__(self, opened):
        self.id = Counter._next_id
        Counter._next_id += 1
        self.time_opened = 0
        self.opened = opened
        self.occupied = False

    def tick(self):
        """Count one more turn of work."""
        self.time_opened += 1
        return self

    def open(self):
        self.opened = True

    def close(self):
        self.opened = False
        self.time_opened = 0

    def __lt__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        return self.id < other.id

    def __repr__(self):
        return f"Counter(id={self.id}, opened={self.opened}, time_opened={self.time_opened})"

    @staticmethod
    def reset_ids():
        """Restart counter numbering from 1."""
        Counter._next_id = 1


class CountersList:
    """All counters of the pharmacy, the first ones opened."""

    def __init__(self, number_of_counters, opened_counters):
        if number_of_counters < opened_counters:
            raise ValueError("You cannot open more counters than there is in the pharmacy")
        self._counters = [Counter(index < opened_counters) for index in range(number_of_counters)]

    @property
    def opened_counters(self):
        return sum(counter.opened for counter in self._counters)

    def find_longest_working(self):
        """The counter open for the most turns; the earliest one on ties."""
        return max(self._counters, key=lambda counter: counter.time_opened)

    def get_counter(self, counter_id):
        for counter in self._counters:
            if counter.id == counter_id:
                return counter
        raise ValueError("There is no counter of such id")

    def open_counter(self, counter_id):
        self.get_counter(counter_id).open()

    def close_counter(self, counter_id):
        self.get_counter(counter_id).close()

    def get_open_counter(self):
        """The first counter that is open and free."""
        for counter in self._counters:
            if counter.opened and not counter.occupied:
                return counter
        raise ValueError("No opened counters")

    def next_turn(self):
        for counter in self._counters:
            if counter.opened:
                counter.tick()

    def __len__(self):
        return len(self._counters)

    def __iter__(self):
        return iter(self._counters)