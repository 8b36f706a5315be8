"""First-in, first-out queue of clients waiting in the pharmacy."""

from collections import deque

from pharmasim.client import BusinessClient, IndividualClient
from pharmasim.exceptions import ClientsQueueIsAlreadyEmpty


class ClientsQueue:
    """Clients in order of arrival."""

    def __init__(self):
        self._clients = deque()

    def push_business_client(self, name, surname, shopping_list, probability_of_actions):
        self._clients.append(BusinessClient(name, surname, shopping_list, probability_of_actions))

    def push_individual_client(self, name, surname, shopping_list, probability_of_actions):
        self._clients.append(IndividualClient(name, surname, shopping_list, probability_of_actions))

    def pop_client(self):
        """Remove and return the client who came first."""
        if not self._clients:
            raise ClientsQueueIsAlreadyEmpty()
        return self._clients.popleft()

    def is_empty(self):
        return not self._clients

    def __len__(self):
        return len(self._clients)

    def __iter__(self):
        return iter(self._clients)