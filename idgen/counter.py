"""Per-namespace sequence counters.

Each namespace owns one unsigned counter. Drawing a seed increments the
counter and reduces the new value modulo SEED_DIV, so seeds run
1, 2, ..., 99999, 0, 1, ... for the lifetime of the registry.
"""

import threading

from core.errors import NamespaceNotInitialized
from internal.logging import get_logger

SEED_DIV = 100_000


class Counter:
    __slots__ = ("_value", "_lock")

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    def add_get(self, step=1):
        """Increment by ``step`` and return the new value as one atomic step."""
        with self._lock:
            self._value += step
            return self._value

    @property
    def value(self):
        return self._value


class SeedRegistry:
    """Namespace -> Counter mapping shared by everything minting IDs.

    Lookups are lock-free dict reads; only init() takes the registry lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counters = {}
        self._log = get_logger()

    def init(self, namespace):
        counter = Counter()
        with self._lock:
            replaced = namespace in self._counters
            self._counters[namespace] = counter
        if replaced:
            self._log.warn("counter reset", namespace=namespace)
        else:
            self._log.info(f"counter+ {namespace}")

    def next_seed(self, namespace):
        return self._lookup(namespace).add_get(1) % SEED_DIV

    def value(self, namespace):
        """Raw counter value, without advancing it."""
        return self._lookup(namespace).value

    def namespaces(self):
        return list(self._counters)

    def __contains__(self, namespace):
        return namespace in self._counters

    def __len__(self):
        return len(self._counters)

    def _lookup(self, namespace):
        try:
            return self._counters[namespace]
        except KeyError:
            raise NamespaceNotInitialized(namespace) from None
