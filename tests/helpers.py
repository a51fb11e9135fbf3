"""Test helpers shared by the unit suites."""

from collections.abc import Iterator
from contextlib import contextmanager

from app.core.seed import SEED_ITEMS

NUM_ITEMS = len(SEED_ITEMS)


class CountingSession:
    """Session factory over a fixed collection that records acquire/release."""

    def __init__(self, collection) -> None:
        self.collection = collection
        self.acquired = 0
        self.released = 0

    @contextmanager
    def __call__(self) -> Iterator:
        self.acquired += 1
        try:
            yield self.collection
        finally:
            self.released += 1
