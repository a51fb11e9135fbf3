"""Shared pytest fixtures: in-memory Mongo collection seeded with the menu."""

from collections.abc import Iterator

import mongomock
import pytest

from app.core.seed import rebuild
from app.models.menu_item import MenuItem
from app.repositories.menu_item_accessor import MenuItemAccessor

from tests.helpers import CountingSession


@pytest.fixture
def mongo_client() -> Iterator[mongomock.MongoClient]:
    """Fixture providing an in-memory Mongo client."""
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def collection(mongo_client: mongomock.MongoClient):
    """Fixture providing the menu collection rebuilt from seed data."""
    coll = mongo_client["restaurantdb"]["menuitems"]
    rebuild(coll)
    return coll


@pytest.fixture
def session(collection) -> CountingSession:
    return CountingSession(collection)


@pytest.fixture
def accessor(session: CountingSession) -> MenuItemAccessor:
    """Fixture providing an accessor bound to the seeded collection."""
    return MenuItemAccessor(session_factory=session)


@pytest.fixture
def test_items() -> dict[str, MenuItem]:
    """Items used across accessor and API tests."""
    return {
        "good_item": MenuItem(107, "ENT", "nothing", 99, False),
        "bad_item": MenuItem(777, "ENT", "nothing", 99, False),
        "item_to_add": MenuItem(888, "ENT", "poutine", 99, False),
        "item_to_delete": MenuItem(202, "ENT", "nothing", 99, False),
        "item_to_update": MenuItem(303, "ENT", "after update", 99, False),
    }
