"""Global pytest fixtures for cartkit."""

from collections.abc import Callable, Iterator
from datetime import datetime, timezone

import pytest

from cartkit.adapters.id_generators import UUIDv4Generator
from cartkit.bootstrap import bootstrap
from cartkit.domain import collaborators
from cartkit.domain.aggregates import CartItem
from cartkit.domain.value_objects import ItemId, Number, OccurredOn, Price, Quantity

pytest_plugins = ["tests.fixtures.datagen"]

FIXED_INSTANT = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def installed_collaborators() -> Iterator[None]:
    """Install the default adapters for every test and forget them afterwards."""
    bootstrap(id_generator=UUIDv4Generator())
    yield
    collaborators.reset()


@pytest.fixture
def occurred_on() -> OccurredOn:
    """A fixed, timezone-aware instant."""
    return OccurredOn.of(FIXED_INSTANT)


@pytest.fixture
def make_item() -> Callable[..., CartItem]:
    """Factory fixture: build a cart line with a fresh item ID.

    Example:
        make_item(100, 2)  # price 100, quantity 2
    """

    def _make(
        price: Number = 100, quantity: Number = 1, item_id: ItemId | None = None
    ) -> CartItem:
        return CartItem(item_id or ItemId.create(), Price.of(price), Quantity.of(quantity))

    return _make
