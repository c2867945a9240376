"""Events

Cart domain events form a closed union (`CartDomainEvent`). Each variant is
built through its `create()` factory only; calling the class directly raises
`TypeError`, so every event carries a deliberate cart reference and timestamp.
"""

import abc
from dataclasses import InitVar, dataclass, field
from enum import Enum
from typing import Literal, TypeAlias

from cartkit.domain.value_objects import CartId, ItemId, OccurredOn, Price, Quantity

_FACTORY_KEY = object()


class CartEventType(Enum):
    """Discriminant of the cart event union."""

    ITEM_ADDED = "ITEM_ADDED"
    ITEM_REMOVED = "ITEM_REMOVED"
    ITEM_QUANTITY_UPDATED = "ITEM_QUANTITY_UPDATED"


@dataclass(frozen=True, slots=True, kw_only=True)
class CartEvent(abc.ABC):
    """Base class for all cart events."""

    cart_id: CartId
    occurred_on: OccurredOn
    _factory_key: InitVar[object] = None

    def __post_init__(self, _factory_key: object) -> None:
        if _factory_key is not _FACTORY_KEY:
            raise TypeError(
                f"{type(self).__name__} must be built with "
                f"{type(self).__name__}.create()"
            )


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemAdded(CartEvent):
    """Event indicating that an item has been added to a cart."""

    item_id: ItemId
    price: Price
    quantity: Quantity
    event_type: Literal[CartEventType.ITEM_ADDED] = field(
        default=CartEventType.ITEM_ADDED, init=False
    )

    @classmethod
    def create(
        cls,
        cart_id: CartId,
        occurred_on: OccurredOn,
        item_id: ItemId,
        price: Price,
        quantity: Quantity,
    ) -> "ItemAdded":
        return cls(
            cart_id=cart_id,
            occurred_on=occurred_on,
            item_id=item_id,
            price=price,
            quantity=quantity,
            _factory_key=_FACTORY_KEY,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemRemoved(CartEvent):
    """Event indicating that an item has been removed from a cart."""

    item_id: ItemId
    event_type: Literal[CartEventType.ITEM_REMOVED] = field(
        default=CartEventType.ITEM_REMOVED, init=False
    )

    @classmethod
    def create(
        cls, cart_id: CartId, occurred_on: OccurredOn, item_id: ItemId
    ) -> "ItemRemoved":
        return cls(
            cart_id=cart_id,
            occurred_on=occurred_on,
            item_id=item_id,
            _factory_key=_FACTORY_KEY,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ItemQuantityUpdated(CartEvent):
    """Event indicating that the quantity of an item in a cart has changed."""

    item_id: ItemId
    quantity: Quantity
    event_type: Literal[CartEventType.ITEM_QUANTITY_UPDATED] = field(
        default=CartEventType.ITEM_QUANTITY_UPDATED, init=False
    )

    @classmethod
    def create(
        cls,
        cart_id: CartId,
        occurred_on: OccurredOn,
        item_id: ItemId,
        quantity: Quantity,
    ) -> "ItemQuantityUpdated":
        return cls(
            cart_id=cart_id,
            occurred_on=occurred_on,
            item_id=item_id,
            quantity=quantity,
            _factory_key=_FACTORY_KEY,
        )


CartDomainEvent: TypeAlias = ItemAdded | ItemRemoved | ItemQuantityUpdated

# Registry of cart event types for deserialization
CART_EVENT_REGISTRY: dict[CartEventType, type[CartDomainEvent]] = {
    CartEventType.ITEM_ADDED: ItemAdded,
    CartEventType.ITEM_REMOVED: ItemRemoved,
    CartEventType.ITEM_QUANTITY_UPDATED: ItemQuantityUpdated,
}
