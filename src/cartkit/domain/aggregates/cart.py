"""Cart Aggregate"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from cartkit.domain import errors
from cartkit.domain.events import (
    CartDomainEvent,
    ItemAdded,
    ItemQuantityUpdated,
    ItemRemoved,
)
from cartkit.domain.utils import assert_never
from cartkit.domain.value_objects import (
    CartId,
    ItemId,
    Number,
    OccurredOn,
    Price,
    Quantity,
)

from .base import Aggregate


@dataclass(frozen=True, slots=True)
class CartItem:
    """A line of a cart. Items have no identity of their own beyond `item_id`."""

    item_id: ItemId
    price: Price
    quantity: Quantity

    @property
    def subtotal(self) -> Number:
        """Price times quantity."""
        return self.price.value * self.quantity.value


def apply_event(
    items: tuple[CartItem, ...], event: CartDomainEvent
) -> tuple[CartItem, ...]:
    """Compute the items that follow from applying `event` to `items`.

    Shared by command methods and replay. Business rules are checked by the
    commands before an event exists; here an update for an unknown item is
    simply a no-op.

    Raises:
        UnreachableError: If `event` is not a member of `CartDomainEvent`.
    """
    match event:
        case ItemAdded():
            return (*items, CartItem(event.item_id, event.price, event.quantity))
        case ItemRemoved():
            return tuple(item for item in items if item.item_id != event.item_id)
        case ItemQuantityUpdated():
            return tuple(
                replace(item, quantity=event.quantity)
                if item.item_id == event.item_id
                else item
                for item in items
            )
        case _:
            assert_never(event)


@dataclass(frozen=True, slots=True, eq=False)
class Cart(Aggregate[CartDomainEvent]):
    """Aggregate root representing a shopping cart.

    Every command returns a new `Cart` and leaves the receiver untouched. When a
    command has nothing to do it returns the receiver itself, so callers can
    detect a no-op with ``new is old``.
    """

    cart_id: CartId
    items: tuple[CartItem, ...] = ()
    pending_events: tuple[CartDomainEvent, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "pending_events", tuple(self.pending_events))

    # --- Construction Paths ---

    @classmethod
    def create(cls, items: Iterable[CartItem] = ()) -> "Cart":
        """Create a cart with a fresh ID holding `items`.

        No events are recorded and duplicate item IDs are kept as given.
        """
        return cls(CartId.create(), tuple(items))

    @classmethod
    def rehydrate(cls, cart_id: CartId, events: Iterable[CartDomainEvent]) -> "Cart":
        """Rebuild the cart `cart_id` from its past events."""
        return cls(cart_id).replay(events)

    # --- Queries ---

    @property
    def total_price(self) -> Number:
        """Sum of price times quantity over all items, computed on access."""
        return sum((item.subtotal for item in self.items), 0)

    def has_item(self, item_id: ItemId) -> bool:
        """Return True if any line holds `item_id`."""
        return any(item.item_id == item_id for item in self.items)

    # --- State Transitions ---

    def add_item(
        self, item: CartItem, *, occurred_on: OccurredOn | None = None
    ) -> "Cart":
        """Add a line to the cart.

        Always records an `ItemAdded` event. An item whose ID is already present
        is added as a second line; quantities are not merged.

        Args:
            item: The line to add.
            occurred_on: When it happened. Defaults to now.
        """
        event = ItemAdded.create(
            self.cart_id,
            occurred_on or OccurredOn.now(),
            item.item_id,
            item.price,
            item.quantity,
        )
        return self._record(event)

    def remove_item(
        self, item_id: ItemId | None, *, occurred_on: OccurredOn | None = None
    ) -> "Cart":
        """Remove every line holding `item_id`.

        Returns the receiver unchanged if `item_id` is None or not in the cart.
        """
        if item_id is None or not self.has_item(item_id):
            return self

        event = ItemRemoved.create(
            self.cart_id, occurred_on or OccurredOn.now(), item_id
        )
        return self._record(event)

    def update_item_quantity(
        self,
        item_id: ItemId | None,
        quantity: Quantity,
        *,
        occurred_on: OccurredOn | None = None,
    ) -> "Cart":
        """Set the quantity of the lines holding `item_id`.

        Returns the receiver unchanged if `item_id` is None.

        Raises:
            ItemNotFoundError: If no line holds `item_id`.
        """
        if item_id is None:
            return self
        if not self.has_item(item_id):
            raise errors.ItemNotFoundError(item_id.value)

        event = ItemQuantityUpdated.create(
            self.cart_id, occurred_on or OccurredOn.now(), item_id, quantity
        )
        return self._record(event)

    # --- Event Application ---

    def _blank(self) -> "Cart":
        return Cart(self.cart_id)

    def _apply(self, event: CartDomainEvent) -> "Cart":
        return Cart(self.cart_id, apply_event(self.items, event), self.pending_events)

    def _with_pending_events(
        self, pending_events: tuple[CartDomainEvent, ...]
    ) -> "Cart":
        return replace(self, pending_events=pending_events)
