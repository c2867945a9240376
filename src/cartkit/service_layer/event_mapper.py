"""Conversions between cart domain events and plain records.

A record is a JSON-compatible dict holding the `event_type` discriminant and
the event's attributes as primitives, e.g.::

    {
        "event_type": "ITEM_ADDED",
        "cart_id": "…",
        "occurred_on": "2025-01-01T00:00:00+00:00",
        "item_id": "…",
        "price": 100,
        "quantity": 2,
    }
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from cartkit.domain.events import (
    CART_EVENT_REGISTRY,
    CartEventType,
    ItemAdded,
    ItemQuantityUpdated,
    ItemRemoved,
)
from cartkit.domain.utils import assert_never
from cartkit.domain.value_objects import CartId, ItemId, OccurredOn, Price, Quantity

from .errors import InvalidEventRecordError, UnknownEventTypeError

if TYPE_CHECKING:
    from cartkit.domain.events import CartDomainEvent

logger = logging.getLogger(__name__)


class EventMapper:
    """Maps between cart domain events and plain records."""

    def __init__(
        self, event_registry: Mapping[CartEventType, type[CartDomainEvent]] | None = None
    ) -> None:
        self.event_registry = (
            event_registry if event_registry is not None else CART_EVENT_REGISTRY
        )

    @staticmethod
    def to_record(event: CartDomainEvent) -> dict[str, Any]:
        """Convert a cart event to a plain record."""
        record: dict[str, Any] = {
            "event_type": event.event_type.value,
            "cart_id": event.cart_id.value,
            "occurred_on": event.occurred_on.isoformat(),
            "item_id": event.item_id.value,
        }
        match event:
            case ItemAdded():
                record["price"] = event.price.value
                record["quantity"] = event.quantity.value
            case ItemRemoved():
                pass
            case ItemQuantityUpdated():
                record["quantity"] = event.quantity.value
            case _:
                assert_never(event)
        return record

    def to_records(self, events: Iterable[CartDomainEvent]) -> list[dict[str, Any]]:
        """Convert a sequence of cart events, preserving order."""
        return [self.to_record(event) for event in events]

    def from_record(self, record: Mapping[str, Any]) -> CartDomainEvent:
        """Convert a plain record back to a cart event.

        Raises:
            UnknownEventTypeError: If `event_type` is missing or unknown.
            InvalidEventRecordError: If a required field is missing or the
                timestamp cannot be parsed.
            ValidationError: If a value is rejected by its value object.
        """
        raw_type = record.get("event_type")
        try:
            event_type = CartEventType(raw_type)
        except ValueError as e:
            raise UnknownEventTypeError(raw_type) from e
        if not (event_cls := self.event_registry.get(event_type)):
            raise UnknownEventTypeError(raw_type)

        try:
            values: dict[str, Any] = {
                "cart_id": CartId.of(record["cart_id"]),
                "occurred_on": OccurredOn.of(
                    _parse_instant(event_type, record["occurred_on"])
                ),
                "item_id": ItemId.of(record["item_id"]),
            }
            for name in _PAYLOAD_FIELDS[event_type]:
                values[name] = _PAYLOAD_TYPES[name].of(record[name])
        except KeyError as e:
            raise InvalidEventRecordError(
                event_type.value, f"missing field {e.args[0]!r}"
            ) from e

        logger.debug(
            "Mapped %s record for cart %s", event_type.value, values["cart_id"]
        )
        return event_cls.create(**values)

    def from_records(
        self, records: Iterable[Mapping[str, Any]]
    ) -> list[CartDomainEvent]:
        """Convert a sequence of plain records, preserving order."""
        return [self.from_record(record) for record in records]


_PAYLOAD_FIELDS: dict[CartEventType, tuple[str, ...]] = {
    CartEventType.ITEM_ADDED: ("price", "quantity"),
    CartEventType.ITEM_REMOVED: (),
    CartEventType.ITEM_QUANTITY_UPDATED: ("quantity",),
}

_PAYLOAD_TYPES: dict[str, type[Price] | type[Quantity]] = {
    "price": Price,
    "quantity": Quantity,
}


def _parse_instant(event_type: CartEventType, raw: object) -> datetime:
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise InvalidEventRecordError(
            event_type.value, f"occurred_on must be an ISO-8601 string, got {raw!r}"
        )
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise InvalidEventRecordError(
            event_type.value, f"unparsable occurred_on {raw!r}"
        ) from e
