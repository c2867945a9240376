"""cartkit cart CLI — inspect carts from their event history.

Commands
- ``cartkit cart replay EVENTS_FILE`` rebuilds a cart from a JSON array of event
  records and prints its lines and total (``--json`` for machine-readable output).
- ``cartkit cart new-id`` prints fresh identifiers from the configured generator.

Data goes to **stdout**; notices and errors go to **stderr**.

Failure modes
- Unreadable JSON, a non-array document or malformed records → ``ClickException``.
- Records rejected by the domain (bad IDs, negative amounts) → ``ClickException``
  carrying the validation message.
- A total that overflows to infinity under ``--json`` → ``ClickException``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TextIO

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from cartkit import config
from cartkit.bootstrap import bootstrap
from cartkit.domain.aggregates import Cart
from cartkit.domain.errors import DomainError
from cartkit.domain.value_objects import CartId
from cartkit.service_layer.errors import EventRecordError

from .helpers import error, success, warn

if TYPE_CHECKING:
    from cartkit.bootstrap import AppContainer

logger = logging.getLogger(__name__)

NOT_AN_ARRAY_MSG = "The events file must contain a JSON array of event records."
NOT_A_RECORD_MSG = "Event record #{index} is not a JSON object."
NOT_FINITE_MSG = "The cart total is too large to write as JSON."


def _bootstrap() -> AppContainer:
    try:
        return bootstrap()
    except config.UnsupportedIdGeneratorError as e:
        raise click.ClickException(str(e)) from e


def _load_records(events_file: TextIO) -> list[Mapping[str, Any]]:
    try:
        document = json.load(events_file)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {events_file.name}: {e}") from e
    if not isinstance(document, list):
        raise click.ClickException(NOT_AN_ARRAY_MSG)
    for index, record in enumerate(document, start=1):
        if not isinstance(record, dict):
            raise click.ClickException(NOT_A_RECORD_MSG.format(index=index))
    return document


def _cart_as_dict(cart: Cart) -> dict[str, Any]:
    return {
        "cart_id": cart.cart_id.value,
        "items": [
            {
                "item_id": item.item_id.value,
                "price": item.price.value,
                "quantity": item.quantity.value,
                "subtotal": item.subtotal,
            }
            for item in cart.items
        ],
        "total_price": cart.total_price,
    }


def _render_table(cart: Cart) -> None:
    table = Table(title=f"Cart {cart.cart_id}")
    table.add_column("Item", no_wrap=True)
    table.add_column("Price", justify="right")
    table.add_column("Quantity", justify="right")
    table.add_column("Subtotal", justify="right")
    for item in cart.items:
        table.add_row(
            item.item_id.value,
            str(item.price.value),
            str(item.quantity.value),
            str(item.subtotal),
        )
    console = Console()
    console.print(table)
    console.print(f"Total: {cart.total_price}")


@click.group(cls=clickx.ExtraGroup)
def cart() -> None:
    """Cart inspection commands."""


@cart.command()
@click.argument("events_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--json", "as_json", is_flag=True, help="Print the rebuilt cart as JSON."
)
def replay(events_file: TextIO, as_json: bool) -> None:
    """Rebuild a cart from a JSON array of event records."""
    app = _bootstrap()
    records = _load_records(events_file)

    try:
        events = app.event_mapper.from_records(records)
    except (EventRecordError, DomainError) as e:
        logger.debug("Rejected event records from %s", events_file.name, exc_info=True)
        error(str(e))
        raise click.ClickException(f"Cannot replay {events_file.name}.") from e

    if events:
        cart_id = events[0].cart_id
    else:
        warn("The events file is empty; replaying onto a fresh cart.")
        cart_id = CartId.create(app.id_generator)

    rebuilt = Cart.rehydrate(cart_id, events)
    logger.info(
        "Replayed %d event(s) onto cart %s (%d item(s))",
        len(events),
        cart_id,
        len(rebuilt.items),
    )

    if as_json:
        try:
            document = json.dumps(_cart_as_dict(rebuilt), indent=2, allow_nan=False)
        except ValueError as e:
            raise click.ClickException(NOT_FINITE_MSG) from e
        click.echo(document)
    else:
        _render_table(rebuilt)

    success(f"Replayed {len(events)} event(s) onto cart {cart_id}.")


@cart.command(name="new-id")
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="How many identifiers to print.",
)
def new_id(count: int) -> None:
    """Print fresh cart/item identifiers, one per line."""
    app = _bootstrap()
    for _ in range(count):
        click.echo(app.id_generator.new_id())
