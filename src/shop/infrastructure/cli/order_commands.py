"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from shop.application.checkout import CheckoutHandler
from shop.application.dto import OrderDTO
from shop.application.show_order import ListOrdersHandler, ShowOrderHandler
from shop.application.update_order_status import (
    CancelOrderHandler,
    ConfirmOrderHandler,
    DeliverOrderHandler,
    ShipOrderHandler,
)
from shop.infrastructure.bootstrap import order_repository, unit_of_work
from shop.infrastructure.cli.common import domain_errors, echo_lines, emit, format_cents


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    click.echo()
    echo_lines(dto.items)
    click.echo(f"  {'Order Total':<45} {format_cents(dto.total, dto.currency):>29}")


def _display_orders(dtos: list[OrderDTO]) -> None:
    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<38} {'Status':<10} {'Total':>14}  {'Created'}")
    click.echo("-" * 90)
    for o in dtos:
        click.echo(
            f"{o.id:<38} {o.status:<10} {format_cents(o.total, o.currency):>14}  {o.created_at}"
        )


@click.command("checkout")
@click.option("--basket", "basket_id", required=True, help="Basket ID to check out.")
def order_checkout(basket_id: str) -> None:
    """Turn a basket into an order (reduces product stock)."""
    handler = CheckoutHandler(uow=unit_of_work())

    with domain_errors():
        dto = handler.handle(basket_id)

    emit(dto, _display_order)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    with domain_errors():
        dto = handler.handle(order_id)

    emit(dto, _display_order)


@click.command("list")
def order_list() -> None:
    """List all orders, oldest first."""
    handler = ListOrdersHandler(order_repo=order_repository())
    emit(handler.handle(), _display_orders)


def _transition_command(name: str, handler_cls, help_text: str) -> click.Command:
    @click.command(name, help=help_text)
    @click.option("--id", "order_id", required=True, help="Order ID.")
    def command(order_id: str) -> None:
        handler = handler_cls(order_repo=order_repository())

        with domain_errors():
            dto = handler.handle(order_id)

        emit(dto, lambda d: click.echo(f"Order {d.id} is now {d.status}."))

    return command


order_confirm = _transition_command(
    "confirm", ConfirmOrderHandler, "Confirm a pending order."
)
order_ship = _transition_command("ship", ShipOrderHandler, "Mark a confirmed order shipped.")
order_deliver = _transition_command(
    "deliver", DeliverOrderHandler, "Mark a shipped order delivered."
)
order_cancel = _transition_command(
    "cancel", CancelOrderHandler, "Cancel an order that is not yet delivered."
)
