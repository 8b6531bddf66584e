"""CLI commands for the Basket aggregate."""

from __future__ import annotations

import click

from shop.application.basket_handlers import (
    AddBasketItemHandler,
    ClearBasketHandler,
    CreateBasketHandler,
    RemoveBasketItemHandler,
    ShowBasketHandler,
    UpdateBasketItemHandler,
)
from shop.application.dto import BasketDTO
from shop.infrastructure.bootstrap import basket_repository, product_repository
from shop.infrastructure.cli.common import domain_errors, echo_lines, emit, format_cents


def _display_basket(dto: BasketDTO) -> None:
    click.echo(f"Basket {dto.id}  ({dto.item_count} units)")
    if not dto.items:
        click.echo("  (empty)")
        return
    click.echo()
    echo_lines(dto.items)
    click.echo(f"  {'Basket Total':<45} {format_cents(dto.total, dto.currency):>29}")


@click.command("create")
def basket_create() -> None:
    """Create a new, empty basket."""
    handler = CreateBasketHandler(basket_repo=basket_repository())
    emit(handler.handle(), _display_basket)


@click.command("show")
@click.option("--id", "basket_id", required=True, help="Basket ID.")
def basket_show(basket_id: str) -> None:
    """Show a basket's contents and total."""
    handler = ShowBasketHandler(basket_repo=basket_repository())

    with domain_errors():
        dto = handler.handle(basket_id)

    emit(dto, _display_basket)


@click.command("add")
@click.option("--id", "basket_id", required=True, help="Basket ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, type=int, show_default=True, help="Units to add.")
def basket_add(basket_id: str, product_id: str, quantity: int) -> None:
    """Add a product to a basket at its current price."""
    handler = AddBasketItemHandler(
        basket_repo=basket_repository(),
        product_repo=product_repository(),
    )

    with domain_errors():
        dto = handler.handle(basket_id, product_id, quantity)

    emit(dto, _display_basket)


@click.command("remove")
@click.option("--id", "basket_id", required=True, help="Basket ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
def basket_remove(basket_id: str, product_id: str) -> None:
    """Remove a product from a basket."""
    handler = RemoveBasketItemHandler(basket_repo=basket_repository())

    with domain_errors():
        dto = handler.handle(basket_id, product_id)

    emit(dto, _display_basket)


@click.command("update")
@click.option("--id", "basket_id", required=True, help="Basket ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def basket_update(basket_id: str, product_id: str, quantity: int) -> None:
    """Change the quantity of a product in a basket."""
    handler = UpdateBasketItemHandler(
        basket_repo=basket_repository(),
        product_repo=product_repository(),
    )

    with domain_errors():
        dto = handler.handle(basket_id, product_id, quantity)

    emit(dto, _display_basket)


@click.command("clear")
@click.option("--id", "basket_id", required=True, help="Basket ID.")
def basket_clear(basket_id: str) -> None:
    """Empty a basket."""
    handler = ClearBasketHandler(basket_repo=basket_repository())

    with domain_errors():
        dto = handler.handle(basket_id)

    emit(dto, _display_basket)
