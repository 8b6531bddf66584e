"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shop.application.add_product import AddProductHandler
from shop.application.dto import ProductDTO
from shop.application.remove_product import RemoveProductHandler
from shop.application.show_product import ListProductsHandler, ShowProductHandler
from shop.application.update_product import UpdateProductHandler, UpdateStockHandler
from shop.infrastructure.bootstrap import product_repository
from shop.infrastructure.cli.common import domain_errors, emit, format_cents
from shop.infrastructure.config import get_settings


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}")
    click.echo(f"Name:        {dto.name}")
    if dto.description:
        click.echo(f"Description: {dto.description}")
    click.echo(f"Price:       {format_cents(dto.price, dto.currency)}")
    click.echo(f"Stock:       {dto.stock}")
    click.echo(f"Updated:     {dto.updated_at}")


def _display_products(dtos: list[ProductDTO]) -> None:
    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>14} {'Stock':>7}")
    click.echo("-" * 82)
    for p in dtos:
        click.echo(
            f"{p.id:<38} {p.name:<20} {format_cents(p.price, p.currency):>14} {p.stock:>7}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--price", required=True, type=int, help="Price in cents (e.g. 1999).")
@click.option("--currency", default=None, help="Currency code (defaults to settings).")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
def product_add(
    name: str, description: str, price: int, currency: str | None, stock: int
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    with domain_errors():
        dto = handler.handle(
            name=name,
            description=description,
            price=price,
            currency=currency or get_settings().default_currency,
            stock=stock,
        )

    emit(dto, _display_product)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    with domain_errors():
        dto = handler.handle(product_id)

    emit(dto, _display_product)


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())
    emit(handler.handle(), _display_products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", default="", help="New description.")
@click.option("--price", required=True, type=int, help="New price in cents.")
@click.option("--currency", default=None, help="Currency code (defaults to settings).")
def product_update(
    product_id: str, name: str, description: str, price: int, currency: str | None
) -> None:
    """Update a product's name, description and price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    with domain_errors():
        dto = handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            price=price,
            currency=currency or get_settings().default_currency,
        )

    emit(dto, _display_product)


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--stock", required=True, type=int, help="New stock level.")
def product_stock(product_id: str, stock: int) -> None:
    """Replace a product's stock level."""
    handler = UpdateStockHandler(product_repo=product_repository())

    with domain_errors():
        dto = handler.handle(product_id=product_id, stock=stock)

    emit(dto, _display_product)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = RemoveProductHandler(product_repo=product_repository())

    with domain_errors():
        handler.handle(product_id)

    click.echo(f"Product {product_id} removed.")
