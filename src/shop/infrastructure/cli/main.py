import click

from shop.infrastructure.cli.basket_commands import (
    basket_add,
    basket_clear,
    basket_create,
    basket_remove,
    basket_show,
    basket_update,
)
from shop.infrastructure.cli.order_commands import (
    order_cancel,
    order_checkout,
    order_confirm,
    order_deliver,
    order_list,
    order_ship,
    order_show,
)
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_show,
    product_stock,
    product_update,
)
from shop.infrastructure.config import get_settings
from shop.infrastructure.logging import setup_logging


@click.group()
@click.option("--json", "as_json", is_flag=True, default=False, help="Print results as JSON.")
def cli(as_json: bool) -> None:
    """Shop: products, baskets and orders."""
    setup_logging(get_settings())


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def basket() -> None:
    """Manage shopping baskets."""


@cli.group()
def order() -> None:
    """Check out baskets and manage orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_stock)
product.add_command(product_update)
basket.add_command(basket_add)
basket.add_command(basket_clear)
basket.add_command(basket_create)
basket.add_command(basket_remove)
basket.add_command(basket_show)
basket.add_command(basket_update)
order.add_command(order_cancel)
order.add_command(order_checkout)
order.add_command(order_confirm)
order.add_command(order_deliver)
order.add_command(order_list)
order.add_command(order_ship)
order.add_command(order_show)
