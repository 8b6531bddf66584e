"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Callable, Iterator

import click

from shop.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StateConflictError,
)
from shop.domain.model.value_objects import Money


class NotFoundException(click.ClickException):
    exit_code = 4


class ConflictException(click.ClickException):
    exit_code = 3


@contextmanager
def domain_errors() -> Iterator[None]:
    """Turn domain exceptions into click errors with a distinct exit code."""
    try:
        yield
    except EntityNotFoundError as exc:
        raise NotFoundException(str(exc)) from exc
    except StateConflictError as exc:
        raise ConflictException(str(exc)) from exc
    except DomainException as exc:
        raise click.ClickException(str(exc)) from exc


def wants_json() -> bool:
    ctx = click.get_current_context()
    return bool(ctx.find_root().params.get("as_json"))


def emit(result, render: Callable[[object], None]) -> None:
    """Print a DTO (or list of DTOs) as JSON or through ``render``."""
    if wants_json():
        if isinstance(result, list):
            payload = [item.to_dict() for item in result]
        else:
            payload = result.to_dict()
        click.echo(json.dumps(payload, indent=2))
    else:
        render(result)


def format_cents(amount: int, currency: str) -> str:
    return str(Money(amount, currency))


def echo_lines(items) -> None:
    """Shared table for basket and order lines."""
    click.echo(f"  {'Product':<38} {'Qty':>5} {'Price':>14} {'Subtotal':>14}")
    click.echo(f"  {'-'*74}")
    for item in items:
        click.echo(
            f"  {item.product_id:<38} {item.quantity:>5} "
            f"{format_cents(item.price, item.currency):>14} "
            f"{format_cents(item.subtotal, item.currency):>14}"
        )
    click.echo(f"  {'-'*74}")
