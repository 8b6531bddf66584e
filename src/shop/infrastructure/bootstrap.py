"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shop.infrastructure.config import get_settings
from shop.infrastructure.persistence.json_basket_repository import (
    JsonBasketRepository,
)
from shop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shop.infrastructure.persistence.json_unit_of_work import (
    BASKETS_FILE,
    ORDERS_FILE,
    PRODUCTS_FILE,
    JsonUnitOfWork,
)


def product_repository() -> JsonProductRepository:
    settings = get_settings()
    return JsonProductRepository(
        settings.data_dir / PRODUCTS_FILE, lock_timeout=settings.lock_timeout
    )


def basket_repository() -> JsonBasketRepository:
    settings = get_settings()
    return JsonBasketRepository(
        settings.data_dir / BASKETS_FILE, lock_timeout=settings.lock_timeout
    )


def order_repository() -> JsonOrderRepository:
    settings = get_settings()
    return JsonOrderRepository(
        settings.data_dir / ORDERS_FILE, lock_timeout=settings.lock_timeout
    )


def unit_of_work() -> JsonUnitOfWork:
    settings = get_settings()
    return JsonUnitOfWork(settings.data_dir, lock_timeout=settings.lock_timeout)
