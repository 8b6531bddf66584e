"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is flattened to
integer cents plus a currency code; timestamps become ISO-8601 strings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from shop.domain.model.basket import Basket
from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.value_objects import DEFAULT_CURRENCY


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    description: str
    price: int  # cents
    currency: str
    stock: int
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class LineItemDTO:
    """A basket or order line."""

    product_id: str
    quantity: int
    price: int
    currency: str
    subtotal: int

    def to_dict(self) -> dict:
        return asdict(self)


BasketItemDTO = LineItemDTO
OrderItemDTO = LineItemDTO


@dataclass(frozen=True)
class BasketDTO:

    id: str
    items: tuple[LineItemDTO, ...]
    total: int
    currency: str
    item_count: int
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["items"] = [item.to_dict() for item in self.items]
        return data


@dataclass(frozen=True)
class OrderDTO:

    id: str
    items: tuple[LineItemDTO, ...]
    total: int
    currency: str
    status: str
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["items"] = [item.to_dict() for item in self.items]
        return data


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price.amount,
        currency=product.price.currency,
        stock=product.stock.value,
        created_at=product.created_at.isoformat(),
        updated_at=product.updated_at.isoformat(),
    )


def basket_to_dto(basket: Basket) -> BasketDTO:
    total = basket.total()
    return BasketDTO(
        id=basket.id,
        items=tuple(
            LineItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                price=item.price.amount,
                currency=item.price.currency,
                subtotal=item.subtotal.amount,
            )
            for item in basket.items
        ),
        total=total.amount,
        currency=total.currency if basket.items else DEFAULT_CURRENCY,
        item_count=basket.item_count(),
        created_at=basket.created_at.isoformat(),
        updated_at=basket.updated_at.isoformat(),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        items=tuple(
            LineItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                price=item.price.amount,
                currency=item.price.currency,
                subtotal=item.subtotal.amount,
            )
            for item in order.items
        ),
        total=order.total.amount,
        currency=order.total.currency,
        status=order.status.value,
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )
