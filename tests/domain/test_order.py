"""Unit tests for the Order aggregate and its status state machine."""

import pytest

from shop.domain.exceptions import (
    AlreadyCancelledError,
    AlreadyDeliveredError,
    CurrencyMismatchError,
    EmptyBasketError,
    InvalidTransitionError,
)
from shop.domain.model.basket import Basket, BasketItem
from shop.domain.model.order import Order, OrderStatus
from shop.domain.model.value_objects import Money, Quantity


def _make_item(product_id: str = "p1", qty: int = 1, price: int = 1500, currency: str = "USD"):
    return BasketItem(product_id, Quantity(qty), Money(price, currency))


def _order_in(status: OrderStatus) -> Order:
    order = Order.create([_make_item()])
    order.status = status
    return order


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create([_make_item(qty=2, price=1000)])
        assert order.status == OrderStatus.PENDING
        assert len(order.items) == 1
        assert order.total == Money(2000, "USD")
        assert order.id
        assert order.created_at == order.updated_at

    def test_total_is_sum_of_subtotals(self):
        order = Order.create([
            _make_item("p1", qty=3, price=1500),
            _make_item("p2", qty=5, price=2500),
        ])
        assert order.total == Money(17000, "USD")

    def test_empty_input_rejected(self):
        with pytest.raises(EmptyBasketError):
            Order.create([])

    def test_mixed_currencies_rejected(self):
        with pytest.raises(CurrencyMismatchError):
            Order.create([
                _make_item("p1", currency="USD"),
                _make_item("p2", currency="EUR"),
            ])

    def test_total_uses_item_currency(self):
        order = Order.create([_make_item(price=700, currency="EUR")])
        assert order.total == Money(700, "EUR")

    def test_items_are_a_snapshot_of_the_basket(self):
        basket = Basket.create()
        basket.add_item("p1", Quantity(2), Money(1000, "USD"))
        order = Order.create(basket.items)

        basket.add_item("p1", Quantity(5), Money(9999, "USD"))
        basket.clear()

        assert len(order.items) == 1
        assert order.items[0].quantity == Quantity(2)
        assert order.items[0].price == Money(1000, "USD")
        assert order.total == Money(2000, "USD")

    def test_items_cannot_be_appended(self):
        order = Order.create([_make_item()])
        assert isinstance(order.items, tuple)


class TestOrderTransitions:

    def test_full_lifecycle(self):
        order = Order.create([_make_item()])
        order.confirm()
        assert order.status == OrderStatus.CONFIRMED
        order.ship()
        assert order.status == OrderStatus.SHIPPED
        order.deliver()
        assert order.status == OrderStatus.DELIVERED

    def test_transition_bumps_updated_at(self):
        order = Order.create([_make_item()])
        before = order.updated_at
        order.confirm()
        assert order.updated_at >= before

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.CONFIRMED, OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED],
    )
    def test_confirm_only_from_pending(self, status):
        order = _order_in(status)
        with pytest.raises(InvalidTransitionError, match="expected PENDING"):
            order.confirm()
        assert order.status == status

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.PENDING, OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED],
    )
    def test_ship_only_from_confirmed(self, status):
        with pytest.raises(InvalidTransitionError, match="expected CONFIRMED"):
            _order_in(status).ship()

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.PENDING, OrderStatus.CONFIRMED, OrderStatus.DELIVERED, OrderStatus.CANCELLED],
    )
    def test_deliver_only_from_shipped(self, status):
        with pytest.raises(InvalidTransitionError, match="expected SHIPPED"):
            _order_in(status).deliver()

    @pytest.mark.parametrize(
        "status", [OrderStatus.PENDING, OrderStatus.CONFIRMED, OrderStatus.SHIPPED]
    )
    def test_cancel_from_non_terminal(self, status):
        order = _order_in(status)
        assert order.is_cancellable()
        order.cancel()
        assert order.status == OrderStatus.CANCELLED
        assert not order.is_cancellable()

    def test_cancel_delivered_rejected(self):
        order = _order_in(OrderStatus.DELIVERED)
        assert not order.is_cancellable()
        with pytest.raises(AlreadyDeliveredError):
            order.cancel()

    def test_cancel_twice_rejected(self):
        order = _order_in(OrderStatus.CANCELLED)
        with pytest.raises(AlreadyCancelledError):
            order.cancel()

    def test_deliver_then_cancel_fails(self):
        order = Order.create([_make_item()])
        order.confirm()
        order.ship()
        order.deliver()
        with pytest.raises(AlreadyDeliveredError):
            order.cancel()
        assert order.status == OrderStatus.DELIVERED
