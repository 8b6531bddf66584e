"""Integration tests for the basket use cases."""

import pytest

from shop.application.basket_handlers import (
    AddBasketItemHandler,
    ClearBasketHandler,
    CreateBasketHandler,
    RemoveBasketItemHandler,
    ShowBasketHandler,
    UpdateBasketItemHandler,
)
from shop.domain.exceptions import (
    BasketNotFoundError,
    InsufficientStockError,
    ItemNotFoundError,
    CurrencyMismatchError,
    ProductNotFoundError,
    ValidationError,
)
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeBasketRepository, FakeProductRepository


def _setup():
    widget = Product.create("Widget", "", Money(1000, "USD"), Quantity(5))
    gadget = Product.create("Gadget", "", Money(250, "USD"), Quantity(100))
    basket_repo = FakeBasketRepository()
    product_repo = FakeProductRepository([widget, gadget])
    basket_id = CreateBasketHandler(basket_repo).handle().id
    return basket_repo, product_repo, basket_id, widget, gadget


class TestCreateAndShow:

    def test_create_persists_empty_basket(self):
        basket_repo = FakeBasketRepository()
        dto = CreateBasketHandler(basket_repo).handle()
        assert dto.items == ()
        assert dto.total == 0
        assert dto.currency == "USD"
        assert basket_repo.exists_by_id(dto.id)

    def test_show_unknown_basket(self):
        with pytest.raises(BasketNotFoundError):
            ShowBasketHandler(FakeBasketRepository()).handle("nope")


class TestAddItem:

    def test_adds_at_current_price(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        dto = AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 2)

        assert dto.total == 2000
        assert dto.item_count == 2
        assert dto.items[0].price == 1000
        assert ShowBasketHandler(basket_repo).handle(basket_id).total == 2000

    def test_other_currency_rejected_before_saving(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        euro = Product.create("Euro widget", "", Money(900, "EUR"), Quantity(5))
        product_repo.save(euro)
        handler = AddBasketItemHandler(basket_repo, product_repo)
        handler.handle(basket_id, widget.id, 1)

        with pytest.raises(CurrencyMismatchError):
            handler.handle(basket_id, euro.id, 1)

        stored = ShowBasketHandler(basket_repo).handle(basket_id)
        assert [item.product_id for item in stored.items] == [widget.id]
        assert stored.total == 1000

    def test_repeat_add_uses_new_price(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        add = AddBasketItemHandler(basket_repo, product_repo)
        add.handle(basket_id, widget.id, 1)

        product = product_repo.get_by_id(widget.id)
        product.update_details("Widget", "", Money(1200, "USD"))
        product_repo.update(product)

        dto = add.handle(basket_id, widget.id, 1)
        assert dto.items[0].quantity == 2
        assert dto.items[0].price == 1200
        assert dto.total == 2400

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        with pytest.raises(ValidationError, match="greater than zero"):
            AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, quantity)

    def test_blank_product_id_rejected(self):
        basket_repo, product_repo, basket_id, _, _ = _setup()
        with pytest.raises(ValidationError, match="Product ID"):
            AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, "", 1)

    def test_more_than_stock_rejected(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        with pytest.raises(InsufficientStockError):
            AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 6)
        assert basket_repo.get_by_id(basket_id).is_empty()

    def test_unknown_product_rejected(self):
        basket_repo, product_repo, basket_id, _, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, "nope", 1)

    def test_unknown_basket_rejected(self):
        basket_repo, product_repo, _, widget, _ = _setup()
        with pytest.raises(BasketNotFoundError):
            AddBasketItemHandler(basket_repo, product_repo).handle("nope", widget.id, 1)


class TestRemoveUpdateClear:

    def test_remove_item(self):
        basket_repo, product_repo, basket_id, widget, gadget = _setup()
        add = AddBasketItemHandler(basket_repo, product_repo)
        add.handle(basket_id, widget.id, 1)
        add.handle(basket_id, gadget.id, 1)

        dto = RemoveBasketItemHandler(basket_repo).handle(basket_id, widget.id)
        assert [i.product_id for i in dto.items] == [gadget.id]

    def test_remove_missing_item_rejected(self):
        basket_repo, _, basket_id, widget, _ = _setup()
        with pytest.raises(ItemNotFoundError):
            RemoveBasketItemHandler(basket_repo).handle(basket_id, widget.id)

    def test_update_quantity_keeps_price(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 1)

        product = product_repo.get_by_id(widget.id)
        product.update_details("Widget", "", Money(5000, "USD"))
        product_repo.update(product)

        dto = UpdateBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 3)
        assert dto.items[0].quantity == 3
        assert dto.items[0].price == 1000
        assert dto.total == 3000

    def test_update_to_zero_removes(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 2)
        dto = UpdateBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 0)
        assert dto.items == ()

    def test_update_negative_rejected(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        with pytest.raises(ValidationError, match="negative"):
            UpdateBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, -1)

    def test_update_beyond_stock_rejected(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        AddBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 1)
        with pytest.raises(InsufficientStockError):
            UpdateBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 6)

    def test_update_missing_item_rejected(self):
        basket_repo, product_repo, basket_id, widget, _ = _setup()
        with pytest.raises(ItemNotFoundError):
            UpdateBasketItemHandler(basket_repo, product_repo).handle(basket_id, widget.id, 2)

    def test_clear(self):
        basket_repo, product_repo, basket_id, widget, gadget = _setup()
        add = AddBasketItemHandler(basket_repo, product_repo)
        add.handle(basket_id, widget.id, 1)
        add.handle(basket_id, gadget.id, 3)

        dto = ClearBasketHandler(basket_repo).handle(basket_id)
        assert dto.items == ()
        assert dto.item_count == 0
        assert basket_repo.get_by_id(basket_id).is_empty()
