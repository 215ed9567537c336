"""Unit tests for the offer strategies."""

from decimal import Decimal

import pytest

from acme_basket.domain.exceptions import ValidationError
from acme_basket.domain.model.product import Product
from acme_basket.domain.model.value_objects import sum_prices
from acme_basket.domain.offers.offer import Offer
from acme_basket.domain.offers.percentage_discount import PercentageDiscountOffer
from acme_basket.domain.offers.red_widget import (
    BuyOneGetHalfOffRedWidgetOffer,
    is_red_widget,
)


def _red(code: str = "RED_WIDGET", price: str = "10.00", name: str = "Red Widget") -> Product:
    return Product(code, name, price)


def _other(code: str = "BLUE_WIDGET", price: str = "8.00", name: str = "Blue Widget") -> Product:
    return Product(code, name, price)


def _prices(products: list[Product]) -> list[Decimal]:
    return [p.price for p in products]


# ── PercentageDiscountOffer ──────────────────────────────────────────────────


class TestPercentageDiscountOffer:

    def test_is_an_offer(self):
        assert isinstance(PercentageDiscountOffer(10), Offer)

    def test_discounts_every_product(self):
        products = [Product("APPLE", "Apple", "1.50"), Product("ORANGE", "Orange", "2.00")]
        result = PercentageDiscountOffer(10).apply(products)
        assert _prices(result) == [Decimal("1.35"), Decimal("1.80")]

    def test_preserves_code_name_and_order(self):
        products = [_red(), _other(), Product("APPLE", "Apple", "1.50")]
        result = PercentageDiscountOffer(25).apply(products)
        assert [(p.code, p.name) for p in result] == [(p.code, p.name) for p in products]

    @pytest.mark.parametrize("percentage", ["0", "10", "15", "33.3", "50", "100"])
    def test_total_scales_by_remaining_factor(self, percentage):
        products = [_red(), _other(), Product("APPLE", "Apple", "1.50")]
        result = PercentageDiscountOffer(percentage).apply(products)
        expected = sum_prices(products) * (1 - Decimal(percentage) / 100)
        assert sum_prices(result) == pytest.approx(expected, abs=Decimal("0.001"))

    def test_zero_percent_leaves_prices_unchanged(self):
        products = [_red(), _other()]
        assert _prices(PercentageDiscountOffer(0).apply(products)) == _prices(products)

    def test_hundred_percent_zeroes_prices(self):
        result = PercentageDiscountOffer(100).apply([_red(), _other()])
        assert _prices(result) == [Decimal("0"), Decimal("0")]

    def test_does_not_mutate_input(self):
        products = [_red(), _other()]
        snapshot = list(products)
        PercentageDiscountOffer(50).apply(products)
        assert products == snapshot
        assert _prices(products) == [Decimal("10.00"), Decimal("8.00")]

    def test_empty_input(self):
        assert PercentageDiscountOffer(10).apply([]) == []

    @pytest.mark.parametrize("percentage", [-1, "100.5", 150])
    def test_out_of_range_rejected(self, percentage):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            PercentageDiscountOffer(percentage)

    def test_description(self):
        assert PercentageDiscountOffer(10).description == "10% off everything"


# ── BuyOneGetHalfOffRedWidgetOffer ───────────────────────────────────────────


class TestRedWidgetMatching:

    @pytest.mark.parametrize(
        "name",
        ["Red Widget", "RED WIDGET", "Widget Red", "Special Red Widget", "redwidget"],
    )
    def test_qualifies(self, name):
        assert is_red_widget(Product("X", name, "1"))

    @pytest.mark.parametrize("name", ["Blue Widget", "Red Apple", "Widget", "Red"])
    def test_does_not_qualify(self, name):
        assert not is_red_widget(Product("X", name, "1"))


class TestBuyOneGetHalfOffRedWidgetOffer:

    def test_single_red_widget_unchanged(self):
        products = [_red()]
        result = BuyOneGetHalfOffRedWidgetOffer().apply(products)
        assert _prices(result) == [Decimal("10.00")]
        assert result is not products

    def test_no_red_widgets_unchanged(self):
        products = [_other(), Product("RED_APPLE", "Red Apple", "2.00")]
        result = BuyOneGetHalfOffRedWidgetOffer().apply(products)
        assert _prices(result) == _prices(products)

    def test_second_red_widget_half_price(self):
        result = BuyOneGetHalfOffRedWidgetOffer().apply([_red(), _red()])
        assert _prices(result) == [Decimal("10.00"), Decimal("5.00")]

    def test_third_red_widget_full_price(self):
        result = BuyOneGetHalfOffRedWidgetOffer().apply([_red(), _red(), _red()])
        assert _prices(result) == [Decimal("10.00"), Decimal("5.00"), Decimal("10.00")]

    def test_every_even_red_widget_halved(self):
        result = BuyOneGetHalfOffRedWidgetOffer().apply([_red()] * 6)
        assert _prices(result) == [Decimal("10.00"), Decimal("5.00")] * 3

    def test_interspersed_products_keep_position(self):
        products = [_red(), _other(), _red(), Product("BANANA", "Banana", "1.50")]
        result = BuyOneGetHalfOffRedWidgetOffer().apply(products)
        assert [p.code for p in result] == [p.code for p in products]
        assert _prices(result) == [
            Decimal("10.00"),
            Decimal("8.00"),
            Decimal("5.00"),
            Decimal("1.50"),
        ]

    @pytest.mark.parametrize("reds,others", [(2, 0), (3, 2), (4, 5), (5, 1), (7, 3)])
    def test_floor_half_of_red_widgets_halved(self, reds, others):
        # alternate others into the list wherever they fit
        products = []
        for i in range(max(reds, others)):
            if i < others:
                products.append(_other(code=f"OTHER_{i}"))
            if i < reds:
                products.append(_red())
        result = BuyOneGetHalfOffRedWidgetOffer().apply(products)

        halved = [p for p in result if p.price == Decimal("5.00")]
        assert len(halved) == reds // 2
        assert len(result) == len(products)
        assert all(p.price == Decimal("8.00") for p in result if not is_red_widget(p))

    def test_different_red_widget_variants_pair_up(self):
        products = [
            _red("WIDGET_RED", "15.00", "Widget Red"),
            _red("SPECIAL_RED_WIDGET", "20.00", "Special Red Widget"),
        ]
        result = BuyOneGetHalfOffRedWidgetOffer().apply(products)
        assert _prices(result) == [Decimal("15.00"), Decimal("10.00")]

    def test_does_not_mutate_input(self):
        products = [_red(), _red()]
        BuyOneGetHalfOffRedWidgetOffer().apply(products)
        assert _prices(products) == [Decimal("10.00"), Decimal("10.00")]

    def test_repriced_product_keeps_identity(self):
        result = BuyOneGetHalfOffRedWidgetOffer().apply([_red(), _red()])
        assert result[1].code == "RED_WIDGET"
        assert result[1].name == "Red Widget"
        assert result[1] == _red()

    def test_empty_input(self):
        assert BuyOneGetHalfOffRedWidgetOffer().apply([]) == []
