"""Tests for reading platform order and fulfillment data."""

import pytest

from mondial_relay.errors import InvalidFulfillmentDataError
from mondial_relay.orders import (
    DeliveryType,
    Fulfillment,
    Order,
    OrderAddress,
    PriceQuoteRequest,
    ShippingOptionMetadata,
)


class TestOrder:
    def test_reads_order(self, order):
        typed = Order.from_dict(order)
        assert typed.display_id == "1042"
        assert typed.email == "jean.dupont@example.com"
        assert typed.shipping_address.address_2 == "020340"
        assert typed.shipping_address.is_locker is False

    def test_missing_order_is_empty(self):
        typed = Order.from_dict(None)
        assert typed.display_id == ""
        assert typed.shipping_address == OrderAddress()

    def test_locker_flag_must_be_true(self):
        assert OrderAddress.from_dict({"metadata": {"isLocker": True}}).is_locker is True
        assert OrderAddress.from_dict({"metadata": {"isLocker": "yes"}}).is_locker is False

    def test_destination_country_defaults_to_france(self):
        assert OrderAddress.from_dict({}).destination_country == "FR"
        assert OrderAddress.from_dict({"country_code": "es"}).destination_country == "ES"

    def test_rejects_non_mapping_address(self):
        with pytest.raises(InvalidFulfillmentDataError):
            Order.from_dict({"shipping_address": "3 avenue Foch"})


class TestShippingOptionMetadata:
    def test_defaults_to_point_relais_pdf(self):
        option = ShippingOptionMetadata.from_dict(None)
        assert option.delivery_type is DeliveryType.PICKUP_POINT
        assert option.print_in_store is False

    def test_home_and_in_store(self):
        option = ShippingOptionMetadata.from_dict({"metadata": {"type": "home", "print": "in_store"}})
        assert option.is_home_delivery is True
        assert option.print_in_store is True


class TestFulfillment:
    def test_return_fulfillment_embeds_order(self, order):
        typed = Fulfillment.from_dict({"id": "ful_02", "order": order, "items": [{"quantity": 3}]})
        assert typed.order.display_id == "1042"
        assert typed.items[0].quantity == 3
        assert typed.data == {}

    def test_items_must_be_a_list(self):
        with pytest.raises(InvalidFulfillmentDataError):
            Fulfillment.from_dict({"items": {"quantity": 1}})

    def test_rejects_boolean_weight(self):
        with pytest.raises(InvalidFulfillmentDataError):
            Fulfillment.from_dict({"items": [{"variant": {"weight": True}}]})

    def test_rejects_negative_quantity(self):
        with pytest.raises(InvalidFulfillmentDataError, match="negative"):
            Fulfillment.from_dict({"items": [{"quantity": -1}]})

    @pytest.mark.parametrize("weight", ["nan", float("inf"), -300])
    def test_rejects_unusable_weight(self, weight):
        with pytest.raises(InvalidFulfillmentDataError):
            Fulfillment.from_dict({"items": [{"variant": {"weight": weight}}]})

    def test_zero_quantity_allowed(self):
        assert Fulfillment.from_dict({"items": [{"quantity": 0}]}).items[0].quantity == 0


class TestPriceQuoteRequest:
    def test_reads_cart(self):
        request = PriceQuoteRequest.from_dict(
            {},
            {},
            {"items": [{"quantity": 1, "variant": {"weight": "250"}}], "shipping_address": {"country_code": "lu"}},
        )
        assert request.items[0].weight == 250.0
        assert request.country_code == "LU"
        assert request.is_home_delivery is False

    def test_domicile_name_is_case_insensitive(self):
        request = PriceQuoteRequest.from_dict({}, {"shipping_option_name": "Livraison à DOMICILE"}, {})
        assert request.delivery_type is DeliveryType.HOME
