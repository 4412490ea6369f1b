"""Mondial Relay fulfillment provider: pricing, shipments and returns."""

import logging
import threading

from mondial_relay.base_provider import FulfillmentProvider
from mondial_relay.client import MondialRelayClient
from mondial_relay.config import MondialRelaySettings
from mondial_relay.delivery_mode import resolve_delivery_mode
from mondial_relay.documents import (
    address_from_order,
    build_shipment_request,
    business_address,
    output_options_for,
    parcels_for,
)
from mondial_relay.models import (
    CancellationResult,
    FulfillmentResult,
    Label,
    ShipmentRequest,
    ShipmentResult,
)
from mondial_relay.orders import Fulfillment, Order, PriceQuoteRequest, line_items_from
from mondial_relay.pricing import PriceLookup, PriceQuote, PricingEngine
from mondial_relay.weight import total_weight


class MondialRelayFulfillmentService(FulfillmentProvider):
    """Fulfillment provider backed by the Mondial Relay shipment API."""

    identifier = "mondialrelay"

    def __init__(
        self,
        settings: MondialRelaySettings,
        client: MondialRelayClient | None = None,
        price_lookup: PriceLookup | None = None,
        logger: logging.Logger | None = None,
    ):
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.client = client or MondialRelayClient(settings, logger=self.logger)
        self.pricing = PricingEngine(price_lookup, logger=self.logger)

    def get_fulfillment_options(self) -> list[dict]:
        return [
            {
                "id": "mondialrelay-fulfillment",
                "name": "Mondial Relay - Point Relais",
            },
            {
                "id": "mondialrelay-fulfillment-return",
                "name": "Mondial Relay - Retour",
                "is_return": True,
            },
        ]

    def validate_fulfillment_data(self, option_data: dict, data: dict, context: dict) -> dict:
        return data

    def validate_option(self, data: dict) -> bool:
        return True

    def can_calculate(self, data: dict) -> bool:
        return True

    def calculate_price(self, option_data: dict, data: dict, context: dict) -> PriceQuote:
        request = PriceQuoteRequest.from_dict(option_data, data, context)
        weight = total_weight(request.items)
        self.logger.info(
            "[Mondial Relay] Pricing %d item(s): destination %s, weight %sg, home delivery %s",
            len(request.items), request.country_code, weight, request.is_home_delivery,
        )
        return self.pricing.quote(weight, request.country_code, request.is_home_delivery)

    def _ship(
        self,
        request: ShipmentRequest,
        fulfillment: Fulfillment,
        timeout: float | None,
        cancel_event: threading.Event | None,
    ) -> FulfillmentResult:
        result = self.client.create_shipment(request, timeout=timeout, cancel_event=cancel_event)
        return self._fulfillment_result(fulfillment, result)

    @staticmethod
    def _fulfillment_result(fulfillment: Fulfillment, result: ShipmentResult) -> FulfillmentResult:
        labels = []
        if result.shipment_label:
            labels.append(
                Label(
                    tracking_number=result.shipment_number,
                    tracking_url="",
                    label_url=result.shipment_label,
                )
            )
        # Stored label data is only ever replaced, never cleared.
        carrier_data = {key: value for key, value in result.as_dict().items() if value is not None}
        return FulfillmentResult(data={**fulfillment.data, **carrier_data}, labels=labels)

    def create_fulfillment(
        self,
        data: dict,
        items: list[dict],
        order: dict | None,
        fulfillment: dict,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> FulfillmentResult:
        """Ship the items from the merchant to the customer.

        The pickup point comes from the storefront's ``parcel_shop_id``,
        or, failing that, from the second address line where some
        storefronts store it.
        """
        typed_order = Order.from_dict(order)
        typed_fulfillment = Fulfillment.from_dict(fulfillment, order=typed_order)
        line_items = line_items_from(items)
        option = typed_fulfillment.shipping_option
        shipping = typed_order.shipping_address

        self.logger.info(
            "[Mondial Relay] Creating fulfillment %s for order %s",
            typed_fulfillment.id, typed_order.display_id,
        )

        raw_parcel_shop_id = str((data or {}).get("parcel_shop_id") or shipping.address_2 or "")
        delivery_mode = resolve_delivery_mode(
            is_home_delivery=option.is_home_delivery,
            is_locker=shipping.is_locker,
            pickup_point_id=raw_parcel_shop_id,
            country_code=shipping.destination_country,
        )
        self.logger.info(
            "[Mondial Relay] Delivery mode %s, location %r",
            delivery_mode.mode.value, delivery_mode.location,
        )

        request = build_shipment_request(
            context=self.client.context(),
            output_options=output_options_for(option.print_in_store),
            order_no=typed_order.display_id,
            delivery_mode=delivery_mode,
            parcels=parcels_for(typed_fulfillment.id, line_items),
            sender=business_address(self.settings),
            recipient=address_from_order(typed_order),
        )
        return self._ship(request, typed_fulfillment, timeout, cancel_event)

    def create_return_fulfillment(
        self,
        fulfillment: dict,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> FulfillmentResult:
        """Ship a return from the customer back to the merchant.

        Pickup-point returns go to the configured return location, whatever
        pickup point the customer used for the original delivery.
        """
        typed_fulfillment = Fulfillment.from_dict(fulfillment)
        typed_order = typed_fulfillment.order
        option = typed_fulfillment.shipping_option
        merchant = business_address(self.settings)

        self.logger.info(
            "[Mondial Relay] Creating return fulfillment %s for order %s",
            typed_fulfillment.id, typed_order.display_id,
        )

        delivery_mode = resolve_delivery_mode(
            is_home_delivery=option.is_home_delivery,
            is_locker=typed_order.shipping_address.is_locker,
            pickup_point_id=self.settings.return_location,
            country_code=merchant.country_code or "FR",
        )

        request = build_shipment_request(
            context=self.client.context(),
            output_options=output_options_for(option.print_in_store),
            order_no=typed_order.display_id,
            delivery_mode=delivery_mode,
            parcels=parcels_for(typed_fulfillment.id, typed_fulfillment.items),
            sender=address_from_order(typed_order),
            recipient=merchant,
        )
        return self._ship(request, typed_fulfillment, timeout, cancel_event)

    def cancel_fulfillment(self, fulfillment: dict) -> CancellationResult:
        self.logger.warning(
            "[Mondial Relay] Mondial Relay does not support fulfillment cancellation via API"
        )
        return CancellationResult(
            cancelled=False,
            reason="Cancellation is not supported by Mondial Relay",
        )

    def get_fulfillment_documents(self, data: dict) -> list:
        return []

    def get_return_documents(self, data: dict) -> list:
        return []

    def get_shipment_documents(self, data: dict) -> list:
        return []

    def retrieve_documents(self, fulfillment_data: dict, document_type: str) -> None:
        # Document retrieval is not offered by the carrier API.
        return None
