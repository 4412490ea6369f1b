"""Builders turning order data into carrier shipment documents."""

from dataclasses import replace

from mondial_relay.config import MondialRelaySettings
from mondial_relay.delivery_mode import collection_mode
from mondial_relay.models import (
    Address,
    Context,
    DeliveryMode,
    OutputOptions,
    PaperFormat,
    Parcel,
    Shipment,
    ShipmentRequest,
    Weight,
)
from mondial_relay.orders import LineItem, Order
from mondial_relay.weight import total_weight


def address_from_order(order: Order) -> Address:
    """The customer's address in carrier form."""
    shipping = order.shipping_address
    return Address(
        firstname=shipping.first_name,
        lastname=shipping.last_name,
        streetname=shipping.address_1,
        address_add2=shipping.address_2,
        country_code=shipping.country_code,
        post_code=shipping.postal_code,
        city=shipping.city,
        mobile_no=shipping.phone,
        email=order.email,
    )


def parcels_for(content: str, items: list[LineItem]) -> list[Parcel]:
    """A single parcel holding every item."""
    return [Parcel(content=content, weight=Weight(total_weight(items)))]


def output_options_for(print_in_store: bool) -> OutputOptions:
    """QR code when the label is printed at the Point Relais, A4 PDF otherwise."""
    if print_in_store:
        return OutputOptions.qr_code()
    return OutputOptions.pdf(PaperFormat.A4)


def build_shipment_request(
    context: Context,
    output_options: OutputOptions,
    order_no: str,
    delivery_mode: DeliveryMode,
    parcels: list[Parcel],
    sender: Address,
    recipient: Address,
) -> ShipmentRequest:
    return ShipmentRequest(
        context=context,
        output_options=output_options,
        shipments=[
            Shipment(
                order_no=order_no,
                customer_no="",
                parcel_count=1,
                delivery_mode=delivery_mode,
                collection_mode=collection_mode(),
                parcels=parcels,
                delivery_instruction="",
                sender=sender,
                recipient=recipient,
            )
        ],
    )


def business_address(settings: MondialRelaySettings) -> Address:
    """A fresh copy of the merchant address, safe to hand to a request."""
    return replace(settings.business_address)
