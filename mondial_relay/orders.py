"""Typed views over the order and fulfillment dicts handed in by the platform.

The fulfillment platform passes loosely structured dictionaries. These
classes read them once, at the boundary, so the rest of the package only
handles typed values.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

from mondial_relay.errors import InvalidFulfillmentDataError

DEFAULT_COUNTRY_CODE = "FR"


class DeliveryType(str, Enum):
    HOME = "home"
    PICKUP_POINT = "pickup_point"


def _mapping(value, name: str) -> dict:
    """Return ``value`` as a dict, treating None as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidFulfillmentDataError(f"{name} must be an object, got {type(value).__name__}")
    return value


def _text(value) -> str:
    return "" if value is None else str(value)


def _number(value, name: str, default):
    """Read a quantity or weight: a finite, non-negative number."""
    if value is None:
        return default
    number = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            pass
    if number is None or not math.isfinite(number):
        raise InvalidFulfillmentDataError(f"{name} must be a number, got {value!r}")
    if number < 0:
        raise InvalidFulfillmentDataError(f"{name} cannot be negative, got {value!r}")
    return number


@dataclass
class LineItem:
    """An ordered item: how many, and how heavy each one is in grams."""

    quantity: float = 1
    weight: float | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> "LineItem":
        data = _mapping(data, "item")
        variant = _mapping(data.get("variant"), "item.variant")
        return cls(
            quantity=_number(data.get("quantity"), "item.quantity", 1),
            weight=_number(variant.get("weight"), "item.variant.weight", None),
        )


def line_items_from(items) -> list[LineItem]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise InvalidFulfillmentDataError("items must be a list")
    return [LineItem.from_dict(item) for item in items]


@dataclass
class OrderAddress:
    """A customer shipping address as stored on the order."""

    first_name: str = ""
    last_name: str = ""
    address_1: str = ""
    address_2: str = ""
    country_code: str = ""
    postal_code: str = ""
    city: str = ""
    phone: str = ""
    is_locker: bool = False

    @classmethod
    def from_dict(cls, data: dict | None) -> "OrderAddress":
        data = _mapping(data, "shipping_address")
        metadata = _mapping(data.get("metadata"), "shipping_address.metadata")
        return cls(
            first_name=_text(data.get("first_name")),
            last_name=_text(data.get("last_name")),
            address_1=_text(data.get("address_1")),
            address_2=_text(data.get("address_2")),
            country_code=_text(data.get("country_code")),
            postal_code=_text(data.get("postal_code")),
            city=_text(data.get("city")),
            phone=_text(data.get("phone")),
            is_locker=metadata.get("isLocker") is True,
        )

    @property
    def destination_country(self) -> str:
        return (self.country_code or DEFAULT_COUNTRY_CODE).upper()


@dataclass
class Order:
    display_id: str = ""
    email: str = ""
    shipping_address: OrderAddress = field(default_factory=OrderAddress)
    items: list[LineItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict | None) -> "Order":
        data = _mapping(data, "order")
        return cls(
            display_id=_text(data.get("display_id")),
            email=_text(data.get("email")),
            shipping_address=OrderAddress.from_dict(data.get("shipping_address")),
            items=line_items_from(data.get("items")),
        )


@dataclass
class ShippingOptionMetadata:
    """Flags set on the shipping option by the merchant."""

    delivery_type: DeliveryType = DeliveryType.PICKUP_POINT
    print_in_store: bool = False

    @property
    def is_home_delivery(self) -> bool:
        return self.delivery_type is DeliveryType.HOME

    @classmethod
    def from_dict(cls, shipping_option: dict | None) -> "ShippingOptionMetadata":
        shipping_option = _mapping(shipping_option, "shipping_option")
        metadata = _mapping(shipping_option.get("metadata"), "shipping_option.metadata")
        return cls(
            delivery_type=DeliveryType.HOME if metadata.get("type") == "home" else DeliveryType.PICKUP_POINT,
            print_in_store=metadata.get("print") == "in_store",
        )


@dataclass
class Fulfillment:
    """A fulfillment to ship, forward or return."""

    id: str = ""
    data: dict = field(default_factory=dict)
    shipping_option: ShippingOptionMetadata = field(default_factory=ShippingOptionMetadata)
    items: list[LineItem] = field(default_factory=list)
    order: Order = field(default_factory=Order)

    @classmethod
    def from_dict(cls, data: dict | None, order: Order | None = None) -> "Fulfillment":
        """Build a fulfillment.

        Return fulfillments embed their order under ``order``; forward
        fulfillments get it passed separately.
        """
        data = _mapping(data, "fulfillment")
        if order is None:
            order = Order.from_dict(data.get("order"))
        return cls(
            id=_text(data.get("id")),
            data=dict(_mapping(data.get("data"), "fulfillment.data")),
            shipping_option=ShippingOptionMetadata.from_dict(data.get("shipping_option")),
            items=line_items_from(data.get("items")),
            order=order,
        )


@dataclass
class PriceQuoteRequest:
    """Everything needed to price a delivery."""

    items: list[LineItem] = field(default_factory=list)
    country_code: str = DEFAULT_COUNTRY_CODE
    delivery_type: DeliveryType = DeliveryType.PICKUP_POINT

    @property
    def is_home_delivery(self) -> bool:
        return self.delivery_type is DeliveryType.HOME

    @classmethod
    def from_dict(
        cls,
        option_data: dict | None,
        data: dict | None,
        context: dict | None,
    ) -> "PriceQuoteRequest":
        """Read a price calculation call.

        Home delivery is detected from the option's ``type``, from the
        storefront's ``metadata.type``, or from a shipping option whose
        name mentions "domicile".
        """
        option_data = _mapping(option_data, "option_data")
        data = _mapping(data, "data")
        context = _mapping(context, "context")
        metadata = _mapping(data.get("metadata"), "data.metadata")

        option_name = _text(data.get("shipping_option_name")).lower()
        is_home = (
            option_data.get("type") == "home"
            or metadata.get("type") == "home"
            or "domicile" in option_name
        )

        address = OrderAddress.from_dict(context.get("shipping_address"))
        return cls(
            items=line_items_from(context.get("items")),
            country_code=address.destination_country,
            delivery_type=DeliveryType.HOME if is_home else DeliveryType.PICKUP_POINT,
        )
