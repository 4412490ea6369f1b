"""Pick the carrier delivery and collection modes for a shipment."""

from mondial_relay.models import (
    CollectionMode,
    CollectionModeCode,
    DeliveryMode,
    DeliveryModeCode,
    HomeDelivery,
    PickupPointDelivery,
)

# Mondial Relay wants pickup points as "<COUNTRY>-<number>", e.g. "FR-020340".
PICKUP_POINT_SEPARATOR = "-"


def format_pickup_point_id(raw_id: str | None, country_code: str) -> str:
    """Return the compound pickup-point identifier the carrier expects.

    Identifiers that already contain the separator are returned as-is.
    An empty identifier stays empty.
    """
    if not raw_id:
        return ""
    if PICKUP_POINT_SEPARATOR in raw_id:
        return raw_id
    return f"{country_code.upper()}{PICKUP_POINT_SEPARATOR}{raw_id}"


def resolve_delivery_mode(
    is_home_delivery: bool,
    is_locker: bool = False,
    pickup_point_id: str | None = None,
    country_code: str = "FR",
) -> DeliveryMode:
    """Decide the delivery mode.

    Args:
        is_home_delivery: The shipping option delivers to the door.
        is_locker: The recipient chose a locker rather than a Point Relais.
        pickup_point_id: Pickup point picked by the customer, with or
            without its country prefix. Ignored for home delivery.
        country_code: Destination country, used to prefix bare ids.

    Returns:
        A HomeDelivery or PickupPointDelivery value.
    """
    if is_home_delivery:
        return HomeDelivery(DeliveryModeCode.HOM)

    mode = DeliveryModeCode.LOCKER if is_locker else DeliveryModeCode.PR
    return PickupPointDelivery(mode, format_pickup_point_id(pickup_point_id, country_code))


def collection_mode() -> CollectionMode:
    """Senders always drop parcels at a Point Relais."""
    return CollectionMode(CollectionModeCode.REL)
