"""Delivery price calculation with a built-in fallback rate card."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

# Added on top of the carrier's own price for home delivery.
HOME_DELIVERY_SURCHARGE = 3

# (max weight in kg, price), evaluated in order. Above the last bound the
# catch-all price applies.
PICKUP_POINT_RATES = [
    (0.5, 4.95),
    (1, 5.95),
    (2, 6.95),
    (3, 7.95),
    (5, 8.95),
    (10, 10.95),
    (20, 14.95),
]
PICKUP_POINT_MAX_RATE = 19.95

HOME_DELIVERY_RATES = [
    (0.5, 7.95),
    (1, 8.95),
    (2, 9.95),
    (3, 10.95),
    (5, 12.95),
    (10, 15.95),
    (20, 19.95),
]
HOME_DELIVERY_MAX_RATE = 24.95

# Looks up the carrier's public price for (weight in grams, country code).
# Returns None when it has no price for that combination.
PriceLookup = Callable[[float, str], float | None]


@dataclass
class PriceQuote:
    amount: float
    is_tax_inclusive: bool = True


def fallback_price(weight_grams: float, is_home_delivery: bool) -> float:
    """Price from the built-in rate card."""
    weight_kg = weight_grams / 1000
    if is_home_delivery:
        rates, max_rate = HOME_DELIVERY_RATES, HOME_DELIVERY_MAX_RATE
    else:
        rates, max_rate = PICKUP_POINT_RATES, PICKUP_POINT_MAX_RATE

    for max_weight_kg, price in rates:
        if weight_kg <= max_weight_kg:
            return price
    return max_rate


class PricingEngine:
    """Computes tax-inclusive delivery prices.

    The carrier's own price table, when one is plugged in through
    ``price_lookup``, takes precedence. Any failure of the lookup falls
    back to the built-in rate card and is never raised to the caller.
    """

    def __init__(
        self,
        price_lookup: PriceLookup | None = None,
        logger: logging.Logger | None = None,
    ):
        self.price_lookup = price_lookup
        self.logger = logger or logging.getLogger(__name__)

    def _lookup(self, weight_grams: float, country_code: str) -> float | None:
        if self.price_lookup is None:
            return None
        try:
            price = self.price_lookup(weight_grams, country_code)
        except Exception as exc:
            self.logger.warning(
                "[Mondial Relay] Price lookup failed, using fallback pricing: %s", exc
            )
            return None
        if price is None:
            self.logger.info(
                "[Mondial Relay] No carrier price for %sg to %s, using fallback pricing",
                weight_grams, country_code,
            )
        return price

    def quote(
        self,
        weight_grams: float,
        country_code: str,
        is_home_delivery: bool,
    ) -> PriceQuote:
        """Price a delivery.

        Args:
            weight_grams: Total parcel weight.
            country_code: Destination country (ISO 3166 alpha-2).
            is_home_delivery: Home delivery rather than Point Relais.

        Returns:
            A tax-inclusive PriceQuote.
        """
        country_code = country_code.upper()
        price = self._lookup(weight_grams, country_code)

        if price is not None:
            if is_home_delivery:
                price += HOME_DELIVERY_SURCHARGE
                self.logger.info(
                    "[Mondial Relay] Home delivery surcharge applied: +%s = %s",
                    HOME_DELIVERY_SURCHARGE, price,
                )
        else:
            price = fallback_price(weight_grams, is_home_delivery)

        delivery_type = "Home Delivery" if is_home_delivery else "Point Relais"
        self.logger.info(
            "[Mondial Relay] Final price: %s for %sg - %s", price, weight_grams, delivery_type
        )
        return PriceQuote(amount=price)
