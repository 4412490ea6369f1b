"""Parcel weight aggregation."""

from collections.abc import Iterable

from mondial_relay.orders import LineItem

# Assumed weight in grams of an item whose variant has no weight.
DEFAULT_ITEM_WEIGHT_GRAMS = 500


def total_weight(items: Iterable[LineItem] | None) -> float:
    """Return the total weight in grams of a set of line items.

    Items without a (non-zero) variant weight count as
    ``DEFAULT_ITEM_WEIGHT_GRAMS`` each. The result is never zero: an
    empty sequence, or one summing to zero, yields the default weight.
    """
    total = 0.0
    for item in items or ():
        weight = item.weight or DEFAULT_ITEM_WEIGHT_GRAMS
        total += item.quantity * weight

    if total == 0:
        return DEFAULT_ITEM_WEIGHT_GRAMS
    return total
