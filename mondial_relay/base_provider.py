"""Abstract base class for carrier fulfillment providers."""

from abc import ABC, abstractmethod

from mondial_relay.models import CancellationResult, FulfillmentResult
from mondial_relay.pricing import PriceQuote


class FulfillmentProvider(ABC):
    """Base class that all carrier fulfillment providers must implement."""

    identifier: str = ""

    @abstractmethod
    def get_fulfillment_options(self) -> list[dict]:
        """Shipping options this provider offers.

        Returns:
            List of option dicts with ``id``, ``name`` and, for returns,
            ``is_return``.
        """

    @abstractmethod
    def calculate_price(
        self,
        option_data: dict,
        data: dict,
        context: dict,
    ) -> PriceQuote:
        """Price a delivery for the cart described by ``context``.

        Args:
            option_data: Data stored on the shipping option.
            data: Data sent by the storefront.
            context: Cart context with ``items`` and ``shipping_address``.

        Returns:
            The price to charge.
        """

    @abstractmethod
    def create_fulfillment(
        self,
        data: dict,
        items: list[dict],
        order: dict | None,
        fulfillment: dict,
    ) -> FulfillmentResult:
        """Register an outbound shipment with the carrier.

        Args:
            data: Fulfillment data from the storefront.
            items: Items being fulfilled.
            order: The order the items belong to.
            fulfillment: The fulfillment record being created.

        Returns:
            Data to store on the fulfillment and the shipping labels.
        """

    @abstractmethod
    def create_return_fulfillment(self, fulfillment: dict) -> FulfillmentResult:
        """Register a return shipment from the customer to the merchant."""

    @abstractmethod
    def cancel_fulfillment(self, fulfillment: dict) -> CancellationResult:
        """Cancel a shipment, when the carrier allows it."""
