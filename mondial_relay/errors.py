"""Exceptions raised by the Mondial Relay integration."""


class MondialRelayError(Exception):
    """Base class for all Mondial Relay failures."""


class TransportError(MondialRelayError):
    """The HTTP exchange failed: network error, timeout or non-200 status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RequestCancelledError(TransportError):
    """The caller cancelled the request before it was sent."""


class MalformedResponseError(MondialRelayError):
    """The carrier answered with XML we cannot parse or navigate."""


class CarrierError(MondialRelayError):
    """The carrier reported an Error-level status."""

    def __init__(self, code: str, message: str):
        super().__init__(f"Error from Mondial Relay API: {message} (code {code})")
        self.code = code
        self.message = message


class InvalidFulfillmentDataError(ValueError):
    """Order or fulfillment data cannot be turned into a shipment."""
