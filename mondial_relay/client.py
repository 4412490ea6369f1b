"""HTTP client for the Mondial Relay shipment creation API."""

import logging
import threading

import requests

from mondial_relay import codec
from mondial_relay.config import MondialRelaySettings
from mondial_relay.errors import MondialRelayError, RequestCancelledError, TransportError
from mondial_relay.models import Context, ShipmentRequest, ShipmentResult
from mondial_relay.status import check_statuses

# Failures worth one more attempt. Anything else is final.
_TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)
MAX_ATTEMPTS = 2


class MondialRelayClient:
    """Client for the Mondial Relay ShipmentCreationRequest endpoint."""

    def __init__(
        self,
        settings: MondialRelaySettings,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ):
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/xml",
                "Content-Type": "text/xml",
            }
        )

    def context(self) -> Context:
        """Account context sent with every request."""
        return Context(
            login=self.settings.login,
            password=self.settings.password,
            customer_id=self.settings.customer_id,
            culture=self.settings.culture,
            version_api=self.settings.api_version,
        )

    def _post(
        self,
        body: bytes,
        timeout: float,
        cancel_event: threading.Event | None = None,
    ) -> bytes:
        """POST an XML document and return the response body.

        Connection errors and timeouts are retried once; any other
        failure, and any non-200 status, raises TransportError straight away.
        """
        for attempt in range(1, MAX_ATTEMPTS + 1):
            if cancel_event is not None and cancel_event.is_set():
                raise RequestCancelledError("Mondial Relay request cancelled")
            try:
                resp = self.session.post(self.settings.api_base_url, data=body, timeout=timeout)
            except _TRANSIENT_ERRORS as exc:
                if attempt < MAX_ATTEMPTS:
                    self.logger.warning(
                        "[Mondial Relay] Transient error, retrying once: %s", exc
                    )
                    continue
                raise TransportError(f"Mondial Relay request failed: {exc}") from exc
            except requests.RequestException as exc:
                raise TransportError(f"Mondial Relay request failed: {exc}") from exc

            if resp.status_code != 200:
                raise TransportError(
                    f"Failed to create shipment: HTTP {resp.status_code}",
                    status_code=resp.status_code,
                )
            return resp.content

    def send(
        self,
        request: ShipmentRequest,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ShipmentResult:
        """Exchange a shipment request with the carrier.

        Statuses are checked before anything is read from the response, so
        an Error-level status never yields a partial result.

        Raises:
            TransportError: Network failure, timeout or non-200 status.
            MalformedResponseError: Unparseable XML or no shipment in it.
            CarrierError: The carrier reported an Error-level status.
        """
        body = self._post(
            codec.encode_request(request),
            timeout=timeout or self.settings.timeout,
            cancel_event=cancel_event,
        )
        root = codec.parse_response(body)
        check_statuses(codec.read_statuses(root), self.logger)
        return codec.read_result(root)

    def create_shipment(
        self,
        request: ShipmentRequest,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ShipmentResult:
        """Create a shipment and return its tracking number and label."""
        try:
            result = self.send(request, timeout=timeout, cancel_event=cancel_event)
        except MondialRelayError as exc:
            self.logger.error("[Mondial Relay] Failed to create shipment: %s", exc)
            raise

        self.logger.info(
            "[Mondial Relay] Shipment created with label: %s", result.shipment_label
        )
        self.logger.info(
            "[Mondial Relay] Shipment created with number: %s", result.shipment_number
        )
        return result
