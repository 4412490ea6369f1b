"""Classification of the Status entries returned by the carrier."""

import logging

from mondial_relay.errors import CarrierError
from mondial_relay.models import CarrierStatus


def check_statuses(
    statuses: list[CarrierStatus] | None,
    logger: logging.Logger | None = None,
) -> None:
    """Raise on the first Error-level status, log the others as warnings.

    Raises:
        CarrierError: carrying the code and message of the first Error.
    """
    logger = logger or logging.getLogger(__name__)
    for status in statuses or ():
        if status.is_error:
            logger.error(
                "[Mondial Relay] Status Code: %s, Message: %s", status.code, status.message
            )
            raise CarrierError(status.code, status.message)
        logger.warning(
            "[Mondial Relay] Status Code: %s, Message: %s", status.code, status.message
        )
