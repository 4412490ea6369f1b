"""Mondial Relay account settings, read from arguments or the environment."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from mondial_relay.models import Address

load_dotenv()

API_VERSION = "1.0"
DEFAULT_CULTURE = "fr-FR"
DEFAULT_TIMEOUT = 30.0

# Address field -> environment variable holding the business address.
_BUSINESS_ADDRESS_ENV = {
    "title": "MONDIAL_RELAY_BUSINESS_TITLE",
    "firstname": "MONDIAL_RELAY_BUSINESS_FIRSTNAME",
    "lastname": "MONDIAL_RELAY_BUSINESS_LASTNAME",
    "streetname": "MONDIAL_RELAY_BUSINESS_STREETNAME",
    "address_add1": "MONDIAL_RELAY_BUSINESS_ADDRESS_ADD1",
    "address_add2": "MONDIAL_RELAY_BUSINESS_ADDRESS_ADD2",
    "country_code": "MONDIAL_RELAY_BUSINESS_COUNTRY_CODE",
    "post_code": "MONDIAL_RELAY_BUSINESS_POST_CODE",
    "city": "MONDIAL_RELAY_BUSINESS_CITY",
    "mobile_no": "MONDIAL_RELAY_BUSINESS_MOBILE_NO",
    "email": "MONDIAL_RELAY_BUSINESS_EMAIL",
}


@dataclass(frozen=True)
class MondialRelaySettings:
    """Credentials and merchant details for the shipment API.

    ``return_location`` is the pickup point return parcels are sent to.
    """

    api_base_url: str
    login: str
    password: str
    customer_id: str
    culture: str = DEFAULT_CULTURE
    api_version: str = API_VERSION
    business_address: Address = field(default_factory=Address)
    return_location: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        missing = [
            name
            for name in ("api_base_url", "login", "password", "customer_id")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(
                f"Mondial Relay settings missing: {', '.join(missing)}. Set "
                "MONDIAL_RELAY_API_BASE_URL, MONDIAL_RELAY_LOGIN, MONDIAL_RELAY_PASSWORD "
                "and MONDIAL_RELAY_CUSTOMER_ID either as arguments or in a .env file."
            )
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(
        cls,
        api_base_url: str | None = None,
        login: str | None = None,
        password: str | None = None,
        customer_id: str | None = None,
        culture: str | None = None,
        business_address: Address | None = None,
        return_location: str | None = None,
        timeout: float | None = None,
    ) -> "MondialRelaySettings":
        """Build settings, falling back to ``MONDIAL_RELAY_*`` variables."""
        if business_address is None:
            business_address = Address(
                **{key: os.getenv(env, "") for key, env in _BUSINESS_ADDRESS_ENV.items()}
            )
        if timeout is None:
            timeout = float(os.getenv("MONDIAL_RELAY_TIMEOUT", DEFAULT_TIMEOUT))

        return cls(
            api_base_url=api_base_url or os.getenv("MONDIAL_RELAY_API_BASE_URL", ""),
            login=login or os.getenv("MONDIAL_RELAY_LOGIN", ""),
            password=password or os.getenv("MONDIAL_RELAY_PASSWORD", ""),
            customer_id=customer_id or os.getenv("MONDIAL_RELAY_CUSTOMER_ID", ""),
            culture=culture or os.getenv("MONDIAL_RELAY_CULTURE", DEFAULT_CULTURE),
            business_address=business_address,
            return_location=(
                return_location
                if return_location is not None
                else os.getenv("MONDIAL_RELAY_RETURN_LOCATION", "")
            ),
            timeout=timeout,
        )
