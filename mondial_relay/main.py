#!/usr/bin/env python3
"""CLI entry point for Mondial Relay price quotes and shipments."""

import argparse
import json
import logging
import sys

from mondial_relay.config import MondialRelaySettings
from mondial_relay.errors import MondialRelayError
from mondial_relay.models import FulfillmentResult
from mondial_relay.orders import LineItem
from mondial_relay.pricing import PricingEngine
from mondial_relay.service import MondialRelayFulfillmentService
from mondial_relay.weight import total_weight


def _print_shipment(result: FulfillmentResult):
    """Print the created shipment to stdout."""
    print(f"\n{'=' * 70}")
    print("  MONDIAL RELAY SHIPMENT")
    print(f"{'=' * 70}\n")
    print(f"  Shipment number: {result.data.get('shipment_number')}")
    for label in result.labels:
        print(f"  Label:           {label.label_url}")
    if not result.labels:
        print("  No label returned.")
    print()


def _load_json(path):
    """Read a fulfillment document from a JSON file."""
    with open(path) as f:
        return json.load(f)


def _quote(args) -> int:
    weight = total_weight([LineItem(quantity=1, weight=args.weight)])
    quote = PricingEngine().quote(weight, args.country, is_home_delivery=args.home)
    delivery_type = "Home Delivery" if args.home else "Point Relais"
    print(f"{quote.amount:.2f} EUR (tax inclusive) for {weight:g}g to {args.country.upper()} - {delivery_type}")
    return 0


def _ship(args) -> int:
    settings = MondialRelaySettings.from_env(
        api_base_url=args.api_url,
        login=args.login,
        password=args.password,
        customer_id=args.customer_id,
        timeout=args.timeout,
    )
    service = MondialRelayFulfillmentService(settings)
    document = _load_json(args.fulfillment)

    if args.return_shipment:
        result = service.create_return_fulfillment(document)
    else:
        result = service.create_fulfillment(
            data=document.get("data", {}),
            items=document.get("items", []),
            order=document.get("order"),
            fulfillment=document,
        )
    _print_shipment(result)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Quote Mondial Relay delivery prices and create shipments.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every step of the exchange with Mondial Relay.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    quote_parser = commands.add_parser("quote", help="Price a delivery.")
    quote_parser.add_argument(
        "--weight",
        type=float,
        default=None,
        help="Parcel weight in grams (default: 500).",
    )
    quote_parser.add_argument(
        "--country",
        default="FR",
        help='Destination country code (default: "FR").',
    )
    quote_parser.add_argument(
        "--home",
        action="store_true",
        help="Home delivery instead of Point Relais.",
    )

    ship_parser = commands.add_parser("ship", help="Create a shipment from a JSON fulfillment.")
    ship_parser.add_argument(
        "fulfillment",
        metavar="FILE",
        help="JSON fulfillment document, with its order, items and data.",
    )
    ship_parser.add_argument(
        "--return",
        dest="return_shipment",
        action="store_true",
        help="Create a return shipment from the customer to the merchant.",
    )

    # Credential arguments.
    credentials = ship_parser.add_argument_group("Mondial Relay options")
    credentials.add_argument(
        "--api-url",
        help="Shipment API URL (overrides MONDIAL_RELAY_API_BASE_URL env var).",
    )
    credentials.add_argument(
        "--login",
        help="API login (overrides MONDIAL_RELAY_LOGIN env var).",
    )
    credentials.add_argument(
        "--password",
        help="API password (overrides MONDIAL_RELAY_PASSWORD env var).",
    )
    credentials.add_argument(
        "--customer-id",
        help="Customer ID (overrides MONDIAL_RELAY_CUSTOMER_ID env var).",
    )
    credentials.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (overrides MONDIAL_RELAY_TIMEOUT env var).",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "quote":
            code = _quote(args)
        else:
            code = _ship(args)
    except (ValueError, OSError, MondialRelayError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
