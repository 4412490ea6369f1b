"""Tests for delivery mode resolution."""

import pytest

from mondial_relay.delivery_mode import (
    collection_mode,
    format_pickup_point_id,
    resolve_delivery_mode,
)
from mondial_relay.models import (
    CollectionModeCode,
    DeliveryModeCode,
    HomeDelivery,
    PickupPointDelivery,
)


class TestFormatPickupPointId:
    def test_prefixes_bare_id_with_country(self):
        assert format_pickup_point_id("020340", "fr") == "FR-020340"

    def test_keeps_prefixed_id(self):
        assert format_pickup_point_id("BE-123456", "FR") == "BE-123456"

    def test_is_idempotent(self):
        once = format_pickup_point_id("020340", "ES")
        assert format_pickup_point_id(once, "ES") == once == "ES-020340"

    @pytest.mark.parametrize("raw_id", ["", None])
    def test_empty_id_stays_empty(self, raw_id):
        assert format_pickup_point_id(raw_id, "FR") == ""


class TestResolveDeliveryMode:
    def test_home_delivery_has_no_location(self):
        """Locker flag and pickup point are ignored for home delivery."""
        mode = resolve_delivery_mode(
            is_home_delivery=True, is_locker=True, pickup_point_id="020340", country_code="FR"
        )
        assert isinstance(mode, HomeDelivery)
        assert mode.mode is DeliveryModeCode.HOM
        assert mode.location == ""

    def test_pickup_point(self):
        mode = resolve_delivery_mode(False, is_locker=False, pickup_point_id="020340", country_code="FR")
        assert mode == PickupPointDelivery(DeliveryModeCode.PR, "FR-020340")

    def test_locker(self):
        mode = resolve_delivery_mode(False, is_locker=True, pickup_point_id="FR-99999", country_code="FR")
        assert mode.mode is DeliveryModeCode.LOCKER
        assert mode.location == "FR-99999"

    def test_pickup_point_without_id_is_not_an_error(self):
        mode = resolve_delivery_mode(False, pickup_point_id="")
        assert mode.mode is DeliveryModeCode.PR
        assert mode.location == ""


class TestModeFamilies:
    def test_home_mode_rejected_for_pickup_point(self):
        with pytest.raises(ValueError):
            PickupPointDelivery(DeliveryModeCode.HOM, "FR-1")

    def test_pickup_mode_rejected_for_home_delivery(self):
        with pytest.raises(ValueError):
            HomeDelivery(DeliveryModeCode.LOCKER)

    def test_collection_is_point_relais_without_location(self):
        mode = collection_mode()
        assert mode.mode is CollectionModeCode.REL
        assert mode.location == ""
