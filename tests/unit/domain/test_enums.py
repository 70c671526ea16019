"""Tests for domain enums."""

from distributor.domain.value_objects.enums import AssignmentTier, GeoStatus


def test_geo_status_values():
    assert GeoStatus.PENDING.value == "pending"
    assert GeoStatus.RESOLVED.value == "resolved"
    assert GeoStatus.FAILED.value == "failed"
    assert GeoStatus.ABROAD.value == "abroad"
    assert GeoStatus.NO_CITY.value == "no_city"


def test_pending_and_failed_are_distinct():
    assert GeoStatus.PENDING != GeoStatus.FAILED


def test_assignment_tiers():
    assert [t.value for t in AssignmentTier] == ["vip", "foreign", "proximity"]


def test_enums_are_strings():
    assert AssignmentTier.VIP == "vip"
