"""
Unit tests for the entity types: pricing, ID normalization, validation,
and the one-line rental summary used by the current-rentals report.
"""
from decimal import Decimal

import pytest

from car_rental.exceptions import InvalidCustomerError, InvalidRateError
from car_rental.models import Customer, RentalAgreement, Vehicle


def test_vehicle_id_is_normalized_and_available_by_default():
    v = Vehicle(" c001 ", "Toyota", "Camry", 60)
    assert v.vehicle_id == "C001"
    assert v.available is True
    assert v.label == "Toyota Camry"


def test_price_is_rate_times_days():
    v = Vehicle("C002", "Honda", "Accord", "70.5")
    assert v.price(3) == Decimal("211.5")


def test_float_rate_has_no_binary_noise():
    v = Vehicle("C009", "Kia", "Rio", 19.99)
    assert v.daily_rate == Decimal("19.99")
    assert v.price(3) == Decimal("59.97")


def test_negative_rate_rejected():
    with pytest.raises(InvalidRateError):
        Vehicle("C010", "Fiat", "Panda", -1)


def test_non_numeric_rate_rejected():
    with pytest.raises(InvalidRateError):
        Vehicle("C011", "Fiat", "Uno", "cheap")


@pytest.mark.parametrize("rate", [float("nan"), "NaN", "Infinity", float("-inf")])
def test_non_finite_rate_rejected(rate):
    with pytest.raises(InvalidRateError):
        Vehicle("C012", "Fiat", "Tipo", rate)


def test_rent_and_return_flip_availability():
    v = Vehicle("C001", "Toyota", "Camry", 60)
    v.rent()
    assert not v.available
    v.rent()  # no guard at this level
    assert not v.available
    v.return_vehicle()
    assert v.available
    v.return_vehicle()
    assert v.available


def test_vehicles_compare_by_identity():
    a = Vehicle("C001", "Toyota", "Camry", 60)
    b = Vehicle("C001", "Toyota", "Camry", 60)
    assert a != b
    assert a == a


def test_customer_create_builds_sequential_id():
    c = Customer.create("  Alice ", 4)
    assert c.customer_id == "CUS4"
    assert c.name == "Alice"
    assert Customer.create("Bob", 1, prefix="R-").customer_id == "R-1"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_customer_name_required(name):
    with pytest.raises(InvalidCustomerError):
        Customer("CUS1", name)


def test_rental_summary_format(fixed_now):
    v = Vehicle("C003", "Mahindra", "Thar", 150)
    c = Customer("CUS1", "Dana")
    r = RentalAgreement(vehicle=v, customer=c, days=2, total_price=v.price(2), created_at=fixed_now)
    assert r.summary() == "Dana rented Mahindra Thar for 2 days, total $300.00"
