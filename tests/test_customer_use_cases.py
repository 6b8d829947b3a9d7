"""Tests for creating, listing and deleting customers."""

from __future__ import annotations

from datetime import datetime

import pytest

from crm.application.use_cases.customers import create_customer, delete_customers, list_customers
from crm.infrastructure.repositories import CustomerRepository


def _create(session, name="John Smith", email="john.smith@Example.com", **overrides):
    values = {
        "name": name,
        "email": email,
        "phone": "555-123-4567",
        "total_spend": 1250.50,
        "last_order_date": datetime(2025, 4, 15),
        "visit_count": 8,
    }
    values.update(overrides)
    return create_customer(session, **values)


def test_create_customer_normalizes_input(session) -> None:
    customer = _create(session, name="  John Smith ", attributes={"city": "San Francisco"})

    assert customer.id is not None
    assert customer.name == "John Smith"
    assert customer.email == "john.smith@example.com"
    assert customer.total_spend == 1250.50
    assert customer.last_order_date == datetime(2025, 4, 15)
    assert customer.created_at is not None
    assert customer.as_record()["city"] == "San Francisco"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"name": ""}, "Customer name is required"),
        ({"email": "not-an-email"}, "Customer email must be a valid email address"),
        ({"email": "a@b@c"}, "Customer email must be a valid email address"),
        ({"phone": None}, "Customer phone is required"),
        ({"total_spend": -1}, "Customer total spend must not be negative"),
        ({"total_spend": "100"}, "Customer total spend must be a number"),
        ({"visit_count": True}, "Customer visit count must be a number"),
        ({"attributes": {"totalSpend": 5}}, "Customer attribute 'totalSpend' is a built-in field"),
    ],
)
def test_create_customer_rejects_invalid_input(session, overrides, message) -> None:
    with pytest.raises(ValueError, match=message):
        _create(session, **overrides)

    assert list_customers(session) == []


def test_list_customers_is_newest_first_and_paginated(session) -> None:
    _create(session, name="Old", email="old@example.com", created_at=datetime(2024, 1, 1))
    _create(session, name="New", email="new@example.com", created_at=datetime(2025, 1, 1))
    _create(session, name="Mid", email="mid@example.com", created_at=datetime(2024, 6, 1))

    assert [customer.name for customer in list_customers(session)] == ["New", "Mid", "Old"]
    assert [customer.name for customer in list_customers(session, skip=2)] == ["Old"]


def test_iter_customers_streams_in_id_order(session) -> None:
    first = _create(session, name="First", email="first@example.com", created_at=datetime(2025, 1, 1))
    second = _create(session, name="Second", email="second@example.com", created_at=datetime(2024, 1, 1))

    streamed = list(CustomerRepository(session).iter_customers(batch_size=1))

    assert [customer.id for customer in streamed] == [first.id, second.id]


def test_delete_customers_removes_matching_ids(session) -> None:
    keep = _create(session, name="Keep", email="keep@example.com")
    drop_one = _create(session, name="Drop", email="drop@example.com")
    drop_two = _create(session, name="Drop too", email="drop2@example.com")

    deleted = delete_customers(session, [drop_one.id, drop_two.id, 12345])

    assert deleted == 2
    assert [customer.id for customer in list_customers(session)] == [keep.id]


def test_delete_requires_ids(session) -> None:
    with pytest.raises(ValueError, match="No customer IDs provided"):
        delete_customers(session, [])


@pytest.mark.parametrize("payload", ["1,2", 7, None])
def test_delete_requires_a_list(session, payload) -> None:
    with pytest.raises(ValueError, match="customer_ids must be a list"):
        delete_customers(session, payload)


def test_delete_unknown_ids_is_an_error(session) -> None:
    _create(session)

    with pytest.raises(ValueError, match="No customers found with the provided IDs"):
        delete_customers(session, [999, 1000])


def _seed_for_listing(session):
    _create(session, name="John Smith", email="john@example.com", total_spend=1250.50, created_at=datetime(2024, 12, 15))
    _create(session, name="Emily Johnson", email="emily@example.com", total_spend=3450.75, created_at=datetime(2025, 1, 20))
    _create(session, name="Sarah Smithers", email="sarah@example.com", total_spend=890.25, created_at=datetime(2025, 3, 10))
    _create(session, name="100%_Club", email="club@example.com", total_spend=10.0, created_at=datetime(2025, 4, 1))


def test_list_customers_searches_names_case_insensitively(session) -> None:
    _seed_for_listing(session)

    names = [customer.name for customer in list_customers(session, search="  SMITH ")]

    assert names == ["Sarah Smithers", "John Smith"]


def test_list_customers_search_treats_wildcards_literally(session) -> None:
    _seed_for_listing(session)

    assert [customer.name for customer in list_customers(session, search="%_")] == ["100%_Club"]
    assert list_customers(session, search="n_Sm") == []


def test_list_customers_sorts_by_chosen_field(session) -> None:
    _seed_for_listing(session)

    by_spend = list_customers(session, sort_field="totalSpend", sort_direction="ASC")
    by_name = list_customers(session, sort_field="name", sort_direction="desc", limit=2)

    assert [customer.total_spend for customer in by_spend] == [10.0, 890.25, 1250.50, 3450.75]
    assert [customer.name for customer in by_name] == ["Sarah Smithers", "John Smith"]


@pytest.mark.parametrize(
    ("sort_field", "sort_direction", "message"),
    [
        ("password", "asc", "Unsupported sort field 'password'"),
        ("total_spend", "asc", "Unsupported sort field 'total_spend'"),
        ("name", "sideways", "Sort direction must be 'asc' or 'desc'"),
    ],
)
def test_list_customers_rejects_unknown_sorting(session, sort_field, sort_direction, message) -> None:
    with pytest.raises(ValueError, match=message):
        list_customers(session, sort_field=sort_field, sort_direction=sort_direction)
