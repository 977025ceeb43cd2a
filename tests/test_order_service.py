"""
OrderService 테스트
"""
from datetime import datetime, timedelta

import pytest

from order_management.core.config import Settings
from order_management.core.exceptions import NotFoundError, TransitionRejected, ValidationError
from order_management.services.order_service import OrderService, calculate_total

from conftest import NOW


def order_data(**overrides):
    data = {
        "customer_id": 1,
        "product_id": 1,
        "quantity": 2,
        "unit_price": 10.5,
        "status": None,
        "date": None,
        "notes": None,
    }
    data.update(overrides)
    return data


@pytest.fixture
def service(db_session, clock):
    return OrderService(db_session, settings=Settings(), clock=clock)


# --- create_order ---


def test_create_order_defaults_status_and_total(service):
    order = service.create_order(order_data())
    assert order.id is not None
    assert order.status == "Pending"
    assert order.total == 21.0
    assert order.date == NOW


def test_create_order_substitutes_zero_values(service):
    order = service.create_order(order_data(customer_id=0, product_id=0, quantity=0, unit_price=7.25))
    assert order.customer_id == 1
    assert order.product_id == 1
    assert order.quantity == 1
    assert order.total == 7.25


def test_create_order_uses_configured_defaults(db_session, clock):
    settings = Settings(DEFAULT_QUANTITY=3, DEFAULT_PRICE=2.5, DEFAULT_CUSTOMER_ID=9)
    service = OrderService(db_session, settings=settings, clock=clock)
    order = service.create_order({})
    assert order.customer_id == 9
    assert order.quantity == 3
    assert order.unit_price == 2.5
    assert order.total == calculate_total(3, 2.5) == 7.5


def test_create_order_keeps_given_status_and_date(service):
    placed = datetime(2026, 3, 1, 9, 30)
    order = service.create_order(order_data(status="Active", date=placed, notes="rush"))
    assert order.status == "Active"
    assert order.date == placed
    assert order.notes == "rush"


def test_create_order_without_data_raises(service):
    with pytest.raises(ValidationError):
        service.create_order(None)


# --- get / list ---


def test_get_order_not_found(service):
    with pytest.raises(NotFoundError) as exc_info:
        service.get_order(99999)
    assert "not found" in exc_info.value.message


def test_list_orders_filters_by_status_and_customer(service):
    service.create_order(order_data(customer_id=1))
    service.create_order(order_data(customer_id=2))
    service.create_order(order_data(customer_id=2, status="Active"))

    assert len(service.list_orders()) == 3
    assert [o.customer_id for o in service.list_orders(customer_id="2")] == [2, 2]
    active = service.list_orders(status="Active", customer_id="2")
    assert len(active) == 1
    assert active[0].status == "Active"


def test_list_orders_invalid_customer_id(service):
    with pytest.raises(ValidationError) as exc_info:
        service.list_orders(customer_id="invalid")
    assert "customerId" in exc_info.value.message


# --- update_order ---


def test_update_order_replaces_fields_and_recomputes_total(service):
    order = service.create_order(order_data())
    updated = service.update_order(order.id, order_data(customer_id=5, quantity=4, unit_price=2.5, notes="changed"))
    assert updated.customer_id == 5
    assert updated.quantity == 4
    assert updated.total == 10.0
    assert updated.notes == "changed"
    assert updated.status == "Pending"
    assert updated.date == NOW


def test_update_order_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_order(12345, order_data())


def test_update_order_without_data_raises(service):
    order = service.create_order(order_data())
    with pytest.raises(ValidationError):
        service.update_order(order.id, None)


# --- update_status ---


def test_update_status_empty_raises_validation_error(service):
    order = service.create_order(order_data())
    for value in ("", None):
        with pytest.raises(ValidationError):
            service.update_status(order.id, value)


def test_update_status_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_status(99999, "Active")


def test_update_status_persists_allowed_transition(service):
    order = service.create_order(order_data(date=NOW - timedelta(days=1)))
    updated = service.update_status(order.id, "Active")
    assert updated.status == "Active"
    assert service.get_order(order.id).status == "Active"


def test_update_status_rejection_carries_reason(service):
    order = service.create_order(order_data(date=NOW.replace(hour=7)))
    with pytest.raises(TransitionRejected) as exc_info:
        service.update_status(order.id, "Active")
    assert exc_info.value.reason == "Cannot activate before hours"
    assert exc_info.value.current_status == "Pending"
    assert service.get_order(order.id).status == "Pending"


def test_update_status_does_not_touch_total(service):
    order = service.create_order(order_data(status="Active"))
    updated = service.update_status(order.id, "Shipped")
    assert updated.status == "Shipped"
    assert updated.total == 21.0
    assert updated.quantity == 2


def test_update_status_uses_clock(db_session, clock):
    service = OrderService(db_session, settings=Settings(), clock=clock)
    order = service.create_order(order_data(date=NOW - timedelta(days=20)))

    clock.current = NOW + timedelta(days=15)
    with pytest.raises(TransitionRejected) as exc_info:
        service.update_status(order.id, "Active")
    assert exc_info.value.reason == "Order too old"


# --- delete_order ---


def test_delete_then_get_is_not_found(service):
    order = service.create_order(order_data())
    service.delete_order(order.id)
    with pytest.raises(NotFoundError):
        service.get_order(order.id)


def test_delete_unknown_order_raises(service):
    with pytest.raises(NotFoundError):
        service.delete_order(99999)
