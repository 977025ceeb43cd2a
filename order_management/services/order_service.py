"""
주문 관련 서비스 로직
"""
from typing import Dict, List, Optional

from sqlalchemy.orm import Session
import structlog

from order_management.core.clock import Clock, SystemClock
from order_management.core.config import Settings, settings as default_settings
from order_management.core.exceptions import NotFoundError, TransitionRejected, ValidationError
from order_management.models.base import is_storable_id
from order_management.models.order import Order, OrderStatus
from order_management.repositories.order_repository import OrderRepository
from order_management.services.status_transition import ActivationPolicy, validate_transition

logger = structlog.get_logger()


def calculate_total(quantity: int, unit_price: float) -> float:
    return round(quantity * unit_price, 2)


class OrderService:
    def __init__(self, db: Session, settings: Settings = default_settings, clock: Optional[Clock] = None):
        self.repository = OrderRepository(db)
        self.settings = settings
        self.clock = clock or SystemClock()
        self.policy = ActivationPolicy.from_settings(settings)

    def list_orders(self, status: Optional[str] = None, customer_id: Optional[str] = None) -> List[Order]:
        """주문 목록 조회 (status, customerId 필터)"""
        parsed_customer_id = None
        if customer_id is not None:
            try:
                parsed_customer_id = int(customer_id)
            except (TypeError, ValueError):
                raise ValidationError(f"Invalid customerId '{customer_id}': must be an integer")
            if not is_storable_id(parsed_customer_id):
                raise ValidationError(f"Invalid customerId '{customer_id}': out of range")

        orders = self.repository.get_all(status=status, customer_id=parsed_customer_id)
        logger.info("Orders retrieved", count=len(orders), status=status, customer_id=parsed_customer_id)
        return orders

    def get_order(self, order_id: int) -> Order:
        order = self.repository.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def create_order(self, order_data: Optional[Dict]) -> Order:
        """새 주문 생성 (0 / 누락 값은 기본값으로 대체)"""
        if order_data is None:
            raise ValidationError("Order data is required")

        quantity = order_data.get('quantity') or self.settings.DEFAULT_QUANTITY
        unit_price = order_data.get('unit_price') or self.settings.DEFAULT_PRICE
        db_order = Order(
            customer_id=order_data.get('customer_id') or self.settings.DEFAULT_CUSTOMER_ID,
            product_id=order_data.get('product_id') or self.settings.DEFAULT_PRODUCT_ID,
            quantity=quantity,
            unit_price=unit_price,
            total=calculate_total(quantity, unit_price),
            status=order_data.get('status') or OrderStatus.PENDING.value,
            date=order_data.get('date') or self.clock.now(),
            notes=order_data.get('notes'),
        )
        order = self.repository.add(db_order)
        logger.info("Order created", order_id=order.id, customer_id=order.customer_id,
                    product_id=order.product_id, total=order.total)
        return order

    def update_order(self, order_id: int, order_data: Optional[Dict]) -> Order:
        """주문 전체 수정 (total 재계산)

        status/date 가 비어 있으면 기존 값을 유지한다.
        """
        if order_data is None:
            raise ValidationError("Order data is required")

        existing = self.get_order(order_id)
        quantity = order_data.get('quantity') or 0
        unit_price = order_data.get('unit_price') or 0

        existing.customer_id = order_data.get('customer_id') or 0
        existing.product_id = order_data.get('product_id') or 0
        existing.quantity = quantity
        existing.unit_price = unit_price
        existing.total = calculate_total(quantity, unit_price)
        existing.status = order_data.get('status') or existing.status
        existing.date = order_data.get('date') or existing.date
        existing.notes = order_data.get('notes')

        order = self.repository.update(existing)
        logger.info("Order updated", order_id=order_id, total=order.total)
        return order

    def update_status(self, order_id: int, status: Optional[str]) -> Order:
        """주문 상태 변경 (상태 변경 규칙 적용)"""
        if not status:
            raise ValidationError("Status is required")

        order = self.get_order(order_id)
        current_status = order.status or ""
        result = validate_transition(current_status, status, order.date, self.clock.now(), self.policy)
        if not result.allowed:
            raise TransitionRejected(result.reason, current_status=current_status, requested_status=status)

        order = self.repository.update_status(order, status)
        logger.info("Order status updated", order_id=order_id, from_status=current_status, to_status=status)
        return order

    def delete_order(self, order_id: int) -> None:
        self.get_order(order_id)
        self.repository.delete(order_id)
        logger.info("Order deleted", order_id=order_id)
