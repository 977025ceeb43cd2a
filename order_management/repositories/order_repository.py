"""
주문 저장소
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
import structlog

from order_management.core.exceptions import PersistenceError
from order_management.models.base import is_storable_id
from order_management.models.order import Order, OrderStatus

logger = structlog.get_logger()


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _persistence(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database error", operation=operation, error=str(e))
            raise PersistenceError(f"An error occurred while {operation}") from e

    def get_all(self, status: Optional[str] = None, customer_id: Optional[int] = None) -> List[Order]:
        """전체 주문 조회 (상태/고객 필터는 일치 조건)"""
        with self._persistence("retrieving orders"):
            query = self.db.query(Order)
            if status is not None:
                query = query.filter(Order.status == status)
            if customer_id is not None:
                query = query.filter(Order.customer_id == customer_id)
            return query.order_by(Order.id).all()

    def get_by_id(self, order_id: int) -> Optional[Order]:
        if not is_storable_id(order_id):
            return None
        with self._persistence("retrieving order"):
            return self.db.query(Order).filter(Order.id == order_id).first()

    def add(self, order: Order) -> Order:
        with self._persistence("creating order"):
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        return order

    def update(self, order: Order) -> Order:
        """변경된 주문 엔티티 저장"""
        with self._persistence("updating order"):
            self.db.commit()
            self.db.refresh(order)
        return order

    def update_status(self, order: Order, status: str) -> Order:
        """status 컬럼만 갱신"""
        with self._persistence("updating order status"):
            self.db.query(Order).filter(Order.id == order.id).update(
                {Order.status: status}, synchronize_session=False
            )
            self.db.commit()
            self.db.refresh(order)
        return order

    def delete(self, order_id: int) -> None:
        """주문 삭제 (없는 ID 는 무시)"""
        if not is_storable_id(order_id):
            return
        with self._persistence("deleting order"):
            order = self.db.query(Order).filter(Order.id == order_id).first()
            if order is not None:
                self.db.delete(order)
                self.db.commit()

    def get_sales_report_data(self) -> List[Order]:
        """Pending 이 아닌 주문 + 고객/상품 즉시 로딩 (N+1 방지)"""
        with self._persistence("retrieving sales report data"):
            return (
                self.db.query(Order)
                .options(joinedload(Order.customer), joinedload(Order.product))
                .filter(Order.status != OrderStatus.PENDING.value)
                .order_by(Order.id)
                .all()
            )
